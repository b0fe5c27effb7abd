import logging
from typing import Dict, Hashable

from path_engine.core.constants import INFINITY
from path_engine.core.graph import Graph

# Set up logging
logger = logging.getLogger(__name__)


class DijkstraPathFinder:
    """
    Implementation of Dijkstra's algorithm for single-source shortest distances.

    Uses a plain set of unvisited nodes and a linear scan to pick the next node
    instead of a priority queue. This is O(V^2 + E), which is fine for the small
    graphs this engine targets.
    """

    @staticmethod
    def calculate_distances(graph: Graph, start: Hashable) -> Dict[Hashable, float]:
        """
        Calculate shortest distances from `start` to every node in the graph.

        The graph must not contain negative edge weights; the caller is
        responsible for checking that.

        Ties between unvisited nodes with the same tentative distance are broken
        by `graph.ordered_nodes`: the node that comes first is settled first.

        Args:
            graph: Graph without negative edges.
            start: Starting node. Must be in the graph.

        Returns:
            Dictionary mapping every node to its distance from `start`,
            INFINITY for unreachable nodes.
        """
        distances = {node: INFINITY for node in graph.ordered_nodes}
        distances[start] = 0
        unvisited = set(graph.ordered_nodes)

        while unvisited:
            # Pick the unvisited node with the smallest tentative distance
            current = None
            for node in graph.ordered_nodes:
                if node not in unvisited:
                    continue
                if current is None or distances[node] < distances[current]:
                    current = node

            current_distance = distances[current]
            for edge in graph.outgoing(current):
                distance = current_distance + edge.weight
                if distance < distances[edge.target]:
                    distances[edge.target] = distance

            unvisited.remove(current)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"Dijkstra from '{start}' settled {len(distances)} nodes, "
                f"{sum(1 for d in distances.values() if d != INFINITY)} reachable"
            )
        return distances
