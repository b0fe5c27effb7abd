import logging
from typing import Dict, Hashable, Optional, Tuple

from path_engine.core.constants import INFINITY
from path_engine.core.exceptions import NegativeCycleError
from path_engine.core.graph import Edge, Graph

logger = logging.getLogger(__name__)


class BellmanFordPathFinder:
    """
    Bellman-Ford algorithm for graphs with negative weights.
    """

    @staticmethod
    def calculate_distances(
        graph: Graph,
        start: Hashable,
        detect_negative_cycles: bool = False
    ) -> Dict[Hashable, float]:
        """
        Calculate shortest distances from `start` using Bellman-Ford.

        Runs exactly |V| - 1 relaxation rounds. Each round walks the nodes in
        `graph.ordered_nodes` and relaxes their outgoing edges in order.

        Without detection a reachable negative cycle is not reported: the
        distances are whatever the fixed number of rounds produced.

        Args:
            graph: Graph to search. Negative weights are allowed.
            start: Starting node. Must be in the graph.
            detect_negative_cycles: Run one extra pass and fail if any edge can
                still be relaxed.

        Returns:
            Dictionary mapping every node to its distance from `start`.

        Raises:
            NegativeCycleError: If detection is enabled and a negative cycle is
                reachable from `start`.
        """
        distances = {node: INFINITY for node in graph.ordered_nodes}
        distances[start] = 0

        # Relax edges
        for _ in range(len(graph) - 1):
            for u, edge in graph.edges():
                if distances[u] + edge.weight < distances[edge.target]:
                    distances[edge.target] = distances[u] + edge.weight

        if detect_negative_cycles:
            violation = BellmanFordPathFinder.find_relaxable_edge(graph, distances)
            if violation is not None:
                u, edge = violation
                logger.error(
                    f"Graph contains a negative-weight cycle reachable from '{start}' "
                    f"(edge '{u}' -> '{edge.target}')"
                )
                raise NegativeCycleError(u, edge.target, edge.weight)

        return distances

    @staticmethod
    def find_relaxable_edge(
        graph: Graph,
        distances: Dict[Hashable, float]
    ) -> Optional[Tuple[Hashable, Edge]]:
        """
        Return the first (source, edge) that could still shorten a distance,
        or None if all distances are final.
        """
        for u, edge in graph.edges():
            if distances[u] + edge.weight < distances[edge.target]:
                return u, edge
        return None

    @staticmethod
    def has_negative_cycle(graph: Graph, distances: Dict[Hashable, float]) -> bool:
        """Check whether distances from a completed run can still be improved."""
        return BellmanFordPathFinder.find_relaxable_edge(graph, distances) is not None
