import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, FrozenSet, Hashable, Mapping, Optional, Union

from path_engine import settings
from path_engine.core.bellman_ford import BellmanFordPathFinder
from path_engine.core.constants import BELLMAN_FORD, DIJKSTRA, INFINITY
from path_engine.core.dijkstra import DijkstraPathFinder
from path_engine.core.exceptions import UnknownNodeError, UnknownStartNodeError
from path_engine.core.graph import Graph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShortestPathResult:
    """
    Outcome of a single shortest-path computation.

    Attributes:
        algorithm_used: "Dijkstra" or "Bellman-Ford", whichever actually ran.
        start: The start node.
        distances: Read-only mapping of every graph node to its distance from
            `start` (INFINITY when unreachable).
    """
    algorithm_used: str
    start: Hashable
    distances: Mapping[Hashable, float] = field(hash=False)

    def distance_to(self, node: Hashable) -> float:
        try:
            return self.distances[node]
        except (KeyError, TypeError):
            raise UnknownNodeError(node) from None

    def reachable(self) -> FrozenSet[Hashable]:
        """Nodes with a finite distance from the start node."""
        return frozenset(node for node, d in self.distances.items() if d != INFINITY)


def contains_negative_weight(graph: Union[Graph, Mapping[Hashable, Any]]) -> bool:
    if isinstance(graph, Graph):
        return graph.has_negative_edge()
    return Graph(graph).has_negative_edge()


def shortest_paths(
    graph: Graph,
    start: Hashable,
    force_bellman_ford: Optional[bool] = None,
    detect_negative_cycles: Optional[bool] = None
) -> ShortestPathResult:
    """
    Compute shortest distances from `start` to every node of `graph`.

    Bellman-Ford is used when the graph has at least one negative edge,
    Dijkstra otherwise.

    Args:
        graph: The graph to search. It is not modified.
        start: Starting node.
        force_bellman_ford: Run Bellman-Ford regardless of edge weights.
            Defaults to settings.FORCE_BELLMAN_FORD.
        detect_negative_cycles: Fail on reachable negative cycles instead of
            returning the distances after |V| - 1 rounds.
            Defaults to settings.DETECT_NEGATIVE_CYCLES.

    Returns:
        ShortestPathResult with the algorithm label and the distance mapping.

    Raises:
        UnknownStartNodeError: If `start` is not in the graph.
        NegativeCycleError: If cycle detection is enabled and one is found.
    """
    if start not in graph:
        raise UnknownStartNodeError(start)

    if force_bellman_ford is None:
        force_bellman_ford = settings.FORCE_BELLMAN_FORD
    if detect_negative_cycles is None:
        detect_negative_cycles = settings.DETECT_NEGATIVE_CYCLES

    has_negative_edge = graph.has_negative_edge()

    if has_negative_edge or force_bellman_ford:
        logger.debug(
            f"Using Bellman-Ford from '{start}' "
            f"(negative edges: {has_negative_edge}, forced: {force_bellman_ford})"
        )
        distances = BellmanFordPathFinder.calculate_distances(
            graph, start, detect_negative_cycles=detect_negative_cycles
        )
        algorithm = BELLMAN_FORD
    else:
        logger.debug(f"Using Dijkstra from '{start}'")
        distances = DijkstraPathFinder.calculate_distances(graph, start)
        algorithm = DIJKSTRA

    return ShortestPathResult(
        algorithm_used=algorithm,
        start=start,
        distances=MappingProxyType(distances),
    )
