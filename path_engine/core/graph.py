"""
Graph model for shortest path computations.

This module provides an immutable directed weighted graph. A graph is built
once from an adjacency mapping and is read-only afterwards, so it can be
shared between concurrent shortest-path computations.
"""
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict, FrozenSet, Hashable, Iterable, Iterator, List, Mapping, Tuple

from path_engine.core.exceptions import InvalidGraphError, UnknownNodeError

Node = Hashable


@dataclass(frozen=True)
class Edge:
    """A directed edge to `target`. The source node is implied by the graph."""
    target: Node
    weight: float

    def __post_init__(self):
        try:
            hash(self.target)
        except TypeError:
            raise InvalidGraphError(
                f"Edge target {self.target!r} is not hashable"
            ) from None
        if isinstance(self.weight, bool) or not isinstance(self.weight, Real):
            raise InvalidGraphError(
                f"Edge to '{self.target}' has non-numeric weight {self.weight!r}"
            )
        if math.isnan(self.weight):
            raise InvalidGraphError(f"Edge to '{self.target}' has NaN weight")


class Graph:
    """
    Immutable directed weighted graph.

    Accepted adjacency formats:
        {node: [Edge(target, weight), ...], ...}
        {node: [(target, weight), ...], ...}
        {node: {target: weight, ...}, ...}

    Parallel edges (the same target listed several times) are kept as
    independent edges. Nodes that only appear as edge targets are still
    graph nodes, with no outgoing edges.
    """

    def __init__(self, adjacency: Mapping[Node, Any]):
        self._adjacency: Dict[Node, Tuple[Edge, ...]] = {}
        order: Dict[Node, None] = {}

        for source, neighbors in adjacency.items():
            edges = tuple(self._to_edges(source, neighbors))
            self._adjacency[source] = edges
            order[source] = None

        for edges in self._adjacency.values():
            for edge in edges:
                if edge.target not in order:
                    order[edge.target] = None

        self._ordered_nodes: Tuple[Node, ...] = tuple(order)
        self._nodes: FrozenSet[Node] = frozenset(order)
        self._has_negative_edge = any(
            edge.weight < 0 for edges in self._adjacency.values() for edge in edges
        )

    @staticmethod
    def _to_edges(source: Node, neighbors: Any) -> Iterator[Edge]:
        if neighbors is None:
            return
        if isinstance(neighbors, Mapping):
            for target, weight in neighbors.items():
                yield Edge(target, weight)
            return
        for item in neighbors:
            if isinstance(item, Edge):
                yield item
                continue
            try:
                target, weight = item
            except (TypeError, ValueError):
                raise InvalidGraphError(
                    f"Invalid edge {item!r} from '{source}': expected (target, weight)"
                ) from None
            yield Edge(target, weight)

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[Node, Node, float]]) -> "Graph":
        """
        Build a graph from (source, target, weight) triples.

        Args:
            edges: Iterable of edge triples. Order is preserved per source.

        Returns:
            A new Graph.
        """
        adjacency: Dict[Node, List[Tuple[Node, float]]] = {}
        for source, target, weight in edges:
            adjacency.setdefault(source, []).append((target, weight))
        return cls(adjacency)

    def nodes(self) -> FrozenSet[Node]:
        """All nodes, whether they appear as a source or only as a target."""
        return self._nodes

    @property
    def ordered_nodes(self) -> Tuple[Node, ...]:
        """
        Nodes in a deterministic order: sources in insertion order, followed by
        target-only nodes in the order they were first seen.
        """
        return self._ordered_nodes

    def outgoing(self, node: Node) -> Tuple[Edge, ...]:
        """
        Get the outgoing edges of a node.

        Raises:
            UnknownNodeError: If the node is not part of the graph.
        """
        if node not in self._nodes:
            raise UnknownNodeError(node)
        return self._adjacency.get(node, ())

    def edges(self) -> Iterator[Tuple[Node, Edge]]:
        """Iterate over (source, edge) pairs in node order."""
        for node in self._ordered_nodes:
            for edge in self._adjacency.get(node, ()):
                yield node, edge

    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._adjacency.values())

    def has_negative_edge(self) -> bool:
        """True if any edge has a negative weight."""
        return self._has_negative_edge

    def __contains__(self, node: Any) -> bool:
        try:
            return node in self._nodes
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={self.edge_count()})"
