"""
Distance matrix utilities.

Converts a dense distance matrix (as produced by numerical code or an
external distance service) into a Graph the shortest-path engine can use.
"""
from typing import Hashable, List, Sequence
import logging
import numpy as np

from path_engine.core.exceptions import InvalidGraphError
from path_engine.core.graph import Graph

logger = logging.getLogger(__name__)


def distance_matrix_to_graph(
    distance_matrix: np.ndarray,
    node_ids: Sequence[Hashable]
) -> Graph:
    """
    Convert a distance matrix to a Graph.

    Args:
        distance_matrix: Square 2D array; entry [i, j] is the weight of the
            edge node_ids[i] -> node_ids[j]. Non-finite entries (inf, nan)
            mean there is no edge.
        node_ids: Node IDs corresponding to matrix indices.

    Returns:
        Graph containing every ID in node_ids, with one edge per finite
        off-diagonal entry.

    Raises:
        InvalidGraphError: If the matrix is not square, does not match
            node_ids, or node_ids contains duplicates.
    """
    try:
        matrix = np.asarray(distance_matrix, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidGraphError(f"Distance matrix must be numeric: {exc}") from exc
    node_ids = list(node_ids)

    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise InvalidGraphError(f"Distance matrix must be square, got shape {matrix.shape}")
    if matrix.shape[0] != len(node_ids):
        raise InvalidGraphError(
            f"Distance matrix has {matrix.shape[0]} rows but {len(node_ids)} node IDs were given"
        )
    if len(set(node_ids)) != len(node_ids):
        raise InvalidGraphError("Node IDs must be unique")

    graph = {}
    skipped = 0

    for i, from_id in enumerate(node_ids):
        edges: List = []
        for j, to_id in enumerate(node_ids):
            if i == j:  # Skip self-connections
                continue
            weight = matrix[i, j]
            if not np.isfinite(weight):
                skipped += 1
                continue
            edges.append((to_id, float(weight)))
        graph[from_id] = edges

    if skipped:
        logger.debug(f"Skipped {skipped} non-finite entries while building graph")

    return Graph(graph)
