"""
Sample graphs to feed the shortest-path engine.
"""
from path_engine.core.graph import Graph

SAMPLE_START = "A"


def make_sample_graph(a_to_b_weight: float = 2) -> Graph:
    """
    Create the sample graph with nodes A to G.

    Args:
        a_to_b_weight: Weight of the A -> B edge. A negative value makes the
            engine switch to Bellman-Ford.

    Returns:
        The sample Graph.
    """
    return Graph({
        "A": [("B", a_to_b_weight), ("F", 2), ("G", 3)],
        "B": [("A", 1), ("C", 4)],
        "C": [],
        "D": [],
        "E": [("D", 2)],
        "F": [("A", 1), ("E", 7)],
        "G": [("C", 5), ("E", 6)],
    })
