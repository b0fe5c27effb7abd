import random

import pytest

from path_engine.core.graph import Graph
from path_engine.fixtures import make_sample_graph


@pytest.fixture
def sample_graph():
    """The A..G sample graph with non-negative weights."""
    return make_sample_graph()


@pytest.fixture
def random_graphs():
    """Seeded random graphs with non-negative integer weights."""
    rng = random.Random(1234)
    graphs = []
    for _ in range(25):
        size = rng.randint(1, 9)
        nodes = [f"n{i}" for i in range(size)]
        edges = [
            (rng.choice(nodes), rng.choice(nodes), rng.randint(0, 20))
            for _ in range(rng.randint(0, size * 3))
        ]
        adjacency = {node: [] for node in nodes}
        for source, target, weight in edges:
            adjacency[source].append((target, weight))
        graphs.append(Graph(adjacency))
    return graphs
