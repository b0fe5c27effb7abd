import unittest

from path_engine.core.exceptions import InvalidGraphError, UnknownNodeError
from path_engine.core.graph import Edge, Graph


class TestGraph(unittest.TestCase):
    """Test cases for the Graph model."""

    def setUp(self):
        self.graph = Graph({
            'A': [('B', 2), ('C', 1)],
            'B': [('D', 3)],
        })

    def test_nodes_include_targets(self):
        self.assertEqual(self.graph.nodes(), frozenset({'A', 'B', 'C', 'D'}))
        self.assertEqual(len(self.graph), 4)

    def test_ordered_nodes(self):
        # Sources first, then target-only nodes in first-seen order
        self.assertEqual(self.graph.ordered_nodes, ('A', 'B', 'C', 'D'))

    def test_outgoing(self):
        self.assertEqual(self.graph.outgoing('A'), (Edge('B', 2), Edge('C', 1)))
        self.assertEqual(self.graph.outgoing('C'), ())

    def test_outgoing_unknown_node(self):
        with self.assertRaises(UnknownNodeError) as ctx:
            self.graph.outgoing('Z')
        self.assertEqual(ctx.exception.node, 'Z')
        self.assertIsInstance(ctx.exception, LookupError)

    def test_contains(self):
        self.assertIn('D', self.graph)
        self.assertNotIn('Z', self.graph)
        self.assertNotIn({'A'}, self.graph)

    def test_has_negative_edge(self):
        self.assertFalse(self.graph.has_negative_edge())
        self.assertTrue(Graph({'A': [('B', -0.1)]}).has_negative_edge())
        self.assertFalse(Graph({'A': [('B', 0)]}).has_negative_edge())

    def test_empty_graph(self):
        graph = Graph({})
        self.assertEqual(graph.nodes(), frozenset())
        self.assertFalse(graph.has_negative_edge())
        self.assertEqual(graph.edge_count(), 0)

    def test_parallel_edges_kept(self):
        graph = Graph({'A': [('B', 3), ('B', 1), ('B', 3)]})
        self.assertEqual(len(graph.outgoing('A')), 3)
        self.assertEqual(graph.edge_count(), 3)

    def test_mapping_adjacency(self):
        graph = Graph({'A': {'B': 1, 'C': 4}, 'B': {'C': 2}, 'C': {}})
        self.assertEqual(graph.outgoing('A'), (Edge('B', 1), Edge('C', 4)))
        self.assertEqual(graph.edge_count(), 3)

    def test_edge_objects_adjacency(self):
        graph = Graph({'A': [Edge('B', 5)], 'B': None})
        self.assertEqual(graph.outgoing('A'), (Edge('B', 5),))
        self.assertEqual(graph.outgoing('B'), ())

    def test_from_edges(self):
        graph = Graph.from_edges([('A', 'B', 1), ('B', 'C', 2), ('A', 'C', 5)])
        self.assertEqual(graph.outgoing('A'), (Edge('B', 1), Edge('C', 5)))
        self.assertEqual(graph.ordered_nodes, ('A', 'B', 'C'))

    def test_edges_iteration_order(self):
        self.assertEqual(
            list(self.graph.edges()),
            [('A', Edge('B', 2)), ('A', Edge('C', 1)), ('B', Edge('D', 3))]
        )

    def test_input_is_copied(self):
        adjacency = {'A': [('B', 1)]}
        graph = Graph(adjacency)
        adjacency['A'].append(('C', -1))
        adjacency['X'] = []
        self.assertEqual(graph.outgoing('A'), (Edge('B', 1),))
        self.assertNotIn('X', graph)
        self.assertFalse(graph.has_negative_edge())

    def test_invalid_weight(self):
        with self.assertRaises(InvalidGraphError):
            Graph({'A': [('B', 'heavy')]})
        with self.assertRaises(InvalidGraphError):
            Graph({'A': [('B', float('nan'))]})
        with self.assertRaises(InvalidGraphError):
            Graph({'A': [('B', True)]})

    def test_unhashable_target(self):
        with self.assertRaises(InvalidGraphError):
            Graph({'A': [(['B'], 1)]})
        with self.assertRaises(InvalidGraphError):
            Edge({'B': 1}, 1)

    def test_invalid_edge_shape(self):
        with self.assertRaises(InvalidGraphError):
            Graph({'A': [('B', 1, 2)]})
        with self.assertRaises(InvalidGraphError):
            Graph({'A': [42]})

    def test_edge_is_frozen(self):
        edge = Edge('B', 1)
        with self.assertRaises(AttributeError):
            edge.weight = 2

    def test_repr(self):
        self.assertEqual(repr(self.graph), 'Graph(nodes=4, edges=3)')


if __name__ == '__main__':
    unittest.main()
