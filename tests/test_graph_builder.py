"""
Tests for similarity graph construction.

Tests verify node/edge invariants, threshold semantics and input validation.
"""

import sys
from pathlib import Path
# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import unittest
import warnings
import numpy as np
import networkx as nx

from entity_network.core.models import Entity
from entity_network.core.exceptions import (
    ConfigurationError, FeatureDimensionError, DuplicateEntityError
)
from entity_network.metrics.graph_builder import build_graph, validate_entities


def make_entities(vectors, group="2019"):
    """Entities named A, B, C... from a list of vectors."""
    return [
        Entity(identifier=chr(ord('A') + i), group=group, features=vec)
        for i, vec in enumerate(vectors)
    ]


class TestValidateEntities(unittest.TestCase):
    """Test input validation."""

    def test_empty(self):
        self.assertEqual(validate_entities([]), 0)

    def test_shared_dimension(self):
        entities = make_entities([[1, 2, 3], [4, 5, 6]])
        self.assertEqual(validate_entities(entities), 3)

    def test_dimension_mismatch(self):
        entities = make_entities([[1, 2, 3], [4, 5, 6], [7, 8]])
        with self.assertRaises(FeatureDimensionError) as ctx:
            validate_entities(entities)
        self.assertIn("'C'", str(ctx.exception))

    def test_duplicate_identifier(self):
        entities = [
            Entity('Duke (2019)', '2019', [1, 2]),
            Entity('Duke (2019)', '2019', [3, 4]),
        ]
        with self.assertRaises(DuplicateEntityError):
            validate_entities(entities)


class TestBuildGraph(unittest.TestCase):
    """Test build_graph."""

    def setUp(self):
        """Set up test fixtures."""
        rng = np.random.default_rng(0)
        self.random_entities = make_entities(rng.random((12, 4)).tolist())

    def test_two_identical_entities(self):
        """A=[1,0], B=[1,0], threshold 0.9 -> one edge of weight 1.0."""
        graph, lookup = build_graph(make_entities([[1, 0], [1, 0]]), 0.9)

        self.assertEqual(graph.number_of_nodes(), 2)
        self.assertEqual(graph.number_of_edges(), 1)
        self.assertEqual(graph['A']['B']['weight'], 1.0)
        self.assertEqual(lookup, {'A': 'A', 'B': 'B'})

    def test_three_entity_scenario(self):
        """A=[1,0], B=[1,0], C=[0,1], threshold 0.5 -> only A-B."""
        graph, _ = build_graph(make_entities([[1, 0], [1, 0], [0, 1]]), 0.5)

        self.assertEqual(graph.number_of_nodes(), 3)
        self.assertEqual(graph.number_of_edges(), 1)
        self.assertTrue(graph.has_edge('A', 'B'))
        self.assertEqual(graph.degree('C'), 0)

    def test_single_entity(self):
        graph, lookup = build_graph(make_entities([[3, 4]]), 0.0)
        self.assertEqual(graph.number_of_nodes(), 1)
        self.assertEqual(graph.number_of_edges(), 0)
        self.assertEqual(list(lookup), ['A'])

    def test_empty_input(self):
        graph, lookup = build_graph([], 0.5)
        self.assertEqual(graph.number_of_nodes(), 0)
        self.assertEqual(lookup, {})

    def test_node_count_and_order(self):
        """One node per entity, in input order, with group attributes."""
        graph, _ = build_graph(self.random_entities, 0.8)
        self.assertEqual(graph.number_of_nodes(), len(self.random_entities))
        self.assertEqual(list(graph.nodes()), [e.identifier for e in self.random_entities])
        self.assertEqual(graph.nodes['A']['group'], '2019')
        self.assertEqual(graph.nodes['C']['order'], 2)

    def test_edge_count_bound_and_no_self_loops(self):
        n = len(self.random_entities)
        graph, _ = build_graph(self.random_entities, -1.0)
        # Every pair admitted at the lowest threshold
        self.assertEqual(graph.number_of_edges(), n * (n - 1) // 2)
        self.assertEqual(nx.number_of_selfloops(graph), 0)

    def test_threshold_is_inclusive(self):
        """An edge exists when similarity equals the threshold."""
        graph, _ = build_graph(make_entities([[1, 0], [1, 0]]), 1.0)
        self.assertEqual(graph.number_of_edges(), 1)

        graph, _ = build_graph(make_entities([[1, 0], [0, 1]]), 0.0)
        self.assertEqual(graph.number_of_edges(), 1)
        self.assertEqual(graph['A']['B']['weight'], 0.0)

    def test_edge_weights_within_bounds(self):
        threshold = 0.7
        graph, _ = build_graph(self.random_entities, threshold)
        for _, _, weight in graph.edges(data='weight'):
            self.assertGreaterEqual(weight, threshold)
            self.assertLessEqual(weight, 1.0)

    def test_threshold_monotonicity(self):
        """Raising the threshold never adds edges."""
        counts = [
            build_graph(self.random_entities, t)[0].number_of_edges()
            for t in (0.0, 0.5, 0.7, 0.8, 0.9, 0.95, 1.0)
        ]
        for lower, higher in zip(counts, counts[1:]):
            self.assertGreaterEqual(lower, higher)

    def test_zero_vector_entity_is_isolated(self):
        graph, _ = build_graph(make_entities([[1, 1], [0, 0], [1, 1]]), 0.1)
        self.assertEqual(graph.degree('B'), 0)
        self.assertTrue(graph.has_edge('A', 'C'))

    def test_metadata(self):
        graph, _ = build_graph(self.random_entities, 0.6)
        self.assertEqual(graph.graph['threshold'], 0.6)
        self.assertEqual(graph.graph['n_entities'], 12)

    def test_mismatched_lengths_fail(self):
        entities = make_entities([[1, 0], [1, 0, 0]])
        with self.assertRaises(FeatureDimensionError):
            build_graph(entities, 0.5)

    def test_duplicate_identifiers_fail(self):
        entities = [Entity('X', 'g', [1, 0]), Entity('X', 'g', [1, 0])]
        with self.assertRaises(DuplicateEntityError):
            build_graph(entities, 0.5)

    def test_invalid_threshold(self):
        entities = make_entities([[1, 0]])
        for bad in (float('nan'), float('inf'), None, "0.5"):
            with self.assertRaises(ConfigurationError):
                build_graph(entities, bad)

    def test_numpy_threshold(self):
        """numpy scalars are valid thresholds."""
        entities = make_entities([[1, 0], [1, 0], [0, 1]])
        for threshold in (np.float32(0.5), np.float64(0.5), np.int64(1)):
            graph, _ = build_graph(entities, threshold)
            self.assertEqual(graph.number_of_edges(), 1)

    def test_non_finite_features_stay_isolated(self):
        """An entity carrying inf connects to nothing, without NaN weights."""
        inf = float('inf')
        entities = make_entities([[inf, 1.0], [inf, 1.0], [1.0, 2.0]])
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            graph, _ = build_graph(entities, 0.0)
        self.assertEqual(graph.degree('A'), 0)
        self.assertEqual(graph.degree('B'), 0)

    def test_show_progress(self):
        """Progress bar does not change the result."""
        plain, _ = build_graph(self.random_entities, 0.8)
        with_bar, _ = build_graph(self.random_entities, 0.8, show_progress=True)
        self.assertEqual(set(plain.edges()), set(with_bar.edges()))


if __name__ == '__main__':
    unittest.main()
