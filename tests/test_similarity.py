"""
Tests for the cosine similarity scorer.
"""

import sys
from pathlib import Path
# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import math
import unittest
import warnings
import numpy as np

from entity_network.metrics.similarity import cosine_similarity
from entity_network.core.exceptions import FeatureDimensionError, ValidationError


class TestCosineSimilarity(unittest.TestCase):
    """Test cosine_similarity properties."""

    def test_identical_vectors_score_one(self):
        """Equal non-zero vectors score exactly 1.0."""
        for vec in ([1.0, 0.0], [1.0, 1.0, 1.0], [0.3, 7.1, 2.2, 0.0], [1e-8, 3e5]):
            self.assertEqual(cosine_similarity(vec, list(vec)), 1.0)

    def test_parallel_vectors(self):
        """Scaled copies are maximally similar."""
        self.assertAlmostEqual(cosine_similarity([1, 2, 3], [2, 4, 6]), 1.0, places=12)

    def test_orthogonal_vectors(self):
        """Orthogonal vectors score 0.0."""
        self.assertEqual(cosine_similarity([1, 0], [0, 1]), 0.0)
        self.assertEqual(cosine_similarity([1, 0, 2], [0, 5, 0]), 0.0)

    def test_known_value(self):
        """45 degrees apart."""
        self.assertAlmostEqual(cosine_similarity([1, 0], [1, 1]), 1 / math.sqrt(2), places=12)

    def test_opposite_vectors(self):
        """Opposite directions score -1.0."""
        self.assertAlmostEqual(cosine_similarity([1, 2], [-1, -2]), -1.0, places=12)

    def test_symmetry(self):
        """similarity(a, b) == similarity(b, a)."""
        rng = np.random.default_rng(42)
        for _ in range(50):
            a = rng.random(6)
            b = rng.random(6)
            self.assertEqual(cosine_similarity(a, b), cosine_similarity(b, a))

    def test_zero_vector(self):
        """Zero vectors score 0.0 against anything, without NaN."""
        zero = [0.0, 0.0, 0.0]
        for other in ([1, 2, 3], [0, 0, 0], [-1, 0, 4]):
            result = cosine_similarity(zero, other)
            self.assertEqual(result, 0.0)
            self.assertFalse(math.isnan(result))
            self.assertEqual(cosine_similarity(other, zero), 0.0)

    def test_non_finite_vectors_score_zero(self):
        """inf or nan entries never leak NaN into the score."""
        inf, nan = float('inf'), float('nan')
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            self.assertEqual(cosine_similarity([inf, 1.0], [1.0, 2.0]), 0.0)
            self.assertEqual(cosine_similarity([1.0, 2.0], [-inf, 0.0]), 0.0)
            self.assertEqual(cosine_similarity([nan, 1.0], [1.0, 1.0]), 0.0)
            # Identical vectors get no 1.0 shortcut once they carry inf
            self.assertEqual(cosine_similarity([inf, 1.0], [inf, 1.0]), 0.0)

    def test_range(self):
        """Scores stay within [-1, 1]."""
        rng = np.random.default_rng(7)
        for _ in range(100):
            a = rng.normal(size=5)
            b = rng.normal(size=5)
            sim = cosine_similarity(a, b)
            self.assertGreaterEqual(sim, -1.0)
            self.assertLessEqual(sim, 1.0)

    def test_returns_python_float(self):
        """Result is a plain float."""
        self.assertIsInstance(cosine_similarity([1, 2], [3, 4]), float)

    def test_length_mismatch(self):
        """Unequal lengths are rejected."""
        with self.assertRaises(FeatureDimensionError):
            cosine_similarity([1, 2], [1, 2, 3])
        # Part of the validation family
        with self.assertRaises(ValidationError):
            cosine_similarity([1], [1, 2])


if __name__ == '__main__':
    unittest.main()
