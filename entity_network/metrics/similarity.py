"""
PROJECT:
-------
entity-similarity-network

TITLE:
------
similarity.py

MAIN OBJECTIVE:
---------------
This script provides the pairwise similarity score used to connect entities in the network.

Dependencies:
-------------
- numpy
- typing

MAIN FEATURES:
--------------
1) Cosine similarity between two equal-length feature vectors
2) Zero-norm and non-finite guard (returns 0.0, never NaN or infinity)
3) Result clipped to [-1, 1]; identical non-zero vectors score exactly 1.0

Author:
-------
Antoine Lemor
"""

from typing import Sequence
import numpy as np

from entity_network.core.exceptions import FeatureDimensionError


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Compute cosine similarity between two feature vectors.

    Args:
        a: First feature vector
        b: Second feature vector (same length as ``a``)

    Returns:
        dot(a, b) / (|a| * |b|), or 0.0 when either vector has zero or non-finite norm

    Raises:
        FeatureDimensionError: If the vectors differ in length
    """
    v1 = np.asarray(a, dtype=float)
    v2 = np.asarray(b, dtype=float)

    if v1.shape != v2.shape:
        raise FeatureDimensionError(
            f"Cannot compare vectors of length {v1.size} and {v2.size}"
        )

    norm1 = np.linalg.norm(v1)
    norm2 = np.linalg.norm(v2)

    # Non-finite entries (inf, nan) make the ratio undefined; score like a zero vector
    if norm1 == 0 or norm2 == 0 or not np.isfinite(norm1) or not np.isfinite(norm2):
        return 0.0

    # Identical vectors must score exactly 1.0 so that any threshold <= 1.0 connects them
    if np.array_equal(v1, v2):
        return 1.0

    sim = np.dot(v1, v2) / (norm1 * norm2)
    return float(np.clip(sim, -1.0, 1.0))
