"""
PROJECT:
-------
entity-similarity-network

TITLE:
------
graph_builder.py

MAIN OBJECTIVE:
---------------
This script builds the undirected weighted similarity network: one node per entity and one edge
per pair of entities whose cosine similarity reaches the configured threshold.

Dependencies:
-------------
- networkx
- itertools
- math
- numbers
- logging
- tqdm

MAIN FEATURES:
--------------
1) Up-front validation of entity input (vector lengths, identifier uniqueness)
2) Deterministic node insertion following input order
3) Exhaustive pairwise comparison, each unordered pair exactly once
4) Inclusive threshold on edge admission, edge weight = similarity

Author:
-------
Antoine Lemor
"""

import math
import numbers
import logging
from itertools import combinations
from typing import Dict, Tuple, Sequence
import networkx as nx
from tqdm import tqdm

from entity_network.core.models import Entity
from entity_network.core.exceptions import (
    ConfigurationError, FeatureDimensionError, DuplicateEntityError
)
from entity_network.metrics.similarity import cosine_similarity

logger = logging.getLogger(__name__)


def validate_entities(entities: Sequence[Entity]) -> int:
    """
    Check that entities can be compared pairwise.

    Args:
        entities: Entities to validate

    Returns:
        Shared feature-vector length (0 for empty input)

    Raises:
        FeatureDimensionError: If two feature vectors differ in length
        DuplicateEntityError: If an identifier appears twice
    """
    if not entities:
        return 0

    reference = entities[0]
    seen = set()
    for entity in entities:
        if entity.dimension != reference.dimension:
            raise FeatureDimensionError(
                f"Entity '{entity.identifier}' has {entity.dimension} features, "
                f"expected {reference.dimension} (as '{reference.identifier}')"
            )
        if entity.identifier in seen:
            raise DuplicateEntityError(f"Duplicate entity identifier: '{entity.identifier}'")
        seen.add(entity.identifier)

    return reference.dimension


def build_graph(entities: Sequence[Entity],
                threshold: float,
                show_progress: bool = False) -> Tuple[nx.Graph, Dict[str, str]]:
    """
    Build the similarity network.

    Args:
        entities: Entities to connect, one node each
        threshold: Minimum similarity (inclusive) for an edge
        show_progress: Show progress bar over pairwise comparisons

    Returns:
        Tuple of (graph, node lookup from identifier to node)
    """
    if isinstance(threshold, bool) or not isinstance(threshold, numbers.Real) or not math.isfinite(threshold):
        raise ConfigurationError(f"Similarity threshold must be a finite number, got {threshold!r}")

    entities = list(entities)
    dimension = validate_entities(entities)
    logger.info(f"Building similarity graph for {len(entities)} entities "
                f"({dimension} features, threshold={threshold})")

    G = nx.Graph()
    G.graph['threshold'] = threshold
    G.graph['n_entities'] = len(entities)

    node_lookup: Dict[str, str] = {}
    for order, entity in enumerate(entities):
        G.add_node(entity.identifier, group=entity.group, order=order)
        node_lookup[entity.identifier] = entity.identifier

    pairs = combinations(entities, 2)
    if show_progress:
        n_pairs = len(entities) * (len(entities) - 1) // 2
        pairs = tqdm(pairs, total=n_pairs, desc="Comparing entities")

    for a, b in pairs:
        sim = cosine_similarity(a.features, b.features)
        if sim >= threshold:
            G.add_edge(node_lookup[a.identifier], node_lookup[b.identifier], weight=sim)

    logger.info(f"Graph built: {G.number_of_nodes()} nodes, {G.number_of_edges()} edges")
    return G, node_lookup
