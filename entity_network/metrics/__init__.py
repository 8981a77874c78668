"""
PROJECT:
-------
entity-similarity-network

TITLE:
------
__init__.py (metrics module)

MAIN OBJECTIVE:
---------------
This script initializes the metrics module, providing access to the similarity scorer, the graph
builder and the two structural analyses run on the resulting network.

Dependencies:
-------------
- entity_network.metrics.similarity
- entity_network.metrics.graph_builder
- entity_network.metrics.centrality
- entity_network.metrics.densest_subgraph

MAIN FEATURES:
--------------
1) Exports cosine_similarity for pairwise scoring
2) Exports build_graph for network construction
3) Exports closeness_centrality for per-node centrality
4) Exports densest_subgraph for greedy density maximization

Author:
-------
Antoine Lemor
"""

from entity_network.metrics.similarity import cosine_similarity
from entity_network.metrics.graph_builder import build_graph, validate_entities
from entity_network.metrics.centrality import closeness_centrality, top_central_nodes
from entity_network.metrics.densest_subgraph import densest_subgraph, DensestSubgraphExtractor

__all__ = [
    'cosine_similarity',
    'build_graph',
    'validate_entities',
    'closeness_centrality',
    'top_central_nodes',
    'densest_subgraph',
    'DensestSubgraphExtractor'
]
