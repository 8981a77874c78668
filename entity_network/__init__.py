"""
PROJECT:
-------
entity-similarity-network

TITLE:
------
__init__.py

MAIN OBJECTIVE:
---------------
This script initializes the entity network package: similarity-graph construction over entity
feature vectors, closeness centrality and densest-subgraph extraction.

Dependencies:
-------------
- entity_network.core
- entity_network.metrics
- entity_network.pipelines

MAIN FEATURES:
--------------
1) Exports the core models and configuration
2) Exports the graph construction and analysis functions
3) Exports the end-to-end AnalysisPipeline

Author:
-------
Antoine Lemor
"""

from entity_network.core import NetworkConfig, Entity, AnalysisResult, DensestSubgraphResult
from entity_network.metrics import (
    cosine_similarity,
    build_graph,
    closeness_centrality,
    densest_subgraph
)
from entity_network.pipelines import AnalysisPipeline

__version__ = "0.1.0"

__all__ = [
    'NetworkConfig',
    'Entity',
    'AnalysisResult',
    'DensestSubgraphResult',
    'cosine_similarity',
    'build_graph',
    'closeness_centrality',
    'densest_subgraph',
    'AnalysisPipeline'
]
