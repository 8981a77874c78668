"""
PROJECT:
-------
entity-similarity-network

TITLE:
------
__init__.py (core module)

MAIN OBJECTIVE:
---------------
This script initializes the core module of the entity network, exposing the main configuration,
models, exceptions and constants for use throughout the framework.

Dependencies:
-------------
- entity_network.core.config
- entity_network.core.models
- entity_network.core.exceptions
- entity_network.core.constants

MAIN FEATURES:
--------------
1) Exports NetworkConfig for configuration management
2) Exports all data models (Entity, DensestSubgraphResult, AnalysisResult)
3) Exports the exception hierarchy
4) Provides clean API for core components

Author:
-------
Antoine Lemor
"""

from entity_network.core.config import NetworkConfig
from entity_network.core.models import (
    Entity,
    DensestSubgraphResult,
    AnalysisResult
)
from entity_network.core.exceptions import (
    EntityNetworkError,
    ConfigurationError,
    DataLoadError,
    ValidationError,
    FeatureDimensionError,
    DuplicateEntityError,
    ReportError
)
from entity_network.core.constants import (
    DEFAULT_SIMILARITY_THRESHOLD,
    IDENTIFIER_COLUMN,
    GROUP_COLUMN
)

__all__ = [
    'NetworkConfig',
    'Entity',
    'DensestSubgraphResult',
    'AnalysisResult',
    'EntityNetworkError',
    'ConfigurationError',
    'DataLoadError',
    'ValidationError',
    'FeatureDimensionError',
    'DuplicateEntityError',
    'ReportError',
    'DEFAULT_SIMILARITY_THRESHOLD',
    'IDENTIFIER_COLUMN',
    'GROUP_COLUMN'
]
