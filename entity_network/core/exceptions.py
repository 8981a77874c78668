"""
PROJECT:
-------
entity-similarity-network

TITLE:
------
exceptions.py

MAIN OBJECTIVE:
---------------
This script defines custom exception classes for the entity network framework, providing
structured error handling for configuration, ingestion, graph construction and reporting.

Dependencies:
-------------
None

MAIN FEATURES:
--------------
1) Base EntityNetworkError exception class
2) Specialized exceptions for configuration, data loading and reporting errors
3) Validation exceptions for malformed entity input (vector shape, duplicate identifiers)

Author:
-------
Antoine Lemor
"""


class EntityNetworkError(Exception):
    """Base exception for the entity network."""
    pass


class ConfigurationError(EntityNetworkError):
    """Configuration-related errors."""
    pass


class DataLoadError(EntityNetworkError):
    """Errors while reading the entity source."""
    pass


class ValidationError(EntityNetworkError):
    """Malformed entity input."""
    pass


class FeatureDimensionError(ValidationError):
    """Feature vectors of unequal length."""
    pass


class DuplicateEntityError(ValidationError):
    """Two entities share one identifier."""
    pass


class ReportError(EntityNetworkError):
    """Errors while writing the analysis report."""
    pass
