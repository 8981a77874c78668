"""
PROJECT:
-------
entity-similarity-network

TITLE:
------
config.py

MAIN OBJECTIVE:
---------------
This script manages the configuration settings for the entity network framework, providing
centralized configuration management with environment variable overrides.

Dependencies:
-------------
- os
- math
- numbers
- dataclasses
- typing

MAIN FEATURES:
--------------
1) Central configuration dataclass for graph construction and reporting parameters
2) Environment variable integration for flexible deployment
3) Default values for all configuration parameters
4) JSON persistence (load/save) and validation

Author:
-------
Antoine Lemor
"""

import os
import math
import numbers
from dataclasses import dataclass, field, fields
from typing import List, Dict, Any
from entity_network.core.constants import *
from entity_network.core.exceptions import ConfigurationError


def _env_float(name: str, default: float) -> float:
    """Read a float from the environment, rejecting unparsable values."""
    raw = os.getenv(name, str(default))
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"Environment variable {name} must be a number, got {raw!r}") from e


@dataclass
class NetworkConfig:
    """
    Central configuration for the entity network.
    Can be overridden via environment variables or config files.

    Only ``similarity_threshold`` affects graph construction; every other
    field configures ingestion, reporting or logging.
    """

    # Graph construction
    similarity_threshold: float = field(
        default_factory=lambda: _env_float("SIMILARITY_THRESHOLD", DEFAULT_SIMILARITY_THRESHOLD)
    )

    # Input configuration
    input_path: str = field(default_factory=lambda: os.getenv("INPUT_PATH", DEFAULT_INPUT_PATH))
    identifier_column: str = IDENTIFIER_COLUMN
    group_column: str = GROUP_COLUMN
    excluded_columns: List[str] = field(default_factory=lambda: EXCLUDED_COLUMNS.copy())
    label_format: str = LABEL_FORMAT

    # Output configuration
    output_path: str = field(default_factory=lambda: os.getenv("OUTPUT_PATH", DEFAULT_OUTPUT_PATH))
    top_k: int = DEFAULT_TOP_K
    entity_label: str = DEFAULT_ENTITY_LABEL
    export_json: bool = False

    # Runtime
    show_progress: bool = False
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL))

    def validate(self) -> bool:
        """Validate configuration consistency."""
        threshold = self.similarity_threshold
        if isinstance(threshold, bool) or not isinstance(threshold, numbers.Real) or not math.isfinite(threshold):
            raise ConfigurationError(f"Similarity threshold must be a finite number, got {threshold!r}")
        if not MIN_SIMILARITY <= threshold <= MAX_SIMILARITY:
            raise ConfigurationError(
                f"Similarity threshold must lie in [{MIN_SIMILARITY}, {MAX_SIMILARITY}], got {threshold}"
            )

        if isinstance(self.top_k, bool) or not isinstance(self.top_k, numbers.Integral):
            raise ConfigurationError(f"top_k must be an integer, got {self.top_k!r}")
        if self.top_k < 1:
            raise ConfigurationError(f"top_k must be at least 1, got {self.top_k}")

        if self.identifier_column == self.group_column:
            raise ConfigurationError("Identifier and group columns must differ")
        reserved = {self.identifier_column, self.group_column}
        if reserved & set(self.excluded_columns):
            raise ConfigurationError(
                f"Excluded columns may not contain identifier/group columns: {sorted(reserved)}"
            )

        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")

        return True

    def to_dict(self) -> Dict:
        """Convert config to dictionary."""
        return {
            'graph': {
                'similarity_threshold': self.similarity_threshold
            },
            'input': {
                'input_path': self.input_path,
                'identifier_column': self.identifier_column,
                'group_column': self.group_column,
                'excluded_columns': self.excluded_columns,
                'label_format': self.label_format
            },
            'output': {
                'output_path': self.output_path,
                'top_k': self.top_k,
                'entity_label': self.entity_label,
                'export_json': self.export_json
            },
            'runtime': {
                'show_progress': self.show_progress,
                'log_level': self.log_level
            }
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'NetworkConfig':
        """Build a config from flat or sectioned (``to_dict``) data."""
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration must be a JSON object, got {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        flat = {}
        for key, value in data.items():
            if isinstance(value, dict) and key not in known:
                flat.update(value)
            else:
                flat[key] = value

        unknown = set(flat) - known
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {sorted(unknown)}")
        try:
            return cls(**flat)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @classmethod
    def from_file(cls, path: str) -> 'NetworkConfig':
        """Load configuration from JSON file."""
        import json
        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Failed to load configuration from {path}: {e}") from e
        return cls.from_dict(data)

    def save(self, path: str) -> None:
        """Save configuration to JSON file."""
        import json
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)
