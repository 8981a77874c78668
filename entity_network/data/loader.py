"""
PROJECT:
-------
entity-similarity-network

TITLE:
------
loader.py

MAIN OBJECTIVE:
---------------
This script reads the tabular entity source (CSV) and turns each valid row into an immutable
Entity record ready for graph construction.

Dependencies:
-------------
- pandas
- numpy
- logging
- pathlib

MAIN FEATURES:
--------------
1) CSV loading with required-column checks
2) Feature column selection (all columns except identifier, group and excluded ones)
3) Numeric coercion of feature cells (invalid or infinite values become 0.0)
4) Filtering of rows with an empty identifier or an all-zero feature vector
5) Identifier labeling as "name (group)"

Author:
-------
Antoine Lemor
"""

import logging
from pathlib import Path
from typing import List, Optional, Any
import numpy as np
import pandas as pd

from entity_network.core.config import NetworkConfig
from entity_network.core.models import Entity
from entity_network.core.exceptions import DataLoadError

logger = logging.getLogger(__name__)


class EntityLoader:
    """
    Loads entity records from a tabular source.
    """

    def __init__(self, config: Optional[NetworkConfig] = None):
        """
        Initialize entity loader.

        Args:
            config: Network configuration
        """
        self.config = config or NetworkConfig()

    def load_csv(self, path: Optional[str] = None) -> List[Entity]:
        """
        Load entities from a CSV file.

        Args:
            path: CSV path (defaults to config.input_path)

        Returns:
            List of entities in file order
        """
        path = Path(path or self.config.input_path)
        if not path.is_file():
            raise DataLoadError(f"Input file not found: {path}")

        logger.info(f"Reading entities from {path}")
        try:
            df = pd.read_csv(path)
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
            logger.error(f"Error reading {path}: {e}")
            raise DataLoadError(f"Failed to read {path}: {e}") from e

        return self.from_dataframe(df)

    def from_dataframe(self, df: pd.DataFrame) -> List[Entity]:
        """
        Convert a DataFrame into entities.

        Args:
            df: Raw entity table

        Returns:
            List of entities (invalid rows removed)
        """
        id_col = self.config.identifier_column
        group_col = self.config.group_column
        missing = [col for col in (id_col, group_col) if col not in df.columns]
        if missing:
            raise DataLoadError(f"Required columns not found: {missing}")

        feature_cols = self.feature_columns(df)
        logger.debug(f"Using {len(feature_cols)} feature columns: {feature_cols}")

        features = self._clean_feature_columns(df, feature_cols)
        names = df[id_col].map(self._format_cell)
        groups = df[group_col].map(self._format_cell)

        # Drop rows without a name or with an all-zero vector
        valid = (names != "") & (features != 0).any(axis=1)
        removed = int((~valid).sum())
        if removed > 0:
            logger.warning(f"Removed {removed} rows with empty identifier or all-zero features")

        entities = [
            Entity(
                identifier=self.config.label_format.format(name=name, group=group),
                group=group,
                features=tuple(row)
            )
            for name, group, row in zip(names[valid], groups[valid], features[valid].to_numpy())
        ]

        logger.info(f"Loaded {len(entities)} entities")
        return entities

    def feature_columns(self, df: pd.DataFrame) -> List[str]:
        """Columns used as features, in table order."""
        skip = {self.config.identifier_column, self.config.group_column}
        skip.update(self.config.excluded_columns)
        return [col for col in df.columns if col not in skip]

    def _clean_feature_columns(self, df: pd.DataFrame, columns: List[str]) -> pd.DataFrame:
        """Convert feature columns to floats, invalid or infinite cells become 0.0."""
        if not columns:
            return pd.DataFrame(np.zeros((len(df), 0)), index=df.index)
        cleaned = df[columns].apply(pd.to_numeric, errors='coerce')
        return cleaned.replace([np.inf, -np.inf], np.nan).fillna(0.0).astype(float)

    @staticmethod
    def _format_cell(value: Any) -> str:
        """Render an identifier/group cell as text ('' for missing)."""
        if pd.isna(value):
            return ""
        if isinstance(value, float) and value.is_integer():
            # Seasons read as 2019.0 when the column has gaps
            return str(int(value))
        return str(value).strip()
