"""
PROJECT:
-------
entity-similarity-network

TITLE:
------
constants.py

MAIN OBJECTIVE:
---------------
This script defines global constants used throughout the entity network framework, including
input column conventions, the default similarity threshold, and report parameters.

Dependencies:
-------------
None

MAIN FEATURES:
--------------
1) Default input/output locations
2) Column mappings for the tabular entity source
3) Graph construction thresholds
4) Report layout parameters

Author:
-------
Antoine Lemor
"""

# Input / output locations
DEFAULT_INPUT_PATH = "DEV _ March Madness.csv"
DEFAULT_OUTPUT_PATH = "output_results.txt"

# Column mappings for the entity table
IDENTIFIER_COLUMN = "Full Team Name"
GROUP_COLUMN = "Season"
EXCLUDED_COLUMNS = ["Seed"]  # Non-statistical columns kept out of feature vectors

# Identifier shown in the graph: name plus cohort, e.g. "Duke (2019)"
LABEL_FORMAT = "{name} ({group})"

# Graph construction
DEFAULT_SIMILARITY_THRESHOLD = 0.5
MIN_SIMILARITY = -1.0
MAX_SIMILARITY = 1.0

# Report layout
DEFAULT_TOP_K = 5
DEFAULT_ENTITY_LABEL = "teams"
REPORT_FLOAT_PRECISION = 3

# Logging
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
