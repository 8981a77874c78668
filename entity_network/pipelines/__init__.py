"""
PROJECT:
-------
entity-similarity-network

TITLE:
------
__init__.py (pipelines module)

MAIN OBJECTIVE:
---------------
This script initializes the pipelines module, exposing the end-to-end analysis pipeline.

Dependencies:
-------------
- entity_network.pipelines.analysis_pipeline

MAIN FEATURES:
--------------
1) Exports AnalysisPipeline

Author:
-------
Antoine Lemor
"""

from entity_network.pipelines.analysis_pipeline import AnalysisPipeline

__all__ = [
    'AnalysisPipeline'
]
