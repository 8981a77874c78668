"""
PROJECT:
-------
entity-similarity-network

TITLE:
------
__init__.py (reporting module)

MAIN OBJECTIVE:
---------------
This script initializes the reporting module, which renders analysis results as text and writes
them to disk.

Dependencies:
-------------
- entity_network.reporting.report

MAIN FEATURES:
--------------
1) Exports AnalysisReport and build_report
2) Exports render_report and write_report

Author:
-------
Antoine Lemor
"""

from entity_network.reporting.report import (
    AnalysisReport,
    build_report,
    render_report,
    write_report
)

__all__ = [
    'AnalysisReport',
    'build_report',
    'render_report',
    'write_report'
]
