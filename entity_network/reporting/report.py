"""
PROJECT:
-------
entity-similarity-network

TITLE:
------
report.py

MAIN OBJECTIVE:
---------------
This script turns an analysis result into a human-readable text summary (graph size, most central
entities, densest subgraph) and writes it to disk, with an optional JSON export.

Dependencies:
-------------
- dataclasses
- json
- pathlib
- logging

MAIN FEATURES:
--------------
1) AnalysisReport dataclass with everything the summary shows
2) Plain-text rendering of graph statistics, top closeness and densest-subgraph members
3) File writing with directory creation and error wrapping
4) JSON export of the report

Author:
-------
Antoine Lemor
"""

import json
import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Dict, List, Tuple, Union

from entity_network.core.constants import DEFAULT_ENTITY_LABEL, DEFAULT_TOP_K, REPORT_FLOAT_PRECISION
from entity_network.core.exceptions import ReportError
from entity_network.core.models import AnalysisResult
from entity_network.metrics.centrality import top_central_nodes

logger = logging.getLogger(__name__)


@dataclass
class AnalysisReport:
    """Values rendered in the text summary."""
    n_nodes: int
    n_edges: int
    average_degree: float
    top_closeness: List[Tuple[str, float]]
    densest_n_nodes: int
    densest_density: float
    densest_top_degree: List[Tuple[str, int]]
    threshold: float
    top_k: int = DEFAULT_TOP_K
    entity_label: str = DEFAULT_ENTITY_LABEL
    metadata: Dict = field(default_factory=dict)

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        data = asdict(self)
        data['top_closeness'] = [{'node': n, 'closeness': s} for n, s in self.top_closeness]
        data['densest_top_degree'] = [{'node': n, 'degree': d} for n, d in self.densest_top_degree]
        return data

    def export_json(self, path: Union[str, Path]) -> Path:
        """Write the report as JSON."""
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(self.to_dict(), f, indent=2, default=str)
        except OSError as e:
            logger.error(f"Error exporting report to {path}: {e}")
            raise ReportError(f"Failed to export report to {path}: {e}") from e
        logger.info(f"Report exported to {path}")
        return path


def build_report(result: AnalysisResult,
                 top_k: int = DEFAULT_TOP_K,
                 entity_label: str = DEFAULT_ENTITY_LABEL) -> AnalysisReport:
    """
    Collect the report values from an analysis result.

    Args:
        result: Pipeline output
        top_k: Number of entries in each ranking
        entity_label: Noun used in the closeness heading

    Returns:
        AnalysisReport
    """
    return AnalysisReport(
        n_nodes=result.n_nodes,
        n_edges=result.n_edges,
        average_degree=result.average_degree,
        top_closeness=top_central_nodes(result.closeness, top_k),
        densest_n_nodes=result.densest.n_nodes,
        densest_density=result.densest.density,
        densest_top_degree=result.densest.nodes_by_degree()[:top_k],
        threshold=result.threshold,
        top_k=top_k,
        entity_label=entity_label,
        metadata={'computation_time': result.computation_time}
    )


def render_report(report: AnalysisReport) -> str:
    """Render the report as plain text."""
    p = REPORT_FLOAT_PRECISION
    lines = [
        f"Graph has {report.n_nodes} nodes and {report.n_edges} edges",
        f"Average node degree: {report.average_degree:.2f}",
        "",
        f"Top {report.top_k} {report.entity_label} by closeness centrality:",
    ]
    lines.extend(f"{node}: {score:.{p}f}" for node, score in report.top_closeness)

    lines.append("")
    lines.append(f"Densest subgraph: {report.densest_n_nodes} nodes, "
                 f"density = {report.densest_density:.{p}f}")
    lines.append(f"Top {report.top_k} nodes in densest subgraph by degree:")
    lines.extend(f"{node} (degree {degree})" for node, degree in report.densest_top_degree)

    return "\n".join(lines) + "\n"


def write_report(text: str, path: Union[str, Path]) -> Path:
    """
    Write the rendered report.

    Args:
        text: Rendered report
        path: Output file

    Returns:
        Path written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
    except OSError as e:
        logger.error(f"Error writing report to {path}: {e}")
        raise ReportError(f"Failed to write report to {path}: {e}") from e

    logger.info(f"Results written to {path}")
    return path
