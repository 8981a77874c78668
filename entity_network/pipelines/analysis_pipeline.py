"""
PROJECT:
-------
entity-similarity-network

TITLE:
------
analysis_pipeline.py

MAIN OBJECTIVE:
---------------
This script orchestrates one analysis run: load entities, build the similarity network, compute
closeness centrality and the densest subgraph, then render and write the report.

Dependencies:
-------------
- logging
- time
- uuid
- pathlib
- networkx

MAIN FEATURES:
--------------
1) Single entry point from an entity sequence or from the configured CSV
2) Independent read-only analyses over the shared network
3) Timing and summary logging
4) Text report writing with optional JSON export

Author:
-------
Antoine Lemor
"""

import logging
import time
import uuid
from pathlib import Path
from typing import Optional, Sequence

from entity_network.core.config import NetworkConfig
from entity_network.core.models import Entity, AnalysisResult
from entity_network.data.loader import EntityLoader
from entity_network.metrics.graph_builder import build_graph
from entity_network.metrics.centrality import closeness_centrality
from entity_network.metrics.densest_subgraph import DensestSubgraphExtractor
from entity_network.reporting.report import build_report, render_report, write_report


class AnalysisPipeline:
    """
    Complete orchestration pipeline for one entity network analysis.
    """

    def __init__(self, config: Optional[NetworkConfig] = None):
        """Initialize the pipeline."""
        self.config = config or NetworkConfig()
        self.config.validate()
        self.pipeline_id = str(uuid.uuid4())

        # Set up logging
        logging.basicConfig(level=getattr(logging, self.config.log_level.upper(), logging.INFO))
        self.logger = logging.getLogger(f"AnalysisPipeline_{self.pipeline_id[:8]}")

        self.loader = EntityLoader(self.config)

    def run(self, entities: Sequence[Entity]) -> AnalysisResult:
        """
        Analyze a sequence of entities.

        Args:
            entities: Entities to connect

        Returns:
            AnalysisResult with graph, centrality and densest subgraph
        """
        start = time.time()
        threshold = self.config.similarity_threshold

        graph, node_lookup = build_graph(entities, threshold, show_progress=self.config.show_progress)

        # Both analyses only read the graph
        closeness = closeness_centrality(graph)
        densest = DensestSubgraphExtractor(graph).extract()

        result = AnalysisResult(
            graph=graph,
            node_lookup=node_lookup,
            closeness=closeness,
            densest=densest,
            threshold=threshold,
            computation_time=time.time() - start,
            metadata={'pipeline_id': self.pipeline_id}
        )

        summary = result.get_summary()
        self.logger.info(
            f"Analysis complete: {summary['n_nodes']} nodes, {summary['n_edges']} edges, "
            f"densest subgraph {summary['densest_n_nodes']} nodes "
            f"(density {summary['densest_density']:.3f}) in {summary['computation_time']}"
        )
        return result

    def run_file(self, path: Optional[str] = None) -> AnalysisResult:
        """Load entities from a CSV file and analyze them."""
        entities = self.loader.load_csv(path)
        result = self.run(entities)
        result.metadata['input_path'] = str(path or self.config.input_path)
        return result

    def export(self, result: AnalysisResult, path: Optional[str] = None) -> str:
        """
        Render the report and write it.

        Args:
            result: Analysis output
            path: Report file (defaults to config.output_path)

        Returns:
            Rendered report text
        """
        report = build_report(result, top_k=self.config.top_k, entity_label=self.config.entity_label)
        text = render_report(report)

        output_path = Path(path or self.config.output_path)
        write_report(text, output_path)
        if self.config.export_json:
            report.export_json(output_path.with_suffix('.json'))

        return text
