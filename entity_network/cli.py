"""
PROJECT:
-------
entity-similarity-network

TITLE:
------
cli.py

MAIN OBJECTIVE:
---------------
This script provides the command-line entry point: analyze an entity CSV and write the network
summary report.

Dependencies:
-------------
- argparse
- logging
- sys

MAIN FEATURES:
--------------
1) Argument parsing with configuration overrides (threshold, output, top-k)
2) Optional JSON export and progress bars
3) Exit code 0 on success, 1 on any analysis error

Author:
-------
Antoine Lemor
"""

import argparse
import logging
import sys
from typing import List, Optional

from entity_network.core.config import NetworkConfig
from entity_network.core.exceptions import EntityNetworkError
from entity_network.pipelines.analysis_pipeline import AnalysisPipeline

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build a similarity network from an entity table and report closeness "
                    "centrality and the densest subgraph."
    )
    parser.add_argument("input", nargs="?", default=None,
                        help="Entity CSV file (defaults to INPUT_PATH or the built-in default).")
    parser.add_argument("--threshold", type=float, default=None,
                        help="Minimum cosine similarity (inclusive) for an edge.")
    parser.add_argument("--output", default=None,
                        help="Report file to write.")
    parser.add_argument("--top-k", type=int, default=None,
                        help="Number of entries in each ranking of the report.")
    parser.add_argument("--config", default=None,
                        help="JSON configuration file.")
    parser.add_argument("--json", action="store_true",
                        help="Also export the report as JSON next to the text report.")
    parser.add_argument("--progress", action="store_true",
                        help="Show progress bars.")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level.")
    return parser


def _config_from_args(args: argparse.Namespace) -> NetworkConfig:
    config = NetworkConfig.from_file(args.config) if args.config else NetworkConfig()
    if args.input is not None:
        config.input_path = args.input
    if args.threshold is not None:
        config.similarity_threshold = args.threshold
    if args.output is not None:
        config.output_path = args.output
    if args.top_k is not None:
        config.top_k = args.top_k
    if args.json:
        config.export_json = True
    if args.progress:
        config.show_progress = True
    if args.log_level is not None:
        config.log_level = args.log_level
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the analyzer."""
    args = build_parser().parse_args(argv)

    try:
        config = _config_from_args(args)
        pipeline = AnalysisPipeline(config)
        result = pipeline.run_file()
        pipeline.export(result)
    except EntityNetworkError as e:
        logger.error(f"Analysis failed: {e}")
        return 1

    print(f"Results written to {config.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
