"""
PROJECT:
-------
entity-similarity-network

TITLE:
------
centrality.py

MAIN OBJECTIVE:
---------------
This script computes closeness centrality for every node of the similarity network using
unweighted breadth-first traversal, restricted to each node's connected component.

Dependencies:
-------------
- networkx
- logging

MAIN FEATURES:
--------------
1) Exact unweighted hop distances from every node via networkx (edge weights ignored)
2) Component-restricted closeness: (reached - 1) / sum of distances
3) Well-defined 0.0 score for isolated nodes and single-node graphs
4) Top-k ranking helper for reporting

Author:
-------
Antoine Lemor
"""

import logging
from typing import Dict, List, Tuple
import networkx as nx

logger = logging.getLogger(__name__)


def closeness_centrality(graph: nx.Graph) -> Dict[str, float]:
    """
    Compute closeness centrality for every node.

    For each node, R is the number of nodes reached (itself included) and D the
    sum of hop distances to them. The score is (R - 1) / D, or 0.0 when D == 0.
    Nodes in other components never contribute.

    Args:
        graph: Similarity network (not modified)

    Returns:
        Dictionary mapping node identifier to closeness score
    """
    scores: Dict[str, float] = {}
    for node in graph.nodes():
        distances = nx.single_source_shortest_path_length(graph, node)
        total_dist = sum(distances.values())
        reached = len(distances)
        scores[node] = (reached - 1) / total_dist if total_dist > 0 else 0.0

    logger.debug(f"Closeness centrality computed for {len(scores)} nodes")
    return scores


def top_central_nodes(scores: Dict[str, float], k: int = 5) -> List[Tuple[str, float]]:
    """Highest-scoring nodes, score descending then identifier."""
    ranked = sorted(scores.items(), key=lambda x: (-x[1], str(x[0])))
    return ranked[:k]
