"""
PROJECT:
-------
entity-similarity-network

TITLE:
------
models.py

MAIN OBJECTIVE:
---------------
This script defines the core data models of the entity network framework: the analyzed entity,
the densest-subgraph result and the bundled analysis result handed to reporting.

Dependencies:
-------------
- dataclasses
- typing
- networkx

MAIN FEATURES:
--------------
1) Immutable Entity records (identifier, group, feature vector)
2) DensestSubgraphResult holding an independent subgraph copy and its density
3) AnalysisResult bundling graph, centrality map and densest subgraph
4) Summary/export helpers for reporting

Author:
-------
Antoine Lemor
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple, Any, Iterator
import networkx as nx


@dataclass(frozen=True)
class Entity:
    """Analyzed unit (e.g. a team-season record) with its feature vector."""
    identifier: str
    group: str
    features: Tuple[float, ...]

    def __post_init__(self):
        # Freeze whatever sequence was passed in
        object.__setattr__(self, 'features', tuple(float(x) for x in self.features))

    @property
    def dimension(self) -> int:
        """Length of the feature vector."""
        return len(self.features)

    def is_zero(self) -> bool:
        """True when every feature is zero."""
        return not any(self.features)

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            'identifier': self.identifier,
            'group': self.group,
            'features': list(self.features)
        }


@dataclass
class DensestSubgraphResult:
    """Best candidate found by greedy peeling."""
    subgraph: nx.Graph
    density: float

    @property
    def n_nodes(self) -> int:
        return self.subgraph.number_of_nodes()

    @property
    def n_edges(self) -> int:
        return self.subgraph.number_of_edges()

    def nodes_by_degree(self) -> List[Tuple[str, int]]:
        """Nodes of the subgraph sorted by degree (highest first), ties by identifier."""
        return sorted(self.subgraph.degree(), key=lambda x: (-x[1], str(x[0])))

    def __iter__(self) -> Iterator:
        # Allows ``subgraph, density = result``
        return iter((self.subgraph, self.density))


@dataclass
class AnalysisResult:
    """Everything the pipeline produced for one run."""
    graph: nx.Graph
    node_lookup: Dict[str, str]
    closeness: Dict[str, float]
    densest: DensestSubgraphResult
    threshold: float
    computation_time: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def n_nodes(self) -> int:
        return self.graph.number_of_nodes()

    @property
    def n_edges(self) -> int:
        return self.graph.number_of_edges()

    @property
    def average_degree(self) -> float:
        """Mean node degree, 2E/N (0.0 for the empty graph)."""
        if self.n_nodes == 0:
            return 0.0
        return 2.0 * self.n_edges / self.n_nodes

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics of the analysis."""
        return {
            'threshold': self.threshold,
            'n_nodes': self.n_nodes,
            'n_edges': self.n_edges,
            'average_degree': self.average_degree,
            'densest_n_nodes': self.densest.n_nodes,
            'densest_n_edges': self.densest.n_edges,
            'densest_density': self.densest.density,
            'computation_time': f"{self.computation_time:.2f}s"
        }
