"""
repolens - Repository graph analysis core.

Two independent pipelines over the same graph-construction primitive:

- analysis: change-impact traversal and risk scoring for a modified file
- knowledge: concept extraction, relationship inference and knowledge-graph
  queries (centrality, related concepts, search)

Usage:
    from repolens import analyze_file_impact, build_knowledge_graph

    report = analyze_file_impact("src/lib/api.ts", edges)
    graph = build_knowledge_graph(tree, contents)
"""

__version__ = "0.1.0"

from .analysis.impact import ImpactAnalyzer, analyze_file_impact
from .analysis.risk import calculate_change_risk_score
from .core.graph import AdjacencyIndex
from .core.types import (
    ConceptEdge,
    ConceptNode,
    DependencyEdge,
    ImpactLevel,
    ImpactMetrics,
    ImpactNode,
    ImpactReport,
    KnowledgeGraph,
    RiskAssessment,
    RiskLevel,
    TreeNode,
)
from .knowledge.graph import KnowledgeGraphIndex, build_knowledge_graph

__all__ = [
    "__version__",
    "AdjacencyIndex",
    "ImpactAnalyzer",
    "analyze_file_impact",
    "calculate_change_risk_score",
    "KnowledgeGraphIndex",
    "build_knowledge_graph",
    "ConceptEdge",
    "ConceptNode",
    "DependencyEdge",
    "ImpactLevel",
    "ImpactMetrics",
    "ImpactNode",
    "ImpactReport",
    "KnowledgeGraph",
    "RiskAssessment",
    "RiskLevel",
    "TreeNode",
]
