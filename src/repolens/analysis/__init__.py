"""
Impact analysis for Repolens.

- impact: bidirectional breadth-first traversal from a changed file
- risk: risk scoring and critical-path selection
"""

from .impact import ImpactAnalyzer, analyze_file_impact, traverse
from .risk import calculate_change_risk_score, find_critical_paths

__all__ = [
    "ImpactAnalyzer",
    "analyze_file_impact",
    "traverse",
    "calculate_change_risk_score",
    "find_critical_paths",
]
