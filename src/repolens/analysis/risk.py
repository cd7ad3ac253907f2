"""
Change Risk Scoring.

Reduces impact metrics to a 0-100 score, a qualitative level and a list of
human-readable contributing factors. Scoring is a fixed, deterministic
formula over the metrics alone.
"""

from typing import Iterable, List

from ..config import CRITICAL_PATH_LIMIT, CRITICAL_PATH_THRESHOLD
from ..core.types import ImpactMetrics, ImpactNode, RiskAssessment, RiskLevel

DIRECT_WEIGHT = 10
INDIRECT_WEIGHT = 3
POTENTIAL_WEIGHT = 1
CHAIN_WEIGHT = 2

# Thresholds above which a metric is called out as a factor
DIRECT_FACTOR_THRESHOLD = 5
INDIRECT_FACTOR_THRESHOLD = 10
DEEP_CHAIN_THRESHOLD = 5


def risk_level(score: int) -> RiskLevel:
    if score < 25:
        return RiskLevel.LOW
    if score < 50:
        return RiskLevel.MEDIUM
    if score < 75:
        return RiskLevel.HIGH
    return RiskLevel.CRITICAL


def calculate_change_risk_score(metrics: ImpactMetrics) -> RiskAssessment:
    """
    Score the risk of changing a file from its impact metrics.

    Example:
        >>> calculate_change_risk_score(ImpactMetrics(direct_impact=6, total_impact=6,
        ...                                            max_chain_length=1)).score
        60
    """
    score = 0
    factors: List[str] = []

    score += metrics.direct_impact * DIRECT_WEIGHT
    if metrics.direct_impact > DIRECT_FACTOR_THRESHOLD:
        factors.append(f"High direct impact ({metrics.direct_impact} files)")

    score += metrics.indirect_impact * INDIRECT_WEIGHT
    if metrics.indirect_impact > INDIRECT_FACTOR_THRESHOLD:
        factors.append(f"Significant indirect impact ({metrics.indirect_impact} files)")

    score += metrics.potential_impact * POTENTIAL_WEIGHT

    if metrics.max_chain_length > DEEP_CHAIN_THRESHOLD:
        score += metrics.max_chain_length * CHAIN_WEIGHT
        factors.append(f"Deep dependency chain ({metrics.max_chain_length} levels)")

    score = max(0, min(100, score))
    level = risk_level(score)

    if not factors:
        if level == RiskLevel.LOW:
            factors.append("Limited impact on other components")
        else:
            factors.append(f"Affects {metrics.total_impact} components in total")

    return RiskAssessment(score=score, level=level, factors=factors)


def find_critical_paths(
    nodes: Iterable[ImpactNode],
    limit: int = CRITICAL_PATH_LIMIT,
    threshold: float = CRITICAL_PATH_THRESHOLD,
) -> List[List[str]]:
    """
    Longest high-confidence dependency chains.

    Only nodes with weight strictly above the threshold qualify. Paths are
    sorted by length descending; equal lengths keep their input order.
    """
    paths = [list(node.dependency_path) for node in nodes if node.weight > threshold]
    paths.sort(key=len, reverse=True)
    return paths[:limit]
