"""
Change Impact Analysis.

Breadth-first walks of the adjacency index from a changed file:
- forward (successors): files that break if the origin changes
- backward (predecessors): files the origin relies on

Each reached node is annotated with its hop distance, a linearly decayed
weight and a discrete impact level. Traversal state is local to each call,
so concurrent analyses never share anything.
"""

import logging
from collections import deque
from typing import Iterable, List, Optional, Set, Tuple

from ..config import MAX_TRAVERSAL_DEPTH, WEIGHT_DECAY
from ..core.graph import AdjacencyIndex
from ..core.tree import classify_file, file_name
from ..core.types import (
    DependencyEdge,
    ImpactLevel,
    ImpactMetrics,
    ImpactNode,
    ImpactReport,
    TraversalDirection,
    TreeNode,
)
from .risk import calculate_change_risk_score, find_critical_paths

logger = logging.getLogger(__name__)


def classify_impact(distance: int) -> ImpactLevel:
    """
    Map hop distance to an impact level.

    Distance 0 is the origin itself; it is reported as direct so callers can
    filter it out explicitly.
    """
    if distance <= 1:
        return ImpactLevel.DIRECT
    if distance <= 3:
        return ImpactLevel.INDIRECT
    return ImpactLevel.POTENTIAL


def impact_weight(distance: int) -> float:
    """Linear decay floored at zero."""
    return max(0.0, 1 - distance * WEIGHT_DECAY)


def _make_impact_node(node_id: str, distance: int, path: List[str]) -> ImpactNode:
    return ImpactNode(
        id=node_id,
        path=node_id,
        name=file_name(node_id),
        type=classify_file(node_id),
        impact_level=classify_impact(distance),
        distance=distance,
        weight=impact_weight(distance),
        dependency_path=list(path),
    )


def traverse(
    origin: str,
    direction: TraversalDirection,
    index: AdjacencyIndex,
    max_depth: int = MAX_TRAVERSAL_DEPTH,
) -> List[ImpactNode]:
    """
    Collect every node reachable from origin in one direction.

    The first result is always the origin at distance 0. Each node is
    recorded once, with the path by which BFS first reached it (the shortest
    by hop count), so cycles and self-loops terminate.
    """
    visited: Set[str] = set()
    result: List[ImpactNode] = []
    queue: deque[Tuple[str, int, List[str]]] = deque([(origin, 0, [origin])])

    while queue:
        current, distance, path = queue.popleft()

        if current in visited or distance > max_depth:
            continue

        visited.add(current)
        result.append(_make_impact_node(current, distance, path))

        for neighbor in index.neighbors(current, direction):
            if neighbor not in visited:
                queue.append((neighbor, distance + 1, path + [neighbor]))

    logger.debug(f"{direction.value} traversal from {origin}: {len(result)} nodes")
    return result


def compute_metrics(impacted: List[ImpactNode]) -> ImpactMetrics:
    """Count nodes per impact level and find the deepest chain."""
    return ImpactMetrics(
        direct_impact=sum(1 for n in impacted if n.impact_level == ImpactLevel.DIRECT),
        indirect_impact=sum(1 for n in impacted if n.impact_level == ImpactLevel.INDIRECT),
        potential_impact=sum(1 for n in impacted if n.impact_level == ImpactLevel.POTENTIAL),
        total_impact=len(impacted),
        max_chain_length=max((n.distance for n in impacted), default=0),
        critical_paths=find_critical_paths(impacted),
    )


class ImpactAnalyzer:
    """
    Analyzes the blast radius of changing a single file.

    Usage:
        analyzer = ImpactAnalyzer(edges)
        report = analyzer.analyze("src/lib/api.ts")
        print(report.risk.level)
    """

    def __init__(
        self,
        edges: Iterable[DependencyEdge],
        tree: Optional[TreeNode] = None,
        max_depth: int = MAX_TRAVERSAL_DEPTH,
    ):
        # Node ids are never validated against the tree
        self.tree = tree
        self.max_depth = max_depth
        self.index = AdjacencyIndex.from_edges(edges)

    def dependents(self, file_path: str) -> List[ImpactNode]:
        """Forward traversal: files affected by a change to file_path."""
        return traverse(file_path, TraversalDirection.FORWARD, self.index, self.max_depth)

    def dependencies(self, file_path: str) -> List[ImpactNode]:
        """Backward traversal: files that file_path relies on."""
        return traverse(file_path, TraversalDirection.BACKWARD, self.index, self.max_depth)

    def analyze(self, file_path: str) -> ImpactReport:
        """
        Merge both traversals and score the result.

        The origin's forward distance-0 entry is its canonical representation;
        the backward self-entry is dropped.
        """
        forward = self.dependents(file_path)
        backward = [n for n in self.dependencies(file_path) if n.path != file_path]
        impacted = forward + backward

        metrics = compute_metrics(impacted)
        risk = calculate_change_risk_score(metrics)

        logger.debug(
            f"Impact of {file_path}: {metrics.total_impact} nodes, "
            f"risk {risk.score} ({risk.level.value})"
        )
        return ImpactReport(
            origin=file_path,
            impacted_files=impacted,
            metrics=metrics,
            risk=risk,
        )


def analyze_file_impact(
    file_path: str,
    edges: Iterable[DependencyEdge],
    tree: Optional[TreeNode] = None,
    max_depth: int = MAX_TRAVERSAL_DEPTH,
) -> ImpactReport:
    """Functional entry point: build a fresh index and analyze one file."""
    return ImpactAnalyzer(edges, tree=tree, max_depth=max_depth).analyze(file_path)
