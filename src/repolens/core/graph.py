"""
Adjacency Index.

Bidirectional lookup tables built from a flat dependency edge list. This is
the graph-construction primitive shared by the impact and knowledge
pipelines.

Node ids are opaque: nothing is validated against the file tree, and ids that
never appear in an edge simply have no neighbours.
"""

import logging
from typing import Dict, Iterable, Iterator, List

from .types import DependencyEdge, TraversalDirection

logger = logging.getLogger(__name__)


class AdjacencyIndex:
    """
    Successor/predecessor lists keyed by node id.

    Neighbour lists keep edge insertion order, and parallel edges produce
    repeated entries. Construction is O(E).
    """

    def __init__(self):
        self._successors: Dict[str, List[str]] = {}
        self._predecessors: Dict[str, List[str]] = {}
        self._edge_count = 0

    @classmethod
    def from_edges(cls, edges: Iterable[DependencyEdge]) -> "AdjacencyIndex":
        """Build an index from an edge list."""
        index = cls()
        for edge in edges:
            index.add_edge(edge.source, edge.target)
        logger.debug(
            f"Built adjacency index: {index.node_count} nodes, {index.edge_count} edges"
        )
        return index

    def add_edge(self, source: str, target: str) -> None:
        """Register a directed edge. Both endpoints become known nodes."""
        self._successors.setdefault(source, []).append(target)
        self._predecessors.setdefault(source, [])
        self._successors.setdefault(target, [])
        self._predecessors.setdefault(target, []).append(source)
        self._edge_count += 1

    def successors(self, node_id: str) -> List[str]:
        """Targets of edges leaving node_id."""
        return list(self._successors.get(node_id, ()))

    def predecessors(self, node_id: str) -> List[str]:
        """Sources of edges entering node_id."""
        return list(self._predecessors.get(node_id, ()))

    def neighbors(self, node_id: str, direction: TraversalDirection) -> List[str]:
        if direction == TraversalDirection.FORWARD:
            return self.successors(node_id)
        return self.predecessors(node_id)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._successors

    def iter_nodes(self) -> Iterator[str]:
        return iter(self._successors)

    @property
    def node_count(self) -> int:
        return len(self._successors)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def to_dict(self) -> Dict[str, Dict[str, List[str]]]:
        return {
            node_id: {
                "successors": self.successors(node_id),
                "predecessors": self.predecessors(node_id),
            }
            for node_id in self.iter_nodes()
        }
