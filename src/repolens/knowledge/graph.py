"""
Knowledge Graph construction and queries.

build_knowledge_graph() runs the whole knowledge pipeline for one repository
snapshot: concept extraction, categorization, relationship inference, and
reflection of every edge into both endpoints' `related` lists.

KnowledgeGraphIndex wraps the finished graph in a rustworkx PyGraph for
neighbourhood queries. All queries are pure: the graph is never mutated after
construction.
"""

import logging
from typing import Dict, List, Mapping, NamedTuple, Optional, Set

import rustworkx as rx

from ..config import DEFAULT_RESULT_LIMIT
from ..core.types import ConceptEdge, ConceptNode, KnowledgeGraph, TreeNode
from .concepts import ConceptExtractor
from .relationships import infer_relationships

logger = logging.getLogger(__name__)


class RelatedConcepts(NamedTuple):
    directly_related: List[ConceptNode]
    indirectly_related: List[ConceptNode]


def _link_related(nodes: List[ConceptNode], edges: List[ConceptEdge]) -> None:
    """Make every edge discoverable from both of its endpoints."""
    by_id = {node.id: node for node in nodes}
    for edge in edges:
        source = by_id.get(edge.source)
        target = by_id.get(edge.target)
        if source is None or target is None:
            continue
        if edge.target not in source.related:
            source.related.append(edge.target)
        if edge.source not in target.related:
            target.related.append(edge.source)


def build_knowledge_graph(
    tree: Optional[TreeNode],
    file_contents: Mapping[str, str],
    extractor: Optional[ConceptExtractor] = None,
) -> KnowledgeGraph:
    """
    Build a knowledge graph from a file tree and the files' text.

    An empty tree yields an empty graph.
    """
    extractor = extractor or ConceptExtractor()
    nodes = extractor.extract_tree(tree, file_contents)
    edges = infer_relationships(nodes, file_contents)
    _link_related(nodes, edges)

    logger.debug(f"Built knowledge graph: {len(nodes)} concepts, {len(edges)} edges")
    return KnowledgeGraph(nodes=nodes, edges=edges)


class KnowledgeGraphIndex:
    """
    Query layer over a KnowledgeGraph.

    Features:
    - Concept id <-> rustworkx index bimap
    - Weighted-degree centrality ranking
    - One- and two-hop related-concept lookup
    - Free-text search and category grouping
    """

    def __init__(self, graph: KnowledgeGraph):
        self.graph = graph
        self._graph = rx.PyGraph(multigraph=True)
        self._id_to_idx: Dict[str, int] = {}
        self._idx_to_id: Dict[int, str] = {}

        for node in graph.nodes:
            idx = self._graph.add_node(node)
            self._id_to_idx[node.id] = idx
            self._idx_to_id[idx] = node.id

        for edge in graph.edges:
            u = self._id_to_idx.get(edge.source)
            v = self._id_to_idx.get(edge.target)
            if u is None or v is None:
                continue
            self._graph.add_edge(u, v, edge)

    def has_concept(self, concept_id: str) -> bool:
        return concept_id in self._id_to_idx

    def neighbor_ids(self, concept_id: str) -> Set[str]:
        """Ids of every concept sharing an edge with concept_id."""
        idx = self._id_to_idx.get(concept_id)
        if idx is None:
            return set()
        return {self._idx_to_id[n] for n in self._graph.neighbors(idx) if n != idx}

    def centrality_scores(self) -> Dict[str, float]:
        """Sum of the weights of all edges touching each concept."""
        scores = {node.id: 0.0 for node in self.graph.nodes}
        for u, v, edge in self._graph.weighted_edge_list():
            scores[self._idx_to_id[u]] += edge.weight
            scores[self._idx_to_id[v]] += edge.weight
        return scores

    def central_concepts(self, limit: int = DEFAULT_RESULT_LIMIT) -> List[ConceptNode]:
        """
        Top concepts by weighted degree, descending.

        Ties keep graph order.
        """
        scores = self.centrality_scores()
        ranked = sorted(self.graph.nodes, key=lambda node: scores[node.id], reverse=True)
        return ranked[:limit]

    def related_concepts(self, concept_id: str, limit: int = DEFAULT_RESULT_LIMIT) -> RelatedConcepts:
        """
        Concepts one and two hops away from concept_id.

        The two-hop set excludes the origin and anything directly related.
        Both lists are sorted by concept weight, descending, then truncated.
        """
        direct_ids = self.neighbor_ids(concept_id)

        indirect_ids: Set[str] = set()
        for related_id in direct_ids:
            for second_hop in self.neighbor_ids(related_id):
                if second_hop != concept_id and second_hop not in direct_ids:
                    indirect_ids.add(second_hop)

        directly_related = [n for n in self.graph.nodes if n.id in direct_ids]
        indirectly_related = [n for n in self.graph.nodes if n.id in indirect_ids]

        return RelatedConcepts(
            directly_related=sorted(directly_related, key=lambda n: n.weight, reverse=True)[:limit],
            indirectly_related=sorted(indirectly_related, key=lambda n: n.weight, reverse=True)[:limit],
        )

    def search(self, query: str) -> List[ConceptNode]:
        """
        Case-insensitive substring search over label, description, category
        and file paths. A blank query matches nothing.
        """
        needle = query.strip().lower()
        if not needle:
            return []

        return [
            node
            for node in self.graph.nodes
            if needle in node.label.lower()
            or needle in node.description.lower()
            or needle in node.category.lower()
            or any(needle in path.lower() for path in node.files)
        ]

    def concepts_by_category(self) -> Dict[str, List[ConceptNode]]:
        """Group concepts by category, each group sorted by weight descending."""
        groups: Dict[str, List[ConceptNode]] = {}
        for node in self.graph.nodes:
            groups.setdefault(node.category, []).append(node)
        return {
            category: sorted(members, key=lambda n: n.weight, reverse=True)
            for category, members in groups.items()
        }

    @property
    def node_count(self) -> int:
        return self._graph.num_nodes()

    @property
    def edge_count(self) -> int:
        return self._graph.num_edges()


def find_central_concepts(graph: KnowledgeGraph, limit: int = DEFAULT_RESULT_LIMIT) -> List[ConceptNode]:
    return KnowledgeGraphIndex(graph).central_concepts(limit)


def find_related_concepts(
    graph: KnowledgeGraph,
    concept_id: str,
    limit: int = DEFAULT_RESULT_LIMIT,
) -> RelatedConcepts:
    return KnowledgeGraphIndex(graph).related_concepts(concept_id, limit)


def search_concepts(graph: KnowledgeGraph, query: str) -> List[ConceptNode]:
    return KnowledgeGraphIndex(graph).search(query)


def get_concepts_by_category(graph: KnowledgeGraph) -> Dict[str, List[ConceptNode]]:
    return KnowledgeGraphIndex(graph).concepts_by_category()
