"""Unit tests for knowledge graph construction and queries."""

from repolens.core.types import (
    ConceptEdge,
    ConceptNode,
    ConceptType,
    KnowledgeGraph,
    RelationshipType,
)
from repolens.knowledge.graph import (
    KnowledgeGraphIndex,
    build_knowledge_graph,
    find_central_concepts,
    find_related_concepts,
    get_concepts_by_category,
    search_concepts,
)


def _node(concept_id, weight=0.5, category="UI Components", description="", files=None):
    return ConceptNode(
        id=concept_id,
        label=concept_id,
        type=ConceptType.COMPONENT,
        description=description,
        category=category,
        weight=weight,
        files=files or [f"src/{concept_id}.tsx"],
    )


def _edge(source, target, weight=0.5):
    return ConceptEdge(source=source, target=target, type=RelationshipType.RELATED, weight=weight)


def _chain_graph():
    """A - B - C - D"""
    return KnowledgeGraph(
        nodes=[_node("A", 0.4), _node("B", 0.5), _node("C", 0.9), _node("D", 0.6)],
        edges=[_edge("A", "B"), _edge("B", "C"), _edge("C", "D")],
    )


class TestBuildKnowledgeGraph:
    def test_related_lists_mirror_edges(self, sample_tree, sample_contents):
        graph = build_knowledge_graph(sample_tree, sample_contents)

        assert graph.nodes
        assert graph.edges
        by_id = {node.id: node for node in graph.nodes}
        for edge in graph.edges:
            assert edge.target in by_id[edge.source].related
            assert edge.source in by_id[edge.target].related

    def test_related_lists_have_no_duplicates(self, sample_tree, sample_contents):
        graph = build_knowledge_graph(sample_tree, sample_contents)

        for node in graph.nodes:
            assert len(node.related) == len(set(node.related))
            assert node.id not in node.related

    def test_node_ids_are_unique(self, sample_tree, sample_contents):
        graph = build_knowledge_graph(sample_tree, sample_contents)
        ids = [node.id for node in graph.nodes]

        assert len(ids) == len(set(ids))
        assert all(0.0 <= node.weight <= 1.0 for node in graph.nodes)

    def test_empty_tree(self):
        graph = build_knowledge_graph(None, {})

        assert graph.nodes == []
        assert graph.edges == []


class TestCentrality:
    def test_weighted_degree_ranking(self):
        graph = KnowledgeGraph(
            nodes=[_node("W"), _node("Y"), _node("X"), _node("Z")],
            edges=[_edge("X", "Y", 1.0), _edge("X", "Z", 1.0), _edge("Y", "Z", 0.5)],
        )
        index = KnowledgeGraphIndex(graph)

        assert index.centrality_scores() == {"W": 0.0, "Y": 1.5, "X": 2.0, "Z": 1.5}
        assert [n.id for n in index.central_concepts()] == ["X", "Y", "Z", "W"]
        assert [n.id for n in index.central_concepts(limit=1)] == ["X"]

    def test_parallel_edges_both_count(self):
        graph = KnowledgeGraph(
            nodes=[_node("X"), _node("Y")],
            edges=[_edge("X", "Y", 0.5), _edge("Y", "X", 0.5)],
        )
        assert KnowledgeGraphIndex(graph).centrality_scores() == {"X": 1.0, "Y": 1.0}

    def test_wrapper(self):
        assert [n.id for n in find_central_concepts(_chain_graph(), limit=2)] == ["B", "C"]


class TestRelatedConcepts:
    def test_one_and_two_hops(self):
        related = find_related_concepts(_chain_graph(), "A")

        assert [n.id for n in related.directly_related] == ["B"]
        assert [n.id for n in related.indirectly_related] == ["C"]

    def test_sorted_by_weight(self):
        related = KnowledgeGraphIndex(_chain_graph()).related_concepts("B")

        assert [n.id for n in related.directly_related] == ["C", "A"]
        assert [n.id for n in related.indirectly_related] == ["D"]

    def test_triangle_has_no_indirect(self):
        graph = KnowledgeGraph(
            nodes=[_node("A"), _node("B"), _node("C")],
            edges=[_edge("A", "B"), _edge("B", "C"), _edge("A", "C")],
        )
        related = find_related_concepts(graph, "A")

        assert {n.id for n in related.directly_related} == {"B", "C"}
        assert related.indirectly_related == []

    def test_limit(self):
        leaves = [_node(f"leaf{i}", weight=0.1 * (i + 1)) for i in range(5)]
        graph = KnowledgeGraph(
            nodes=[_node("hub")] + leaves,
            edges=[_edge("hub", leaf.id) for leaf in leaves],
        )
        related = find_related_concepts(graph, "hub", limit=2)

        assert [n.id for n in related.directly_related] == ["leaf4", "leaf3"]

    def test_unknown_concept(self):
        related = find_related_concepts(_chain_graph(), "Nope")

        assert related.directly_related == []
        assert related.indirectly_related == []


class TestSearch:
    def _graph(self):
        return KnowledgeGraph(nodes=[
            _node("Button", description="Primary action button"),
            _node("useCart", category="Hooks", files=["src/hooks/useCart.ts"]),
            _node("Navbar", files=["src/layout/Navbar.tsx"]),
        ])

    def test_label_case_insensitive(self):
        assert [n.id for n in search_concepts(self._graph(), "BUTTON")] == ["Button"]

    def test_matches_category(self):
        assert [n.id for n in search_concepts(self._graph(), "hooks")] == ["useCart"]

    def test_matches_file_path(self):
        assert [n.id for n in search_concepts(self._graph(), "layout/")] == ["Navbar"]

    def test_matches_description(self):
        assert [n.id for n in search_concepts(self._graph(), "action")] == ["Button"]

    def test_blank_query(self):
        assert search_concepts(self._graph(), "") == []
        assert search_concepts(self._graph(), "   ") == []

    def test_no_match(self):
        assert search_concepts(self._graph(), "zzz") == []


class TestCategories:
    def test_grouped_and_sorted(self):
        graph = KnowledgeGraph(nodes=[
            _node("Low", weight=0.2),
            _node("useX", weight=0.4, category="Hooks"),
            _node("High", weight=0.9),
        ])
        groups = get_concepts_by_category(graph)

        assert set(groups) == {"UI Components", "Hooks"}
        assert [n.id for n in groups["UI Components"]] == ["High", "Low"]
        assert [n.id for n in groups["Hooks"]] == ["useX"]

    def test_empty(self):
        assert get_concepts_by_category(KnowledgeGraph()) == {}


class TestIndex:
    def test_counts_skip_dangling_edges(self):
        graph = KnowledgeGraph(
            nodes=[_node("A"), _node("B")],
            edges=[_edge("A", "B"), _edge("A", "ghost")],
        )
        index = KnowledgeGraphIndex(graph)

        assert index.node_count == 2
        assert index.edge_count == 1
        assert index.has_concept("A")
        assert not index.has_concept("ghost")

    def test_get_node(self):
        graph = _chain_graph()

        assert graph.get_node("C").weight == 0.9
        assert graph.get_node("ghost") is None

    def test_queries_do_not_mutate_graph(self):
        graph = _chain_graph()
        before = graph.model_dump()
        index = KnowledgeGraphIndex(graph)
        index.central_concepts()
        index.related_concepts("B")
        index.search("a")
        index.concepts_by_category()

        assert graph.model_dump() == before
