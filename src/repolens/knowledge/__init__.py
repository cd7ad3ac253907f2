"""
Knowledge graph pipeline for Repolens.

- extractors: independent pattern passes yielding (name, type) pairs
- concepts: per-tree accumulation, descriptions and categories
- relationships: pairwise edge inference
- graph: construction and queries
"""

from .concepts import ConceptExtractor, categorize
from .extractors import ExtractorRegistry, create_default_registry, extract_concepts
from .graph import (
    KnowledgeGraphIndex,
    RelatedConcepts,
    build_knowledge_graph,
    find_central_concepts,
    find_related_concepts,
    get_concepts_by_category,
    search_concepts,
)
from .relationships import infer_relationships

__all__ = [
    "ConceptExtractor",
    "categorize",
    "ExtractorRegistry",
    "create_default_registry",
    "extract_concepts",
    "KnowledgeGraphIndex",
    "RelatedConcepts",
    "build_knowledge_graph",
    "find_central_concepts",
    "find_related_concepts",
    "get_concepts_by_category",
    "search_concepts",
    "infer_relationships",
]
