"""
Relationship inference between concepts.

Every ordered pair of distinct concepts is compared once:

- Concepts sharing files are `related`, upgraded to `uses`, `extends` or
  `defines` when a shared file imports, extends or defines the other
  concept's label. Upgrades compound additively; the last matching
  condition names the edge.
- Otherwise, a concept whose files mention the other's label (case
  insensitive) `depends` on it.

Edges are directional as authored; no deduplication beyond the pairwise loop.
"""

import logging
from typing import List, Mapping, Sequence, Tuple

from ..core.types import ConceptEdge, ConceptNode, RelationshipType

logger = logging.getLogger(__name__)

BASE_SHARED_WEIGHT = 0.5
MAX_SHARED_BONUS = 0.5
USES_BONUS = 0.2
EXTENDS_BONUS = 0.3
DEFINES_BONUS = 0.4
BASE_MENTION_WEIGHT = 0.3
MENTION_BONUS = 0.1


def _imports(content: str, label: str) -> bool:
    return (
        f"import {{ {label} }}" in content
        or f"import {label}" in content
        or f"from '{label}'" in content
        or f'from "{label}"' in content
    )


def _extends(content: str, label: str) -> bool:
    return f"extends {label}" in content or f"implements {label}" in content


def _defines(content: str, label: str) -> bool:
    return f"const {label} =" in content or f"function {label}(" in content


def _shared_relationship(
    shared_files: List[str],
    label: str,
    file_contents: Mapping[str, str],
) -> Tuple[RelationshipType, float]:
    relationship = RelationshipType.RELATED
    weight = BASE_SHARED_WEIGHT + min(len(shared_files) / 5, MAX_SHARED_BONUS)

    for path in shared_files:
        content = file_contents.get(path, "")
        if _imports(content, label):
            relationship = RelationshipType.USES
            weight += USES_BONUS
        if _extends(content, label):
            relationship = RelationshipType.EXTENDS
            weight += EXTENDS_BONUS
        if _defines(content, label):
            relationship = RelationshipType.DEFINES
            weight += DEFINES_BONUS

    return relationship, min(weight, 1.0)


def _mentions(concept: ConceptNode, label: str, file_contents: Mapping[str, str]) -> bool:
    label_lower = label.lower()
    return any(label_lower in file_contents.get(path, "").lower() for path in concept.files)


def infer_relationships(
    concepts: Sequence[ConceptNode],
    file_contents: Mapping[str, str],
) -> List[ConceptEdge]:
    """
    Produce typed, weighted edges between concepts.

    This is O(n^2) in the number of concepts.
    """
    edges: List[ConceptEdge] = []

    file_sets = {concept.id: set(concept.files) for concept in concepts}

    for concept in concepts:
        for other in concepts:
            if concept.id == other.id:
                continue

            other_files = file_sets[other.id]
            shared = [path for path in concept.files if path in other_files]
            if shared:
                relationship, weight = _shared_relationship(shared, other.label, file_contents)
                edges.append(
                    ConceptEdge(source=concept.id, target=other.id, type=relationship, weight=weight)
                )
            elif _mentions(concept, other.label, file_contents):
                edges.append(
                    ConceptEdge(
                        source=concept.id,
                        target=other.id,
                        type=RelationshipType.DEPENDS,
                        weight=BASE_MENTION_WEIGHT + MENTION_BONUS,
                    )
                )

    logger.debug(f"Inferred {len(edges)} relationships between {len(concepts)} concepts")
    return edges
