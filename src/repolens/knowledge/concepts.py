"""
Concept accumulation across a repository tree.

Runs the extractor registry over every concept-bearing file and merges
detections by name: a name seen in several files becomes one concept whose
file list is the union. The first detection of a name decides its type.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional

from ..config import CONCEPT_FILE_EXTENSIONS
from ..core.tree import file_extension, iter_blobs
from ..core.types import ConceptNode, ConceptType, TreeNode
from .extractors import (
    API_PREFIX,
    DOMAIN_PREFIX,
    ExtractionContext,
    ExtractorRegistry,
    create_default_registry,
)

logger = logging.getLogger(__name__)

_LABEL_PREFIX = re.compile(rf"^({DOMAIN_PREFIX}|{API_PREFIX})")

CATEGORY_BY_TYPE: Dict[ConceptType, str] = {
    ConceptType.COMPONENT: "UI Components",
    ConceptType.HOOK: "Hooks",
    ConceptType.API: "API Endpoints",
    ConceptType.FUNCTION: "Utilities",
    ConceptType.UTIL: "Utilities",
    ConceptType.CLASS: "Classes",
    ConceptType.CONTEXT: "Contexts",
    ConceptType.CONCEPT: "Domain Concepts",
}


def categorize(concept_type: ConceptType | str) -> str:
    """Fixed category label for a concept type."""
    try:
        return CATEGORY_BY_TYPE.get(ConceptType(concept_type), "Other")
    except ValueError:
        return "Other"


def concept_label(concept_id: str) -> str:
    """Strip the Domain:/API: prefix from a concept id."""
    return _LABEL_PREFIX.sub("", concept_id)


def concept_weight(file_count: int) -> float:
    """Base weight plus a bonus per file, capped at 1."""
    return min(1.0, 0.3 + file_count * 0.1)


def _component_doc(name: str, text: str) -> Optional[str]:
    """Text of the JSDoc block directly preceding an exported component."""
    jsdoc = re.search(
        rf"/\*\*[\s\S]*?\*/\s*export\s+(?:default\s+)?(?:function|const)\s+{re.escape(name)}\b",
        text,
    )
    if not jsdoc:
        return None
    block = jsdoc.group(0)
    # Only the innermost block belongs to this export
    block = block[block.rfind("/**"):]
    match = re.search(r"@description\s+([^\n]+)", block) or re.search(
        r"^\s*\*\s+([^\n@]+)", block, re.MULTILINE
    )
    if match and match.group(1).strip():
        return match.group(1).strip()
    return None


def describe_concept(
    concept_id: str,
    concept_type: ConceptType,
    files: List[str],
    file_contents: Mapping[str, str],
) -> str:
    """Generate a short human-readable description."""
    plural = "" if len(files) == 1 else "s"
    description = f"{concept_type.value.capitalize()} found in {len(files)} file{plural}"

    if concept_type == ConceptType.CONCEPT and concept_id.startswith(DOMAIN_PREFIX):
        description = f"Domain concept related to {concept_label(concept_id)} functionality"

    elif concept_type == ConceptType.COMPONENT:
        for path in files:
            doc = _component_doc(concept_id, file_contents.get(path, ""))
            if doc:
                description = doc
                break

    elif concept_type == ConceptType.API and concept_id.startswith(API_PREFIX):
        description = f"API endpoint for {concept_label(concept_id)} operations"

    return description


@dataclass
class _Accumulated:
    type: ConceptType
    files: List[str] = field(default_factory=list)


class ConceptExtractor:
    """
    Extracts and merges concepts for a whole tree.

    Usage:
        extractor = ConceptExtractor()
        concepts = extractor.extract_tree(tree, {"src/App.tsx": "..."})
    """

    def __init__(
        self,
        registry: Optional[ExtractorRegistry] = None,
        extensions: Optional[Iterable[str]] = None,
    ):
        self.registry = registry or create_default_registry()
        self.extensions = set(extensions) if extensions is not None else set(CONCEPT_FILE_EXTENSIONS)

    def accepts(self, path: str) -> bool:
        return file_extension(path) in self.extensions

    def extract_tree(
        self,
        tree: Optional[TreeNode],
        file_contents: Mapping[str, str],
    ) -> List[ConceptNode]:
        """
        Extract concepts from every accepted file in the tree.

        Files absent from file_contents are treated as empty, so only their
        path-based concepts (API routes, domain terms) are detected.
        """
        accumulated: Dict[str, _Accumulated] = {}

        for blob in iter_blobs(tree):
            if not self.accepts(blob.path):
                continue
            ctx = ExtractionContext(file_path=blob.path, text=file_contents.get(blob.path, ""))
            for name, concept_type in self.registry.extract_all(ctx):
                entry = accumulated.get(name)
                if entry is None:
                    accumulated[name] = _Accumulated(type=concept_type, files=[blob.path])
                elif blob.path not in entry.files:
                    entry.files.append(blob.path)

        concepts = [
            ConceptNode(
                id=concept_id,
                label=concept_label(concept_id),
                type=entry.type,
                description=describe_concept(concept_id, entry.type, entry.files, file_contents),
                category=categorize(entry.type),
                weight=concept_weight(len(entry.files)),
                files=list(entry.files),
            )
            for concept_id, entry in accumulated.items()
        ]
        logger.debug(f"Extracted {len(concepts)} concepts")
        return concepts
