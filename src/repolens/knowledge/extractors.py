"""
Concept Extractors.

Each extractor is an independent pattern pass over one file's path and text,
yielding (name, type) pairs. Extractors are registered with an
ExtractorRegistry that runs them in descending priority order; a file may
yield many concepts of different types.

Priority order is significant: when the same name is detected by several
extractors, the first one to report it decides the concept's type.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Protocol

from ..config import DOMAIN_TERMS
from ..core.tree import file_name
from ..core.types import ConceptType

logger = logging.getLogger(__name__)

DOMAIN_PREFIX = "Domain:"
API_PREFIX = "API:"


class ExtractedConcept(NamedTuple):
    name: str
    type: ConceptType


@dataclass(frozen=True)
class ExtractionContext:
    """
    Read-only view of a single file shared by all extractors.
    """

    file_path: str
    text: str

    @property
    def file_name(self) -> str:
        return file_name(self.file_path)

    @property
    def dir_name(self) -> str:
        parts = self.file_path.split("/")
        return parts[-2] if len(parts) > 1 else ""


class Extractor(Protocol):
    """
    Universal extractor interface.

    Any class implementing this protocol can be registered with an
    ExtractorRegistry.
    """

    @property
    def name(self) -> str:
        """Unique name for debugging."""
        ...

    @property
    def priority(self) -> int:
        """Execution priority. Higher numbers run first."""
        ...

    def can_extract(self, ctx: ExtractionContext) -> bool:
        """Quick check to see if this extractor applies to the file."""
        ...

    def extract(self, ctx: ExtractionContext) -> Iterator[ExtractedConcept]:
        """Yield every concept found in the file."""
        ...


class RegexExtractor:
    """
    Base for extractors driven by a single regex over file content.

    The first capture group is the concept name.
    """

    name = "regex"
    priority = 0
    pattern: re.Pattern = re.compile(r"(?!)")
    concept_type = ConceptType.CONCEPT

    def can_extract(self, ctx: ExtractionContext) -> bool:
        return bool(ctx.text)

    def extract(self, ctx: ExtractionContext) -> Iterator[ExtractedConcept]:
        for match in self.pattern.finditer(ctx.text):
            yield ExtractedConcept(match.group(1), self.concept_type)


class ComponentExtractor(RegexExtractor):
    """Exported PascalCase functions, consts and classes (UI components)."""

    name = "components"
    priority = 100
    pattern = re.compile(r"export\s+(?:default\s+)?(?:function|const|class)\s+([A-Z][a-zA-Z0-9]*)")
    concept_type = ConceptType.COMPONENT


class HookExtractor(RegexExtractor):
    """Exported `useXxx` functions and consts."""

    name = "hooks"
    priority = 90
    pattern = re.compile(r"export\s+(?:default\s+)?(?:function|const)\s+(use[A-Z][a-zA-Z0-9]*)")
    concept_type = ConceptType.HOOK


class FunctionExtractor(RegexExtractor):
    """Exported camelCase functions and consts."""

    name = "functions"
    priority = 80
    pattern = re.compile(r"export\s+(?:const|function)\s+([a-z][a-zA-Z0-9]*)")
    concept_type = ConceptType.FUNCTION


class ClassExtractor(RegexExtractor):
    name = "classes"
    priority = 70
    pattern = re.compile(r"export\s+(?:default\s+)?class\s+([A-Z][a-zA-Z0-9]*)")
    concept_type = ConceptType.CLASS


class TypeExtractor(RegexExtractor):
    """Exported type aliases and interfaces."""

    name = "types"
    priority = 60
    pattern = re.compile(r"export\s+(?:type|interface)\s+([A-Z][a-zA-Z0-9]*)")
    concept_type = ConceptType.TYPE


class ContextExtractor(RegexExtractor):
    """Any `XxxContext` identifier, exported or not."""

    name = "contexts"
    priority = 40
    pattern = re.compile(r"([A-Z][a-zA-Z0-9]*Context)")
    concept_type = ConceptType.CONTEXT


class ApiRouteExtractor:
    """
    One API concept per file under an `api` directory.

    pages/api/users.ts      -> API:users
    app/api/github/route.ts -> API:github
    """

    name = "api_routes"
    priority = 50

    SCRIPT_EXTENSION = re.compile(r"\.(js|ts|jsx|tsx)$")

    def can_extract(self, ctx: ExtractionContext) -> bool:
        return "/api/" in ctx.file_path or ctx.file_path.startswith("api/")

    def extract(self, ctx: ExtractionContext) -> Iterator[ExtractedConcept]:
        route_name = self.SCRIPT_EXTENSION.sub("", ctx.file_name)
        if route_name == "route":
            route_name = ctx.dir_name
        if route_name and route_name != "index":
            yield ExtractedConcept(f"{API_PREFIX}{route_name}", ConceptType.API)


class DomainTermExtractor:
    """
    Common web-domain vocabulary found in the file name, its parent directory
    name, or quoted in the content.
    """

    name = "domain_terms"
    priority = 30

    def __init__(self, terms: List[str] | None = None):
        self.terms = terms if terms is not None else DOMAIN_TERMS

    def can_extract(self, ctx: ExtractionContext) -> bool:
        return True

    def extract(self, ctx: ExtractionContext) -> Iterator[ExtractedConcept]:
        name_lower = ctx.file_name.lower()
        dir_lower = ctx.dir_name.lower()
        text_lower = ctx.text.lower()

        seen = set()
        for term in self.terms:
            if (
                term in name_lower
                or term in dir_lower
                or f'"{term}"' in text_lower
                or f"'{term}'" in text_lower
            ):
                concept = term[:1].upper() + term[1:]
                if concept not in seen:
                    seen.add(concept)
                    yield ExtractedConcept(f"{DOMAIN_PREFIX}{concept}", ConceptType.CONCEPT)


class ExtractorRegistry:
    """
    Manages and orchestrates concept extractors.
    """

    def __init__(self):
        self._extractors: List[Extractor] = []

    def register(self, extractor: Extractor) -> None:
        """Register a new extractor and sort by priority."""
        self._extractors.append(extractor)
        # Stable sort, descending by priority (100 -> 0)
        self._extractors.sort(key=lambda e: -e.priority)

    @property
    def extractors(self) -> List[Extractor]:
        return list(self._extractors)

    def extract_all(self, ctx: ExtractionContext) -> Iterator[ExtractedConcept]:
        """Run all registered extractors against the context."""
        for extractor in self._extractors:
            if not extractor.can_extract(ctx):
                continue
            try:
                yield from extractor.extract(ctx)
            except Exception as e:
                # Log but do not abort extraction for the rest of the file
                logger.debug(f"Extractor {extractor.name} failed on {ctx.file_path}: {e}")


def create_default_registry() -> ExtractorRegistry:
    """Registry with every built-in extractor."""
    registry = ExtractorRegistry()
    registry.register(ComponentExtractor())
    registry.register(HookExtractor())
    registry.register(FunctionExtractor())
    registry.register(ClassExtractor())
    registry.register(TypeExtractor())
    registry.register(ApiRouteExtractor())
    registry.register(ContextExtractor())
    registry.register(DomainTermExtractor())
    return registry


def extract_concepts(file_path: str, text: str) -> List[ExtractedConcept]:
    """Convenience wrapper: run the default registry over one file."""
    return list(create_default_registry().extract_all(ExtractionContext(file_path, text)))
