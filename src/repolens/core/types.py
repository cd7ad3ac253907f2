"""
Core type definitions for repolens.

Both pipelines share these pydantic models: the impact pipeline works on file
paths and dependency edges, the knowledge pipeline on concepts.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class TreeNodeType(StrEnum):
    """Git-style tree entry kinds."""
    TREE = "tree"
    BLOB = "blob"


class TreeNode(BaseModel):
    """
    One entry of a repository file tree.

    Directories (`tree`) carry children; files (`blob`) do not.
    """
    name: str
    path: str
    type: TreeNodeType
    size: int | None = None
    children: List[TreeNode] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    @property
    def is_file(self) -> bool:
        return self.type == TreeNodeType.BLOB


class DependencyEdge(BaseModel):
    """
    Directed dependency between two files.

    Parallel edges with a different `type` are distinct relationships.
    """
    source: str
    target: str
    type: str = "import"
    weight: float = 1.0

    model_config = ConfigDict(extra="ignore")


class FileKind(StrEnum):
    """Coarse file classification derived from the extension."""
    SCRIPT = "script"
    STYLE = "style"
    MARKUP = "markup"
    CONFIG = "config"
    DOCUMENT = "document"
    IMAGE = "image"
    UNKNOWN = "unknown"


class ImpactLevel(StrEnum):
    """How strongly a node is affected by a change, by hop distance."""
    DIRECT = "direct"
    INDIRECT = "indirect"
    POTENTIAL = "potential"
    SAFE = "safe"


class TraversalDirection(StrEnum):
    """FORWARD follows successors (dependents), BACKWARD follows predecessors."""
    FORWARD = "forward"
    BACKWARD = "backward"


class ImpactNode(BaseModel):
    """A node reached while walking the dependency graph from an origin."""
    id: str
    path: str
    name: str
    type: FileKind
    impact_level: ImpactLevel
    distance: int = Field(ge=0)
    weight: float = Field(ge=0.0, le=1.0)
    dependency_path: List[str] = Field(default_factory=list)


class ImpactMetrics(BaseModel):
    """Aggregate counts over a set of ImpactNodes."""
    direct_impact: int = 0
    indirect_impact: int = 0
    potential_impact: int = 0
    total_impact: int = 0
    max_chain_length: int = 0
    critical_paths: List[List[str]] = Field(default_factory=list)


class RiskLevel(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class RiskAssessment(BaseModel):
    """Qualitative risk of changing a file."""
    score: int = Field(ge=0, le=100)
    level: RiskLevel
    factors: List[str] = Field(default_factory=list)


class ImpactReport(BaseModel):
    """Full result of analyzing a single changed file."""
    origin: str
    impacted_files: List[ImpactNode] = Field(default_factory=list)
    metrics: ImpactMetrics = Field(default_factory=ImpactMetrics)
    risk: RiskAssessment


class ConceptType(StrEnum):
    """Kinds of named concepts detected in source files."""
    COMPONENT = "component"
    HOOK = "hook"
    FUNCTION = "function"
    CLASS = "class"
    TYPE = "type"
    API = "api"
    CONTEXT = "context"
    CONCEPT = "concept"
    UTIL = "util"


class RelationshipType(StrEnum):
    """Types of relationships between concepts."""
    IMPLEMENTS = "implements"
    USES = "uses"
    EXTENDS = "extends"
    DEFINES = "defines"
    RELATED = "related"
    DEPENDS = "depends"


class ConceptNode(BaseModel):
    """
    A named, higher-level abstraction inferred from file naming and content.

    `files` and `related` behave as insertion-ordered sets.
    """
    id: str
    label: str
    type: ConceptType
    description: str = ""
    category: str = ""
    weight: float = Field(default=0.0, ge=0.0, le=1.0)
    files: List[str] = Field(default_factory=list)
    related: List[str] = Field(default_factory=list)


class ConceptEdge(BaseModel):
    """Directed, typed relationship between two concepts."""
    source: str
    target: str
    type: RelationshipType
    weight: float = Field(ge=0.0, le=1.0)


class KnowledgeGraph(BaseModel):
    """
    Concepts and their relationships for one repository snapshot.

    Treated as immutable once built; all queries are pure functions over it.
    """
    nodes: List[ConceptNode] = Field(default_factory=list)
    edges: List[ConceptEdge] = Field(default_factory=list)

    def get_node(self, concept_id: str) -> ConceptNode | None:
        for node in self.nodes:
            if node.id == concept_id:
                return node
        return None


class TreeStats(BaseModel):
    """Summary statistics of a file tree."""
    total_files: int = 0
    total_folders: int = 0
    total_size: int = 0
    max_depth: int = 0
    file_types: Dict[str, int] = Field(default_factory=dict)
    main_language: str = "unknown"


class AnalysisInput(BaseModel):
    """
    Caller-supplied snapshot consumed by the CLI.

    Expected JSON shape:
    {
        "tree": {"name": "...", "path": "", "type": "tree", "children": [...]},
        "dependencies": [{"source": "...", "target": "...", "type": "import"}],
        "contents": {"src/App.tsx": "..."}
    }
    """
    tree: TreeNode | None = None
    dependencies: List[DependencyEdge] = Field(default_factory=list)
    contents: Dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(extra="ignore")
