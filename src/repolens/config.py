"""
Global Configuration and Analysis Defaults.

This module centralizes the tunables shared by the impact and knowledge
pipelines, and the optional YAML configuration file that overrides them.
"""

import logging
from pathlib import Path
from typing import List, Set

import yaml
from pydantic import BaseModel, Field, ValidationError

from .core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(".repolens/config.yaml")

# --- Impact Traversal ---

# Hops beyond this are never expanded (bounds queue growth on dense graphs)
MAX_TRAVERSAL_DEPTH = 10

# Linear influence lost per hop
WEIGHT_DECAY = 0.2

# Only chains whose tail weight exceeds this are reported as critical
CRITICAL_PATH_THRESHOLD = 0.7
CRITICAL_PATH_LIMIT = 3

# --- Knowledge Graph ---

DEFAULT_RESULT_LIMIT = 10

# Files outside these extensions never contribute concepts
CONCEPT_FILE_EXTENSIONS: Set[str] = {
    "js",
    "jsx",
    "ts",
    "tsx",
    "css",
    "scss",
    "html",
    "md",
}

# Common web-application vocabulary. Order matters: concepts are emitted in
# this order for each file.
DOMAIN_TERMS: List[str] = [
    "auth",
    "user",
    "profile",
    "account",
    "payment",
    "billing",
    "subscription",
    "product",
    "cart",
    "checkout",
    "order",
    "dashboard",
    "analytics",
    "report",
    "notification",
    "message",
    "chat",
    "comment",
    "post",
    "article",
    "blog",
    "content",
    "media",
    "upload",
    "search",
    "filter",
    "sort",
    "pagination",
    "settings",
    "preference",
    "theme",
    "layout",
    "navigation",
    "menu",
    "sidebar",
    "header",
    "footer",
    "modal",
    "dialog",
    "form",
    "validation",
    "error",
    "success",
    "warning",
    "info",
    "toast",
    "alert",
    "confirm",
    "prompt",
]


class AnalysisConfig(BaseModel):
    """
    User-overridable analysis settings.

    Loaded from `.repolens/config.yaml` when present:

        max_depth: 6
        result_limit: 20
        concept_extensions: [ts, tsx]
    """

    max_depth: int = Field(default=MAX_TRAVERSAL_DEPTH, ge=0)
    result_limit: int = Field(default=DEFAULT_RESULT_LIMIT, ge=1)
    concept_extensions: Set[str] = Field(default_factory=lambda: set(CONCEPT_FILE_EXTENSIONS))


def load_config(path: Path | None = None) -> AnalysisConfig:
    """
    Load configuration from YAML, falling back to defaults.

    Args:
        path: Explicit config file. When None, the default location is tried.

    Raises:
        ConfigError: If the file is not valid YAML or holds invalid values.
    """
    config_path = path or DEFAULT_CONFIG_PATH

    if not config_path.exists():
        if path is not None:
            raise ConfigError(f"Config file not found: {config_path}")
        return AnalysisConfig()

    try:
        data = yaml.safe_load(config_path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping: {config_path}")

    try:
        config = AnalysisConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config values in {config_path}: {e}") from e

    logger.debug(f"Loaded config from {config_path}: {config}")
    return config
