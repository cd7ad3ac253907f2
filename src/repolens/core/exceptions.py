"""
Exception hierarchy for repolens.

The analysis core itself never raises for well-typed input; these errors
belong to the boundary (input loading, configuration).
"""


class RepoLensError(Exception):
    """Base class for all repolens errors."""


class InputFileNotFoundError(RepoLensError):
    """Raised when an analysis input file does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Input file not found: {path}")


class InvalidInputError(RepoLensError):
    """Raised when an analysis input file cannot be decoded or validated."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid analysis input in {path}: {reason}")


class ConfigError(RepoLensError):
    """Raised for unreadable or invalid configuration."""
