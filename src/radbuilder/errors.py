"""
Custom error types for the radbuilder toolchain.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class RadError(Exception):
    """Base error carrying a human readable message."""

    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass
class DocumentDecodeError(RadError):
    """Raised when a persisted project document cannot be decoded."""

    details: list[dict[str, Any]] | None = None

    def __post_init__(self) -> None:  # pragma: no cover - trivial
        if self.details is None:
            self.details = []


@dataclass
class ProjectIOError(RadError):
    """Raised when a project file cannot be read or written."""

    path: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        if self.path:
            return f"{self.message} ({self.path})"
        return self.message


class CatalogueError(RadError):
    """A kind-keyed table is missing an entry for some widget kind."""


class ConfigError(RadError):
    """Invalid radbuilder.toml configuration."""
