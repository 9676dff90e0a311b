"""Error taxonomy for packaging runs."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class PackagingError(RuntimeError):
    """Base class for failures that abort packaging of a single descriptor."""

    phase = "packaging"

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigurationError(PackagingError):
    """Raised when user-supplied inputs violate a precondition."""

    phase = "configuration"

    def __init__(
        self, message: str, *, check: str = "config", path: Optional[Path] = None
    ) -> None:
        super().__init__(message, path=path)
        self.check = check


class GenerationError(PackagingError):
    """Raised when the stub/skeleton generator fails."""

    phase = "generation"


class ArtifactError(PackagingError):
    """Raised when an artifact destined for the archive is missing or unreadable."""

    phase = "collection"


__all__ = ["ArtifactError", "ConfigurationError", "GenerationError", "PackagingError"]
