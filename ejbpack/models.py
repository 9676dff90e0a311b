"""Core data models shared across ejbpack components."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path
from typing import Dict, Optional, Tuple

from .naming import (
    DEFAULT_TERMINATOR,
    STANDARD_DESCRIPTOR,
    VENDOR_PREFIX,
    derive_vendor_descriptor_name,
    split_base_name,
    split_descriptor_path,
)

ArtifactInventory = Dict[str, Path]
"""In-archive path -> file on disk."""


@dataclass(frozen=True)
class Descriptor:
    """A standard component descriptor relative to its descriptor root."""

    relative_path: str
    root: Path
    name_terminator: str = DEFAULT_TERMINATOR
    standard_basename: str = STANDARD_DESCRIPTOR
    vendor_prefix: str = VENDOR_PREFIX

    @property
    def directory_prefix(self) -> str:
        return split_descriptor_path(self.relative_path)[0]

    @property
    def filename(self) -> str:
        return split_descriptor_path(self.relative_path)[1]

    @property
    def base_name(self) -> str:
        """Filename segment before the vendor prefix is inserted."""
        if self.is_standard:
            return ""
        return split_base_name(self.filename, self.name_terminator)[0]

    @property
    def is_standard(self) -> bool:
        """True when the descriptor carries no project base name."""
        return self.filename == self.standard_basename

    @cached_property
    def vendor_name(self) -> str:
        # Memoized for the lifetime of the descriptor.
        return derive_vendor_descriptor_name(
            self.relative_path,
            self.name_terminator,
            self.standard_basename,
            self.vendor_prefix,
        )

    @property
    def path(self) -> Path:
        return self.root / self.relative_path

    @property
    def vendor_path(self) -> Path:
        return self.root / self.vendor_name

    @property
    def directory(self) -> Path:
        return self.root / self.directory_prefix


@dataclass(frozen=True)
class GeneratorOptions:
    """Flags translated into the external generator invocation."""

    retain_generated_source: bool = False
    verbose_output: bool = False
    tool_home: Optional[Path] = None


@dataclass(frozen=True)
class GenerationResult:
    """Output of one generator invocation."""

    display_name: Optional[str]
    inventory: ArtifactInventory = field(default_factory=dict)
    dependents: Tuple[str, ...] = ()


@dataclass(frozen=True)
class OutputArtifact:
    """Target archive for a descriptor; ``modified`` is None when absent."""

    path: Path
    modified: Optional[float] = None

    @property
    def exists(self) -> bool:
        return self.modified is not None

    @classmethod
    def from_path(cls, path: Path) -> "OutputArtifact":
        try:
            modified: Optional[float] = path.stat().st_mtime
        except FileNotFoundError:
            modified = None
        return cls(path=path, modified=modified)


@dataclass
class PackagingOutcome:
    """Result of packaging a single descriptor."""

    descriptor: Descriptor
    archive: Path
    built: bool
    display_name: Optional[str] = None
