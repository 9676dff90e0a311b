"""Timestamp-driven rebuild decisions."""

from __future__ import annotations

from typing import Iterable, List

from .errors import ArtifactError
from .models import ArtifactInventory, OutputArtifact


def is_stale(output: OutputArtifact, input_timestamps: Iterable[float]) -> bool:
    """Return True when ``output`` is missing or older than any input."""
    if output.modified is None:
        return True
    return any(timestamp > output.modified for timestamp in input_timestamps)


def input_timestamps(inventory: ArtifactInventory) -> List[float]:
    """Modification times of every file in the inventory, in key order."""
    timestamps: List[float] = []
    for entry in sorted(inventory):
        source = inventory[entry]
        try:
            timestamps.append(source.stat().st_mtime)
        except OSError as exc:
            raise ArtifactError(
                f"Archive entry {entry} refers to an unreadable file ({source.resolve()}).",
                path=source.resolve(),
            ) from exc
    return timestamps


__all__ = ["input_timestamps", "is_stale"]
