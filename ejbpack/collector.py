"""Assembles the full artifact inventory for one descriptor."""

from __future__ import annotations

from pathlib import Path

from .errors import ArtifactError
from .logging import get_logger
from .models import ArtifactInventory, GenerationResult

META_DIR = "META-INF/"
VENDOR_DESCRIPTOR_ENTRY = META_DIR + "ias-ejb-jar.xml"

_logger = get_logger("collector")


def collect_artifacts(
    result: GenerationResult,
    descriptor_dir: Path,
    primary_descriptor_dir: str,
    vendor_descriptor: Path,
) -> ArtifactInventory:
    """Merge generator output, dependent descriptors and the vendor descriptor.

    Dependent references are trusted for their filename only: the file is
    always looked up next to the primary descriptor. A missing dependent
    aborts collection and nothing is returned.
    """
    inventory: ArtifactInventory = dict(result.inventory)

    base_dir = descriptor_dir / primary_descriptor_dir
    for reference in result.dependents:
        filename = reference[reference.rfind("/") + 1 :]
        dependent = base_dir / filename
        if not dependent.is_file():
            raise ArtifactError(
                f"The dependent descriptor file ({dependent.resolve()}) could not be found.",
                path=dependent.resolve(),
            )
        inventory[reference] = dependent

    if VENDOR_DESCRIPTOR_ENTRY in inventory:
        _logger.debug("Replacing generated %s with the vendor descriptor", VENDOR_DESCRIPTOR_ENTRY)
    inventory[VENDOR_DESCRIPTOR_ENTRY] = vendor_descriptor

    _logger.debug("Collected %d artifact(s)", len(inventory))
    return inventory


__all__ = ["META_DIR", "VENDOR_DESCRIPTOR_ENTRY", "collect_artifacts"]
