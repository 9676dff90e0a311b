"""JAR assembly from an artifact inventory."""

from __future__ import annotations

import zipfile
from pathlib import Path

from . import __version__
from .errors import ArtifactError
from .logging import get_logger
from .models import ArtifactInventory

MANIFEST_ENTRY = "META-INF/MANIFEST.MF"


class JarWriter:
    """Writes inventories into compressed JAR archives."""

    def __init__(self, created_by: str | None = None) -> None:
        self.created_by = created_by or f"ejbpack {__version__}"
        self.logger = get_logger("archive")

    def write(self, inventory: ArtifactInventory, destination: Path) -> Path:
        """Write every inventory entry into ``destination`` and return its path.

        A partially written archive is removed when any entry fails.
        """
        for entry, source in inventory.items():
            if not source.is_file():
                raise ArtifactError(
                    f"Cannot add {entry} to {destination}: {source.resolve()} does not exist.",
                    path=source.resolve(),
                )

        destination.parent.mkdir(parents=True, exist_ok=True)
        self.logger.info("Building archive %s", destination)
        try:
            with zipfile.ZipFile(destination, "w", compression=zipfile.ZIP_DEFLATED) as jar:
                if MANIFEST_ENTRY not in inventory:
                    jar.writestr(MANIFEST_ENTRY, self._manifest())
                for entry in sorted(inventory):
                    self.logger.debug("Adding %s", entry)
                    jar.write(inventory[entry], arcname=entry)
        except OSError as exc:
            destination.unlink(missing_ok=True)
            raise ArtifactError(
                f"Failed to write archive {destination.resolve()}: {exc}",
                path=destination.resolve(),
            ) from exc
        return destination

    def _manifest(self) -> str:
        return f"Manifest-Version: 1.0\r\nCreated-By: {self.created_by}\r\n\r\n"


__all__ = ["JarWriter", "MANIFEST_ENTRY"]
