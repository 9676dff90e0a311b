"""Locate standard descriptors beneath a descriptor root."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List

from .naming import STANDARD_DESCRIPTOR, VENDOR_PREFIX

_EXCLUDED_DIRS = {".git", ".hg", ".svn", "__pycache__"}


def discover_descriptors(
    root: Path,
    standard_basename: str = STANDARD_DESCRIPTOR,
    vendor_prefix: str = VENDOR_PREFIX,
) -> List[str]:
    """Return sorted root-relative paths of standard descriptors.

    Files ending in ``standard_basename`` qualify unless they are vendor
    descriptors, i.e. end in ``vendor_prefix + standard_basename``.
    """
    vendor_suffix = vendor_prefix + standard_basename
    found: List[str] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(name for name in dirnames if name not in _EXCLUDED_DIRS)
        for filename in filenames:
            if not filename.endswith(standard_basename) or filename.endswith(vendor_suffix):
                continue
            relative = Path(dirpath, filename).relative_to(root)
            found.append(relative.as_posix())
    return sorted(found)


__all__ = ["discover_descriptors"]
