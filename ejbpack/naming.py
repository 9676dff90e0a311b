"""Naming conventions for vendor descriptors and output archives.

A standard descriptor is usually named ``[basename][terminator]ejb-jar.xml``
(for example ``account-ejb-jar.xml``). The vendor descriptor that drives the
stub generator lives next to it and carries the vendor prefix right after the
terminator (``account-vendor-ejb-jar.xml``). A bare ``ejb-jar.xml`` has no base
name, so its companion is simply ``vendor-ejb-jar.xml``.
"""

from __future__ import annotations

import os
from typing import Optional, Tuple

STANDARD_DESCRIPTOR = "ejb-jar.xml"
VENDOR_PREFIX = "vendor-"
DEFAULT_TERMINATOR = "-"


def split_descriptor_path(path: str) -> Tuple[str, str]:
    """Return ``(prefix, filename)`` where prefix keeps its trailing separator."""
    boundary = path.rfind("/")
    if os.sep != "/":
        boundary = max(boundary, path.rfind(os.sep))
    return path[: boundary + 1], path[boundary + 1 :]


def split_base_name(filename: str, name_terminator: str) -> Tuple[str, str]:
    """Split a descriptor filename into ``(base, remainder)``.

    The base runs up to and including the first terminator. Without a
    terminator the split falls on the last ``.`` so the remainder starts with
    the extension; without an extension the whole filename is the base.
    """
    if name_terminator:
        index = filename.find(name_terminator)
        if index >= 0:
            end = index + len(name_terminator)
            return filename[:end], filename[end:]
    dot = filename.rfind(".")
    if dot >= 0:
        return filename[:dot], filename[dot:]
    return filename, ""


def derive_vendor_descriptor_name(
    descriptor_path: str,
    name_terminator: str = DEFAULT_TERMINATOR,
    standard_basename: str = STANDARD_DESCRIPTOR,
    vendor_prefix: str = VENDOR_PREFIX,
) -> str:
    """Derive the vendor-specific descriptor path for a standard descriptor."""
    prefix, filename = split_descriptor_path(descriptor_path)
    if filename == standard_basename:
        return f"{prefix}{vendor_prefix}{standard_basename}"
    base, remainder = split_base_name(filename, name_terminator)
    return f"{prefix}{base}{vendor_prefix}{remainder}"


def derive_output_base_name(
    descriptor_path: str,
    name_terminator: str = DEFAULT_TERMINATOR,
    base_jar_name: Optional[str] = None,
) -> str:
    """Return the archive name (without suffix) for a descriptor.

    A configured ``base_jar_name`` wins; otherwise the descriptor's own base
    name is used with the terminator stripped. The directory prefix of the
    descriptor is always kept so archives mirror the descriptor layout.
    """
    prefix, filename = split_descriptor_path(descriptor_path)
    if base_jar_name:
        return f"{prefix}{base_jar_name}"
    base, _ = split_base_name(filename, name_terminator)
    if name_terminator and base.endswith(name_terminator):
        base = base[: -len(name_terminator)]
    return f"{prefix}{base}"


__all__ = [
    "DEFAULT_TERMINATOR",
    "STANDARD_DESCRIPTOR",
    "VENDOR_PREFIX",
    "derive_output_base_name",
    "derive_vendor_descriptor_name",
    "split_base_name",
    "split_descriptor_path",
]
