"""Configuration loading for ejbpack (.ejbpack.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import ConfigurationError
from .logging import get_logger
from .naming import DEFAULT_TERMINATOR, STANDARD_DESCRIPTOR, VENDOR_PREFIX

CONFIG_FILENAME = ".ejbpack.yml"

_logger = get_logger("config")


@dataclass
class PackagingConfig:
    """Settings shared by every descriptor processed in a run."""

    descriptor_dir: Path
    src_dir: Path
    dest_dir: Path
    classpath: List[Path] = field(default_factory=list)
    suffix: str = ".jar"
    keep_generated: bool = False
    debug: bool = False
    ias_home: Optional[Path] = None
    base_jar_name: Optional[str] = None
    name_terminator: str = DEFAULT_TERMINATOR
    standard_basename: str = STANDARD_DESCRIPTOR
    vendor_prefix: str = VENDOR_PREFIX
    continue_on_failure: bool = False


def load_config(config_path: Path) -> PackagingConfig:
    """Load configuration from disk, falling back to defaults rooted at its directory."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent

    if not config_file.exists():
        return PackagingConfig(descriptor_dir=root, src_dir=root, dest_dir=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"{CONFIG_FILENAME} must contain a mapping at the root",
            check="config-file",
            path=config_file,
        )
    return config_from_mapping(data, root)


def config_from_mapping(data: Dict[str, Any], root: Path) -> PackagingConfig:
    """Build a config from an already parsed mapping; relative paths use ``root``."""
    if data.get("generic_jar_suffix") is not None:
        warn_generic_jar_suffix()

    config = PackagingConfig(
        descriptor_dir=_as_path(data.get("descriptor_dir"), root) or root,
        src_dir=_as_path(data.get("src_dir"), root) or root,
        dest_dir=_as_path(data.get("dest_dir"), root) or root,
        classpath=[
            path
            for path in (_as_path(item, root) for item in _as_str_list(data.get("classpath")))
            if path is not None
        ],
        ias_home=_as_path(data.get("ias_home"), root),
        base_jar_name=_as_str(data.get("base_jar_name")),
    )

    suffix = _as_str(data.get("suffix"))
    if suffix:
        config.suffix = suffix
    terminator = _as_str(data.get("name_terminator"))
    if terminator:
        config.name_terminator = terminator
    standard = _as_str(data.get("standard_basename"))
    if standard:
        config.standard_basename = standard
    vendor_prefix = _as_str(data.get("vendor_prefix"))
    if vendor_prefix:
        config.vendor_prefix = vendor_prefix

    config.keep_generated = _as_bool(data.get("keep_generated")) or False
    config.debug = _as_bool(data.get("debug")) or False
    config.continue_on_failure = _as_bool(data.get("continue_on_failure")) or False
    return config


def warn_generic_jar_suffix() -> None:
    """Log that the deprecated generic archive suffix is ignored."""
    _logger.warning(
        "No generic archive is created during processing, so the "
        "\"generic_jar_suffix\" option is not supported. It will be ignored."
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            f"Failed to parse {path.name}: {exc}", check="config-file", path=path
        ) from exc
    return loaded if loaded is not None else {}


def _as_path(value: Any, root: Path) -> Optional[Path]:
    text = _as_str(value)
    if not text:
        return None
    path = Path(text).expanduser()
    return path if path.is_absolute() else root / path


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "on", "1"}:
            return True
        if lowered in {"false", "no", "off", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "PackagingConfig",
    "config_from_mapping",
    "load_config",
    "warn_generic_jar_suffix",
]
