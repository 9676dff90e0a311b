"""Precondition checks run before any descriptor is processed."""

from __future__ import annotations

from .config import PackagingConfig
from .errors import ConfigurationError
from .models import Descriptor


def validate_configuration(descriptor: Descriptor, config: PackagingConfig) -> None:
    """Raise ``ConfigurationError`` on the first violated precondition."""
    if descriptor.is_standard and not config.base_jar_name:
        raise ConfigurationError(
            "No name specified for the completed archive. The descriptor "
            f"{descriptor.path.resolve()} should be prefixed with the archive "
            "name or base_jar_name must be configured.",
            check="archive-name",
            path=descriptor.path.resolve(),
        )

    vendor_descriptor = (config.descriptor_dir / descriptor.vendor_name).resolve()
    if not vendor_descriptor.is_file():
        raise ConfigurationError(
            f"The vendor descriptor ({vendor_descriptor}) was not found.",
            check="vendor-descriptor",
            path=vendor_descriptor,
        )

    if config.ias_home is not None and not config.ias_home.is_dir():
        ias_home = config.ias_home.resolve()
        raise ConfigurationError(
            f"If ias_home is specified it must be a valid directory (it was set to {ias_home}).",
            check="ias-home",
            path=ias_home,
        )


__all__ = ["validate_configuration"]
