"""Logging setup for ejbpack runs."""

from __future__ import annotations

import logging
from pathlib import Path

_ROOT = "ejbpack"
_CONSOLE_FORMAT = "[ejbpack] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``ejbpack.<name>``, or the package logger when no name is given."""
    return logging.getLogger(f"{_ROOT}.{name}" if name else _ROOT)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Install the console handler and, when ``log_file`` is set, a build log.

    The console shows INFO and up (DEBUG with ``verbose``). The build log
    always records DEBUG so a failed descriptor can be diagnosed without
    re-running the build.
    """
    console_level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_ROOT)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    logger.setLevel(console_level)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        build_log = logging.FileHandler(log_file, encoding="utf-8")
        build_log.setLevel(logging.DEBUG)
        build_log.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(build_log)
        logger.setLevel(logging.DEBUG)

    return logger


__all__ = ["configure_logging", "get_logger"]
