from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.descriptor_tree import DescriptorTree


@pytest.fixture
def tree(tmp_path: Path) -> DescriptorTree:
    """Provide a descriptor/classes/dist layout rooted at the pytest tmp_path."""
    return DescriptorTree(tmp_path)


@pytest.fixture(autouse=True)
def _reset_ejbpack_logger() -> Iterator[None]:
    """Undo configure_logging() so caplog sees records in later tests."""
    yield
    logger = logging.getLogger("ejbpack")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
