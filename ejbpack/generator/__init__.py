"""Stub/skeleton generation boundary."""

from .base import Generator
from .ejbc import EjbcGenerator

__all__ = ["EjbcGenerator", "Generator"]
