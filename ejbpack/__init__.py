"""Stub generation and archive packaging for EJB descriptors."""

__version__ = "0.1.0"

__all__ = ["__version__"]
