"""Resolve the latest published version of registry packages."""

__version__ = "0.3.0"

__all__ = ["__version__"]
