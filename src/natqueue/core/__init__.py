"""natqueue core package."""

from .queue import StringQueue

__all__ = ["StringQueue"]
