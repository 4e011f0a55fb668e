"""Common type definitions for the natqueue package.

Defines fundamental types used across all components.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Literal

# Core primitive types
Value = str
SortStrategy = Literal["bottom_up", "top_down"]

# Three-way comparison: negative, zero or positive.
# Either side may be None; see components.compare for the contract.
Comparator = Callable[[Value | None, Value | None], int]
