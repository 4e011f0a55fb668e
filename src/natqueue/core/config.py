"""Configuration for natqueue.

Defines all tunable parameters for the string queue.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import QueueConfigError
from .types import SortStrategy

SORT_STRATEGIES = ("bottom_up", "top_down")


@dataclass
class QueueConfig:
    """Configuration parameters for a StringQueue.

    Attributes:
        sort_strategy: Merge sort driver, "bottom_up" (iterative) or "top_down" (recursive)
        trace_sort: Whether to log pending-run snapshots at DEBUG while sorting
        max_trace_values: Number of values shown per run in a trace line
    """

    sort_strategy: SortStrategy = "bottom_up"
    trace_sort: bool = False
    max_trace_values: int = 16

    def __post_init__(self) -> None:
        if self.sort_strategy not in SORT_STRATEGIES:
            raise QueueConfigError(
                f"Unknown sort strategy {self.sort_strategy!r}, "
                f"expected one of {', '.join(SORT_STRATEGIES)}"
            )
        if self.max_trace_values < 1:
            raise QueueConfigError(
                f"max_trace_values must be positive, got {self.max_trace_values}"
            )
