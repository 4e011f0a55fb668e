"""natqueue - singly-linked string queue with stable natural-order sorting."""

from .components.compare import natural_compare, natural_key
from .core.config import QueueConfig
from .core.errors import (
    QueueError,
    AllocationError,
    InvalidValueError,
    QueueConfigError,
    QueueInvariantError,
    QueueSortError,
)
from .core.queue import StringQueue
from .core.types import Comparator, SortStrategy, Value
from .interfaces.queue import StringQueueProtocol

__all__ = [
    "QueueConfig",
    "QueueError",
    "AllocationError",
    "InvalidValueError",
    "QueueConfigError",
    "QueueInvariantError",
    "QueueSortError",
    "StringQueue",
    "StringQueueProtocol",
    "Comparator",
    "SortStrategy",
    "Value",
    "natural_compare",
    "natural_key",
]
