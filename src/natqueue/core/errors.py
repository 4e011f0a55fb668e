"""Exception hierarchy for natqueue.

Defines all custom exceptions used throughout the implementation.
"""

from __future__ import annotations


class QueueError(Exception):
    """Base exception for all queue errors."""
    pass


class AllocationError(QueueError):
    """Raised when a node cannot be built for an inserted value."""
    pass


class InvalidValueError(QueueError):
    """Raised when an inserted value is not a string."""
    pass


class QueueConfigError(QueueError):
    """Raised when a configuration value is out of range."""
    pass


class QueueInvariantError(QueueError):
    """Raised when the chain does not match the cached head, tail or size."""
    pass


class QueueSortError(QueueError):
    """Raised when the comparator fails while sorting."""
    pass
