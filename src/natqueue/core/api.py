"""NULL-safe functional API over StringQueue.

Every function accepts None in place of a queue and degrades to
False, 0 or a no-op instead of raising.
"""

from __future__ import annotations

import logging

from ..interfaces.queue import StringQueueProtocol
from .config import QueueConfig
from .errors import QueueError
from .queue import StringQueue

logger = logging.getLogger(__name__)


def create(config: QueueConfig | None = None) -> StringQueue | None:
    """Create an empty queue. Returns None if it could not be allocated."""
    try:
        return StringQueue(config)
    except MemoryError as e:
        logger.warning(f"Failed to allocate queue: {e}")
        return None


def destroy(queue: StringQueueProtocol | None) -> None:
    """Free all storage used by the queue."""
    if queue is None:
        return
    queue.destroy()


def insert_head(queue: StringQueueProtocol | None, text: str) -> bool:
    """Insert at the head. False if queue is None or the node could not be built."""
    if queue is None:
        return False
    return queue.insert_head(text)


def insert_tail(queue: StringQueueProtocol | None, text: str) -> bool:
    """Insert at the tail. False if queue is None or the node could not be built."""
    if queue is None:
        return False
    return queue.insert_tail(text)


def remove_head(
    queue: StringQueueProtocol | None,
    out: bytearray | None = None,
    capacity: int = 0,
) -> bool:
    """Remove the head, copying at most capacity - 1 bytes plus a terminator into `out`.

    False if queue is None or empty.
    """
    if queue is None:
        return False
    return queue.remove_head(out, capacity)


def size(queue: StringQueueProtocol | None) -> int:
    """Number of values, 0 if queue is None or empty."""
    if queue is None:
        return 0
    return queue.size()


def reverse(queue: StringQueueProtocol | None) -> None:
    """Reverse in place. No effect if queue is None or empty."""
    if queue is None:
        return
    queue.reverse()


def sort(queue: StringQueueProtocol | None) -> None:
    """Stable natural-order sort. No effect if queue is None, empty or a singleton."""
    if queue is None:
        return
    try:
        queue.sort()
    except QueueError as e:
        logger.warning(f"sort skipped: {e}")
