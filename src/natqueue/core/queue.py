"""String queue implementation - main public API.

A singly-linked queue of strings with cached head, tail and size.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..components.compare import natural_compare
from ..components.merge import merge_sort_bottom_up, merge_sort_top_down
from ..components.node import Node, chain_tail, iter_chain
from .config import QueueConfig
from .errors import (
    AllocationError,
    InvalidValueError,
    QueueConfigError,
    QueueError,
    QueueInvariantError,
    QueueSortError,
)
from .types import Comparator

logger = logging.getLogger(__name__)


class StringQueue:
    """Singly-linked queue of strings.

    Args:
        config: Queue configuration, defaults to QueueConfig()
        compare: Three-way comparator used by sort(), defaults to natural order

    Public API:
        - insert_head(text) / insert_tail(text): Add a value, False on failure
        - remove_head(out, capacity): Drop the head, optionally copying it out
        - pop_head(): Drop the head and return its value
        - reverse(): Reverse the chain in place
        - sort(): Stable in-place merge sort
        - destroy(): Release every node

    Invariants:
        - head is None iff tail is None iff size == 0
        - tail is reached from head in exactly size - 1 hops, tail.next is None
        - No node in the chain holds a None value
    """

    def __init__(
        self,
        config: QueueConfig | None = None,
        compare: Comparator = natural_compare,
    ) -> None:
        self.config = config if config is not None else QueueConfig()
        self._compare = compare
        self.head: Node | None = None
        self.tail: Node | None = None
        self._size: int = 0

    @classmethod
    def from_iterable(
        cls, values: Iterable[str], config: QueueConfig | None = None
    ) -> StringQueue:
        """Build a queue holding `values` in order."""
        queue = cls(config)
        for value in values:
            if not queue.insert_tail(value):
                raise InvalidValueError(f"Cannot insert {value!r}")
        return queue

    def __repr__(self) -> str:
        if self.head is None:
            return ""
        return "[Head] " + " -> ".join(self.values()) + " [Tail]"

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self.head is not None

    def __iter__(self) -> Iterator[str]:
        for node in iter_chain(self.head):
            yield node.value

    def values(self) -> list[str]:
        """Return the values from head to tail."""
        return list(self)

    def size(self) -> int:
        """Return the number of values, O(1)."""
        return self._size

    def _new_node(self, text: str) -> Node:
        if not isinstance(text, str):
            raise InvalidValueError(
                f"Queue values must be str, got {type(text).__name__}"
            )
        try:
            return Node(text)
        except MemoryError as e:
            raise AllocationError(f"Failed to allocate node: {e}") from e

    def insert_head(self, text: str) -> bool:
        """
        Inserts a new value at the head of the queue. O(1).
        Returns False, leaving the queue unchanged, if no node could be built.
        """
        try:
            node = self._new_node(text)
        except QueueError as e:
            logger.warning(f"insert_head rejected: {e}")
            return False

        node.next = self.head
        self.head = node
        if self.tail is None:
            self.tail = node
        self._size += 1
        return True

    def insert_tail(self, text: str) -> bool:
        """
        Inserts a new value at the tail of the queue. O(1).
        Returns False, leaving the queue unchanged, if no node could be built.
        """
        try:
            node = self._new_node(text)
        except QueueError as e:
            logger.warning(f"insert_tail rejected: {e}")
            return False

        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1
        return True

    def _unlink_head(self) -> str:
        """Detach the head node, release it and return its value."""
        node = self.head
        value = node.value
        if node is self.tail:
            self.tail = None
        self.head = node.next
        node.release()
        self._size -= 1
        return value

    def remove_head(self, out: bytearray | None = None, capacity: int = 0) -> bool:
        """
        Removes the head of the queue.
        Returns False if the queue is empty.

        If `out` is given, up to capacity - 1 bytes of the UTF-8 encoded value
        are copied into it followed by a zero terminator. Longer values are
        truncated. The removed value is released whether or not it was copied.
        """
        if self.head is None:
            return False

        # Copy before unlinking so a read-only buffer leaves the queue intact
        if out is not None:
            limit = min(capacity, len(out))
            if limit > 0:
                data = self.head.value.encode("utf-8")[: limit - 1]
                try:
                    out[: len(data)] = data
                    out[len(data)] = 0
                except TypeError as e:
                    logger.warning(f"remove_head rejected: buffer is not writable: {e}")
                    return False

        self._unlink_head()
        return True

    def pop_head(self) -> str | None:
        """Removes the head of the queue and returns its value, or None if empty."""
        if self.head is None:
            return None
        return self._unlink_head()

    def reverse(self) -> None:
        """
        Reverses the queue in place by flipping every forward link.
        No node is created or released. O(n) time, O(1) space.
        """
        if self.head is None or self.head is self.tail:
            return

        prior: Node | None = None
        current = self.head
        while current is not None:
            next_node = current.next
            current.next = prior
            prior = current
            current = next_node

        self.head, self.tail = self.tail, self.head

    def sort(self) -> None:
        """
        Sorts the queue in ascending natural order, stable and in place.
        Only forward links, head and tail are rewritten.

        If the comparator raises, the original order is restored and
        QueueSortError is raised.
        """
        if self.head is None or self.head is self.tail:
            return

        strategy = self.config.sort_strategy
        if strategy not in ("bottom_up", "top_down"):
            raise QueueConfigError(f"Unknown sort strategy {strategy!r}")
        logger.debug(f"Sorting {self._size} values ({strategy})")

        original = list(iter_chain(self.head))
        try:
            if strategy == "top_down":
                head = merge_sort_top_down(self.head, self._compare)
            else:
                on_carry = self._trace_runs if self.config.trace_sort else None
                head = merge_sort_bottom_up(self.head, self._compare, on_carry)
        except Exception as e:
            self._relink(original)
            raise QueueSortError(f"Comparator failed while sorting: {e}") from e

        self.head = head
        self.tail = chain_tail(head)

    def _relink(self, nodes: list[Node]) -> None:
        """Rebuild the chain from `nodes` in the given order."""
        for node, next_node in zip(nodes, nodes[1:]):
            node.next = next_node
        nodes[-1].next = None
        self.head = nodes[0]
        self.tail = nodes[-1]

    def _trace_runs(self, pending: list[Node | None]) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        limit = self.config.max_trace_values
        for i, run in enumerate(pending):
            if run is None:
                continue
            shown = []
            for node in iter_chain(run):
                if len(shown) == limit:
                    shown.append("...")
                    break
                shown.append(node.value)
            logger.debug(f"pending[{i}] = [{' '.join(shown)}]")

    def destroy(self) -> None:
        """Releases every node and its value. Safe on an empty queue."""
        current = self.head
        while current is not None:
            next_node = current.next
            current.release()
            current = next_node

        self.head = self.tail = None
        self._size = 0

    def check_invariants(self) -> None:
        """
        Walks the chain and raises QueueInvariantError on the first
        mismatch with the cached head, tail or size.
        """
        if (self.head is None) != (self.tail is None) or (
            (self.head is None) != (self._size == 0)
        ):
            raise QueueInvariantError(
                f"Inconsistent empty state: head={self.head!r}, "
                f"tail={self.tail!r}, size={self._size}"
            )
        if self.head is None:
            return

        count = 0
        last = None
        for node in iter_chain(self.head):
            count += 1
            if count > self._size:
                raise QueueInvariantError(
                    f"Chain is longer than size {self._size} or contains a cycle"
                )
            if node.value is None:
                raise QueueInvariantError(f"Node {count - 1} holds no value")
            last = node

        if count != self._size:
            raise QueueInvariantError(f"Chain has {count} nodes, size is {self._size}")
        if last is not self.tail:
            raise QueueInvariantError(f"Tail {self.tail!r} is not the last node {last!r}")
