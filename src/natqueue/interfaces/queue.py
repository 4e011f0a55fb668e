"""Protocol definition for a string queue."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterator


class StringQueueProtocol(Protocol):
    """Singly-linked queue of strings with head/tail insertion."""

    def insert_head(self, text: str) -> bool:
        """Insert text at the head; False if no node could be built."""
        ...

    def insert_tail(self, text: str) -> bool:
        """Insert text at the tail; False if no node could be built."""
        ...

    def remove_head(self, out: bytearray | None = None, capacity: int = 0) -> bool:
        """Remove the head, optionally copying it into `out`; False if empty."""
        ...

    def size(self) -> int:
        """Return the number of values."""
        ...

    def reverse(self) -> None:
        """Reverse the order of values in place."""
        ...

    def sort(self) -> None:
        """Sort values in ascending natural order, stable and in place."""
        ...

    def destroy(self) -> None:
        """Release every value."""
        ...

    def __iter__(self) -> Iterator[str]:
        """Iterate values from head to tail."""
        ...
