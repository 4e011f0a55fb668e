"""Chain node for the string queue."""

from __future__ import annotations

from collections.abc import Iterator


class Node:
    """
    A node is a container which holds one string value
    and the next node it is linked to.
    """

    __slots__ = ("value", "next")

    def __init__(self, value: str | None) -> None:
        self.value: str | None = value
        self.next: Node | None = None

    def __repr__(self) -> str:
        return f"[Node] {self.value}"

    def release(self) -> None:
        """Drop the value and the forward link."""
        self.value = None
        self.next = None


def iter_chain(head: Node | None) -> Iterator[Node]:
    """Yield every node from head to the end of the chain."""
    current = head
    while current is not None:
        yield current
        current = current.next


def chain_tail(head: Node | None) -> Node | None:
    """Return the last node of the chain, O(n)."""
    if head is None:
        return None
    current = head
    while current.next is not None:
        current = current.next
    return current
