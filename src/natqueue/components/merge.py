"""
MERGE SORT OVER NODE CHAINS
"""

from __future__ import annotations

from collections.abc import Callable

from ..core.types import Comparator
from .node import Node

"""
NOTE: both drivers sort by relinking `next` pointers only.
No Node is created or released while sorting.
"""

RunsHook = Callable[[list[Node | None]], None]


def merge(left: Node | None, right: Node | None, compare: Comparator) -> Node | None:
    """
    Merges two sorted chains into one sorted chain and returns its head.
    On ties the node from `left` is taken first, which keeps the sort stable.

    Takes O(n) time, O(1) extra space.
    """
    if left is None:
        return right
    if right is None:
        return left

    # Pick the head, then let the cursor trail the last linked node
    if compare(left.value, right.value) <= 0:
        head = left
        left = left.next
    else:
        head = right
        right = right.next
    cursor = head

    while left is not None and right is not None:
        if compare(left.value, right.value) <= 0:
            cursor.next = left
            left = left.next
        else:
            cursor.next = right
            right = right.next
        cursor = cursor.next

    # One side is exhausted, the other is already in order
    cursor.next = left if left is not None else right

    return head


def split(head: Node) -> Node | None:
    """
    Cuts the chain after its midpoint and returns the head of the second half.

    Uses slow/fast pointers with `fast` one node ahead of `slow`, so a chain
    of two or more nodes always yields two non-empty halves.
    """
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next

    second = slow.next
    slow.next = None
    return second


def merge_sort_top_down(head: Node | None, compare: Comparator) -> Node | None:
    """
    A recursive merge sort over a chain.

    Splitting halves the chain on each level, so recursion depth is O(logn).

    Overall Time: O(nlogn)
    """

    # Base case - empty or single node chain
    if head is None or head.next is None:
        return head

    second = split(head)

    first = merge_sort_top_down(head, compare)
    second = merge_sort_top_down(second, compare)

    return merge(first, second, compare)


def merge_sort_bottom_up(
    head: Node | None,
    compare: Comparator,
    on_carry: RunsHook | None = None,
) -> Node | None:
    """
    An iterative merge sort over a chain.

    `pending[i]` holds a sorted run of 2**i nodes or None. Each input node
    enters as a run of one and is carried up the slots like a bit in binary
    addition. The list grows as needed, so there is no bound on input length.

    `on_carry`, when given, receives the pending slots after every carry.

    Overall Time: O(nlogn), one pass over the input, O(logn) pending runs.
    """
    pending: list[Node | None] = []

    current = head
    while current is not None:
        next_node = current.next
        current.next = None

        run: Node | None = current
        i = 0
        while i < len(pending) and pending[i] is not None:
            # The slot run holds earlier input, so it goes on the left
            run = merge(pending[i], run, compare)
            pending[i] = None
            i += 1

        if i == len(pending):
            pending.append(run)
        else:
            pending[i] = run

        if on_carry is not None:
            on_carry(pending)

        current = next_node

    # Higher slots hold earlier input; fold upward keeping them on the left
    result: Node | None = None
    for run in pending:
        if run is not None:
            result = merge(run, result, compare)

    return result
