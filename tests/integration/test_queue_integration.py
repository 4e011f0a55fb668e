"""Integration tests for StringQueue: properties over mixed operation sequences."""

import random
from itertools import pairwise

import pytest
from sortedcontainers import SortedKeyList

from natqueue import QueueConfig, StringQueue, natural_compare, natural_key
from natqueue.core import api

ALPHABET = "aAbB019 ."


def random_values(rng, count):
    return ["".join(rng.choices(ALPHABET, k=rng.randint(0, 6))) for _ in range(count)]


def stable_oracle(values):
    """Independent stable natural ordering: equal keys keep insertion order."""
    ordered = SortedKeyList(key=natural_key)
    for v in values:
        ordered.add(v)
    return list(ordered)


@pytest.fixture(params=["bottom_up", "top_down"])
def config(request):
    return QueueConfig(sort_strategy=request.param)


def test_size_tracks_inserts_and_removals():
    """size == successful inserts - successful removals, for any sequence."""
    rng = random.Random(7)
    queue = StringQueue()
    expected = 0

    for _ in range(2000):
        op = rng.choice(["head", "tail", "remove"])
        if op == "head" and queue.insert_head(str(rng.random())):
            expected += 1
        elif op == "tail" and queue.insert_tail(str(rng.random())):
            expected += 1
        elif op == "remove" and queue.remove_head():
            expected -= 1
        assert queue.size() == expected

    queue.check_invariants()


def test_mixed_operations_match_a_reference_deque():
    from collections import deque

    rng = random.Random(11)
    queue = StringQueue()
    reference = deque()

    for step in range(1500):
        op = rng.choice(["head", "tail", "pop", "reverse", "sort"])
        value = f"v{rng.randint(0, 50)}"
        if op == "head":
            queue.insert_head(value)
            reference.appendleft(value)
        elif op == "tail":
            queue.insert_tail(value)
            reference.append(value)
        elif op == "pop":
            assert queue.pop_head() == (reference.popleft() if reference else None)
        elif op == "reverse":
            queue.reverse()
            reference.reverse()
        else:
            queue.sort()
            reference = deque(stable_oracle(reference))

        assert queue.values() == list(reference), f"diverged at step {step}"

    queue.check_invariants()


def test_round_trip_in_insertion_order():
    values = [f"value-{i}" for i in range(100)]
    queue = api.create()
    for v in values:
        api.insert_tail(queue, v)

    out = []
    while api.size(queue):
        out.append(queue.pop_head())

    assert out == values


def test_reverse_is_its_own_inverse():
    rng = random.Random(3)
    for count in [0, 1, 2, 3, 10, 257]:
        queue = StringQueue.from_iterable(random_values(rng, count))
        nodes = _nodes(queue)

        queue.reverse()
        queue.reverse()

        assert _nodes(queue) == nodes
        queue.check_invariants()


@pytest.mark.parametrize("count", [2, 3, 17, 64, 500])
def test_sort_matches_stable_oracle(config, count):
    rng = random.Random(count)
    values = random_values(rng, count)
    queue = StringQueue.from_iterable(values, config)

    queue.sort()

    assert queue.values() == stable_oracle(values)
    assert all(natural_compare(a, b) <= 0 for a, b in pairwise(queue))
    queue.check_invariants()


@pytest.mark.parametrize(
    "values",
    [
        [f"item{i}" for i in range(1, 40)],  # already sorted
        [f"item{i}" for i in range(40, 0, -1)],  # reverse sorted
        ["same"] * 33,  # all equal
        ["Same", "same", "SAME", "sAmE"] * 5,  # all equal ignoring case
    ],
)
def test_sort_edge_orderings(config, values):
    queue = StringQueue.from_iterable(values, config)
    original_nodes = _nodes(queue)

    queue.sort()

    assert queue.values() == stable_oracle(values)
    assert sorted(map(id, _nodes(queue))) == sorted(map(id, original_nodes))
    queue.check_invariants()


def test_sort_preserves_identity_of_equal_values(config):
    """Equal keys keep their relative node order, not just equal values."""
    queue = StringQueue.from_iterable(["x1", "a", "X1", "b", "x01", "a"], config)
    nodes = _nodes(queue)

    queue.sort()

    assert _nodes(queue) == [nodes[1], nodes[5], nodes[3], nodes[0], nodes[2], nodes[4]]


def test_sort_is_idempotent(config):
    rng = random.Random(99)
    queue = StringQueue.from_iterable(random_values(rng, 300), config)

    queue.sort()
    once = _nodes(queue)
    queue.sort()

    assert _nodes(queue) == once


def test_both_strategies_agree():
    rng = random.Random(5)
    values = random_values(rng, 400)
    bottom_up = StringQueue.from_iterable(values, QueueConfig(sort_strategy="bottom_up"))
    top_down = StringQueue.from_iterable(values, QueueConfig(sort_strategy="top_down"))

    bottom_up.sort()
    top_down.sort()

    assert bottom_up.values() == top_down.values()


def test_operations_after_sort_keep_tail_correct(config):
    queue = StringQueue.from_iterable(["c", "a", "b"], config)
    queue.sort()

    assert queue.insert_tail("d")
    assert queue.values() == ["a", "b", "c", "d"]
    queue.reverse()
    assert queue.insert_tail("z")
    assert queue.values() == ["d", "c", "b", "a", "z"]
    queue.check_invariants()


def _nodes(queue):
    nodes = []
    node = queue.head
    while node is not None:
        nodes.append(node)
        node = node.next
    return nodes
