"""Tests for generic cursor algorithms."""

import pytest

from zipcursor import CapabilityError, NotASequenceError
from zipcursor.cursors import (
    IterableRange,
    SequenceRange,
    as_range,
    distance,
    next_cursor,
    prev_cursor,
    walk,
    walk_backward,
)


def test_next_and_prev_on_random_access():
    seq = SequenceRange([1, 2, 3, 4])

    assert next_cursor(seq.begin(), 3).get() == 4
    assert prev_cursor(seq.end(), 2).get() == 3
    assert next_cursor(seq.end(), -1).get() == 4
    assert prev_cursor(seq.begin(), -1).get() == 2


def test_next_and_prev_on_bidirectional(linked_list_cls):
    items = linked_list_cls([1, 2, 3])

    assert next_cursor(items.begin(), 2).get() == 3
    assert prev_cursor(items.end()).get() == 3
    assert prev_cursor(items.end(), 3) == items.begin()


def test_prev_on_forward_cursor_is_rejected(forward_list_cls):
    items = forward_list_cls([1, 2])

    with pytest.raises(CapabilityError, match="prev_cursor requires bidirectional"):
        prev_cursor(items.begin())
    with pytest.raises(CapabilityError):
        next_cursor(items.begin(), -1)


def test_distance(linked_list_cls, forward_list_cls):
    seq = SequenceRange("abcde")
    assert distance(seq.begin(), seq.end()) == 5
    linked = linked_list_cls([1, 2, 3])
    assert distance(linked.begin(), linked.end()) == 3
    forward = forward_list_cls([1, 2])
    assert distance(forward.begin(), forward.end()) == 2


def test_walk_and_walk_backward(linked_list_cls):
    linked = linked_list_cls([1, 2, 3])

    assert list(walk(linked.begin(), linked.end())) == [1, 2, 3]
    assert list(walk_backward(linked.begin(), linked.end())) == [3, 2, 1]


def test_walk_backward_rejects_forward_cursors_eagerly(forward_list_cls):
    items = forward_list_cls([1])

    with pytest.raises(CapabilityError):
        walk_backward(items.begin(), items.end())


def test_as_range_dispatch(forward_list_cls):
    items = forward_list_cls([1])

    assert as_range(items) is items
    assert isinstance(as_range([1]), SequenceRange)
    assert isinstance(as_range("abc"), SequenceRange)
    assert isinstance(as_range({1, 2}), IterableRange)
    assert as_range(iter([1]), buffer_iterators=False).buffered is False


def test_as_range_rejects_scalars():
    with pytest.raises(NotASequenceError, match="int is not a sequence"):
        as_range(42)
