"""Tests for cursors over plain iterables."""

import pytest

from zipcursor import Capability, CursorInvalidatedError, ReadOnlyReferenceError
from zipcursor.cursors import BufferedCursor, InputCursor, IterableRange, walk


def _counting(values, pulled):
    for value in values:
        pulled.append(value)
        yield value


def test_buffered_range_is_forward_and_multipass():
    numbers = IterableRange(x * x for x in range(4))

    assert isinstance(numbers.begin(), BufferedCursor)
    assert BufferedCursor.capability is Capability.FORWARD
    assert list(walk(numbers.begin(), numbers.end())) == [0, 1, 4, 9]
    assert list(walk(numbers.begin(), numbers.end())) == [0, 1, 4, 9]


def test_items_are_pulled_lazily():
    pulled: list[int] = []
    numbers = IterableRange(_counting([1, 2, 3], pulled))
    cursor = numbers.begin().advanced()

    assert pulled == []
    assert cursor.get() == 2
    assert pulled == [1, 2]


def test_end_equality_probes_the_iterator():
    numbers = IterableRange(iter([1]))
    first = numbers.begin()

    assert first != numbers.end()
    assert first.advanced() == numbers.end()
    assert numbers.end() == first.advanced()
    assert numbers.end() == numbers.end()


def test_empty_iterable_begin_equals_end():
    empty = IterableRange(iter([]))

    assert empty.begin() == empty.end()


def test_cursors_of_different_ranges_are_never_equal():
    assert IterableRange([]).end() != IterableRange([]).end()


def test_single_pass_cursor_invalidates_earlier_positions():
    stream = IterableRange(iter([1, 2, 3]), buffered=False)
    first = stream.begin()

    assert isinstance(first, InputCursor)
    assert first.get() == 1
    second = first.advanced()
    assert second.get() == 2
    with pytest.raises(CursorInvalidatedError):
        first.get()


def test_single_pass_advance_without_dereference_keeps_alignment():
    stream = IterableRange(iter("abc"), buffered=False)
    third = stream.begin().advanced().advanced()

    assert third.get() == "c"
    assert third.advanced() == stream.end()


def test_values_are_read_only():
    ref = IterableRange([1]).begin().ref()

    assert not ref.writable
    assert ref.get() == 1
    with pytest.raises(ReadOnlyReferenceError):
        ref.set(2)


def test_end_cursor_cannot_move_or_dereference():
    end = IterableRange([1]).end()

    with pytest.raises(IndexError):
        end.get()
    with pytest.raises(IndexError):
        end.advanced()


def test_iterable_cursors_are_unhashable():
    with pytest.raises(TypeError):
        hash(IterableRange([1]).begin())
