"""Tests for random-access cursors over Python sequences."""

import pytest

from zipcursor import Capability, ReadOnlyReferenceError
from zipcursor.cursors import IndexCursor, ItemReference, SequenceRange


def test_begin_end_bound_the_sequence():
    values = [10, 20, 30]
    seq = SequenceRange(values)

    assert seq.begin().get() == 10
    assert seq.end().retreated().get() == 30
    assert seq.begin().distance_to(seq.end()) == 3
    assert len(seq) == 3


def test_cursor_is_immutable_and_moves_return_new_cursors():
    values = [1, 2, 3]
    first = SequenceRange(values).begin()
    second = first.advanced()

    assert first.index == 0
    assert second.index == 1
    assert first.offset(2).get() == 3
    assert second.offset(-1) == first


def test_capability_is_random_access():
    assert IndexCursor.capability is Capability.RANDOM_ACCESS


def test_equality_requires_the_same_sequence_object():
    """Equal contents in different objects are different positions."""
    a = [1, 2]
    b = [1, 2]

    assert IndexCursor(a, 0) == IndexCursor(a, 0)
    assert IndexCursor(a, 0) != IndexCursor(b, 0)
    assert hash(IndexCursor(a, 1)) == hash(IndexCursor(a, 1))


def test_distance_between_different_sequences_fails():
    with pytest.raises(ValueError, match="different sequences"):
        IndexCursor([1], 0).distance_to(IndexCursor([1], 0))


def test_reference_writes_through_mutable_sequence():
    values = [1, 2, 3]
    ref = SequenceRange(values).begin().advanced().ref()

    assert isinstance(ref, ItemReference)
    assert ref.writable
    ref.set(20)
    assert values == [1, 20, 3]
    assert ref.get() == 20


@pytest.mark.parametrize("sequence", [(1, 2), "ab", range(2)])
def test_reference_into_immutable_sequence_is_read_only(sequence):
    ref = SequenceRange(sequence).begin().ref()

    assert not ref.writable
    assert ref.get() == sequence[0]
    with pytest.raises(ReadOnlyReferenceError):
        ref.set(sequence[1])


def test_end_tracks_appends():
    values = [1]
    seq = SequenceRange(values)
    values.append(2)

    assert seq.begin().distance_to(seq.end()) == 2


def test_dereferencing_past_the_end_raises_index_error():
    end = SequenceRange([1, 2]).end()

    with pytest.raises(IndexError):
        end.get()
