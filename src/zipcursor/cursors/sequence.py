"""Random-access cursors over Python sequences.

Usage:
    values = [1, 2, 3]
    seq = SequenceRange(values)
    cursor = seq.begin().offset(2)
    cursor.get()          # 3
    cursor.ref().set(30)  # values == [1, 2, 30]
"""

from __future__ import annotations

import copy
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass, field
from typing import Any, ClassVar

from zipcursor.core.capability import Capability
from zipcursor.core.errors import ReadOnlyReferenceError


@dataclass(frozen=True, slots=True, eq=False)
class ItemReference[T]:
    """Reference to one index of a sequence.

    Writable only when the sequence is a MutableSequence; tuples, strings
    and ranges yield read-only references.
    """

    sequence: Sequence[T] = field(repr=False)
    index: int

    @property
    def writable(self) -> bool:
        return isinstance(self.sequence, MutableSequence)

    def get(self) -> T:
        return self.sequence[self.index]

    def set(self, value: T) -> None:
        if not isinstance(self.sequence, MutableSequence):
            raise ReadOnlyReferenceError(
                f"{type(self.sequence).__name__} does not support item assignment"
            )
        self.sequence[self.index] = value


@dataclass(frozen=True, slots=True, eq=False)
class IndexCursor[T]:
    """Random-access cursor: a sequence plus an index.

    Two cursors are equal when they point into the same sequence object
    (identity, not equality) at the same index. Moving past either end is
    not checked; dereferencing there raises the sequence's own IndexError.
    """

    capability: ClassVar[Capability] = Capability.RANDOM_ACCESS

    sequence: Sequence[T] = field(repr=False)
    index: int = 0

    def get(self) -> T:
        return self.sequence[self.index]

    def ref(self) -> ItemReference[T]:
        return ItemReference(self.sequence, self.index)

    def advanced(self) -> IndexCursor[T]:
        return IndexCursor(self.sequence, self.index + 1)

    def retreated(self) -> IndexCursor[T]:
        return IndexCursor(self.sequence, self.index - 1)

    def offset(self, n: int) -> IndexCursor[T]:
        return IndexCursor(self.sequence, self.index + n)

    def distance_to(self, other: IndexCursor[T]) -> int:
        """Number of advances from this cursor to other.

        Raises:
            ValueError: If the cursors point into different sequences.
        """
        if other.sequence is not self.sequence:
            raise ValueError("Cannot measure distance between cursors of different sequences")
        return other.index - self.index

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, IndexCursor):
            return NotImplemented
        return self.sequence is other.sequence and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self.sequence), self.index))


class SequenceRange[T]:
    """Cursor range over any Sequence (list, tuple, str, range, deque, ...).

    Args:
        sequence: The sequence to traverse. It is referenced, never copied.
    """

    def __init__(self, sequence: Sequence[T]):
        self._sequence = sequence

    @property
    def sequence(self) -> Sequence[T]:
        """The underlying sequence."""
        return self._sequence

    def begin(self) -> IndexCursor[T]:
        return IndexCursor(self._sequence, 0)

    def end(self) -> IndexCursor[T]:
        return IndexCursor(self._sequence, len(self._sequence))

    def __len__(self) -> int:
        return len(self._sequence)

    def __copy__(self) -> SequenceRange[T]:
        """Range over a shallow copy of the sequence, so owning a range owns its storage."""
        return SequenceRange(copy.copy(self._sequence))

    def __deepcopy__(self, memo: dict[int, Any]) -> SequenceRange[T]:
        return SequenceRange(copy.deepcopy(self._sequence, memo))

    def __repr__(self) -> str:
        return f"SequenceRange({type(self._sequence).__name__}, len={len(self._sequence)})"
