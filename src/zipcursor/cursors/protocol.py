"""Cursor protocols for swappable sequence providers.

The cursor layer abstracts positions into sequences, enabling:
- Random access over Python sequences (default)
- Multi-pass and single-pass traversal of plain iterables
- Any user collection that hands out its own cursors

Usage:
    class Node:
        capability = Capability.BIDIRECTIONAL
        def get(self): ...
        def ref(self): ...
        def advanced(self): ...
        def retreated(self): ...

    class LinkedList:
        def begin(self): ...
        def end(self): ...

Cursors are immutable values: moving one returns a new cursor.
"""

from __future__ import annotations

from typing import Any, ClassVar, Protocol, Self, runtime_checkable

from zipcursor.core.capability import Capability


@runtime_checkable
class Reference[T](Protocol):
    """Handle onto one storage location."""

    @property
    def writable(self) -> bool:
        """Whether set() writes through to the storage."""
        ...

    def get(self) -> T:
        """Read the current value."""
        ...

    def set(self, value: T) -> None:
        """Write a value through to the storage."""
        ...


class Cursor[T](Protocol):
    """Position into a sequence. Advance-only unless a subprotocol says otherwise."""

    capability: ClassVar[Capability]

    def get(self) -> T:
        """Dereference the position."""
        ...

    def ref(self) -> Reference[T]:
        """Reference to the storage at the position."""
        ...

    def advanced(self) -> Self:
        """Cursor one position further."""
        ...

    def __eq__(self, other: Any) -> bool:
        """Same sequence, same position."""
        ...


class BidirectionalCursor[T](Cursor[T], Protocol):
    """Cursor that can also step backward."""

    def retreated(self) -> Self:
        """Cursor one position back."""
        ...


class RandomAccessCursor[T](BidirectionalCursor[T], Protocol):
    """Cursor with constant-time jumps and distances."""

    def offset(self, n: int) -> Self:
        """Cursor n positions away (negative n moves backward)."""
        ...

    def distance_to(self, other: Self) -> int:
        """Number of advances from this cursor to other."""
        ...


@runtime_checkable
class CursorRange[T](Protocol):
    """Sequence provider exposing begin/end cursors."""

    def begin(self) -> Cursor[T]:
        """Cursor at the first element."""
        ...

    def end(self) -> Cursor[T]:
        """Cursor one past the last element."""
        ...
