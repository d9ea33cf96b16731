"""Generic cursor algorithms.

These work on any cursor, combined cursors included, and dispatch on the
capability the cursor's class declares: random-access cursors jump, weaker
ones step. Algorithms that need a capability the cursor lacks raise
CapabilityError before touching it.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeVar

from zipcursor.core.capability import Capability, capability_of, require, supports
from zipcursor.core.errors import NotASequenceError
from zipcursor.core.probe import probe
from zipcursor.cursors.iterable import IterableRange
from zipcursor.cursors.protocol import CursorRange
from zipcursor.cursors.sequence import SequenceRange

C = TypeVar("C")


def _random_access(cursor: Any) -> bool:
    return supports(capability_of(cursor), Capability.RANDOM_ACCESS)


def next_cursor(cursor: C, n: int = 1) -> C:
    """Cursor n positions forward.

    Args:
        cursor: Starting cursor (left untouched).
        n: Number of positions; negative moves backward.

    Returns:
        The moved cursor.

    Raises:
        CapabilityError: If n is negative and the cursor cannot retreat.
    """
    if n < 0:
        return prev_cursor(cursor, -n)
    if _random_access(cursor):
        return cursor.offset(n)  # type: ignore[attr-defined]
    for _ in range(n):
        cursor = cursor.advanced()  # type: ignore[attr-defined]
    return cursor


def prev_cursor(cursor: C, n: int = 1) -> C:
    """Cursor n positions backward.

    Args:
        cursor: Starting cursor (left untouched).
        n: Number of positions; negative moves forward.

    Returns:
        The moved cursor.

    Raises:
        CapabilityError: If the cursor is not at least BIDIRECTIONAL.
    """
    require(cursor, Capability.BIDIRECTIONAL, "prev_cursor")
    if n < 0:
        return next_cursor(cursor, -n)
    if _random_access(cursor):
        return cursor.offset(-n)  # type: ignore[attr-defined]
    for _ in range(n):
        cursor = cursor.retreated()  # type: ignore[attr-defined]
    return cursor


def distance(first: Any, last: Any) -> int:
    """Number of advances from first to last.

    Constant time for random-access cursors, linear otherwise. For weaker
    cursors last must be reachable from first.
    """
    if _random_access(first) and _random_access(last):
        return first.distance_to(last)
    count = 0
    while first != last:
        first = first.advanced()
        count += 1
    return count


def walk(first: Any, last: Any) -> Iterator[Any]:
    """Yield the dereferenced values in [first, last)."""
    while first != last:
        yield first.get()
        first = first.advanced()


def walk_backward(first: Any, last: Any) -> Iterator[Any]:
    """Yield the dereferenced values in [first, last), last to first.

    Raises:
        CapabilityError: If the cursors are not at least BIDIRECTIONAL.
    """
    require(last, Capability.BIDIRECTIONAL, "walk_backward")
    return _walk_backward(first, last)


def _walk_backward(first: Any, last: Any) -> Iterator[Any]:
    while last != first:
        last = last.retreated()
        yield last.get()


def as_range(source: Any, *, buffer_iterators: bool = True) -> CursorRange[Any]:
    """Wrap a zip source in a cursor range.

    - Objects with begin()/end() -> used as is
    - Sequences -> SequenceRange (RANDOM_ACCESS)
    - Other iterables -> IterableRange (FORWARD, or INPUT when not buffered)

    Args:
        source: Object to traverse.
        buffer_iterators: Whether plain iterables get multi-pass cursors.

    Returns:
        A cursor range over source.

    Raises:
        NotASequenceError: If source offers no way to traverse it.
    """
    features = probe(source)
    if features.cursor_range:
        return source
    if features.indexable:
        return SequenceRange(source)
    if features.iterable:
        return IterableRange(source, buffered=buffer_iterators)
    raise NotASequenceError(f"{type(source).__name__} is not a sequence, iterable, or cursor range")
