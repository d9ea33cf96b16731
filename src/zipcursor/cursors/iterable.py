"""Cursors over plain (possibly one-shot) iterables.

A shared buffer pulls items lazily from the iterator. Buffered ranges keep
every pulled item, so their cursors are multi-pass (FORWARD). Unbuffered
ranges release items as soon as a cursor moves past them, so their cursors
are single-pass (INPUT).

Usage:
    lines = IterableRange(open("data.txt"))                 # FORWARD
    stream = IterableRange(sensor_readings(), buffered=False)  # INPUT
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator
from typing import Any, ClassVar

from zipcursor.core.capability import Capability
from zipcursor.core.errors import CursorInvalidatedError, ReadOnlyReferenceError


class _Buffer[T]:
    """Lazily pulled window over an iterator, indexed by absolute position."""

    def __init__(self, iterable: Iterable[T], *, keep_history: bool):
        self._iterator: Iterator[T] = iter(iterable)
        self._items: list[T] = []
        self._base = 0  # Absolute position of _items[0]
        self._exhausted = False
        self._keep_history = keep_history

    def has(self, index: int) -> bool:
        """Check whether position `index` holds an item, pulling as needed."""
        if index < self._base:
            return True
        while index >= self._base + len(self._items) and not self._exhausted:
            try:
                self._items.append(next(self._iterator))
            except StopIteration:
                self._exhausted = True
        return index < self._base + len(self._items)

    def item(self, index: int) -> T:
        if index < self._base:
            raise CursorInvalidatedError(
                f"Position {index} of a single-pass iterable was already consumed"
            )
        if not self.has(index):
            raise IndexError(f"Position {index} is past the end of the iterable")
        return self._items[index - self._base]

    def release(self, index: int) -> None:
        """Drop every item before `index` (no-op when history is kept)."""
        if self._keep_history:
            return
        # Items before index must be pulled so the iterator stays aligned
        self.has(index - 1)
        drop = min(index - self._base, len(self._items))
        if drop > 0:
            del self._items[:drop]
            self._base += drop


class ValueReference[T]:
    """Read-only reference to a value pulled from an iterable."""

    __slots__ = ("_value",)

    def __init__(self, value: T):
        self._value = value

    @property
    def writable(self) -> bool:
        return False

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        raise ReadOnlyReferenceError("Values pulled from an iterable cannot be written back")

    def __repr__(self) -> str:
        return f"ValueReference({self._value!r})"


class _IterableCursor[T]:
    """Position into a _Buffer. index=None marks the end."""

    __slots__ = ("_buffer", "_index")

    capability: ClassVar[Capability]

    def __init__(self, buffer: _Buffer[T], index: int | None):
        self._buffer = buffer
        self._index = index

    @property
    def index(self) -> int | None:
        return self._index

    def get(self) -> T:
        if self._index is None:
            raise IndexError("Cannot dereference the end cursor")
        return self._buffer.item(self._index)

    def ref(self) -> ValueReference[T]:
        return ValueReference(self.get())

    def advanced(self) -> Any:
        if self._index is None:
            raise IndexError("Cannot advance the end cursor")
        return type(self)(self._buffer, self._index + 1)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, _IterableCursor):
            return NotImplemented
        if other._buffer is not self._buffer:
            return False
        if self._index is None and other._index is None:
            return True
        if self._index is None:
            return not self._buffer.has(other._index)  # type: ignore[arg-type]
        if other._index is None:
            return not self._buffer.has(self._index)
        return self._index == other._index

    # End equality depends on how much of the iterator is pulled
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        position = "end" if self._index is None else self._index
        return f"{type(self).__name__}({position})"


class BufferedCursor[T](_IterableCursor[T]):
    """Multi-pass cursor over a buffered iterable."""

    __slots__ = ()

    capability: ClassVar[Capability] = Capability.FORWARD


class InputCursor[T](_IterableCursor[T]):
    """Single-pass cursor: advancing releases every earlier position."""

    __slots__ = ()

    capability: ClassVar[Capability] = Capability.INPUT

    def advanced(self) -> InputCursor[T]:
        moved = super().advanced()
        self._buffer.release(moved.index)
        return moved


class IterableRange[T]:
    """Cursor range over a plain iterable.

    The iterable is consumed lazily, once, no matter how many cursors walk it.

    Args:
        iterable: Source of items; iter() is called on it exactly once.
        buffered: Keep pulled items for multi-pass traversal (FORWARD);
            when False, cursors are single-pass (INPUT).
    """

    def __init__(self, iterable: Iterable[T], *, buffered: bool = True):
        self._source = iterable
        self._buffered = buffered
        self._buffer: _Buffer[T] = _Buffer(iterable, keep_history=buffered)

    @property
    def source(self) -> Iterable[T]:
        """The iterable this range was built from."""
        return self._source

    @property
    def buffered(self) -> bool:
        return self._buffered

    def _cursor(self, index: int | None) -> _IterableCursor[T]:
        if self._buffered:
            return BufferedCursor(self._buffer, index)
        return InputCursor(self._buffer, index)

    def begin(self) -> _IterableCursor[T]:
        return self._cursor(0)

    def end(self) -> _IterableCursor[T]:
        return self._cursor(None)

    def __copy__(self) -> IterableRange[T]:
        """Range over a copy of the source; a one-shot iterator source is shared."""
        if isinstance(self._source, Iterator):
            return self
        return IterableRange(copy.copy(self._source), buffered=self._buffered)

    def __deepcopy__(self, memo: dict[int, Any]) -> IterableRange[T]:
        if isinstance(self._source, Iterator):
            return self
        return IterableRange(copy.deepcopy(self._source, memo), buffered=self._buffered)

    def __repr__(self) -> str:
        mode = "buffered" if self._buffered else "single-pass"
        return f"IterableRange({type(self._source).__name__}, {mode})"
