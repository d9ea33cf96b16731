"""Ownership slots: how a zip holds each of its sequences.

Usage:
    Zip(Owned(values), Borrowed(names), scores)  # scores uses the default

An owned slot holds a private copy made at construction, so nothing the zip
does through it is visible to the caller. A borrowed slot holds the caller's
object itself.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from zipcursor.core.errors import NotASequenceError
from zipcursor.core.probe import probe
from zipcursor.core.types import Ownership
from zipcursor.cursors.operations import as_range
from zipcursor.cursors.protocol import CursorRange


@dataclass(frozen=True, slots=True)
class Owned[T]:
    """Marks a source the zip should take ownership of."""

    sequence: T


@dataclass(frozen=True, slots=True)
class Borrowed[T]:
    """Marks a source the zip should only reference."""

    sequence: T


type Source[T] = Iterable[T] | CursorRange[T] | Owned[Any] | Borrowed[Any]
"""Anything a zip accepts as one of its arguments."""


@dataclass(frozen=True, slots=True)
class Slot:
    """One sequence of a zip, with the ownership fixed at construction.

    Attributes:
        ownership: OWNED or BORROWED.
        container: The object the zip traverses (private copy when owned).
        range: Cursor range over container.
        buffer_iterators: Whether a plain iterable container got multi-pass
            cursors.
    """

    ownership: Ownership
    container: Any
    range: CursorRange[Any]
    buffer_iterators: bool = True

    def owned_copy(self, *, deep: bool = False) -> Slot:
        """Owned slot over a private copy of this slot's container.

        An iterator container cannot be copied, so the copy keeps the same
        iterator and the same range (and with it, the items already pulled).
        """
        if isinstance(self.container, Iterator):
            return Slot(Ownership.OWNED, self.container, self.range, self.buffer_iterators)
        container = take_ownership(self.container, deep=deep)
        return Slot(
            ownership=Ownership.OWNED,
            container=container,
            range=as_range(container, buffer_iterators=self.buffer_iterators),
            buffer_iterators=self.buffer_iterators,
        )


def take_ownership(sequence: Any, *, deep: bool = False) -> Any:
    """Private copy of a sequence for an owned slot.

    Iterators are already transient and cannot be copied, so they are kept
    as is. Everything else goes through the copy protocol (__copy__ or
    __deepcopy__ where a collection defines one).

    Args:
        sequence: Object to own.
        deep: Copy elements too.

    Returns:
        The object the owned slot will hold.
    """
    if isinstance(sequence, Iterator):
        return sequence
    return copy.deepcopy(sequence) if deep else copy.copy(sequence)


def make_slot(
    source: Any,
    *,
    default: Ownership = Ownership.BORROWED,
    deep_copy: bool = False,
    buffer_iterators: bool = True,
) -> Slot:
    """Resolve one zip argument into a slot.

    Args:
        source: Owned(...), Borrowed(...), or a bare sequence.
        default: Ownership applied to bare sequences.
        deep_copy: Deep-copy owned sequences.
        buffer_iterators: Give plain iterables multi-pass cursors.

    Returns:
        Slot holding the container and its cursor range.

    Raises:
        NotASequenceError: If the source cannot be traversed.
    """
    if isinstance(source, Owned):
        ownership, sequence = Ownership.OWNED, source.sequence
    elif isinstance(source, Borrowed):
        ownership, sequence = Ownership.BORROWED, source.sequence
    else:
        ownership, sequence = default, source

    # Untraversable sources fail before anything is copied
    if not probe(sequence).zippable:
        raise NotASequenceError(
            f"{type(sequence).__name__} is not a sequence, iterable, or cursor range"
        )
    if ownership is Ownership.OWNED:
        sequence = take_ownership(sequence, deep=deep_copy)

    return Slot(
        ownership=ownership,
        container=sequence,
        range=as_range(sequence, buffer_iterators=buffer_iterators),
        buffer_iterators=buffer_iterators,
    )
