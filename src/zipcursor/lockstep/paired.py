"""Paired range: a sliding window of (current, next) over one sequence.

Usage:
    for previous, current in PairedRange([1, 2, 4, 8]):
        print(current - previous)   # 1, 2, 4

Built from the same combined cursor as Zip, over two cursors into the same
sequence offset by one position.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from loguru import logger

from zipcursor.config import ZipSettings, get_settings
from zipcursor.core.capability import Capability, capability_of, is_multipass, supports
from zipcursor.core.errors import CapabilityError
from zipcursor.core.probe import has_size
from zipcursor.core.types import Ownership
from zipcursor.cursors.operations import walk
from zipcursor.lockstep.iterator import ZipIterator, class_for
from zipcursor.lockstep.slots import Slot, Source, make_slot


class PairedRange[T]:
    """Adjacent pairs of a single sequence.

    Args:
        source: Sequence, iterable or cursor range; may be wrapped in
            Owned(...) or Borrowed(...).
        settings: Defaults for ownership and buffering.

    Raises:
        CapabilityError: If the source is single-pass, since two cursors
            cannot share one pass.
    """

    def __init__(self, source: Source[T], *, settings: ZipSettings | None = None):
        settings = settings or get_settings()
        self._slot: Slot = make_slot(
            source,
            default=settings.default_ownership,
            deep_copy=settings.deep_copy_owned,
            buffer_iterators=settings.buffer_iterators,
        )
        tag = capability_of(self._slot.range.begin())
        if not is_multipass(tag):
            raise CapabilityError(f"PairedRange needs a multi-pass sequence, got {tag.value}")
        self._capability = tag
        self._iterator_cls = class_for(tag)
        logger.debug(f"PairedRange built: capability={tag.value}")

    @property
    def capability(self) -> Capability:
        return self._iterator_cls.capability

    @property
    def container(self) -> Any:
        """The traversed sequence (private copy when owned)."""
        return self._slot.container

    @property
    def ownership(self) -> Ownership:
        return self._slot.ownership

    def begin(self) -> ZipIterator[T, T]:
        """Combined cursor at (first, second)."""
        first, last = self._slot.range.begin(), self._slot.range.end()
        if first == last:
            return self._iterator_cls._wrap((last, last))
        return self._iterator_cls._wrap((first, first.advanced()))

    def end(self) -> ZipIterator[T, T]:
        """Combined cursor at (last element, end).

        Bidirectional ranges step back from the end; forward-only ranges
        walk from the start to find the last element.
        """
        first, last = self._slot.range.begin(), self._slot.range.end()
        if first == last:
            return self._iterator_cls._wrap((last, last))
        if supports(self._capability, Capability.BIDIRECTIONAL):
            return self._iterator_cls._wrap((last.retreated(), last))
        cursor = first
        while (following := cursor.advanced()) != last:
            cursor = following
        return self._iterator_cls._wrap((cursor, last))

    def __iter__(self) -> Iterator[tuple[T, T]]:
        return walk(self.begin(), self.end())

    def __length_hint__(self) -> int:
        if not has_size(self._slot.range):
            return NotImplemented
        return max(len(self._slot.range) - 1, 0)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"PairedRange({self._slot.ownership.value}:{type(self._slot.container).__name__})"
