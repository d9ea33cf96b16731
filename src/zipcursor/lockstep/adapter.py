"""Zip adapter: N sequences traversed as one sequence of tuples.

Usage:
    numbers = [1, 2, 3]
    for n, f in Zip(numbers, [1.0, 2.0, 3.0]):
        ...

    z = Zip(Owned(numbers), names)
    z.capability                 # weakest capability of the inputs
    z.end().retreated().get()    # only if every input is BIDIRECTIONAL
    z.containers()[0][0] = 99    # edits the zip's private copy, not numbers
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeVar, overload

from loguru import logger

from zipcursor.config import ZipSettings, get_settings
from zipcursor.core.capability import (
    Capability,
    capability_of,
    is_multipass,
    require,
    weakest,
)
from zipcursor.core.errors import LengthMismatchError
from zipcursor.core.probe import has_size
from zipcursor.core.types import LengthPolicy, Ownership
from zipcursor.cursors.operations import next_cursor, walk_backward
from zipcursor.lockstep.iterator import ZipIterator, class_for
from zipcursor.lockstep.models import ZipTraits
from zipcursor.lockstep.slots import Slot, Source, make_slot

T1 = TypeVar("T1")
T2 = TypeVar("T2")
T3 = TypeVar("T3")
T4 = TypeVar("T4")


class Zip[*Ts]:
    """Owns or borrows N sequences and exposes begin/end combined cursors.

    Each argument is wrapped in Owned(...) or Borrowed(...), or passed bare to
    take the configured default ownership (BORROWED unless configured
    otherwise). Ownership and capability are fixed at construction.

    Args:
        *sources: One or more sequences, iterables, or cursor ranges.
        length_policy: Overrides settings.length_policy.
        settings: Defaults for ownership, buffering and length policy.

    Raises:
        TypeError: If no sources are given.
        NotASequenceError: If a source cannot be traversed.
        LengthMismatchError: Under STRICT, if sized sources differ in length.
    """

    @overload
    def __init__(
        self: Zip[T1],
        s1: Source[T1],
        /,
        *,
        length_policy: LengthPolicy | None = None,
        settings: ZipSettings | None = None,
    ) -> None: ...

    @overload
    def __init__(
        self: Zip[T1, T2],
        s1: Source[T1],
        s2: Source[T2],
        /,
        *,
        length_policy: LengthPolicy | None = None,
        settings: ZipSettings | None = None,
    ) -> None: ...

    @overload
    def __init__(
        self: Zip[T1, T2, T3],
        s1: Source[T1],
        s2: Source[T2],
        s3: Source[T3],
        /,
        *,
        length_policy: LengthPolicy | None = None,
        settings: ZipSettings | None = None,
    ) -> None: ...

    @overload
    def __init__(
        self: Zip[T1, T2, T3, T4],
        s1: Source[T1],
        s2: Source[T2],
        s3: Source[T3],
        s4: Source[T4],
        /,
        *,
        length_policy: LengthPolicy | None = None,
        settings: ZipSettings | None = None,
    ) -> None: ...

    @overload
    def __init__(
        self: Zip[*tuple[Any, ...]],
        *sources: Source[Any],
        length_policy: LengthPolicy | None = None,
        settings: ZipSettings | None = None,
    ) -> None: ...

    def __init__(
        self,
        *sources: Source[Any],
        length_policy: LengthPolicy | None = None,
        settings: ZipSettings | None = None,
    ) -> None:
        if not sources:
            raise TypeError("Zip requires at least one sequence")

        settings = settings or get_settings()
        self._settings = settings
        self._policy = length_policy or settings.length_policy
        self._slots: tuple[Slot, ...] = tuple(
            make_slot(
                source,
                default=settings.default_ownership,
                deep_copy=settings.deep_copy_owned,
                buffer_iterators=settings.buffer_iterators,
            )
            for source in sources
        )

        components = tuple(capability_of(slot.range.begin()) for slot in self._slots)
        self._traits = ZipTraits(capability=weakest(*components), components=components)
        self._iterator_cls = class_for(self._traits.capability)

        sizes = self._sizes()
        if sizes is not None and len(set(sizes)) > 1:
            if self._policy is LengthPolicy.STRICT:
                raise LengthMismatchError(f"Zip sequences differ in length: {sizes}")
            logger.debug(f"Zip truncates to shortest sequence: lengths {sizes}")

        logger.debug(
            f"Zip built: arity={self.arity}, capability={self._traits.capability.value}, "
            f"policy={self._policy.value}"
        )

    # Properties

    @property
    def arity(self) -> int:
        return len(self._slots)

    @property
    def capability(self) -> Capability:
        """Capability the combined cursors advertise."""
        return self._traits.capability

    @property
    def traits(self) -> ZipTraits:
        return self._traits

    @property
    def length_policy(self) -> LengthPolicy:
        return self._policy

    # Cursor access

    def begin(self) -> ZipIterator[*Ts]:
        """Combined cursor at the first element tuple."""
        return self._iterator_cls._wrap(tuple(slot.range.begin() for slot in self._slots))

    def end(self) -> ZipIterator[*Ts]:
        """Combined cursor one past the last element tuple.

        Under SHORTEST the end is aligned across every component, so full
        equality and end().retreated() hold and the zip nests inside another
        zip. Sized inputs jump (or step) to the shortest length; unsized
        multi-pass inputs are walked once from the start. Under STRICT, and
        for single-pass inputs that cannot be walked ahead, it is each
        input's own end.
        """
        if self._policy is LengthPolicy.SHORTEST and not self._ends_aligned():
            shortest = self.size()
            if shortest is not None:
                return next_cursor(self.begin(), shortest)
            if all(is_multipass(tag) for tag in self._traits.components):
                return self._stop()
        return self._ends()

    def _ends(self) -> ZipIterator[*Ts]:
        return self._iterator_cls._wrap(tuple(slot.range.end() for slot in self._slots))

    def _ends_aligned(self) -> bool:
        sizes = self._sizes()
        return sizes is not None and len(set(sizes)) == 1

    def containers(self) -> tuple[Any, ...]:
        """The zipped sequences, in argument order.

        Owned slots yield the zip's private copy; borrowed slots yield the
        caller's own object.
        """
        return tuple(slot.container for slot in self._slots)

    def ownership(self) -> tuple[Ownership, ...]:
        """Ownership of each slot, in argument order."""
        return tuple(slot.ownership for slot in self._slots)

    # Copying

    def _reowned(self, *, deep: bool) -> Zip[*Ts]:
        new = object.__new__(type(self))
        new._settings = self._settings
        new._policy = self._policy
        new._slots = tuple(slot.owned_copy(deep=deep) for slot in self._slots)
        new._traits = self._traits
        new._iterator_cls = self._iterator_cls
        return new

    def __copy__(self) -> Zip[*Ts]:
        """Zip that owns a copy of every slot, borrowed ones included."""
        return self._reowned(deep=self._settings.deep_copy_owned)

    def __deepcopy__(self, memo: dict[int, Any]) -> Zip[*Ts]:
        return self._reowned(deep=True)

    # Sizes

    def _sizes(self) -> tuple[int, ...] | None:
        if not all(has_size(slot.range) for slot in self._slots):
            return None
        return tuple(len(slot.range) for slot in self._slots)  # type: ignore[arg-type]

    def size(self) -> int | None:
        """Number of element tuples, or None when some input is unsized."""
        sizes = self._sizes()
        if sizes is None:
            return None
        return min(sizes)

    def __length_hint__(self) -> int:
        size = self.size()
        return NotImplemented if size is None else size

    # Iteration

    def _finished(self, cursor: ZipIterator[*Ts], end: ZipIterator[*Ts]) -> bool:
        hits = cursor.matches(end)
        if all(hits):
            return True
        if not any(hits):
            return False
        if self._policy is LengthPolicy.STRICT:
            exhausted = [i for i, hit in enumerate(hits) if hit]
            raise LengthMismatchError(
                f"Zip sequences differ in length: sequence(s) {exhausted} ended first"
            )
        return True

    def _stop(self) -> ZipIterator[*Ts]:
        """Position where iteration stops, found by walking from begin()."""
        end = self._ends()
        cursor = self.begin()
        while not self._finished(cursor, end):
            cursor = cursor.advanced()
        return cursor

    def __iter__(self) -> Iterator[tuple[*Ts]]:
        cursor, end = self.begin(), self._ends()
        while not self._finished(cursor, end):
            yield cursor.get()
            cursor = cursor.advanced()

    def __reversed__(self) -> Iterator[tuple[*Ts]]:
        """Element tuples from last to first.

        Raises:
            CapabilityError: If some input cannot retreat.
            LengthMismatchError: Under STRICT, if the inputs differ in length.
        """
        require(self.begin(), Capability.BIDIRECTIONAL, "reversed(Zip)")
        last = self.end() if self._policy is LengthPolicy.SHORTEST else self._stop()
        return walk_backward(self.begin(), last)

    def __repr__(self) -> str:
        slots = ", ".join(
            f"{slot.ownership.value}:{type(slot.container).__name__}" for slot in self._slots
        )
        return f"Zip({slots}; {self.capability.value}, {self._policy.value})"
