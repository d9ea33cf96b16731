"""Combined cursor: N cursors moved in lockstep.

Usage:
    it = ZipIterator.of(SequenceRange([1, 2, 3]).begin(), SequenceRange("abc").begin())
    it.get()                # (1, "a")
    it.advanced().get()     # (2, "b")
    type(it)                # RandomAccessZipIterator

The class of a combined cursor is chosen from the weakest capability of its
components, so operations the components cannot all support are simply
absent: a ZipIterator built over a forward-only cursor has no retreated().
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, ClassVar, Self

from zipcursor.core.capability import Capability, capability_of, supports, weakest
from zipcursor.core.errors import CapabilityError
from zipcursor.lockstep.models import TupleReference, ZipTraits


@dataclass(frozen=True, eq=False)
class ZipIterator[*Ts]:
    """Forward combined cursor.

    Immutable - every movement returns a new combined cursor. The only state
    is the tuple of component cursors.
    """

    capability: ClassVar[Capability] = Capability.FORWARD

    cursors: tuple[Any, ...]

    def __init__(self, *cursors: Any):
        if not cursors:
            raise TypeError(f"{type(self).__name__} requires at least one cursor")
        tag = weakest(*(capability_of(c) for c in cursors))
        if not supports(tag, type(self).capability):
            raise CapabilityError(
                f"{type(self).__name__} needs {type(self).capability.value} components, "
                f"weakest component is {tag.value}"
            )
        object.__setattr__(self, "cursors", cursors)

    @classmethod
    def of(cls, *cursors: Any) -> ZipIterator[*Ts]:
        """Build the combined cursor class matching the weakest component."""
        if not cursors:
            raise TypeError("ZipIterator.of() requires at least one cursor")
        tag = weakest(*(capability_of(c) for c in cursors))
        return class_for(tag)._wrap(cursors)

    @classmethod
    def _wrap(cls, cursors: tuple[Any, ...]) -> Self:
        # Skips validation: callers already know the components fit cls
        new = object.__new__(cls)
        object.__setattr__(new, "cursors", cursors)
        return new

    @property
    def arity(self) -> int:
        return len(self.cursors)

    @property
    def traits(self) -> ZipTraits:
        return ZipTraits(
            capability=type(self).capability,
            components=tuple(capability_of(c) for c in self.cursors),
        )

    def advanced(self) -> Self:
        """Advance every component by one, in argument order, without end checks."""
        return self._wrap(tuple(c.advanced() for c in self.cursors))

    def get(self) -> tuple[*Ts]:
        """Dereference every component; nothing is cached."""
        return tuple(c.get() for c in self.cursors)  # type: ignore[return-value]

    def references(self) -> tuple[Any, ...]:
        """Reference tuple: one Reference per component, in argument order."""
        return tuple(c.ref() for c in self.cursors)

    def ref(self) -> TupleReference:
        return TupleReference(self.references())

    def assign(self, values: Iterable[Any]) -> None:
        """Write one value through each component's reference.

        Raises:
            ValueError: If the number of values differs from the arity.
            ReadOnlyReferenceError: If a component's storage is immutable.
        """
        self.ref().set(tuple(values))

    def matches(self, other: ZipIterator[*Ts]) -> tuple[bool, ...]:
        """Component-wise equality with another combined cursor."""
        if other.arity != self.arity:
            raise ValueError(f"Cannot compare arity {self.arity} with arity {other.arity}")
        return tuple(a == b for a, b in zip(self.cursors, other.cursors, strict=True))

    def meets(self, other: ZipIterator[*Ts]) -> bool:
        """True when any component equals its counterpart in other.

        Used to stop at the end of the shortest sequence.
        """
        return any(self.matches(other))

    def __eq__(self, other: Any) -> bool:
        """Equal only when every component pair is equal."""
        if not isinstance(other, ZipIterator):
            return NotImplemented
        return self.cursors == other.cursors

    def __hash__(self) -> int:
        """Hash of the cursor tuple.

        Raises:
            TypeError: If a component is unhashable, as cursors over plain
                iterables are.
        """
        for cursor in self.cursors:
            if type(cursor).__hash__ is None:
                raise TypeError(
                    f"{type(self).__name__} is unhashable: component "
                    f"{type(cursor).__name__} is unhashable"
                )
        return hash(self.cursors)

    def __repr__(self) -> str:
        inner = ", ".join(repr(c) for c in self.cursors)
        return f"{type(self).__name__}({inner})"


class BidirectionalZipIterator[*Ts](ZipIterator[*Ts]):
    """Combined cursor whose components can all retreat."""

    capability: ClassVar[Capability] = Capability.BIDIRECTIONAL

    def retreated(self) -> Self:
        """Retreat every component by one, in argument order."""
        return self._wrap(tuple(c.retreated() for c in self.cursors))


class RandomAccessZipIterator[*Ts](BidirectionalZipIterator[*Ts]):
    """Combined cursor with constant-time jumps, distances and ordering."""

    capability: ClassVar[Capability] = Capability.RANDOM_ACCESS

    def offset(self, n: int) -> Self:
        return self._wrap(tuple(c.offset(n) for c in self.cursors))

    def distance_to(self, other: RandomAccessZipIterator[*Ts]) -> int:
        """Advances from this cursor to other, measured on the first component.

        Components move in lockstep, so every component agrees.
        """
        return self.cursors[0].distance_to(other.cursors[0])

    def __add__(self, n: int) -> Self:
        if not isinstance(n, int):
            return NotImplemented
        return self.offset(n)

    __radd__ = __add__

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, int):
            return self.offset(-other)
        if isinstance(other, RandomAccessZipIterator):
            return other.distance_to(self)
        return NotImplemented

    def __getitem__(self, n: int) -> tuple[*Ts]:
        """Element tuple n positions away."""
        return self.offset(n).get()

    def __lt__(self, other: RandomAccessZipIterator[*Ts]) -> bool:
        return self.distance_to(other) > 0

    def __le__(self, other: RandomAccessZipIterator[*Ts]) -> bool:
        return self.distance_to(other) >= 0

    def __gt__(self, other: RandomAccessZipIterator[*Ts]) -> bool:
        return self.distance_to(other) < 0

    def __ge__(self, other: RandomAccessZipIterator[*Ts]) -> bool:
        return self.distance_to(other) <= 0


_CLASSES: dict[Capability, type[ZipIterator[Any]]] = {
    Capability.FORWARD: ZipIterator,
    Capability.BIDIRECTIONAL: BidirectionalZipIterator,
    Capability.RANDOM_ACCESS: RandomAccessZipIterator,
}


def class_for(tag: Capability) -> type[ZipIterator[Any]]:
    """Combined cursor class advertising a given (weakest) capability.

    Args:
        tag: Result of weakest(); INPUT and OUTPUT are never passed here
            since weakest() normalises them to FORWARD.

    Returns:
        ZipIterator, BidirectionalZipIterator or RandomAccessZipIterator.
    """
    return _CLASSES[tag]
