"""Lockstep models: traits of a combined cursor and its reference tuple."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from zipcursor.core.capability import Capability
from zipcursor.cursors.protocol import Reference


@dataclass(slots=True, frozen=True)
class ZipTraits:
    """Statically fixed description of a combined cursor.

    Attributes:
        capability: Weakest capability among the components; the capability
            the combined cursor advertises.
        components: Capability of each component, in argument order.
    """

    capability: Capability
    components: tuple[Capability, ...]

    @property
    def arity(self) -> int:
        return len(self.components)


class TupleReference:
    """Reference tuple viewed as a single reference.

    Lets a combined cursor satisfy the Cursor protocol, so zips can nest.
    """

    __slots__ = ("_refs",)

    def __init__(self, refs: Iterable[Reference[Any]]):
        self._refs = tuple(refs)

    @property
    def refs(self) -> tuple[Reference[Any], ...]:
        return self._refs

    @property
    def writable(self) -> bool:
        return all(r.writable for r in self._refs)

    def get(self) -> tuple[Any, ...]:
        return tuple(r.get() for r in self._refs)

    def set(self, value: tuple[Any, ...]) -> None:
        values = tuple(value)
        if len(values) != len(self._refs):
            raise ValueError(f"Expected {len(self._refs)} values, got {len(values)}")
        for ref, item in zip(self._refs, values, strict=True):
            ref.set(item)

    def __repr__(self) -> str:
        return f"TupleReference({self._refs!r})"
