"""Probe models: structural protocols and the feature record.

Probes only inspect types; they never call the probed methods.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HasSize(Protocol):
    """Exposes an element count."""

    def __len__(self) -> int: ...


@runtime_checkable
class HasCursors(Protocol):
    """Exposes begin/end cursor access."""

    def begin(self) -> Any: ...
    def end(self) -> Any: ...


@dataclass(slots=True, frozen=True)
class SequenceFeatures:
    """What a zip source offers, as detected by probe()."""

    sized: bool
    indexable: bool
    mutable: bool
    reversible: bool
    iterable: bool
    cursor_range: bool

    @property
    def zippable(self) -> bool:
        """Whether a cursor range can be built over the source."""
        return self.cursor_range or self.indexable or self.iterable
