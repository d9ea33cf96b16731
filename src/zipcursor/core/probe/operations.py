"""Feature detection for zip sources."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Reversible, Sequence
from typing import Any, get_origin

from zipcursor.core.probe.models import HasCursors, HasSize, SequenceFeatures


def _as_class(obj: Any) -> type | None:
    """Resolve classes and generic aliases (list[int]) to a class, else None."""
    origin = get_origin(obj)
    if isinstance(origin, type):
        return origin
    if isinstance(obj, type):
        return obj
    return None


def _conforms(obj: Any, protocol: type) -> bool:
    cls = _as_class(obj)
    if cls is not None:
        return issubclass(cls, protocol)
    return isinstance(obj, protocol)


def has_size(obj: Any) -> bool:
    """Check whether a type (or instance) exposes an element count.

    Detection is structural: `__len__` is looked up, never called.

    Args:
        obj: A class, a generic alias such as list[int], or an instance.

    Returns:
        True if len() is defined for it, False otherwise.
    """
    return _conforms(obj, HasSize)


def probe(obj: Any) -> SequenceFeatures:
    """Detect every feature of a zip source at once.

    Args:
        obj: A class, a generic alias, or an instance.

    Returns:
        SequenceFeatures describing what the source offers.
    """
    return SequenceFeatures(
        sized=has_size(obj),
        indexable=_conforms(obj, Sequence),
        mutable=_conforms(obj, MutableSequence),
        reversible=_conforms(obj, Reversible),
        iterable=_conforms(obj, Iterable),
        cursor_range=_conforms(obj, HasCursors),
    )
