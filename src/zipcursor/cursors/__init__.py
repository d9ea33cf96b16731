"""Cursor functionality: protocols, default ranges, and generic algorithms."""

from zipcursor.cursors.iterable import (
    BufferedCursor,
    InputCursor,
    IterableRange,
    ValueReference,
)
from zipcursor.cursors.operations import (
    as_range,
    distance,
    next_cursor,
    prev_cursor,
    walk,
    walk_backward,
)
from zipcursor.cursors.protocol import (
    BidirectionalCursor,
    Cursor,
    CursorRange,
    RandomAccessCursor,
    Reference,
)
from zipcursor.cursors.sequence import IndexCursor, ItemReference, SequenceRange

__all__ = [
    # Protocols
    "Reference",
    "Cursor",
    "BidirectionalCursor",
    "RandomAccessCursor",
    "CursorRange",
    # Ranges
    "SequenceRange",
    "IndexCursor",
    "ItemReference",
    "IterableRange",
    "BufferedCursor",
    "InputCursor",
    "ValueReference",
    # Operations
    "as_range",
    "next_cursor",
    "prev_cursor",
    "distance",
    "walk",
    "walk_backward",
]
