"""Lockstep traversal: combined cursors, the Zip adapter, and paired ranges.

Architecture Note:
    lockstep/ composes the stateless pieces of core/ and cursors/. A Zip
    holds sequences (owned or borrowed); its combined cursors only hold
    positions into them.
"""

from zipcursor.lockstep.adapter import Zip
from zipcursor.lockstep.iterator import (
    BidirectionalZipIterator,
    RandomAccessZipIterator,
    ZipIterator,
    class_for,
)
from zipcursor.lockstep.models import TupleReference, ZipTraits
from zipcursor.lockstep.paired import PairedRange
from zipcursor.lockstep.slots import Borrowed, Owned, Slot, Source, make_slot, take_ownership

__all__ = [
    # Models
    "ZipTraits",
    "TupleReference",
    # Combined cursors
    "ZipIterator",
    "BidirectionalZipIterator",
    "RandomAccessZipIterator",
    "class_for",
    # Slots
    "Owned",
    "Borrowed",
    "Slot",
    "Source",
    "make_slot",
    "take_ownership",
    # Adapters
    "Zip",
    "PairedRange",
]
