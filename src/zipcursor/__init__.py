"""zipcursor: lockstep traversal of heterogeneous sequences.

Usage:
    from zipcursor import Zip, Owned, Capability

    numbers = [1, 2, 3]
    for n, f in Zip(numbers, (1.0, 2.0, 3.0)):
        print(n, f)

    z = Zip(Owned(numbers), "abc")
    z.capability is Capability.RANDOM_ACCESS
    z.end().retreated().get()   # (3, "c")
"""

__version__ = "0.1.0"

# Core primitives
from zipcursor.core import (
    Capability,
    CapabilityError,
    CursorInvalidatedError,
    CursorProtocolError,
    LengthMismatchError,
    LengthPolicy,
    NotASequenceError,
    Ownership,
    Rank,
    ReadOnlyReferenceError,
    ZipCursorError,
    has_size,
    probe,
    rank_of,
    tag_of,
    weakest,
)

# Configuration
from zipcursor.config import ZipSettings, get_settings

# Cursors
from zipcursor.cursors import (
    CursorRange,
    IterableRange,
    SequenceRange,
    as_range,
    distance,
    next_cursor,
    prev_cursor,
    walk,
    walk_backward,
)

# Lockstep traversal
from zipcursor.lockstep import (
    BidirectionalZipIterator,
    Borrowed,
    Owned,
    PairedRange,
    RandomAccessZipIterator,
    Zip,
    ZipIterator,
    ZipTraits,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Capability",
    "Rank",
    "rank_of",
    "tag_of",
    "weakest",
    "has_size",
    "probe",
    "Ownership",
    "LengthPolicy",
    # Errors
    "ZipCursorError",
    "CapabilityError",
    "CursorProtocolError",
    "NotASequenceError",
    "LengthMismatchError",
    "ReadOnlyReferenceError",
    "CursorInvalidatedError",
    # Config
    "ZipSettings",
    "get_settings",
    # Cursors
    "CursorRange",
    "SequenceRange",
    "IterableRange",
    "as_range",
    "next_cursor",
    "prev_cursor",
    "distance",
    "walk",
    "walk_backward",
    # Lockstep
    "Zip",
    "PairedRange",
    "Owned",
    "Borrowed",
    "ZipIterator",
    "BidirectionalZipIterator",
    "RandomAccessZipIterator",
    "ZipTraits",
]
