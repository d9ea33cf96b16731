"""Core functionalities: stateless capability and probe primitives.

Architecture Note:
    core/ contains pure, stateless functionalities with no runtime state.
    Cursor protocols and adapters live in cursors/; the combined cursor and
    the zip adapter live in lockstep/.
"""

from zipcursor.core.capability import (
    Capability,
    Rank,
    capability_of,
    is_multipass,
    rank_of,
    require,
    supports,
    tag_of,
    weakest,
)
from zipcursor.core.errors import (
    CapabilityError,
    CursorInvalidatedError,
    CursorProtocolError,
    LengthMismatchError,
    NotASequenceError,
    ReadOnlyReferenceError,
    ZipCursorError,
)
from zipcursor.core.probe import HasCursors, HasSize, SequenceFeatures, has_size, probe
from zipcursor.core.types import LengthPolicy, Ownership

__all__ = [
    # Types
    "LengthPolicy",
    "Ownership",
    # Capability
    "Capability",
    "Rank",
    "rank_of",
    "tag_of",
    "weakest",
    "supports",
    "is_multipass",
    "capability_of",
    "require",
    # Probe
    "HasSize",
    "HasCursors",
    "SequenceFeatures",
    "has_size",
    "probe",
    # Errors
    "ZipCursorError",
    "CapabilityError",
    "CursorProtocolError",
    "NotASequenceError",
    "LengthMismatchError",
    "ReadOnlyReferenceError",
    "CursorInvalidatedError",
]
