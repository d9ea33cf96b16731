"""Pure functions over capability tags.

The weakest capability of a composite is the strongest one that every
component supports. A combined cursor may only advertise that capability.
"""

from __future__ import annotations

from typing import Any

from zipcursor.core.capability.models import Capability, Rank
from zipcursor.core.errors import CapabilityError, CursorProtocolError

_RANKS: dict[Capability, Rank] = {
    Capability.INPUT: Rank.FORWARD,
    Capability.OUTPUT: Rank.FORWARD,
    Capability.FORWARD: Rank.FORWARD,
    Capability.BIDIRECTIONAL: Rank.BIDIRECTIONAL,
    Capability.RANDOM_ACCESS: Rank.RANDOM_ACCESS,
}

_TAGS: dict[Rank, Capability] = {
    Rank.FORWARD: Capability.FORWARD,
    Rank.BIDIRECTIONAL: Capability.BIDIRECTIONAL,
    Rank.RANDOM_ACCESS: Capability.RANDOM_ACCESS,
}


def rank_of(tag: Capability) -> Rank:
    """Map a capability tag onto its rank.

    Args:
        tag: Capability to rank.

    Returns:
        Rank.FORWARD for INPUT, OUTPUT and FORWARD; BIDIRECTIONAL and
        RANDOM_ACCESS map to their own ranks.

    Raises:
        TypeError: If tag is not a Capability.
    """
    if not isinstance(tag, Capability):
        raise TypeError(f"Expected Capability, got {type(tag).__name__}")
    return _RANKS[tag]


def tag_of(rank: int) -> Capability:
    """Map a rank back onto a capability tag.

    Rank 1 always resolves to FORWARD, never to INPUT or OUTPUT: a composite
    over single-pass components is still advertised as multi-pass.

    Args:
        rank: One of 1, 2 or 3.

    Returns:
        The capability for that rank.

    Raises:
        ValueError: If rank is outside {1, 2, 3}.
    """
    try:
        return _TAGS[Rank(rank)]
    except ValueError:
        raise ValueError(f"No capability has rank {rank!r}") from None


def weakest(*tags: Capability) -> Capability:
    """Weakest common capability of a set of tags.

    Args:
        *tags: One or more capability tags.

    Returns:
        tag_of(min(rank_of(tag) for tag in tags)).

    Raises:
        TypeError: If called with no tags.
    """
    if not tags:
        raise TypeError("weakest() requires at least one capability")
    return tag_of(min(rank_of(tag) for tag in tags))


def supports(tag: Capability, required: Capability) -> bool:
    """Check whether a capability is at least as strong as another."""
    return rank_of(tag) >= rank_of(required)


def is_multipass(tag: Capability) -> bool:
    """Check whether cursors of this capability can be copied and re-traversed."""
    return tag not in (Capability.INPUT, Capability.OUTPUT)


def capability_of(cursor: Any) -> Capability:
    """Read the capability a cursor's class declares.

    Args:
        cursor: Cursor instance (or cursor class).

    Returns:
        The declared capability.

    Raises:
        CursorProtocolError: If no Capability is declared.
    """
    owner = cursor if isinstance(cursor, type) else type(cursor)
    tag = getattr(owner, "capability", None)
    if not isinstance(tag, Capability):
        raise CursorProtocolError(f"{owner.__name__} does not declare a cursor capability")
    return tag


def require(cursor: Any, required: Capability, operation: str) -> None:
    """Fail unless a cursor supports the capability an operation needs.

    Args:
        cursor: Cursor about to be used.
        required: Minimum capability for the operation.
        operation: Name of the operation, for the error message.

    Raises:
        CapabilityError: If the cursor is too weak.
    """
    tag = capability_of(cursor)
    if not supports(tag, required):
        raise CapabilityError(
            f"{operation} requires {required.value} cursors, "
            f"{type(cursor).__name__} is {tag.value}"
        )
