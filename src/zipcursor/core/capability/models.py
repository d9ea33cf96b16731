"""Capability models: traversal tags and their ranks.

Usage:
    class MyCursor:
        capability = Capability.BIDIRECTIONAL

    rank_of(Capability.INPUT)  # Rank.FORWARD
"""

from __future__ import annotations

from enum import Enum, IntEnum


class Capability(Enum):
    """Traversal strength a cursor type declares.

    Every cursor class carries exactly one of these as its `capability`
    class attribute.
    """

    INPUT = "input"  # Single pass, read
    OUTPUT = "output"  # Single pass, write
    FORWARD = "forward"  # Multi pass, advance only
    BIDIRECTIONAL = "bidirectional"  # Advance and retreat
    RANDOM_ACCESS = "random_access"  # Constant-time offsets and distances

    @property
    def rank(self) -> Rank:
        """Rank of this capability in the total order."""
        # Late import to avoid circular dependency
        from zipcursor.core.capability import operations

        return operations.rank_of(self)


class Rank(IntEnum):
    """Total order over capabilities.

    INPUT, OUTPUT and FORWARD collapse onto the same lowest rank.
    """

    FORWARD = 1
    BIDIRECTIONAL = 2
    RANDOM_ACCESS = 3
