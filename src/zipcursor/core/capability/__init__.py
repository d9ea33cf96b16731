"""Capability functionality: traversal tags, ranks, and the weakest-tag engine."""

from zipcursor.core.capability.models import Capability, Rank
from zipcursor.core.capability.operations import (
    capability_of,
    is_multipass,
    rank_of,
    require,
    supports,
    tag_of,
    weakest,
)

__all__ = [
    # Models
    "Capability",
    "Rank",
    # Operations
    "rank_of",
    "tag_of",
    "weakest",
    "supports",
    "is_multipass",
    "capability_of",
    "require",
]
