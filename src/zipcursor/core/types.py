"""Core type definitions for zipcursor."""

from enum import Enum


class Ownership(Enum):
    """How a zip holds one of its sequences."""

    OWNED = "owned"  # Private copy, lifetime of the zip
    BORROWED = "borrowed"  # Caller's object, mutations are shared


class LengthPolicy(Enum):
    """How a zip terminates when its sequences differ in length."""

    SHORTEST = "shortest"  # Stop when the first component is exhausted
    STRICT = "strict"  # Raise LengthMismatchError on unequal lengths

