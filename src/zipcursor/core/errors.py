"""Exception hierarchy for zipcursor.

Every error derives from ZipCursorError and from the builtin exception whose
meaning it shares, so callers can catch either.
"""


class ZipCursorError(Exception):
    """Base class for all zipcursor errors."""

    pass


class CapabilityError(ZipCursorError, TypeError):
    """Raised when an operation needs a stronger traversal capability."""

    pass


class CursorProtocolError(ZipCursorError, TypeError):
    """Raised when an object does not declare a cursor capability."""

    pass


class NotASequenceError(ZipCursorError, TypeError):
    """Raised when a zip source offers no cursor access."""

    pass


class LengthMismatchError(ZipCursorError, ValueError):
    """Raised when zipped sequences differ in length under the STRICT policy."""

    pass


class ReadOnlyReferenceError(ZipCursorError, TypeError):
    """Raised when writing through a reference into immutable storage."""

    pass


class CursorInvalidatedError(ZipCursorError, RuntimeError):
    """Raised when dereferencing a single-pass position that was already released."""

    pass
