"""Civil exception hierarchy.

All civil-specific exceptions inherit from CivilError.
"""

from __future__ import annotations


class CivilError(Exception):
    """Base exception for all civil errors."""

    pass


class ValidationError(CivilError):
    """A component is outside the range an operation requires.

    Date values themselves may hold out-of-range components; this is
    raised only by operations that cannot give such a component a meaning.

    Examples:
        - Asking for the length of month 13
    """

    pass


class ParseError(CivilError):
    """Failed to parse a string as a date.

    Examples:
        - Empty string
        - Year not zero-padded to four digits
        - Trailing characters after the date or timestamp
        - Day outside the month's range
    """

    pass


class DecodeError(CivilError):
    """Failed to decode a structured (JSON) date value.

    Raised when the document is not valid JSON, is not a JSON string,
    or holds a string that fails to parse. The underlying error is
    chained as ``__cause__``.
    """

    pass


class UnsupportedScanInput(CivilError):
    """A storage value is neither a timestamp nor a string.

    Attributes:
        kind: Type name of the rejected value.
    """

    def __init__(self, value: object) -> None:
        self.kind = type(value).__name__
        super().__init__(f"civil.Date scan: can't scan into {self.kind}")


class ConversionError(CivilError):
    """A date cannot be represented as a ``datetime.datetime``.

    Python datetimes cover years 1 through 9999 only; civil dates
    cover every integer year.
    """

    pass


__all__ = [
    "CivilError",
    "ValidationError",
    "ParseError",
    "DecodeError",
    "UnsupportedScanInput",
    "ConversionError",
]
