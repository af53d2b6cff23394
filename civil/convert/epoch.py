"""Epoch conversion utilities for dates.

This module converts between dates and Unix timestamps in seconds. A
date maps to midnight UTC of that day; a timestamp maps to the UTC day
it falls in. The Unix epoch is 1970-01-01 00:00:00 UTC.

Both directions are plain integer arithmetic, with no leap seconds and
no range limit.

Examples:
    >>> from civil import Date
    >>> from civil.convert import to_unix_seconds, from_unix_seconds

    >>> to_unix_seconds(Date(1970, 1, 1))
    0

    >>> from_unix_seconds(1705322200)
    Date(2024, 1, 15)
"""

from __future__ import annotations

from civil.core.date import Date


def to_unix_seconds(value: Date) -> int:
    """Convert a Date to Unix seconds at midnight UTC.

    Examples:
        >>> to_unix_seconds(Date(2024, 1, 15))
        1705276800

        >>> to_unix_seconds(Date(1969, 12, 31))
        -86400
    """
    return value.to_unix_seconds()


def from_unix_seconds(seconds: int) -> Date:
    """Create a Date from Unix seconds, truncating to the UTC day.

    Examples:
        >>> from_unix_seconds(86399)
        Date(1970, 1, 1)
    """
    return Date.from_unix_seconds(seconds)


__all__ = ["to_unix_seconds", "from_unix_seconds"]
