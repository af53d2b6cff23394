"""Date parsing.

Two textual forms are accepted:

    YYYY-MM-DD
        The canonical form produced by ``str(Date)``. The year has at
        least four digits (``0999``, ``10000``) and an optional leading
        minus, except that year zero is unsigned; month and day have
        exactly two.

    YYYY-MM-DDTHH:MM:SS[.fraction](Z|+HH:MM|-HH:MM)
        An RFC 3339 timestamp whose date part follows the same rules,
        so years past 9999 are accepted here too. Only the date portion,
        as written, is kept; the offset does not shift the day.

Many producers emit full timestamps where only the date matters, so
callers do not need to truncate them first.

Examples:
    >>> from civil.format import parse_date

    >>> parse_date("2016-01-02")
    Date(2016, 1, 2)

    >>> parse_date("2016-01-02T23:59:59.999Z")
    Date(2016, 1, 2)

    >>> parse_date("999-01-26")  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
    ...
    ParseError: invalid date '999-01-26'...
"""

from __future__ import annotations

import logging
import re

from civil.core.date import Date
from civil.errors import ParseError

log = logging.getLogger(__name__)

# ASCII digits only; fullmatch keeps a trailing newline from slipping through
_DATE_PATTERN = re.compile(
    r"(?P<year>-?[0-9]{4,})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
)

_TIMESTAMP_PATTERN = re.compile(
    r"(?P<year>-?[0-9]{4,})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"  # Date: YYYY-MM-DD
    r"T"
    r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"  # Time: HH:MM:SS
    r"(?:\.[0-9]+)?"  # Optional fractional seconds
    r"(?P<offset>Z|[+-][0-9]{2}:[0-9]{2})"  # Required timezone
)


def parse_date(text: str) -> Date:
    """Parse a date or timestamp string into a Date.

    The strict ``YYYY-MM-DD`` form is tried first. If that fails, the
    text is parsed as a full timestamp and truncated to its date. If
    both fail, the error from the strict attempt is raised.

    Args:
        text: The string to parse.

    Returns:
        The parsed Date, always valid.

    Raises:
        ParseError: If the text matches neither form, or names a day
            that does not exist.

    Examples:
        >>> parse_date("0003-02-04")
        Date(3, 2, 4)

        >>> parse_date("2016-01-02T15:04:05+07:00")
        Date(2016, 1, 2)
    """
    if not isinstance(text, str):
        raise ParseError(f"expected str, got {type(text).__name__}")

    try:
        return _parse_date_only(text)
    except ParseError as err:
        original = err

    try:
        result = _parse_timestamp(text)
    except ParseError:
        raise original from None

    log.debug("parsed %r as a timestamp, keeping its date portion", text)
    return result


def _parse_date_only(text: str) -> Date:
    match = _DATE_PATTERN.fullmatch(text)
    if match is None:
        raise ParseError(f"invalid date {text!r}: expected YYYY-MM-DD")

    return _checked(
        text,
        Date(_year(text, match["year"]), int(match["month"]), int(match["day"])),
    )


def _parse_timestamp(text: str) -> Date:
    match = _TIMESTAMP_PATTERN.fullmatch(text)
    if match is None:
        raise ParseError(
            f"invalid timestamp {text!r}: expected "
            "YYYY-MM-DDTHH:MM:SS[.fraction]Z or "
            "YYYY-MM-DDTHH:MM:SS[.fraction]+/-HH:MM"
        )

    if int(match["hour"]) > 23 or int(match["minute"]) > 59 or int(match["second"]) > 59:
        raise ParseError(f"invalid timestamp {text!r}: time out of range")

    offset = match["offset"]
    if offset != "Z" and (int(offset[1:3]) > 23 or int(offset[4:6]) > 59):
        raise ParseError(f"invalid timestamp {text!r}: offset out of range")

    return _checked(
        text,
        Date(_year(text, match["year"]), int(match["month"]), int(match["day"])),
    )


def _year(text: str, digits: str) -> int:
    # str(Date(0, m, d)) never carries a sign
    year = int(digits)
    if year == 0 and digits.startswith("-"):
        raise ParseError(f"invalid date {text!r}: year zero has no sign")
    return year


def _checked(text: str, date: Date) -> Date:
    """Reject parsed fields that do not name a real day."""
    if date.is_valid():
        return date
    if date.month < 1 or date.month > 12:
        raise ParseError(f"invalid date {text!r}: month out of range")
    raise ParseError(f"invalid date {text!r}: day out of range")


__all__ = ["parse_date"]
