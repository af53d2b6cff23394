"""Storage adapter contract for dates.

A store writes a Date as its canonical string and reads back one of
exactly two kinds of value:

    timestamp
        A ``datetime.datetime`` (or the ``datetime.date`` a DATE column
        yields), truncated to its date.
    string
        Text in either form understood by :func:`civil.format.parse_date`.

Any other value is rejected with UnsupportedScanInput.

Examples:
    >>> import datetime
    >>> from civil import Date
    >>> from civil.convert import scan, value

    >>> value(Date(1987, 4, 15))
    '1987-04-15'

    >>> scan("1987-04-15")
    Date(1987, 4, 15)

    >>> scan(datetime.datetime(1987, 4, 15, 13, 45))
    Date(1987, 4, 15)
"""

from __future__ import annotations

import datetime
import logging
from typing import Union

from civil.convert.timestamp import date_of
from civil.core.date import Date
from civil.errors import UnsupportedScanInput
from civil.format.parse import parse_date

log = logging.getLogger(__name__)

# The two kinds a store may hand back
ScanInput = Union[datetime.date, str]


def value(date: Date) -> str:
    """Return the value to write to a store: the canonical string."""
    return date.to_iso_format()


def scan(src: ScanInput) -> Date:
    """Read a Date from a value returned by a store.

    Args:
        src: A timestamp (``datetime.datetime`` or ``datetime.date``) or
            a string.

    Returns:
        The Date held by ``src``.

    Raises:
        ParseError: If ``src`` is a string that is not a date.
        UnsupportedScanInput: If ``src`` is neither kind.

    Examples:
        >>> scan(3.5)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        UnsupportedScanInput: civil.Date scan: can't scan into float
    """
    # datetime.datetime is a subclass of datetime.date
    if isinstance(src, datetime.date):
        log.debug("scanning timestamp %r", src)
        return date_of(src)
    if isinstance(src, str):
        log.debug("scanning string %r", src)
        return parse_date(src)

    log.debug("rejecting scan input of type %s", type(src).__name__)
    raise UnsupportedScanInput(src)


__all__ = ["ScanInput", "scan", "value"]
