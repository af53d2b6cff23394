"""Date formatting and parsing.

This module provides functions for converting dates to and from
string representations:
    - Lenient parsing of dates and timestamps
    - strftime-style formatting

Functions:
    parse_date: Parse YYYY-MM-DD or a full timestamp into a Date.
    strftime: Format a Date using a strftime pattern.

Examples:
    >>> from civil.format import parse_date, strftime

    >>> d = parse_date("2024-01-15T14:30:45Z")
    >>> d.year
    2024

    >>> strftime(d, "%Y/%m/%d")
    '2024/01/15'
"""

from __future__ import annotations

from civil.format.parse import parse_date
from civil.format.strftime import strftime

__all__: list[str] = [
    "parse_date",
    "strftime",
]
