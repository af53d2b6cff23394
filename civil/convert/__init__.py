"""Date conversion utilities.

This module provides functions for converting dates to and from
other representations:
    - Timestamps (``datetime.datetime``)
    - Unix epoch seconds
    - JSON documents
    - Storage values (the scan/value contract)

Examples:
    >>> from civil import Date
    >>> from civil.convert import to_json, from_json

    >>> d = Date(2024, 1, 15)
    >>> from_json(to_json(d)) == d
    True

    >>> from civil.convert import to_unix_seconds, from_unix_seconds
    >>> from_unix_seconds(to_unix_seconds(d)) == d
    True
"""

from __future__ import annotations

from civil.convert.epoch import from_unix_seconds, to_unix_seconds
from civil.convert.json import (
    DateJSONEncoder,
    from_json,
    from_json_value,
    to_json,
)
from civil.convert.scan import ScanInput, scan, value
from civil.convert.timestamp import date_of, date_of_optional, to_datetime

__all__ = [
    # Timestamps
    "date_of",
    "date_of_optional",
    "to_datetime",
    # Epoch
    "to_unix_seconds",
    "from_unix_seconds",
    # JSON
    "to_json",
    "from_json",
    "from_json_value",
    "DateJSONEncoder",
    # Storage
    "ScanInput",
    "scan",
    "value",
]
