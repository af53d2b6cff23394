"""Civil: calendar dates without time-of-day or timezone.

Civil provides a Date value for dates as understood in everyday life
(birthdays, due dates, billing periods), independent of any instant in
time, in the proleptic Gregorian calendar.

Core Types:
    Date: Year, month and day, validated on demand

Calendar Functions:
    is_leap_year: Gregorian leap rule
    max_day_of_month: Length of a month
    clamp_day: Clamp a day into a month

Conversion Functions:
    parse_date: Parse YYYY-MM-DD or a full timestamp
    date_of: Date of a datetime in a timezone
    date_of_optional: date_of that passes None through

Exceptions:
    CivilError: Base exception
    ValidationError: Component outside a required range
    ParseError: Failed to parse string
    DecodeError: Failed to decode JSON
    UnsupportedScanInput: Storage value of an unsupported kind
    ConversionError: Date not representable as a datetime

Example:
    >>> from civil import Date
    >>> due = Date(2014, 1, 31).add_months(1)
    >>> due
    Date(2014, 2, 28)
    >>> str(due)
    '2014-02-28'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from civil.core.date import Date

# Calendar
from civil._internal.calendar import clamp_day, is_leap_year, max_day_of_month

# Exceptions
from civil.errors import (
    CivilError,
    ConversionError,
    DecodeError,
    ParseError,
    UnsupportedScanInput,
    ValidationError,
)

# Conversion functions
from civil.convert.timestamp import date_of, date_of_optional
from civil.format.parse import parse_date

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    # Calendar
    "is_leap_year",
    "max_day_of_month",
    "clamp_day",
    # Exceptions
    "CivilError",
    "ValidationError",
    "ParseError",
    "DecodeError",
    "UnsupportedScanInput",
    "ConversionError",
    # Conversion functions
    "parse_date",
    "date_of",
    "date_of_optional",
]
