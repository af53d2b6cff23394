"""Calendar utilities for civil.

This module provides the proleptic Gregorian calendar arithmetic that
every Date operation goes through: the leap rule, month lengths, and
conversion between (year, month, day) triples and ordinal day numbers.

Ordinal 1 = 0001-01-01. Ordinals are unbounded in both directions, so
year 0, negative years and years past 9999 all convert exactly.

Conversion to an ordinal normalizes out-of-range components the way a
clock normalizes an overflowing timestamp: month 13 of 2016 is January
2017, day 0 is the last day of the previous month. Converting back
therefore yields the canonical triple for any input.

This module is not part of the public API.
"""

from __future__ import annotations

from civil._internal.constants import (
    DAYS_IN_MONTH,
    DAYS_PER_100_YEARS,
    DAYS_PER_400_YEARS,
    DAYS_PER_4_YEARS,
    DAYS_PER_YEAR,
)
from civil.errors import ValidationError


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 400, OR
    - Divisible by 4 and NOT divisible by 100

    Args:
        year: The year to check (can be zero or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(0)
        True
    """
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def max_day_of_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValidationError: If month is not in 1-12.

    Examples:
        >>> max_day_of_month(2016, 2)
        29
        >>> max_day_of_month(2017, 2)
        28
    """
    if month < 1 or month > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def clamp_day(year: int, month: int, day: int) -> int:
    """Clamp a day-of-month down to the month's last day.

    Days at or below the month's length come back unchanged, including
    days below 1.

    Examples:
        >>> clamp_day(2011, 2, 31)
        28
        >>> clamp_day(2012, 2, 31)
        29
        >>> clamp_day(2012, 3, 31)
        31
    """
    return min(day, max_day_of_month(year, month))


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def _days_before_year(year: int) -> int:
    """Return the number of days before January 1 of the year.

    Floor division keeps the formula exact for year 0 and negative years.
    """
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based day of the year for a valid date."""
    return _days_before_month(year, month) + day


def normalize_month(year: int, month: int) -> tuple[int, int]:
    """Fold an out-of-range month into the year.

    Examples:
        >>> normalize_month(2016, 13)
        (2017, 1)
        >>> normalize_month(2016, 0)
        (2015, 12)
    """
    carry, index = divmod(month - 1, 12)
    return year + carry, index + 1


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to an ordinal day number.

    Month and day may be out of range; they are normalized.

    Examples:
        >>> ymd_to_ordinal(1, 1, 1)
        1
        >>> ymd_to_ordinal(0, 12, 31)
        0
        >>> ymd_to_ordinal(2016, 2, 30) == ymd_to_ordinal(2016, 3, 1)
        True
    """
    year, month = normalize_month(year, month)
    return _days_before_year(year) + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal day number to year, month, day.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).
    """
    # n is 0-indexed (n=0 means ordinal=1); divmod floors, so the
    # cycle arithmetic also holds for ordinals before year 1
    n = ordinal - 1

    n400, n = divmod(n, DAYS_PER_400_YEARS)
    n100, n = divmod(n, DAYS_PER_100_YEARS)
    n4, n = divmod(n, DAYS_PER_4_YEARS)
    n1, n = divmod(n, DAYS_PER_YEAR)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a 4-year or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert a 1-based day-of-year to month and day."""
    for month in range(1, 13):
        dim = max_day_of_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"invalid day of year: {doy} for year {year}")


def normalize(year: int, month: int, day: int) -> tuple[int, int, int]:
    """Return the canonical triple for a possibly out-of-range date.

    Examples:
        >>> normalize(2016, 2, 30)
        (2016, 3, 1)
        >>> normalize(2016, 13, 1)
        (2017, 1, 1)
        >>> normalize(1, 1, 0)
        (0, 12, 31)
    """
    return ordinal_to_ymd(ymd_to_ordinal(year, month, day))


__all__ = [
    "is_leap_year",
    "max_day_of_month",
    "clamp_day",
    "day_of_year",
    "normalize_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "normalize",
]
