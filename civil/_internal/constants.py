"""Internal constants for civil.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

import datetime

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Gregorian cycle lengths in days
DAYS_PER_400_YEARS: int = 146_097
DAYS_PER_100_YEARS: int = 36_524
DAYS_PER_4_YEARS: int = 1_461
DAYS_PER_YEAR: int = 365

# Range a datetime.datetime can hold
MIN_DATETIME_YEAR: int = datetime.MINYEAR
MAX_DATETIME_YEAR: int = datetime.MAXYEAR

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Ordinal of 1970-01-01, where ordinal 1 = 0001-01-01
UNIX_EPOCH_ORDINAL: int = 719_163


__all__ = [
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "DAYS_PER_400_YEARS",
    "DAYS_PER_100_YEARS",
    "DAYS_PER_4_YEARS",
    "DAYS_PER_YEAR",
    "MIN_DATETIME_YEAR",
    "MAX_DATETIME_YEAR",
    "DAYS_IN_MONTH",
    "UNIX_EPOCH_ORDINAL",
]
