"""Internal utilities for civil.

This module contains private implementation details:
    - Calendar arithmetic (leap rule, month lengths, ordinals)
    - Constants and magic numbers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from civil._internal.calendar import (
    clamp_day,
    is_leap_year,
    max_day_of_month,
    normalize,
    ordinal_to_ymd,
    ymd_to_ordinal,
)

__all__: list[str] = [
    "clamp_day",
    "is_leap_year",
    "max_day_of_month",
    "normalize",
    "ordinal_to_ymd",
    "ymd_to_ordinal",
]
