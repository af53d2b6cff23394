"""Core civil types.

This module provides the civil date type:
    - Date: Calendar date in the proleptic Gregorian calendar
"""

from __future__ import annotations

from civil.core.date import Date

__all__: list[str] = [
    "Date",
]
