"""Date class representing a civil calendar date.

This module provides the Date class: a year, month and day with no
time-of-day and no timezone, in the proleptic Gregorian calendar.
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, overload

from civil._internal.calendar import (
    clamp_day,
    is_leap_year,
    max_day_of_month,
    normalize,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from civil._internal.constants import (
    MAX_DATETIME_YEAR,
    MIN_DATETIME_YEAR,
    SECONDS_PER_DAY,
    UNIX_EPOCH_ORDINAL,
)
from civil.errors import ConversionError

if TYPE_CHECKING:
    from typing import Any


class Date:
    """A civil date in the proleptic Gregorian calendar.

    Date holds year, month and day exactly as given. Construction never
    validates: ``Date(2016, 13, 1)`` is a legal value that ``is_valid()``
    rejects. Operations that go through the calendar (``add_days``,
    ``days_since``, ``to_datetime``, ``format``) normalize first, the way
    a clock rolls an overflowing timestamp over; comparisons and
    ``str()`` use the raw fields.

    Year 0 and negative years are ordinary years (astronomical year
    numbering, year 0 = 1 BCE). There is no upper or lower bound.

    Attributes:
        year: The year (any integer).
        month: The month, nominally 1-12.
        day: The day of the month, nominally 1 to the month's length.

    Examples:
        >>> d = Date(2024, 1, 15)
        >>> d.year, d.month, d.day
        (2024, 1, 15)

        >>> Date(2024, 2, 30).is_valid()
        False

        >>> str(Date(999, 1, 26))
        '0999-01-26'
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Date from year, month, and day.

        Args:
            year: The year (can be 0 or negative).
            month: The month.
            day: The day of the month.
        """
        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def today(cls, tz: datetime.tzinfo = datetime.timezone.utc) -> Date:
        """Return the current date as observed in ``tz``.

        Examples:
            >>> Date.today().is_valid()
            True
        """
        return cls.from_datetime(datetime.datetime.now(tz))

    @classmethod
    def from_datetime(
        cls,
        instant: datetime.date,
        tz: datetime.tzinfo | None = None,
    ) -> Date:
        """Return the date of ``instant``, dropping time-of-day and zone.

        See :func:`civil.convert.timestamp.date_of`.
        """
        from civil.convert.timestamp import date_of

        return date_of(instant, tz)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Date:
        """Create a Date from an ordinal day number.

        The ordinal is the number of days since year 1, where
        ordinal 1 = 0001-01-01 (January 1, year 1).

        Examples:
            >>> Date.from_ordinal(1)
            Date(1, 1, 1)
            >>> Date.from_ordinal(0)
            Date(0, 12, 31)
        """
        year, month, day = ordinal_to_ymd(ordinal)
        return cls(year, month, day)

    @classmethod
    def from_unix_seconds(cls, seconds: int) -> Date:
        """Create a Date from Unix seconds, truncating to the UTC day.

        Examples:
            >>> Date.from_unix_seconds(0)
            Date(1970, 1, 1)
            >>> Date.from_unix_seconds(-1)
            Date(1969, 12, 31)
        """
        return cls.from_ordinal(UNIX_EPOCH_ORDINAL + seconds // SECONDS_PER_DAY)

    @classmethod
    def parse(cls, text: str) -> Date:
        """Parse ``YYYY-MM-DD`` or a full timestamp into a Date.

        See :func:`civil.format.parse.parse_date`.

        Raises:
            ParseError: If the text matches neither form.
        """
        from civil.format.parse import parse_date

        return parse_date(text)

    @classmethod
    def from_json(cls, data: str | bytes) -> Date:
        """Decode a Date from a JSON string document.

        Examples:
            >>> Date.from_json('"2024-01-15"')
            Date(2024, 1, 15)

        Raises:
            DecodeError: If the document is not a JSON string holding a date.
        """
        from civil.convert.json import from_json

        return from_json(data)

    @property
    def year(self) -> int:
        """Return the year component."""
        return self._year

    @property
    def month(self) -> int:
        """Return the month component."""
        return self._month

    @property
    def day(self) -> int:
        """Return the day component."""
        return self._day

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date's year is a leap year.

        Examples:
            >>> Date(2024, 1, 1).is_leap_year
            True
            >>> Date(1900, 1, 1).is_leap_year
            False
        """
        return is_leap_year(self._year)

    def is_valid(self) -> bool:
        """Return True if the date names a real calendar day.

        A date is valid when normalizing it through the calendar leaves
        it unchanged. That single round trip covers month range, month
        length and the leap rule.

        Examples:
            >>> Date(2000, 2, 29).is_valid()
            True
            >>> Date(2016, 2, 30).is_valid()
            False
            >>> Date(-1, 1, 1).is_valid()
            True
            >>> Date(1, 0, 1).is_valid()
            False
        """
        return normalize(self._year, self._month, self._day) == (
            self._year,
            self._month,
            self._day,
        )

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> Date:
        """Return a new Date with specified components replaced.

        No validation is performed; use ``set_day_clamped`` to move to a
        day that may not exist in the month.

        Examples:
            >>> Date(2024, 1, 15).replace(month=6)
            Date(2024, 6, 15)
        """
        return Date(
            year if year is not None else self._year,
            month if month is not None else self._month,
            day if day is not None else self._day,
        )

    def to_datetime(
        self,
        tz: datetime.tzinfo | None = datetime.timezone.utc,
    ) -> datetime.datetime:
        """Return midnight of this date in ``tz``.

        Out-of-range components are normalized first. Passing ``tz=None``
        returns a naive datetime.

        Raises:
            ConversionError: If the normalized year is outside 1-9999.

        Examples:
            >>> Date(2014, 7, 29).to_datetime()
            datetime.datetime(2014, 7, 29, 0, 0, tzinfo=datetime.timezone.utc)
            >>> Date(2016, 13, 1).to_datetime(None)
            datetime.datetime(2017, 1, 1, 0, 0)
        """
        year, month, day = normalize(self._year, self._month, self._day)
        if year < MIN_DATETIME_YEAR or year > MAX_DATETIME_YEAR:
            raise ConversionError(
                f"year {year} is outside the datetime range "
                f"{MIN_DATETIME_YEAR}-{MAX_DATETIME_YEAR}"
            )
        return datetime.datetime(year, month, day, tzinfo=tz)

    def to_ordinal(self) -> int:
        """Return the ordinal day number for this date.

        Examples:
            >>> Date(1, 1, 1).to_ordinal()
            1
            >>> Date(2024, 1, 15).to_ordinal()
            738900
        """
        return ymd_to_ordinal(self._year, self._month, self._day)

    def to_unix_seconds(self) -> int:
        """Return Unix seconds at midnight UTC of this date.

        Examples:
            >>> Date(1970, 1, 2).to_unix_seconds()
            86400
        """
        return (self.to_ordinal() - UNIX_EPOCH_ORDINAL) * SECONDS_PER_DAY

    def add_days(self, days: int) -> Date:
        """Return a new Date offset by the given number of days.

        Examples:
            >>> Date(2014, 12, 31).add_days(1)
            Date(2015, 1, 1)
            >>> Date(2015, 1, 1).add_days(-1)
            Date(2014, 12, 31)
        """
        return Date.from_ordinal(self.to_ordinal() + days)

    def days_since(self, other: Date) -> int:
        """Return the signed number of days from ``other`` to this date.

        Examples:
            >>> Date(2005, 1, 1).days_since(Date(2004, 1, 1))
            366
            >>> Date(2014, 12, 31).days_since(Date(2015, 1, 1))
            -1
        """
        delta = self.to_unix_seconds() - other.to_unix_seconds()
        return delta // SECONDS_PER_DAY

    def add_months(self, months: int) -> Date:
        """Return a new Date offset by the given number of months.

        If the day does not exist in the new month, it is clamped to
        the month's last day.

        Examples:
            >>> Date(2014, 1, 31).add_months(1)
            Date(2014, 2, 28)
            >>> Date(2012, 1, 31).add_months(1)  # Leap year
            Date(2012, 2, 29)
            >>> Date(2014, 1, 1).add_months(-1)
            Date(2013, 12, 1)
        """
        years, index = divmod((self._month - 1) + months, 12)
        year = self._year + years
        month = index + 1
        return Date(year, month, clamp_day(year, month, self._day))

    def add_years(self, years: int) -> Date:
        """Return a new Date offset by the given number of years.

        Examples:
            >>> Date(2024, 2, 29).add_years(1)
            Date(2025, 2, 28)
        """
        return self.add_months(12 * years)

    def months_until(self, other: Date) -> int:
        """Return the number of calendar months from this date to ``other``.

        Days of the month are ignored.

        Examples:
            >>> Date(2014, 1, 31).months_until(Date(2014, 3, 1))
            2
            >>> Date(2014, 1, 1).months_until(Date(2013, 12, 31))
            -1
        """
        return (other._month - self._month) + (other._year - self._year) * 12

    def set_day_clamped(self, day: int) -> Date:
        """Return this date moved to ``day``, clamped to the month's length.

        Raises:
            ValidationError: If the month is outside 1-12; there is no
                month length to clamp against.

        Examples:
            >>> Date(2011, 2, 1).set_day_clamped(31)
            Date(2011, 2, 28)
            >>> Date(2012, 2, 1).set_day_clamped(31)
            Date(2012, 2, 29)
        """
        return Date(self._year, self._month, clamp_day(self._year, self._month, day))

    def first_of_month(self) -> int:
        """Return the first day-of-month number, always 1."""
        return 1

    def last_of_month(self) -> int:
        """Return the last day-of-month number of this date's month.

        Raises:
            ValidationError: If the month is outside 1-12.
        """
        return max_day_of_month(self._year, self._month)

    def is_first_of_month(self) -> bool:
        return self._day == self.first_of_month()

    def is_last_of_month(self) -> bool:
        """Return True if the day is the last of its month.

        A month outside 1-12 has no last day, so the answer is False.
        """
        if self._month < 1 or self._month > 12:
            return False
        return self._day == self.last_of_month()

    def before(self, other: Date) -> bool:
        """Return True if this date sorts before ``other``.

        Ordering is lexicographic on (year, month, day) and does not
        look at validity.
        """
        if self._year != other._year:
            return self._year < other._year
        if self._month != other._month:
            return self._month < other._month
        return self._day < other._day

    def after(self, other: Date) -> bool:
        """Return True if this date sorts after ``other``."""
        return other.before(self)

    def on(self, other: Date) -> bool:
        """Return True if both dates have the same fields."""
        return (self._year, self._month, self._day) == (
            other._year,
            other._month,
            other._day,
        )

    def before_or_on(self, other: Date) -> bool:
        return self.on(other) or self.before(other)

    def after_or_on(self, other: Date) -> bool:
        return self.on(other) or self.after(other)

    def format(self, fmt: str) -> str:
        """Format midnight UTC of this date with a strftime-style pattern.

        See :func:`civil.format.strftime.strftime`.

        Examples:
            >>> Date(2024, 1, 15).format("%d/%m/%Y")
            '15/01/2024'
        """
        from civil.format.strftime import strftime

        return strftime(self, fmt)

    def to_iso_format(self) -> str:
        """Return the date as ``YYYY-MM-DD``.

        The year is zero-padded to at least four digits and never
        truncated. Negative years keep a leading minus.

        Examples:
            >>> Date(2014, 7, 29).to_iso_format()
            '2014-07-29'
            >>> Date(10000, 1, 1).to_iso_format()
            '10000-01-01'
            >>> Date(-44, 3, 15).to_iso_format()
            '-0044-03-15'
        """
        if self._year >= 0:
            return f"{self._year:04d}-{self._month:02d}-{self._day:02d}"
        else:
            # Negative year with leading minus
            return f"{self._year:05d}-{self._month:02d}-{self._day:02d}"

    def to_json(self) -> str:
        """Return the date as a JSON string document.

        Examples:
            >>> Date(2024, 1, 15).to_json()
            '"2024-01-15"'
        """
        from civil.convert.json import to_json

        return to_json(self)

    @overload
    def __add__(self, other: int) -> Date: ...

    @overload
    def __add__(self, other: object) -> Date: ...

    def __add__(self, other: object) -> Date:
        """Add a number of days to this date.

        Examples:
            >>> Date(2024, 1, 15) + 10
            Date(2024, 1, 25)
        """
        if not isinstance(other, int):
            return NotImplemented  # type: ignore[return-value]
        return self.add_days(other)

    __radd__ = __add__

    @overload
    def __sub__(self, other: int) -> Date: ...

    @overload
    def __sub__(self, other: Date) -> int: ...

    @overload
    def __sub__(self, other: object) -> Date | int: ...

    def __sub__(self, other: object) -> Date | int:
        """Subtract days or another Date from this date.

        Subtracting an int returns a Date; subtracting a Date returns
        the day count between them.

        Examples:
            >>> Date(2024, 1, 25) - 10
            Date(2024, 1, 15)
            >>> Date(2024, 1, 25) - Date(2024, 1, 15)
            10
        """
        if isinstance(other, Date):
            return self.days_since(other)
        elif isinstance(other, int):
            return self.add_days(-other)
        return NotImplemented  # type: ignore[return-value]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.on(other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.before(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.before_or_on(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.after(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.after_or_on(other)

    def __hash__(self) -> int:
        return hash((self._year, self._month, self._day))

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'Date(2024, 1, 15)'.
        """
        return f"Date({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        return self.to_iso_format()

    def __format__(self, format_spec: str) -> str:
        """Support ``f"{d:%d.%m.%Y}"``; an empty format string gives ``str(d)``."""
        if not format_spec:
            return str(self)
        return self.format(format_spec)

    def __reduce__(self) -> tuple[Any, ...]:
        return (Date, (self._year, self._month, self._day))


__all__ = ["Date"]
