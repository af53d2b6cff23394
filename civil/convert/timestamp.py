"""Timestamp conversions for dates.

Functions:
    date_of: Date of a datetime as observed in a timezone.
    date_of_optional: date_of that passes None through.
    to_datetime: Midnight of a Date in a timezone.

Examples:
    >>> import datetime
    >>> from civil.convert import date_of, to_datetime

    >>> date_of(datetime.datetime(2014, 8, 20, 15, 8, 43))
    Date(2014, 8, 20)

    >>> to_datetime(date_of(datetime.datetime(2014, 8, 20, 15, 8, 43)))
    datetime.datetime(2014, 8, 20, 0, 0, tzinfo=datetime.timezone.utc)
"""

from __future__ import annotations

import datetime

from civil.core.date import Date


def date_of(
    instant: datetime.date,
    tz: datetime.tzinfo | None = None,
) -> Date:
    """Return the date of ``instant``, dropping time-of-day and zone.

    Args:
        instant: A ``datetime.datetime`` or ``datetime.date``.
        tz: Zone to observe the instant in. ``None`` reads the instant's
            own fields. A naive datetime is taken to be UTC when ``tz`` is
            given.

    Returns:
        The Date the instant falls on.

    Examples:
        >>> import datetime
        >>> utc = datetime.timezone.utc
        >>> late = datetime.datetime(2016, 1, 2, 23, 30, tzinfo=utc)
        >>> date_of(late)
        Date(2016, 1, 2)
        >>> date_of(late, datetime.timezone(datetime.timedelta(hours=1)))
        Date(2016, 1, 3)
    """
    if isinstance(instant, datetime.datetime) and tz is not None:
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=datetime.timezone.utc)
        instant = instant.astimezone(tz)
    return Date(instant.year, instant.month, instant.day)


def date_of_optional(
    instant: datetime.date | None,
    tz: datetime.tzinfo | None = None,
) -> Date | None:
    """Like :func:`date_of`, but ``None`` gives ``None``.

    Examples:
        >>> date_of_optional(None) is None
        True
    """
    if instant is None:
        return None
    return date_of(instant, tz)


def to_datetime(
    value: Date,
    tz: datetime.tzinfo | None = datetime.timezone.utc,
) -> datetime.datetime:
    """Return midnight of ``value`` in ``tz``.

    Raises:
        ConversionError: If the year is outside the datetime range.
    """
    return value.to_datetime(tz)


__all__ = ["date_of", "date_of_optional", "to_datetime"]
