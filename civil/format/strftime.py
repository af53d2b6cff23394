"""strftime-style formatting.

This module renders a Date through the same directives used for
timestamps, applied to midnight UTC of the date. It supports a minimal
subset of directives that avoids locale-dependent behavior.

Supported Directives:
    %Y - Year, at least 4 digits (e.g., 2024, 0999, -0044)
    %m - 2-digit month (01-12)
    %d - 2-digit day (01-31)
    %j - 3-digit day of year (001-366)
    %H - 2-digit hour, always 00
    %M - 2-digit minute, always 00
    %S - 2-digit second, always 00
    %f - Microseconds, always 000000
    %z - UTC offset, always +0000
    %Z - Timezone name, always UTC
    %% - Literal %

Not Supported (locale-dependent):
    %a, %A - Weekday names
    %b, %B - Month names
    %c, %x, %X - Locale-specific formats
    %U, %W - Week numbers

Examples:
    >>> from civil import Date
    >>> from civil.format import strftime

    >>> strftime(Date(2024, 1, 15), "%Y-%m-%d")
    '2024-01-15'

    >>> strftime(Date(2024, 1, 15), "%Y-%m-%dT%H:%M:%S%z")
    '2024-01-15T00:00:00+0000'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from civil._internal.calendar import day_of_year, normalize

if TYPE_CHECKING:
    from civil.core.date import Date


_SUPPORTED = "%Y, %m, %d, %j, %H, %M, %S, %f, %z, %Z, %%"

# Directives whose output does not depend on the date
_MIDNIGHT_UTC: dict[str, str] = {
    "%H": "00",
    "%M": "00",
    "%S": "00",
    "%f": "000000",
    "%z": "+0000",
    "%Z": "UTC",
    "%%": "%",
}


def strftime(value: Date, fmt: str) -> str:
    """Format a Date using a strftime-style format string.

    Out-of-range components are normalized first, so the output always
    names a real day: ``Date(2016, 2, 30)`` formats as 2016-03-01.

    Args:
        value: The Date to format.
        fmt: Format string with %-directives.

    Returns:
        Formatted string.

    Raises:
        ValueError: If format contains unsupported directives.

    Examples:
        >>> from civil import Date

        >>> strftime(Date(2024, 1, 15), "%d/%m/%Y")
        '15/01/2024'

        >>> strftime(Date(2024, 12, 31), "%Y-%j")
        '2024-366'
    """
    components = normalize(value.year, value.month, value.day)

    result = []
    i = 0
    while i < len(fmt):
        if fmt[i] == "%" and i + 1 < len(fmt):
            directive = fmt[i : i + 2]
            result.append(_format_directive(components, directive))
            i += 2
        else:
            result.append(fmt[i])
            i += 1

    return "".join(result)


def _format_directive(components: tuple[int, int, int], directive: str) -> str:
    """Format a single directive.

    Args:
        components: Normalized (year, month, day).
        directive: The format directive (e.g., "%Y").

    Returns:
        Formatted string for this directive.

    Raises:
        ValueError: If directive is unsupported.
    """
    year, month, day = components

    if directive in _MIDNIGHT_UTC:
        return _MIDNIGHT_UTC[directive]

    if directive == "%Y":
        if year >= 0:
            return f"{year:04d}"
        else:
            return f"{year:05d}"  # Include minus sign

    elif directive == "%m":
        return f"{month:02d}"

    elif directive == "%d":
        return f"{day:02d}"

    elif directive == "%j":
        return f"{day_of_year(year, month, day):03d}"

    else:
        raise ValueError(
            f"unsupported strftime directive: {directive}. "
            f"Supported: {_SUPPORTED}"
        )


__all__ = ["strftime"]
