"""JSON serialization and deserialization for dates.

A Date is encoded as a JSON string in canonical form:

    "2024-01-15"

Decoding accepts a JSON string in either form understood by
:func:`civil.format.parse_date`, so ``"2024-01-15T10:00:00Z"`` decodes
to 2024-01-15. Anything else raises DecodeError.

Functions:
    to_json: Encode a Date as a JSON document.
    from_json: Decode a Date from a JSON document.
    from_json_value: Decode a Date from an already-loaded JSON value.

Classes:
    DateJSONEncoder: ``json.JSONEncoder`` that encodes nested Dates.

Examples:
    >>> import json
    >>> from civil import Date
    >>> from civil.convert import to_json, from_json

    >>> to_json(Date(2024, 1, 15))
    '"2024-01-15"'

    >>> from_json('"2024-01-15"')
    Date(2024, 1, 15)

    >>> json.dumps({"due": Date(2024, 1, 15)}, cls=DateJSONEncoder)
    '{"due": "2024-01-15"}'
"""

from __future__ import annotations

import json
from typing import Any

from civil.core.date import Date
from civil.errors import DecodeError, ParseError
from civil.format.parse import parse_date


def to_json(value: Date) -> str:
    """Encode a Date as a JSON string document.

    Raises:
        TypeError: If value is not a Date.
    """
    if not isinstance(value, Date):
        raise TypeError(f"expected Date, got {type(value).__name__}")
    return json.dumps(value.to_iso_format())


def from_json(data: str | bytes) -> Date:
    """Decode a Date from a JSON document.

    Args:
        data: A JSON document holding a single string.

    Returns:
        A new Date.

    Raises:
        DecodeError: If the document is not valid JSON, is not a string,
            or the string is not a date. The underlying error is chained.

    Examples:
        >>> from_json(b'"2016-01-02T23:59:59.999Z"')
        Date(2016, 1, 2)

        >>> from_json("20160102")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        DecodeError: expected JSON string, got number
    """
    try:
        loaded = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as err:
        raise DecodeError(f"invalid JSON for Date: {err}") from err
    return from_json_value(loaded)


def from_json_value(value: Any) -> Date:
    """Decode a Date from a value already produced by ``json.loads``.

    Raises:
        DecodeError: If value is not a string holding a date.

    Examples:
        >>> from_json_value("1987-04-15")
        Date(1987, 4, 15)
    """
    if not isinstance(value, str):
        raise DecodeError(f"expected JSON string, got {_json_kind(value)}")

    try:
        return parse_date(value)
    except ParseError as err:
        raise DecodeError(str(err)) from err


class DateJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes Date values in canonical form."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Date):
            return o.to_iso_format()
        return super().default(o)


def _json_kind(value: Any) -> str:
    """Name a loaded JSON value by its JSON type."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


__all__ = ["to_json", "from_json", "from_json_value", "DateJSONEncoder"]
