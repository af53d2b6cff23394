"""Tests for parsing module."""

from __future__ import annotations

import logging

import pytest

from civil import Date, parse_date
from civil.errors import ParseError


class TestParseDate:
    """Tests for the strict YYYY-MM-DD form."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("2016-01-02", Date(2016, 1, 2)),
            ("2016-12-31", Date(2016, 12, 31)),
            ("0003-02-04", Date(3, 2, 4)),
            ("2000-02-29", Date(2000, 2, 29)),
            ("0000-06-15", Date(0, 6, 15)),
            ("10000-12-31", Date(10000, 12, 31)),
            ("-0044-03-15", Date(-44, 3, 15)),
        ],
    )
    def test_parse(self, text: str, expected: Date) -> None:
        assert parse_date(text) == expected

    def test_classmethod(self) -> None:
        assert Date.parse("2016-01-02") == Date(2016, 1, 2)

    @pytest.mark.parametrize("date", [Date(2014, 7, 29), Date(999, 1, 26), Date(-44, 3, 15)])
    def test_canonical_string_parses_back(self, date: Date) -> None:
        assert parse_date(str(date)) == date


class TestParseTimestamp:
    """Tests for the full timestamp fallback."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("2016-01-02T00:00:00.000Z", Date(2016, 1, 2)),
            ("2016-01-02T23:59:59.999Z", Date(2016, 1, 2)),
            ("2016-01-02T15:04:05Z", Date(2016, 1, 2)),
            ("2016-01-02T15:04:05.123456789Z", Date(2016, 1, 2)),
            ("2016-01-02T23:30:00-05:00", Date(2016, 1, 2)),
            ("2016-01-02T00:30:00+09:00", Date(2016, 1, 2)),
            ("10000-01-01T00:00:00Z", Date(10000, 1, 1)),
            ("-0044-03-15T12:00:00Z", Date(-44, 3, 15)),
        ],
    )
    def test_keeps_date_as_written(self, text: str, expected: Date) -> None:
        assert parse_date(text) == expected

    def test_fallback_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="civil.format.parse"):
            parse_date("2016-01-02T15:04:05Z")
        assert "keeping its date portion" in caplog.text


class TestParseErrors:
    """Tests for rejected input."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "999-01-26",  # year not padded to four digits
            "2016-01-02x",
            "x2016-01-02",
            "2016/01/02",
            "2016-1-2",
            "20160102",
            "19870415",
            "2016-01-02 ",
            "2016-01-02\n",
            "2016-01-02T15:04:05",  # no zone
            "2016-01-02 15:04:05Z",  # space separator
            "2016-01-02T15:04Z",
            "2016-01-02T15:04:05.Z",
            "2016-01-02T15:04:05Zjunk",
            "２０１６-01-02",  # fullwidth digits
            "-0000-01-01",  # year zero is never signed
            "-0000-01-01T00:00:00Z",
        ],
    )
    def test_malformed(self, text: str) -> None:
        with pytest.raises(ParseError):
            parse_date(text)

    @pytest.mark.parametrize(
        ("text", "message"),
        [
            ("2016-02-30", "day out of range"),
            ("2015-02-29", "day out of range"),
            ("2016-00-10", "month out of range"),
            ("2016-13-01", "month out of range"),
            ("2016-01-00", "day out of range"),
        ],
    )
    def test_out_of_range(self, text: str, message: str) -> None:
        with pytest.raises(ParseError, match=message):
            parse_date(text)

    @pytest.mark.parametrize(
        "text",
        [
            "2016-02-30T00:00:00Z",
            "2016-01-02T24:00:00Z",
            "2016-01-02T23:60:00Z",
            "2016-01-02T23:59:60Z",
            "2016-01-02T12:00:00+24:00",
            "2016-01-02T12:00:00+05:60",
        ],
    )
    def test_timestamp_out_of_range(self, text: str) -> None:
        with pytest.raises(ParseError):
            parse_date(text)

    def test_reports_strict_failure(self) -> None:
        """When both forms fail, the strict form's error is raised."""
        with pytest.raises(ParseError, match="expected YYYY-MM-DD") as excinfo:
            parse_date("2016-01-02x")
        assert excinfo.value.__cause__ is None

    def test_non_string(self) -> None:
        with pytest.raises(ParseError, match="expected str, got int"):
            parse_date(20160102)  # type: ignore[arg-type]
