"""Tests for calendar utilities."""

from __future__ import annotations

import datetime

import pytest

from civil import clamp_day, is_leap_year, max_day_of_month
from civil._internal.calendar import (
    normalize,
    normalize_month,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from civil.errors import ValidationError


class TestLeapYear:
    """Tests for is_leap_year()."""

    @pytest.mark.parametrize("year", [2000, 2024, 1996, 1600, 0, -4, -400])
    def test_leap(self, year: int) -> None:
        assert is_leap_year(year)

    @pytest.mark.parametrize("year", [1900, 2100, 2023, 1, -1, -100])
    def test_not_leap(self, year: int) -> None:
        assert not is_leap_year(year)


class TestMaxDayOfMonth:
    """Tests for max_day_of_month() and clamp_day()."""

    def test_table(self) -> None:
        lengths = [max_day_of_month(2017, month) for month in range(1, 13)]
        assert lengths == [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

    def test_february(self) -> None:
        assert max_day_of_month(2016, 2) == 29
        assert max_day_of_month(2017, 2) == 28
        assert max_day_of_month(1900, 2) == 28
        assert max_day_of_month(2000, 2) == 29

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_invalid_month(self, month: int) -> None:
        with pytest.raises(ValidationError, match="month must be between 1 and 12"):
            max_day_of_month(2017, month)

    def test_clamp_day(self) -> None:
        assert clamp_day(2011, 2, 31) == 28
        assert clamp_day(2012, 2, 31) == 29
        assert clamp_day(2012, 2, 15) == 15
        assert clamp_day(2012, 2, 0) == 0


class TestOrdinals:
    """Tests for ordinal conversions."""

    def test_matches_stdlib(self) -> None:
        for year, month, day in [(1, 1, 1), (1858, 11, 17), (1970, 1, 1), (2000, 2, 29), (9999, 12, 31)]:
            ordinal = datetime.date(year, month, day).toordinal()
            assert ymd_to_ordinal(year, month, day) == ordinal
            assert ordinal_to_ymd(ordinal) == (year, month, day)

    def test_cycle_boundaries(self) -> None:
        assert ordinal_to_ymd(ymd_to_ordinal(2000, 12, 31)) == (2000, 12, 31)
        assert ordinal_to_ymd(ymd_to_ordinal(2004, 12, 31)) == (2004, 12, 31)
        assert ordinal_to_ymd(ymd_to_ordinal(-400, 12, 31)) == (-400, 12, 31)
        assert ordinal_to_ymd(ymd_to_ordinal(-1, 12, 31)) == (-1, 12, 31)

    def test_consecutive_days_across_year_zero(self) -> None:
        start = ymd_to_ordinal(-2, 1, 1)
        expected = datetime.date(2002, 1, 1)
        for offset in range(365 * 4 + 1):
            year, month, day = ordinal_to_ymd(start + offset)
            shifted = expected + datetime.timedelta(days=offset)
            # 2000 years apart, so the leap pattern matches
            assert (year + 2004, month, day) == (shifted.year, shifted.month, shifted.day)


class TestNormalize:
    """Tests for normalize() and normalize_month()."""

    @pytest.mark.parametrize(
        ("given", "expected"),
        [
            ((2016, 2, 30), (2016, 3, 1)),
            ((2016, 13, 1), (2017, 1, 1)),
            ((2016, 0, 1), (2015, 12, 1)),
            ((2016, 1, 0), (2015, 12, 31)),
            ((2016, 1, 32), (2016, 2, 1)),
            ((1, -1, 1), (0, 11, 1)),
            ((2016, 3, -1), (2016, 2, 28)),
            ((2016, 25, 1), (2018, 1, 1)),
        ],
    )
    def test_normalize(self, given: tuple[int, int, int], expected: tuple[int, int, int]) -> None:
        assert normalize(*given) == expected

    def test_normalize_month(self) -> None:
        assert normalize_month(2016, 12) == (2016, 12)
        assert normalize_month(2016, 13) == (2017, 1)
        assert normalize_month(2016, -11) == (2015, 1)
