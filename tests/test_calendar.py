"""Tests for the internal calendar helpers."""

from __future__ import annotations

import datetime

import pytest

from datekit._internal.calendar import (
    days_in_month,
    days_in_year,
    is_leap_year,
    normalize_month,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from datekit._internal.validation import as_int


class TestLeapYears:
    """Tests for is_leap_year and days_in_year."""

    @pytest.mark.parametrize(
        "year,expected",
        [
            (2024, True),
            (2023, False),
            (2000, True),
            (1900, False),
            (2100, False),
            (0, True),
            (-4, True),
            (-100, False),
            (-400, True),
        ],
    )
    def test_is_leap_year(self, year: int, expected: bool) -> None:
        """Gregorian leap rules hold for positive, zero and negative years."""
        assert is_leap_year(year) is expected

    def test_days_in_year(self) -> None:
        assert days_in_year(2024) == 366
        assert days_in_year(2023) == 365


class TestDaysInMonth:
    """Tests for days_in_month."""

    def test_february(self) -> None:
        """February has 29 days only in leap years."""
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(1900, 2) == 28

    def test_thirty_and_thirty_one(self) -> None:
        assert days_in_month(2023, 4) == 30
        assert days_in_month(2023, 12) == 31

    @pytest.mark.parametrize("month", [0, 13])
    def test_invalid_month(self, month: int) -> None:
        with pytest.raises(ValueError, match="month must be 1-12"):
            days_in_month(2023, month)


class TestNormalizeMonth:
    """Tests for normalize_month."""

    @pytest.mark.parametrize(
        "year,month,expected",
        [
            (2023, 1, (2023, 1)),
            (2023, 12, (2023, 12)),
            (2023, 13, (2024, 1)),
            (2023, 25, (2025, 1)),
            (2023, 0, (2022, 12)),
            (2023, -1, (2022, 11)),
            (2023, -12, (2021, 12)),
        ],
    )
    def test_normalize(self, year: int, month: int, expected: tuple[int, int]) -> None:
        """Months outside 1-12 carry into the year."""
        assert normalize_month(year, month) == expected


class TestOrdinals:
    """Tests for ordinal conversion."""

    @pytest.mark.parametrize(
        "year,month,day",
        [
            (1, 1, 1),
            (1970, 1, 1),
            (2000, 2, 29),
            (2000, 12, 31),
            (2023, 3, 1),
            (2024, 1, 15),
            (9999, 12, 31),
        ],
    )
    def test_matches_stdlib(self, year: int, month: int, day: int) -> None:
        """Ordinals agree with datetime.date.toordinal()."""
        ordinal = datetime.date(year, month, day).toordinal()
        assert ymd_to_ordinal(year, month, day) == ordinal
        assert ordinal_to_ymd(ordinal) == (year, month, day)

    def test_last_day_of_400_year_cycle(self) -> None:
        """December 31 of a year divisible by 400 converts back correctly."""
        ordinal = ymd_to_ordinal(2000, 12, 31)
        assert ordinal_to_ymd(ordinal) == (2000, 12, 31)
        assert ordinal_to_ymd(ordinal + 1) == (2001, 1, 1)

    def test_year_zero(self) -> None:
        """Ordinal 0 is the last day of year 0."""
        assert ordinal_to_ymd(0) == (0, 12, 31)
        assert ymd_to_ordinal(0, 12, 31) == 0
        assert ymd_to_ordinal(0, 1, 1) == -365

    @pytest.mark.parametrize(
        "year,month,day",
        [
            (0, 2, 29),
            (-1, 12, 31),
            (-44, 3, 15),
            (-400, 1, 1),
            (-401, 12, 31),
            (-9999, 6, 30),
        ],
    )
    def test_negative_years(self, year: int, month: int, day: int) -> None:
        """Dates before year 1 convert in both directions."""
        assert ordinal_to_ymd(ymd_to_ordinal(year, month, day)) == (year, month, day)

    def test_far_future(self) -> None:
        """Years beyond 9999 convert in both directions."""
        assert ordinal_to_ymd(ymd_to_ordinal(12345, 6, 7)) == (12345, 6, 7)

    def test_consecutive_days_across_boundaries(self) -> None:
        """Each ordinal step advances exactly one calendar day."""
        start = ymd_to_ordinal(-1, 12, 30)
        assert [ordinal_to_ymd(start + i) for i in range(4)] == [
            (-1, 12, 30),
            (-1, 12, 31),
            (0, 1, 1),
            (0, 1, 2),
        ]

    def test_day_overflow_in_ymd_to_ordinal(self) -> None:
        """Day 32 of January lands on February 1."""
        assert ymd_to_ordinal(2023, 1, 32) == ymd_to_ordinal(2023, 2, 1)
        assert ymd_to_ordinal(2023, 3, 0) == ymd_to_ordinal(2023, 2, 28)


class TestAsInt:
    """Tests for as_int."""

    def test_accepts_int_and_bool(self) -> None:
        assert as_int("days", 5) == 5
        assert as_int("days", -5) == -5
        assert as_int("days", True) == 1

    @pytest.mark.parametrize("value", [1.5, 1.0, "3", None])
    def test_rejects_non_integers(self, value: object) -> None:
        """Non-integers raise TypeError naming the field."""
        with pytest.raises(TypeError, match="days must be an integer"):
            as_int("days", value)
