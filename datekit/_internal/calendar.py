"""Calendar utilities for datekit.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap year logic, month lengths, month rollover and
conversion between (year, month, day) and ordinal day numbers.

Ordinal 1 = 0001-01-01, matching ``datetime.date.toordinal()``. Years
use astronomical numbering, so year 0 exists and ordinals may be zero or
negative.

This module is not part of the public API.
"""

from __future__ import annotations

from datekit._internal.constants import (
    DAYS_IN_MONTH,
    DAYS_PER_100_YEARS,
    DAYS_PER_400_YEARS,
    DAYS_PER_4_YEARS,
    DAYS_PER_YEAR,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
        >>> is_leap_year(2023)
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def normalize_month(year: int, month: int) -> tuple[int, int]:
    """Carry an out-of-range month into the year.

    Month 13 is January of the following year, month 0 is December of
    the previous one.

    Examples:
        >>> normalize_month(2023, 13)
        (2024, 1)
        >>> normalize_month(2023, 0)
        (2022, 12)
        >>> normalize_month(2023, -11)
        (2022, 1)
    """
    carry, month_index = divmod(month - 1, 12)
    return (year + carry, month_index + 1)


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to an ordinal day number.

    The day is not range-checked against the month: day 32 of January
    lands on February 1 and day 0 on the last day of the previous month.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        The ordinal day number.

    Examples:
        >>> ymd_to_ordinal(1, 1, 1)
        1
        >>> ymd_to_ordinal(2024, 1, 15)
        738900
    """
    # Floor division keeps the leap day count right for years <= 0
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400

    return days_before_year + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal day number to year, month, day.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> ordinal_to_ymd(1)
        (1, 1, 1)
        >>> ordinal_to_ymd(0)
        (0, 12, 31)
    """
    if ordinal <= 0:
        # Shift into positive ordinals by whole 400-year cycles; the
        # Gregorian calendar repeats exactly every cycle.
        cycles = -ordinal // DAYS_PER_400_YEARS + 1
        year, month, day = ordinal_to_ymd(ordinal + cycles * DAYS_PER_400_YEARS)
        return (year - 400 * cycles, month, day)

    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    n400, n = divmod(n, DAYS_PER_400_YEARS)
    n100, n = divmod(n, DAYS_PER_100_YEARS)
    n4, n = divmod(n, DAYS_PER_4_YEARS)
    n1, n = divmod(n, DAYS_PER_YEAR)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a 4-year or 400-year cycle is December 31 of a leap year
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert a 1-indexed day-of-year to (month, day)."""
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "normalize_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
]
