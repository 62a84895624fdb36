"""Day arithmetic for date values.

Supported operations:
    - add_days: Shift a date by a signed number of calendar days

Type Combinations:
    - CalendarDate + days -> CalendarDate
    - datetime.datetime + days -> datetime.datetime
    - datetime.date + days -> datetime.date
"""

from __future__ import annotations

import datetime
from typing import TypeVar, overload

from datekit._internal.validation import as_int
from datekit.core.calendar_date import CalendarDate

D = TypeVar("D")


@overload
def add_days(date: CalendarDate, days: int) -> CalendarDate: ...


@overload
def add_days(date: D, days: int) -> D: ...


def add_days(date, days):
    """Return a new date shifted by ``days`` calendar days.

    Day-of-month overflow rolls into the next month and year, and
    negative counts roll back across month and year boundaries. The
    time of day (and tzinfo, for aware datetimes) is kept, so the shift
    is by calendar days rather than elapsed 24-hour periods. The input
    is never modified.

    CalendarDate values use their own ordinal arithmetic and accept any
    year. Every other value is shifted with ``date + timedelta(days=days)``,
    so stdlib limits surface unchanged (OverflowError past year 9999).

    Args:
        date: A CalendarDate, ``datetime.date`` or ``datetime.datetime``.
        days: Number of days to add (can be negative or zero).

    Returns:
        A new value of the same type as ``date``.

    Raises:
        TypeError: If days is not an integer.

    Examples:
        >>> import datetime
        >>> add_days(datetime.date(2023, 1, 31), 1)
        datetime.date(2023, 2, 1)

        >>> add_days(datetime.date(2024, 3, 1), -1)
        datetime.date(2024, 2, 29)

        >>> add_days(CalendarDate(9999, 12, 31), 1)
        CalendarDate(10000, 1, 1)
    """
    days = as_int("days", days)

    if isinstance(date, CalendarDate):
        return date.add_days(days)
    return date + datetime.timedelta(days=days)


__all__ = ["add_days"]
