"""Calendar date formatting.

Functions:
    format_date: Format a date as YYYY-MM-DD.
"""

from __future__ import annotations

from typing import Protocol

from datekit._internal.constants import DATE_SEPARATOR


class HasDateFields(Protocol):
    """Anything exposing integer year, 1-indexed month, and day."""

    @property
    def year(self) -> int: ...

    @property
    def month(self) -> int: ...

    @property
    def day(self) -> int: ...


def format_date(date: HasDateFields) -> str:
    """Format a date as YYYY-MM-DD.

    The year is written in plain decimal with no padding or truncation;
    month and day are zero-padded to two digits. Only the calendar day
    is used: time of day and tzinfo do not affect the result.

    Accepts ``datetime.date``, ``datetime.datetime``, CalendarDate, or
    any object with ``year``, ``month`` (1-12) and ``day`` attributes.
    The value is not validated; a missing field raises the native
    AttributeError.

    Args:
        date: The date to format.

    Returns:
        The formatted date string.

    Examples:
        >>> import datetime
        >>> format_date(datetime.date(2023, 5, 7))
        '2023-05-07'

        >>> format_date(datetime.datetime(2024, 1, 15, 23, 59))
        '2024-01-15'
    """
    return DATE_SEPARATOR.join(
        (str(date.year), f"{date.month:02d}", f"{date.day:02d}")
    )


__all__ = ["HasDateFields", "format_date"]
