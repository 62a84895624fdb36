"""datekit: small helpers for calendar dates.

datekit formats dates as YYYY-MM-DD and shifts them by whole days,
working on stdlib dates and datetimes as well as its own CalendarDate.

Core Types:
    CalendarDate: Gregorian calendar day with optional time of day,
        unbounded years, and field rollover on construction

Functions:
    format_date: Format a date as YYYY-MM-DD
    add_days: Shift a date by a signed number of days

Exceptions:
    DatekitError: Base exception
    ConversionError: CalendarDate outside the stdlib datetime range

Example:
    >>> import datetime
    >>> from datekit import add_days, format_date
    >>> format_date(add_days(datetime.date(2023, 12, 31), 1))
    '2024-01-01'
"""

from __future__ import annotations

__version__ = "0.1.0"

from datekit.logging_config import install_null_handler

install_null_handler()

# Core types
from datekit.core.calendar_date import CalendarDate

# Operations
from datekit.arithmetic.ops import add_days
from datekit.format.date import format_date

# Exceptions
from datekit.errors import ConversionError, DatekitError

__all__: list[str] = [
    "__version__",
    # Core types
    "CalendarDate",
    # Operations
    "add_days",
    "format_date",
    # Exceptions
    "DatekitError",
    "ConversionError",
]
