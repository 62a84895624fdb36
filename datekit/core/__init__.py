"""Core value types for datekit.

Types:
    CalendarDate: Gregorian calendar day with optional time of day
"""

from __future__ import annotations

from datekit.core.calendar_date import CalendarDate

__all__: list[str] = [
    "CalendarDate",
]
