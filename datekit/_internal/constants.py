"""Internal constants for datekit.

Calendar limits and unit conversions used by the calendar helpers and
CalendarDate. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
MICROS_PER_SECOND: int = 1_000_000
MICROS_PER_MINUTE: int = 60 * MICROS_PER_SECOND
MICROS_PER_HOUR: int = 60 * MICROS_PER_MINUTE
MICROS_PER_DAY: int = 24 * MICROS_PER_HOUR  # 86_400_000_000

# Gregorian calendar cycles
DAYS_PER_400_YEARS: int = 146_097
DAYS_PER_100_YEARS: int = 36_524
DAYS_PER_4_YEARS: int = 1_461
DAYS_PER_YEAR: int = 365

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Range the stdlib datetime types can represent
STDLIB_MIN_YEAR: int = 1
STDLIB_MAX_YEAR: int = 9999

# Separator between year, month and day in formatted output
DATE_SEPARATOR: str = "-"


__all__ = [
    "MICROS_PER_SECOND",
    "MICROS_PER_MINUTE",
    "MICROS_PER_HOUR",
    "MICROS_PER_DAY",
    "DAYS_PER_400_YEARS",
    "DAYS_PER_100_YEARS",
    "DAYS_PER_4_YEARS",
    "DAYS_PER_YEAR",
    "DAYS_IN_MONTH",
    "STDLIB_MIN_YEAR",
    "STDLIB_MAX_YEAR",
    "DATE_SEPARATOR",
]
