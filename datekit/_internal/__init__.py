"""Internal utilities for datekit.

This module contains private implementation details:
    - Calendar arithmetic (leap years, month lengths, ordinals)
    - Constants and magic numbers
    - Field validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datekit._internal.calendar import (
    days_in_month,
    is_leap_year,
    normalize_month,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from datekit._internal.validation import as_int

__all__: list[str] = [
    "as_int",
    "days_in_month",
    "is_leap_year",
    "normalize_month",
    "ordinal_to_ymd",
    "ymd_to_ordinal",
]
