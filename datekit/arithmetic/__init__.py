"""Date arithmetic operations.

Arithmetic Operations (from datekit.arithmetic.ops):
    - add_days: Shift a date by a signed number of calendar days
"""

from __future__ import annotations

from datekit.arithmetic.ops import add_days

__all__ = [
    "add_days",
]
