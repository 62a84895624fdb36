"""Date formatting.

Functions:
    format_date: Format a date as YYYY-MM-DD.

Examples:
    >>> import datetime
    >>> from datekit.format import format_date

    >>> format_date(datetime.date(2023, 2, 1))
    '2023-02-01'
"""

from __future__ import annotations

from datekit.format.date import HasDateFields, format_date

__all__: list[str] = [
    "HasDateFields",
    "format_date",
]
