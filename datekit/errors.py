"""datekit exception hierarchy.

All datekit-specific exceptions inherit from DatekitError. Field type
problems raise the builtin TypeError, as the stdlib datetime types do.
"""

from __future__ import annotations


class DatekitError(Exception):
    """Base exception for all datekit errors."""

    pass


class ConversionError(DatekitError, ValueError):
    """A CalendarDate cannot be represented in the requested type.

    Raised when converting to a stdlib ``datetime`` whose year falls
    outside 1-9999. Subclasses ValueError so callers catching the
    stdlib's own range error keep working.

    Examples:
        - ``CalendarDate(12345, 1, 1).to_datetime()``
        - ``CalendarDate(0, 6, 15).to_datetime()``
    """

    pass


__all__ = [
    "DatekitError",
    "ConversionError",
]
