"""Validation utilities for datekit.

Date fields and day counts must be integers. Values are never
range-checked: out-of-range fields roll over instead.

This module is not part of the public API.
"""

from __future__ import annotations

import operator


def as_int(name: str, value: object) -> int:
    """Return ``value`` as an int, or raise TypeError naming the field.

    Accepts anything implementing ``__index__`` (int, bool, numpy
    integers). Floats and strings are rejected rather than truncated.

    Args:
        name: Field name used in the error message.
        value: The value to coerce.

    Returns:
        The integer value.

    Raises:
        TypeError: If the value is not an integer.

    Examples:
        >>> as_int("days", 3)
        3
        >>> as_int("days", 1.5)
        Traceback (most recent call last):
        ...
        TypeError: days must be an integer, got float
    """
    try:
        return operator.index(value)  # type: ignore[arg-type]
    except TypeError:
        raise TypeError(
            f"{name} must be an integer, got {type(value).__name__}"
        ) from None


__all__ = ["as_int"]
