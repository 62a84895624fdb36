"""Tests for datekit package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations

import logging


def test_import_datekit() -> None:
    """Import datekit package succeeds."""
    import datekit

    assert hasattr(datekit, "__version__")
    assert datekit.__version__ == "0.1.0"


def test_public_api() -> None:
    """Top-level exports are the documented names."""
    import datekit

    for name in ("CalendarDate", "add_days", "format_date", "DatekitError", "ConversionError"):
        assert name in datekit.__all__
        assert hasattr(datekit, name)


def test_import_subpackages() -> None:
    """Each subpackage declares __all__."""
    from datekit import _internal, arithmetic, core, format  # noqa: A004

    for module in (_internal, arithmetic, core, format):
        assert hasattr(module, "__all__")


def test_import_errors() -> None:
    """Exception hierarchy is rooted at DatekitError."""
    from datekit.errors import ConversionError, DatekitError

    assert issubclass(ConversionError, DatekitError)
    assert issubclass(ConversionError, ValueError)
    assert issubclass(DatekitError, Exception)


def test_import_constants() -> None:
    """Import datekit._internal.constants succeeds."""
    from datekit._internal.constants import (
        DAYS_IN_MONTH,
        DAYS_PER_400_YEARS,
        MICROS_PER_DAY,
    )

    assert MICROS_PER_DAY == 86_400_000_000
    assert DAYS_PER_400_YEARS == 146_097
    assert len(DAYS_IN_MONTH) == 13  # 0-indexed placeholder + 12 months


def test_package_logger_has_null_handler() -> None:
    """Importing datekit never configures output handlers."""
    import datekit  # noqa: F401

    handlers = logging.getLogger("datekit").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_get_logger_strips_internal_segments() -> None:
    """Module loggers are named without internal package segments."""
    from datekit.logging_config import get_logger

    assert get_logger("datekit.core.calendar_date").name == "datekit.calendar_date"
    assert get_logger("datekit._internal.calendar").name == "datekit.calendar"
    assert get_logger("datekit.format.date").name == "datekit.format.date"
