"""Logging helpers for datekit.

datekit is a library: it never configures handlers beyond a NullHandler
on the package logger. Applications opt in with ``logging.basicConfig``
or their own handlers on the ``datekit`` logger.
"""

from __future__ import annotations

import logging

PACKAGE_LOGGER_NAME = "datekit"


def install_null_handler() -> None:
    """Attach a NullHandler to the package logger once."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified module.

    Internal ``_internal`` and ``core`` segments are dropped so records
    read ``datekit.calendar_date`` rather than the full module path.

    Args:
        name: Name of the module (typically __name__)

    Returns:
        Logger instance
    """
    for segment in ("._internal.", ".core."):
        name = name.replace(segment, ".")
    return logging.getLogger(name)


__all__ = ["PACKAGE_LOGGER_NAME", "install_null_handler", "get_logger"]
