# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errpolicy
"""
Package logger for errpolicy.

The default log functions write through a standard library logger. Each
record carries its own prefix (the classification id) so that handling never
reconfigures shared logger state.
"""

from __future__ import annotations

import logging
import sys

from errpolicy.config import HandlingSettings, get_settings


class PrefixFormatter(logging.Formatter):
    """Formatter rendering ``<prefix><timestamp> <message>``."""

    def __init__(self, datefmt: str = "%Y/%m/%d %H:%M:%S") -> None:
        super().__init__(fmt="%(prefix)s%(asctime)s %(message)s", datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:
        """Format a record, tolerating records logged without a prefix.

        Args:
            record: The log record to format

        Returns:
            Formatted log string
        """
        if not hasattr(record, "prefix"):
            record.prefix = ""
        return super().format(record)


class _PackageHandler(logging.StreamHandler):
    """Marker type for the handler installed by get_logger."""


def get_logger(settings: HandlingSettings | None = None) -> logging.Logger:
    """Get the package logger, installing its stream handler on first use.

    Records stop at the package logger unless ``settings.propagate`` is set,
    so an application's root handlers do not print every line a second time.

    Args:
        settings: Optional settings (process settings if None)

    Returns:
        The configured logger
    """
    settings = settings or get_settings()
    logger = logging.getLogger(settings.logger_name)
    if not any(isinstance(h, _PackageHandler) for h in logger.handlers):
        stream = sys.stdout if settings.stream == "stdout" else sys.stderr
        handler = _PackageHandler(stream)
        handler.setFormatter(PrefixFormatter(settings.date_format))
        logger.addHandler(handler)
        logger.setLevel(settings.log_level)
        logger.propagate = settings.propagate
    return logger


def reset_logging(name: str = "errpolicy") -> None:
    """Remove the handlers installed by get_logger.

    Args:
        name: Logger name to reset
    """
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        if isinstance(handler, _PackageHandler):
            logger.removeHandler(handler)
            handler.close()
    logger.propagate = True
