# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errpolicy
"""
Default log and print functions, and the defaults bundle.

Every ExtendedError copies its log function, print function, level and
stack-frame budget from a ``HandlerDefaults`` bundle when it is constructed.
The bundle is either passed explicitly or taken from the process defaults.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias

from errpolicy.config import HandlingSettings, get_settings, reset_settings
from errpolicy.logging import get_logger

LogFunc: TypeAlias = Callable[..., None]
PrintFunc: TypeAlias = Callable[..., None]


def error_log(*elem: Any) -> None:
    """Log an error line.

    The first argument is used as the line prefix, the rest is written
    space-separated. With only a prefix an empty line is written.
    """
    if not elem:
        return
    prefix, rest = str(elem[0]), elem[1:]
    get_logger().error(" ".join(str(e) for e in rest), extra={"prefix": prefix})


def fail_log(*elem: Any) -> None:
    """Log a fatal line and exit the process.

    The first argument is used as the line prefix and is also part of the
    message.

    Raises:
        SystemExit: Always, with the configured exit code
    """
    if not elem:
        return
    settings = get_settings()
    get_logger(settings).critical(
        " ".join(str(e) for e in elem), extra={"prefix": str(elem[0])}
    )
    raise SystemExit(settings.exit_code)


def print_message(*msg: Any) -> None:
    """Print a user-facing message to standard output."""
    print(*msg)


@dataclass(frozen=True)
class HandlerDefaults:
    """Values copied into each ExtendedError at construction."""

    log_fn: LogFunc = error_log
    fail_fn: LogFunc = fail_log
    print_fn: PrintFunc = print_message
    level: int = 1
    stack_frames: int = 3

    @classmethod
    def from_settings(cls, settings: HandlingSettings | None = None) -> HandlerDefaults:
        """Build defaults from settings.

        Args:
            settings: Optional settings (process settings if None)

        Returns:
            Defaults using the default functions and the configured numbers
        """
        settings = settings or get_settings()
        return cls(level=settings.level, stack_frames=settings.stack_frames)


_defaults: HandlerDefaults | None = None


def current_defaults() -> HandlerDefaults:
    """Get the process defaults, building them from settings on first use."""
    global _defaults
    if _defaults is None:
        _defaults = HandlerDefaults.from_settings()
    return _defaults


def configure_defaults(**changes: Any) -> HandlerDefaults:
    """Replace fields of the process defaults.

    Only errors constructed afterwards see the new values.

    Args:
        **changes: HandlerDefaults fields to replace

    Returns:
        The previous defaults, so callers can restore them
    """
    global _defaults
    previous = current_defaults()
    _defaults = dataclasses.replace(previous, **changes)
    return previous


def restore_defaults(defaults: HandlerDefaults) -> None:
    """Install a defaults bundle, typically one returned by configure_defaults."""
    global _defaults
    _defaults = defaults


def reset_defaults() -> None:
    """Drop the process defaults and settings so both are read again."""
    global _defaults
    _defaults = None
    reset_settings()
