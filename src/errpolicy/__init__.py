# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errpolicy

"""
Public API for errpolicy.

Decorate errors with a user message and a handling policy where they are
created, then handle them in one call.
"""

from __future__ import annotations

from errpolicy.config import HandlingSettings, get_settings, reset_settings
from errpolicy.defaults import (
    HandlerDefaults,
    LogFunc,
    PrintFunc,
    configure_defaults,
    current_defaults,
    error_log,
    fail_log,
    print_message,
    reset_defaults,
    restore_defaults,
)
from errpolicy.extended import ExtendedError
from errpolicy.handle import handle, handle_with
from errpolicy.messages import concat_messages, join_fragments
from errpolicy.policy import (
    FAIL,
    LOG_ERR,
    PANIC,
    UNLIMITED_FRAMES,
    HandlingPolicy,
    Severity,
)
from errpolicy.stack import StackTracer, render_stack

__all__ = [
    # Policies
    "HandlingPolicy",
    "Severity",
    "LOG_ERR",
    "PANIC",
    "FAIL",
    "UNLIMITED_FRAMES",
    # Errors
    "ExtendedError",
    "StackTracer",
    # Handling
    "handle",
    "handle_with",
    "concat_messages",
    "join_fragments",
    "render_stack",
    # Defaults
    "HandlerDefaults",
    "LogFunc",
    "PrintFunc",
    "error_log",
    "fail_log",
    "print_message",
    "current_defaults",
    "configure_defaults",
    "restore_defaults",
    "reset_defaults",
    # Settings
    "HandlingSettings",
    "get_settings",
    "reset_settings",
]
