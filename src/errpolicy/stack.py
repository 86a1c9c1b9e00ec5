# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errpolicy
"""
Stack trace capture and rendering.

Any error type can offer its own stack by implementing ``StackTracer``.
Raised exceptions without that method still expose the frames of their
traceback.
"""

from __future__ import annotations

import os
import traceback
from typing import Any, Protocol, runtime_checkable

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


@runtime_checkable
class StackTracer(Protocol):
    """Capability of errors that carry a captured stack."""

    def stack_trace(self) -> list[traceback.FrameSummary]:
        """Return the captured frames, most recent last."""
        ...


def frames_of(error: Any) -> list[traceback.FrameSummary] | None:
    """Get the stack frames an error can provide.

    Args:
        error: Any object, usually an exception

    Returns:
        The frames (most recent last), or None if the error has none
    """
    if isinstance(error, StackTracer):
        return list(error.stack_trace())
    tb = getattr(error, "__traceback__", None)
    if tb is not None:
        return list(traceback.extract_tb(tb))
    return None


def capture_stack() -> list[traceback.FrameSummary]:
    """Capture the current call stack, leaving out this package's frames."""
    return [
        frame
        for frame in traceback.extract_stack()
        if os.path.dirname(os.path.abspath(frame.filename)) != _PACKAGE_DIR
    ]


def render_stack(source: Any, frames: int) -> str:
    """Render the stack of ``source`` as text.

    Args:
        source: Object to take the frames from (see frames_of)
        frames: Budget: 0 renders nothing, negative renders every frame,
            positive renders that many of the most recent frames

    Returns:
        The formatted frames, or "" when disabled or unavailable
    """
    if frames == 0:
        return ""
    stack = frames_of(source)
    if not stack:
        return ""
    if 0 < frames < len(stack):
        stack = stack[-frames:]
    return "".join(traceback.format_list(stack))
