# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errpolicy
"""Formatting of context messages passed to handling calls."""

from __future__ import annotations

from typing import Any


def concat_messages(*messages: Any) -> str:
    """Concatenate context messages into one log line.

    The first message is a label followed by ": ", middle messages are
    followed by ", " and the last one stands alone. A single message is
    treated as the label.

    Args:
        *messages: Messages to concatenate, converted with str()

    Returns:
        The concatenated line ending in a newline, or "" for no messages
    """
    if not messages:
        return ""
    last = len(messages) - 1
    parts = []
    for i, msg in enumerate(messages):
        if i == 0:
            parts.append(f"{str(msg).rstrip(' ')}: ")
        elif i == last:
            parts.append(str(msg))
        else:
            parts.append(f"{msg}, ")
    return "".join(parts) + "\n"


def join_fragments(*fragments: Any) -> str:
    """Join message fragments into a user message."""
    return ", ".join(str(fragment) for fragment in fragments)
