# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errpolicy
"""
Handling policies and severity levels.

A handling policy is the classification id attached to an error. Its value
is also the prefix written in front of every log line for that error.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Final

UNLIMITED_FRAMES: Final = -1


class HandlingPolicy(str, Enum):
    """What handling does once the error has been printed and logged."""

    LOG_AND_RETURN = "Log and return "
    LOG_AND_PANIC = "Log and panic "
    LOG_AND_EXIT = "Log and exit "

    @property
    def is_fatal(self) -> bool:
        """Whether handling ends the process."""
        return self is not HandlingPolicy.LOG_AND_RETURN

    @classmethod
    def lookup(cls, value: HandlingPolicy | str) -> HandlingPolicy | None:
        """Find the policy matching a member, a member value or a member name.

        Args:
            value: Policy, literal prefix value, or member name

        Returns:
            The matching policy, or None when nothing matches
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        for member in cls:
            if value == member.value or value.upper() == member.name:
                return member
        return None

    @classmethod
    def from_value(cls, value: HandlingPolicy | str) -> HandlingPolicy:
        """Convert to a policy, normalizing unknown ids to LOG_AND_RETURN.

        Args:
            value: Policy, literal prefix value, or member name

        Returns:
            The matching policy or LOG_AND_RETURN
        """
        return cls.lookup(value) or cls.LOG_AND_RETURN


class Severity(IntEnum):
    """Conventional severity levels. Any int is accepted where these are."""

    SILENT = 0
    DEFAULT = 1
    FATAL = 4


LOG_ERR: Final = HandlingPolicy.LOG_AND_RETURN
PANIC: Final = HandlingPolicy.LOG_AND_PANIC
FAIL: Final = HandlingPolicy.LOG_AND_EXIT
