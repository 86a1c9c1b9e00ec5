# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errpolicy
"""
Configuration for error handling.

Settings are environment-driven (``ERRPOLICY_*``) and provide the starting
values for every newly constructed error and for the package logger.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_STREAMS = ("stderr", "stdout")


class HandlingSettings(BaseSettings):
    """Starting values for new errors and the package logger.

    Every field can be set with an ``ERRPOLICY_<FIELD>`` environment variable.
    """

    model_config = SettingsConfigDict(
        env_prefix="ERRPOLICY_",
        extra="ignore",
        case_sensitive=False,
        frozen=False,
    )

    level: int = Field(default=1, ge=0, description="Default severity level")
    stack_frames: int = Field(
        default=3, description="Default stack frames (0 = none, <0 = all)"
    )
    exit_code: int = Field(default=1, description="Exit status for fatal policies")
    logger_name: str = Field(default="errpolicy", description="Package logger name")
    log_level: str = Field(default="DEBUG", description="Package logger level")
    date_format: str = Field(
        default="%Y/%m/%d %H:%M:%S", description="Timestamp format for log lines"
    )
    stream: str = Field(default="stderr", description="Log stream: stderr or stdout")
    propagate: bool = Field(
        default=False, description="Also pass records to ancestor loggers"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: Any) -> str:
        """Normalize the package logger level to an upper-case level name.

        Raises:
            ValueError: If the name is not a level known to ``logging``
        """
        if not isinstance(v, str):
            raise ValueError(f"log_level must be a level name, got {type(v).__name__}")
        name = v.upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown logging level name: {v}")
        return name

    @field_validator("stream")
    @classmethod
    def validate_stream(cls, v: str) -> str:
        """Validate the log stream name."""
        stream = v.lower()
        if stream not in _STREAMS:
            raise ValueError(f"Invalid stream: {v} (expected one of {_STREAMS})")
        return stream

    @classmethod
    def load(cls) -> HandlingSettings:
        """Read a fresh settings instance from the ``ERRPOLICY_*`` environment."""
        return cls()


_settings: HandlingSettings | None = None


def get_settings() -> HandlingSettings:
    """Get the process settings, reading the environment on first use only."""
    global _settings
    if _settings is None:
        _settings = HandlingSettings.load()
    return _settings


def reset_settings() -> None:
    """Forget the process settings so the environment is read again."""
    global _settings
    _settings = None
