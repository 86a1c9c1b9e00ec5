# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errpolicy
"""
The ExtendedError type.

An ExtendedError decorates an underlying error with a user message, a
handling policy, a severity level and a stack-frame budget. Calling
``handle()`` prints the user message, logs the diagnostic detail and then
returns or ends the process according to the policy.

Example:
    err = ExtendedError(exc, LOG_ERR, "could not read settings").set_stack_depth(0)
    return err.handle("load_settings", path)
"""

from __future__ import annotations

import traceback
from typing import Any

from errpolicy.defaults import HandlerDefaults, LogFunc, PrintFunc, current_defaults
from errpolicy.messages import concat_messages
from errpolicy.policy import UNLIMITED_FRAMES, HandlingPolicy, Severity
from errpolicy.stack import capture_stack, frames_of, render_stack


class ExtendedError(Exception):
    """
    Error carrying its own presentation and handling policy.

    Defaults to level 1 logging and 3 stack frames. The panic and exit
    policies switch to level 4, every stack frame and the fatal logger.
    """

    def __init__(
        self,
        wrapped: BaseException | None,
        policy: HandlingPolicy | str,
        user_message: str = "",
        *,
        defaults: HandlerDefaults | None = None,
        prefix: str | None = None,
    ) -> None:
        """Initialize a new ExtendedError.

        Args:
            wrapped: The underlying error, may be None
            policy: Classification id; unknown ids become LOG_AND_RETURN
            user_message: Message shown to end users
            defaults: Defaults bundle (process defaults if None)
            prefix: Log prefix used instead of the policy value
        """
        super().__init__(user_message)
        defaults = defaults or current_defaults()

        self._wrapped = wrapped
        self._message = user_message
        self._level = defaults.level
        self._stack_frames = defaults.stack_frames
        self._log_fn = defaults.log_fn
        self._print_fn = defaults.print_fn
        self._prefix = prefix
        self._captured: list[traceback.FrameSummary] = []
        self.handled = False

        resolved = HandlingPolicy.lookup(policy)
        if resolved is not None and resolved.is_fatal:
            self._policy = resolved
            self._log_fn = defaults.fail_fn
            self._level = Severity.FATAL
            self._stack_frames = UNLIMITED_FRAMES
        else:
            self._policy = HandlingPolicy.LOG_AND_RETURN

        if wrapped is not None:
            self.__cause__ = wrapped

    @classmethod
    def new(
        cls,
        wrapped: BaseException | None,
        policy: HandlingPolicy | str,
        user_message: str = "",
        **kwargs: Any,
    ) -> ExtendedError:
        """Construct an ExtendedError; same arguments as the constructor."""
        return cls(wrapped, policy, user_message, **kwargs)

    @property
    def id(self) -> HandlingPolicy:
        return self._policy

    policy = id

    @property
    def user_message(self) -> str:
        return self._message

    @property
    def level(self) -> int:
        return self._level

    @property
    def stack_frames(self) -> int:
        return self._stack_frames

    @property
    def log_fn(self) -> LogFunc:
        return self._log_fn

    @property
    def print_fn(self) -> PrintFunc:
        return self._print_fn

    @property
    def prefix(self) -> str:
        """Prefix passed to the log function."""
        return self._prefix if self._prefix is not None else self._policy.value

    def set_level(self, level: int, log_fn: LogFunc | None = None) -> ExtendedError:
        """Change the log level, and optionally the log function.

        Level 0 turns logging off for this error.

        Args:
            level: New severity level
            log_fn: Function to use for logging

        Returns:
            self, for chaining
        """
        if not isinstance(level, int):
            raise TypeError(f"level must be an int, not {type(level).__name__}")
        self._level = level
        if log_fn is not None:
            self._log_fn = log_fn
        return self

    def set_printer(self, print_fn: PrintFunc) -> ExtendedError:
        """Use ``print_fn`` for user-facing messages."""
        self._print_fn = print_fn
        return self

    def set_stack_depth(self, frames: int) -> ExtendedError:
        """Set how many stack frames are logged.

        Args:
            frames: 0 turns stack traces off, a negative value means no limit

        Returns:
            self, for chaining
        """
        if not isinstance(frames, int):
            raise TypeError(f"frames must be an int, not {type(frames).__name__}")
        self._stack_frames = frames
        return self

    def handle(self, *context: Any) -> ExtendedError:
        """Print the user message, log the error and return it.

        With a fatal policy and the default fatal logger this does not
        return: the process exits once the error is logged.

        Args:
            *context: Messages for the log; the first one is a label

        Returns:
            self, marked as handled
        """
        self._print_fn(str(self))

        if self._level > 0:
            logmsg = concat_messages(*context)
            if self._stack_frames == 0:
                detail = f"{logmsg}\nPrinted for user: {self}\n"
            else:
                self._captured = capture_stack()
                stack = render_stack(self, self._stack_frames)
                detail = f"{logmsg}\nPrinted for user: {self!r}\n{stack} "
            self._log_fn(self.prefix, detail)

        self.handled = True
        return self

    def unwrap(self) -> BaseException | None:
        """Return the wrapped error."""
        return self._wrapped

    def stack_trace(self) -> list[traceback.FrameSummary]:
        """Frames of the wrapped error, of this error, or of the last handling call."""
        for source in (self._wrapped, self.__traceback__):
            if source is None:
                continue
            if isinstance(source, BaseException):
                frames = frames_of(source)
            else:
                frames = list(traceback.extract_tb(source))
            if frames:
                return frames
        return list(self._captured)

    def to_dict(self) -> dict[str, Any]:
        """Return a dictionary representation of the error."""
        wrapped = self._wrapped
        return {
            "policy": self._policy.name,
            "prefix": self.prefix,
            "message": self._message,
            "level": int(self._level),
            "stack_frames": self._stack_frames,
            "handled": self.handled,
            "wrapped_type": type(wrapped).__name__ if wrapped is not None else None,
            "wrapped_message": str(wrapped) if wrapped is not None else None,
        }

    def __reduce__(self) -> tuple[Any, ...]:
        # captured frames hold code objects, which do not pickle
        state = {**self.__dict__, "_captured": []}
        return (type(self), (self._wrapped, self._policy, self._message), state)

    def __str__(self) -> str:
        if self._wrapped is not None:
            return f"{self._message}: {self._wrapped}"
        return self._message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(policy={self._policy.name}, "
            f"message={self._message!r}, level={int(self._level)}, "
            f"stack_frames={self._stack_frames}, wrapped={self._wrapped!r})"
        )
