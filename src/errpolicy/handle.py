# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errpolicy
"""
Free functions for handling any error.

``handle`` responds according to the policy attached when the error was
built. Plain exceptions are promoted to ExtendedError on the fly when a
classification id is supplied.

Example:
    if (err := handle(exc, LOG_ERR, "reading", path)) is not None:
        return err
"""

from __future__ import annotations

import logging
from typing import Any

from errpolicy.defaults import HandlerDefaults
from errpolicy.extended import ExtendedError
from errpolicy.messages import join_fragments
from errpolicy.policy import HandlingPolicy

logger = logging.getLogger(__name__)


def handle(err: BaseException | None, *context: Any) -> BaseException | None:
    """Handle an error according to its policy.

    Args:
        err: The error to handle, may be None
        *context: For an ExtendedError, log context messages. For any other
            error, a classification id followed by user message fragments.

    Returns:
        None for None, the handled ExtendedError, or ``err`` unchanged when it
        is a plain error without a classification id
    """
    if err is None:
        return None

    if isinstance(err, ExtendedError):
        return err.handle(*context)

    if context and isinstance(context[0], (HandlingPolicy, str)):
        return _promote(err, context[0], context[1:]).handle()

    logger.debug(
        "Not handling %s: no classification id given", type(err).__name__
    )
    return err


def handle_with(
    err: BaseException | None,
    policy: HandlingPolicy | str,
    *fragments: Any,
    defaults: HandlerDefaults | None = None,
) -> ExtendedError | None:
    """Handle an error under an explicit policy.

    Args:
        err: The error to handle, may be None
        policy: Classification id used when ``err`` is not an ExtendedError
        *fragments: User message fragments, or log context for an
            ExtendedError
        defaults: Defaults bundle for a promoted error

    Returns:
        None for None, otherwise the handled ExtendedError
    """
    if err is None:
        return None
    if isinstance(err, ExtendedError):
        return err.handle(*fragments)
    return _promote(err, policy, fragments, defaults).handle()


def _promote(
    err: BaseException,
    policy: HandlingPolicy | str,
    fragments: tuple[Any, ...],
    defaults: HandlerDefaults | None = None,
) -> ExtendedError:
    # an id that names no policy is kept as the log prefix
    prefix = None
    if HandlingPolicy.lookup(policy) is None:
        prefix = str(policy)
    return ExtendedError(
        err, policy, join_fragments(*fragments), defaults=defaults, prefix=prefix
    )
