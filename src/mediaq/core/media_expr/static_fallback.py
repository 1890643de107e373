"""
Static fallback evaluation for targets without media query support.

Answers: if the viewport were exactly the fallback breakpoint, would a
block guarded by these conditions have been shown?
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from mediaq.core.errors import UnknownBreakpointError
from mediaq.core.ir.context import ResolutionContext
from mediaq.core.ir.length import Length
from mediaq.core.media_expr.compiler import expression_prefix, expression_value
from mediaq.core.media_expr.tokenizer import tokenize

logger = logging.getLogger(__name__)


def fallback_breakpoint(context: ResolutionContext) -> Length:
    """Length of the configured fallback breakpoint.

    Raises:
        UnknownBreakpointError: If the name is not a breakpoint.
    """
    value = context.breakpoint(context.no_media_breakpoint)
    if value is None:
        raise UnknownBreakpointError(
            f"`{context.no_media_breakpoint}` is not a valid breakpoint."
        )
    return value


def intercepts_static_breakpoint(conditions: Iterable[str], context: ResolutionContext) -> bool:
    """Check whether every condition holds at the fallback breakpoint.

    Media expressions pass only when listed in ``no_media_expressions``.
    For operator expressions a "max" bound passes when the fallback is at
    or below it and a "min" bound passes when the fallback is above it.
    The first failing condition returns False.
    """
    fallback = fallback_breakpoint(context)

    for condition in conditions:
        if context.is_media_expression(condition):
            if condition not in context.no_media_expressions:
                logger.debug("%r is not allowed without media queries", condition)
                return False
            continue

        tokens = tokenize(condition)
        bound = expression_value(tokens, context)
        if expression_prefix(tokens.operator) == "max":
            passes = fallback <= bound
        else:
            passes = fallback > bound
        if not passes:
            logger.debug("%r does not hold at %s", condition, fallback)
            return False

    return True
