"""
Scoped overrides of the breakpoint and media expression tables.

    with media_context(context, {"tablet": "900px"}) as tweaked:
        media(">=tablet", body=".a { ... }", context=tweaked)

The outer context is an immutable value, so it is unchanged once the
block exits, whether normally or through an exception.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any, TypeVar

from mediaq.core.ir.context import ResolutionContext

logger = logging.getLogger(__name__)

T = TypeVar("T")


def with_context(
    context: ResolutionContext,
    breakpoints: Mapping[str, Any] | None,
    media_expressions: Mapping[str, str] | None,
    body: Callable[[ResolutionContext], T],
) -> T:
    """Run body with a context whose tables include the given overrides."""
    tweaked = context.tweaked(breakpoints, media_expressions)
    logger.debug(
        "Entering tweaked context (breakpoints=%s, expressions=%s)",
        sorted(breakpoints or {}),
        sorted(media_expressions or {}),
    )
    return body(tweaked)


@contextmanager
def media_context(
    context: ResolutionContext,
    breakpoints: Mapping[str, Any] | None = None,
    media_expressions: Mapping[str, str] | None = None,
) -> Iterator[ResolutionContext]:
    """Context manager form of with_context yielding the tweaked context."""
    yield context.tweaked(breakpoints, media_expressions)
