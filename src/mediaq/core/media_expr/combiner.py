"""
Combining condition lists into nested media blocks.

Every condition must hold, so each one opens its own @media guard
inside the previous one:

    combine(["<=tablet", "retina2x"], ".a { color: red; }", context)

    @media (max-width: 768px) {
      @media (-webkit-min-device-pixel-ratio: 2), ... {
        .a { color: red; }
      }
    }
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from mediaq.core.ir.context import ResolutionContext
from mediaq.core.ir.media import MediaBlock
from mediaq.core.media_expr.compiler import parse_expression
from mediaq.core.media_expr.static_fallback import intercepts_static_breakpoint
from mediaq.core.renderer import DEFAULT_INDENT, render_block

logger = logging.getLogger(__name__)

Body = str | MediaBlock | Sequence[str | MediaBlock]


def combine(
    conditions: Sequence[str],
    body: Body,
    context: ResolutionContext,
) -> MediaBlock | None:
    """AND a list of conditions around a body.

    With media query support, returns one guard per condition nested in
    input order (an empty list returns the body unguarded). Without
    support, returns the unguarded body when the conditions hold at the
    fallback breakpoint and None otherwise.

    Raises:
        MediaQueryError: If any condition fails to compile.
    """
    children = _as_children(body)

    if not context.media_support:
        if intercepts_static_breakpoint(conditions, context):
            return MediaBlock(children=children)
        logger.debug("Dropped block for %s: no media query support", list(conditions))
        return None

    return _nest(list(conditions), children, context)


def _nest(
    conditions: list[str],
    children: list[MediaBlock | str],
    context: ResolutionContext,
) -> MediaBlock:
    """Open a guard for the first condition and recurse with the rest."""
    if not conditions:
        return MediaBlock(children=children)

    head, tail = conditions[0], conditions[1:]
    query = parse_expression(head, context)
    inner = _nest(tail, children, context)
    return MediaBlock(query=query, children=[inner] if inner.is_guarded else inner.children)


def _as_children(body: Body) -> list[MediaBlock | str]:
    if isinstance(body, (str, MediaBlock)):
        return [body]
    return list(body)


def media(
    *conditions: str,
    body: Body,
    context: ResolutionContext,
    indent: str = DEFAULT_INDENT,
) -> str:
    """Combine conditions around a body and render the result as CSS."""
    return render_block(combine(conditions, body, context), indent=indent)
