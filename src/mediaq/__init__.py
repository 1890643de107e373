"""
mediaq - readable breakpoint expressions compiled to CSS media queries.

Turns conditions such as ">=tablet", "<850px" or "retina2x" into media
query clauses, nests several of them into one guard, and expands
@include media(...) directives in stylesheets.
"""

from __future__ import annotations

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import (
    ExpressionSyntaxError,
    MediaQueryError,
    UnitError,
    UnknownBreakpointError,
    ValueTypeError,
)
from .core.ir import Length, ResolutionContext
from .core.media_expr import (
    combine,
    intercepts_static_breakpoint,
    media,
    media_context,
    parse_expression,
    with_context,
)
from ._version import get_version

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "Length",
    "ResolutionContext",
    "combine",
    "intercepts_static_breakpoint",
    "media",
    "media_context",
    "parse_expression",
    "with_context",
    "MediaQueryError",
    "ExpressionSyntaxError",
    "UnknownBreakpointError",
    "UnitError",
    "ValueTypeError",
]
