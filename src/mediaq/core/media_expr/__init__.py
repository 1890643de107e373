"""
mediaq media expression engine.

Tokenizer, number parser, compiler, combiner, static fallback evaluator
and scoped context for breakpoint expressions.

Usage:
    from mediaq.core.media_expr import media, parse_expression
    from mediaq.core.ir import ResolutionContext

    context = ResolutionContext()
    parse_expression(">tablet", context)
    # "(min-width: 769px)"
"""

from mediaq.core.media_expr.combiner import combine, media
from mediaq.core.media_expr.compiler import (
    expression_dimension,
    expression_prefix,
    expression_value,
    parse_expression,
)
from mediaq.core.media_expr.intervals import apply_interval, resolve_interval
from mediaq.core.media_expr.numbers import to_length, to_number
from mediaq.core.media_expr.scoped import media_context, with_context
from mediaq.core.media_expr.static_fallback import (
    fallback_breakpoint,
    intercepts_static_breakpoint,
)
from mediaq.core.media_expr.tokenizer import find_operator, split_expression, tokenize

__all__ = [
    "apply_interval",
    "combine",
    "expression_dimension",
    "expression_prefix",
    "expression_value",
    "fallback_breakpoint",
    "find_operator",
    "intercepts_static_breakpoint",
    "media",
    "media_context",
    "parse_expression",
    "resolve_interval",
    "split_expression",
    "to_length",
    "to_number",
    "tokenize",
    "with_context",
]
