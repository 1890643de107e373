"""
Compiler from media expressions to media query clauses.

    parse_expression(">=tablet", context)   -> "(min-width: 768px)"
    parse_expression("height<600px", context) -> "(max-height: 599px)"
    parse_expression("retina2x", context)   -> literal table value
"""

from __future__ import annotations

import logging

from mediaq.core.errors import ErrorContext, UnitError
from mediaq.core.ir.context import ResolutionContext
from mediaq.core.ir.length import Length, Operator
from mediaq.core.media_expr.intervals import apply_interval
from mediaq.core.media_expr.numbers import to_number
from mediaq.core.media_expr.tokenizer import ExpressionTokens, tokenize

logger = logging.getLogger(__name__)


def expression_dimension(expression: str) -> str:
    """Media feature name of an operator expression ("width" by default)."""
    return tokenize(expression).dimension


def expression_prefix(operator: Operator) -> str:
    """Return "max" for upper bounds and "min" for lower bounds."""
    return operator.prefix


def expression_value(tokens: ExpressionTokens, context: ResolutionContext) -> Length:
    """Resolve the bound of an operator expression.

    Breakpoint names are looked up in the context; anything else is read
    as a number. Exclusive operators are shifted by the unit interval.
    """
    raw = tokens.value
    named = context.breakpoint(raw)
    if named is not None:
        value = named
    else:
        parsed = to_number(raw)
        value = parsed if isinstance(parsed, Length) else Length(value=parsed)
    return apply_interval(value, tokens.operator, context.unit_intervals)


def parse_expression(condition: str, context: ResolutionContext) -> str:
    """Compile one condition into a media query clause.

    Args:
        condition: Media expression name or operator expression.
        context: Tables used for resolution.

    Returns:
        The literal media expression, or "(<prefix>-<dimension>: <value>)".

    Raises:
        ExpressionSyntaxError: If the condition has no operator.
        UnitError: If the value's unit is invalid or has no interval.
    """
    if context.is_media_expression(condition):
        return context.media_expressions[condition]

    tokens = tokenize(condition)
    try:
        value = expression_value(tokens, context)
    except UnitError as e:
        if e.context is not None:
            raise
        column = tokens.pos + len(tokens.operator.value) + 1
        raise UnitError(e.message, ErrorContext(source=condition, column=column)) from e

    clause = f"({expression_prefix(tokens.operator)}-{tokens.dimension}: {value})"
    logger.debug("Compiled %r to %r", condition, clause)
    return clause
