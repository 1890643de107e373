"""
Tokenizer for media expressions.

Splits a condition such as "height>=tablet" into its dimension,
comparison operator and raw value.
"""

from __future__ import annotations

from mediaq.core.errors import make_syntax_error
from mediaq.core.ir.length import Operator

# Longer operators come before their one-character prefixes
OPERATOR_SCAN_ORDER: tuple[Operator, ...] = (
    Operator.GE,
    Operator.GT,
    Operator.LE,
    Operator.LT,
    Operator.GE_SIGN,
    Operator.LE_SIGN,
)

DEFAULT_DIMENSION = "width"


class ExpressionTokens:
    """The three parts of an operator expression."""

    __slots__ = ("dimension", "operator", "value", "pos")

    def __init__(self, dimension: str, operator: Operator, value: str, pos: int) -> None:
        self.dimension = dimension
        self.operator = operator
        self.value = value
        self.pos = pos

    def __repr__(self) -> str:
        return (
            f"ExpressionTokens({self.dimension!r}, {self.operator.value!r}, "
            f"{self.value!r}, pos={self.pos})"
        )


def find_operator(expression: str) -> tuple[Operator, int]:
    """Locate the comparison operator in an expression.

    Scans left to right; at each position the operators are tried in
    OPERATOR_SCAN_ORDER so ">=" wins over ">".

    Returns:
        The operator and its 0-indexed position.

    Raises:
        ExpressionSyntaxError: If the expression contains no operator.
    """
    for pos in range(len(expression)):
        for operator in OPERATOR_SCAN_ORDER:
            if expression.startswith(operator.value, pos):
                return operator, pos
    raise make_syntax_error(
        f"No operator found in `{expression}`.",
        expression,
        column=len(expression) + 1,
    )


def split_expression(expression: str, operator: Operator, pos: int) -> tuple[str, str]:
    """Return (dimension, raw value) around an operator found at pos."""
    dimension = expression[:pos].strip() or DEFAULT_DIMENSION
    value = expression[pos + len(operator.value) :].strip()
    return dimension, value


def tokenize(expression: str) -> ExpressionTokens:
    """Tokenize an operator expression into dimension, operator and value."""
    operator, pos = find_operator(expression)
    dimension, value = split_expression(expression, operator, pos)
    return ExpressionTokens(dimension, operator, value, pos)
