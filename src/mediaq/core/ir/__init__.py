"""
mediaq intermediate representation types.

All types are re-exported from this package.
"""

from .context import (
    BreakpointTable,
    ExpressionTable,
    IntervalTable,
    ResolutionContext,
    coerce_breakpoint,
    coerce_length,
)
from .length import LENGTH_UNITS, Length, Operator, format_decimal
from .media import MediaBlock

__all__ = [
    "BreakpointTable",
    "ExpressionTable",
    "IntervalTable",
    "LENGTH_UNITS",
    "Length",
    "MediaBlock",
    "Operator",
    "ResolutionContext",
    "coerce_breakpoint",
    "coerce_length",
    "format_decimal",
]
