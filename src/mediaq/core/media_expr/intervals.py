"""
Unit intervals for exclusive bounds.

Media queries only express inclusive min/max comparisons, so ">768px"
becomes "min-width: 769px" by adding the interval registered for px.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal

from mediaq.core.errors import UnitError
from mediaq.core.ir.length import Length, Operator


def resolve_interval(length: Length, intervals: Mapping[str, Decimal]) -> Decimal:
    """Look up the rounding interval for a length's unit.

    Raises:
        UnitError: If the unit has no registered interval.
    """
    interval = intervals.get(length.unit)
    if interval is None:
        raise UnitError(f"Unknown unit `{length.unit}`.")
    return interval


def apply_interval(
    length: Length,
    operator: Operator,
    intervals: Mapping[str, Decimal],
) -> Length:
    """Shift an exclusive bound to the nearest inclusive one.

    The unit must have an interval even for inclusive operators, which
    are returned unchanged. "≥" and "≤" count as inclusive.
    """
    interval = resolve_interval(length, intervals)
    if not operator.is_exclusive:
        return length
    return length + interval if operator == Operator.GT else length - interval
