"""
Number parsing for media expression values.

Reads a signed decimal literal with an optional unit suffix ("768px",
"-0.5em", "40") without going through float(), so magnitudes stay exact.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from mediaq.core.errors import UnitError, ValueTypeError
from mediaq.core.ir.length import LENGTH_UNITS, Length

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")

Number = int | Decimal


def to_number(value: Any) -> Number | Length:
    """Convert a string such as "768px" into a Length.

    Numbers and Lengths pass through unchanged (floats become exact
    decimals of their repr). A string without a unit suffix yields a
    unit-less Length.

    Args:
        value: A number, a Length, or a numeric string with optional unit.

    Returns:
        The number itself, or the parsed Length.

    Raises:
        ValueTypeError: If value is neither a number nor a string.
        UnitError: If the suffix is not a supported unit.
    """
    if isinstance(value, bool):
        raise ValueTypeError("Value for `to_number` should be a number or a string.")
    if isinstance(value, (int, Decimal, Length)):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    if not isinstance(value, str):
        raise ValueTypeError("Value for `to_number` should be a number or a string.")

    text = value
    negative = text[:1] == "-"
    if text[:1] in ("+", "-") and text:
        text = text[1:]

    integer: list[str] = []
    fraction: list[str] | None = None  # None while reading the integer part
    for i, char in enumerate(text):
        if char in _DIGITS:
            (integer if fraction is None else fraction).append(char)
            continue
        if char == "." and fraction is None:
            fraction = []
            continue
        return to_length(_magnitude(negative, integer, fraction), text[i:])

    return Length(value=_magnitude(negative, integer, fraction))


def _magnitude(negative: bool, integer: list[str], fraction: list[str] | None) -> Decimal:
    """Exact decimal from scanned digits, independent of the decimal context."""
    literal = "".join(integer) or "0"
    if fraction:
        literal += "." + "".join(fraction)
    return Decimal("-" + literal if negative else literal)


def to_length(magnitude: Number, unit: str) -> Length:
    """Attach a CSS unit to a bare magnitude.

    Raises:
        UnitError: If the unit is not a supported length unit.
    """
    if unit and unit not in LENGTH_UNITS:
        logger.debug("Rejected unit %r for magnitude %s", unit, magnitude)
        raise UnitError(f"Invalid unit `{unit}`.")
    return Length(value=Decimal(magnitude), unit=unit)
