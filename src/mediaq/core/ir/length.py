"""
Length and operator types for media expressions.

A Length is an exact decimal magnitude tagged with a CSS unit. Decimal
keeps interval arithmetic exact, so ">40em" prints as 40.01em rather
than a binary floating point approximation.
"""

from __future__ import annotations

from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------

# Length units accepted after a number
LENGTH_UNITS: tuple[str, ...] = (
    "px",
    "cm",
    "mm",
    "%",
    "ch",
    "pc",
    "in",
    "em",
    "rem",
    "pt",
    "ex",
    "vw",
    "vh",
    "vmin",
    "vmax",
)

# Absolute units expressed in inches; only these convert into each other
_ABSOLUTE_PER_INCH: dict[str, Decimal] = {
    "in": Decimal("1"),
    "px": Decimal("96"),
    "cm": Decimal("2.54"),
    "mm": Decimal("25.4"),
    "pt": Decimal("72"),
    "pc": Decimal("6"),
}


# Interval arithmetic never rounds, whatever the magnitude of the operands
_EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


def format_decimal(value: Decimal) -> str:
    """Shortest exact plain-notation rendering of a decimal (no exponent)."""
    if value == 0:
        return "0"
    text = format(value.normalize(_EXACT), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


class Length(BaseModel):
    """A numeric magnitude with a CSS unit ("" for unit-less numbers)."""

    value: Decimal = Field(description="Exact magnitude")
    unit: str = Field(default="", description="CSS unit, empty for bare numbers")

    model_config = ConfigDict(frozen=True)

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, v: Any) -> Any:
        if isinstance(v, float):
            return Decimal(repr(v))
        return v

    def __str__(self) -> str:
        return f"{format_decimal(self.value)}{self.unit}"

    def __add__(self, delta: Decimal | int) -> Length:
        return Length(value=_EXACT.add(self.value, Decimal(delta)), unit=self.unit)

    def __sub__(self, delta: Decimal | int) -> Length:
        return Length(value=_EXACT.subtract(self.value, Decimal(delta)), unit=self.unit)

    @property
    def is_unitless(self) -> bool:
        return self.unit == ""

    def compare(self, other: Length) -> int:
        """Three-way comparison: -1, 0 or 1.

        Unit-less values compare with any unit by magnitude. Absolute
        units (px, cm, mm, in, pt, pc) are converted through inches.

        Raises:
            UnitError: If the units cannot be compared.
        """
        left, right = self._comparable_magnitudes(other)
        if left < right:
            return -1
        if left > right:
            return 1
        return 0

    def _comparable_magnitudes(self, other: Length) -> tuple[Decimal, Decimal]:
        if self.unit == other.unit or self.is_unitless or other.is_unitless:
            return self.value, other.value
        if self.unit in _ABSOLUTE_PER_INCH and other.unit in _ABSOLUTE_PER_INCH:
            return (
                self.value / _ABSOLUTE_PER_INCH[self.unit],
                other.value / _ABSOLUTE_PER_INCH[other.unit],
            )
        from mediaq.core.errors import UnitError

        raise UnitError(f"Incompatible units `{self.unit}` and `{other.unit}`.")

    def __lt__(self, other: Length) -> bool:
        return self.compare(other) < 0

    def __le__(self, other: Length) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: Length) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: Length) -> bool:
        return self.compare(other) >= 0


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class Operator(StrEnum):
    """Comparison operators understood in media expressions."""

    GE = ">="
    GT = ">"
    LE = "<="
    LT = "<"
    GE_SIGN = "≥"
    LE_SIGN = "≤"

    @property
    def prefix(self) -> str:
        """Media feature prefix: "max" for upper bounds, "min" otherwise."""
        if self in (Operator.LT, Operator.LE, Operator.LE_SIGN):
            return "max"
        return "min"

    @property
    def is_exclusive(self) -> bool:
        """Only the ASCII strict operators are shifted by a unit interval."""
        return self in (Operator.GT, Operator.LT)
