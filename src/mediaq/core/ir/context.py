"""
Resolution context for media expressions.

Holds the breakpoint, media expression and unit interval tables together
with the static-mode settings. The context is an immutable value that is
passed explicitly to every resolution call; scoped overrides derive a new
context instead of mutating a shared one.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mediaq.core.defaults import (
    DEFAULT_BREAKPOINTS,
    DEFAULT_MEDIA_EXPRESSIONS,
    DEFAULT_MEDIA_SUPPORT,
    DEFAULT_NO_MEDIA_BREAKPOINT,
    DEFAULT_NO_MEDIA_EXPRESSIONS,
    DEFAULT_UNIT_INTERVALS,
)
from mediaq.core.errors import UnitError
from mediaq.core.ir.length import Length

BreakpointTable = dict[str, Length]
ExpressionTable = dict[str, str]
IntervalTable = dict[str, Decimal]


def coerce_length(value: Any) -> Length:
    """Turn a config value ("768px", 768, Length) into a Length."""
    from mediaq.core.media_expr.numbers import to_number

    result = to_number(value)
    if isinstance(result, Length):
        return result
    return Length(value=result)


def coerce_breakpoint(name: str, value: Any) -> Length:
    """Coerce a breakpoint value; breakpoints are positive lengths with a unit.

    Raises:
        UnitError: If the value is unit-less, zero or negative.
    """
    length = coerce_length(value)
    if length.is_unitless or length.value <= 0:
        raise UnitError(
            f"Breakpoint `{name}` must be a positive length with a unit, got `{length}`."
        )
    return length


class ResolutionContext(BaseModel):
    """Everything needed to resolve a media expression."""

    breakpoints: BreakpointTable = Field(
        default_factory=lambda: dict(DEFAULT_BREAKPOINTS),
        description="Breakpoint name -> length",
    )
    media_expressions: ExpressionTable = Field(
        default_factory=lambda: dict(DEFAULT_MEDIA_EXPRESSIONS),
        description="Expression name -> literal media query clause",
    )
    unit_intervals: IntervalTable = Field(
        default_factory=lambda: dict(DEFAULT_UNIT_INTERVALS),
        description="Unit -> increment applied to exclusive bounds",
    )
    media_support: bool = Field(
        default=DEFAULT_MEDIA_SUPPORT,
        description="False emulates a target without media query support",
    )
    no_media_breakpoint: str = Field(
        default=DEFAULT_NO_MEDIA_BREAKPOINT,
        description="Breakpoint assumed when media queries are unsupported",
    )
    no_media_expressions: tuple[str, ...] = Field(
        default=DEFAULT_NO_MEDIA_EXPRESSIONS,
        description="Media expressions that still match without media query support",
    )

    model_config = ConfigDict(frozen=True, validate_default=True)

    @field_validator("breakpoints", mode="before")
    @classmethod
    def _coerce_breakpoints(cls, v: Any) -> Any:
        if isinstance(v, Mapping):
            return {str(name): coerce_breakpoint(str(name), value) for name, value in v.items()}
        return v

    @field_validator("unit_intervals", mode="before")
    @classmethod
    def _coerce_intervals(cls, v: Any) -> Any:
        if isinstance(v, Mapping):
            return {
                "" if unit is None else str(unit): (
                    Decimal(repr(step)) if isinstance(step, float) else step
                )
                for unit, step in v.items()
            }
        return v

    def tweaked(
        self,
        breakpoints: Mapping[str, Any] | None = None,
        media_expressions: Mapping[str, str] | None = None,
    ) -> ResolutionContext:
        """Derive a context whose tables are shallow-merged with overrides.

        Overrides win on key collisions. The receiver is left untouched.
        """
        merged_breakpoints: dict[str, Any] = dict(self.breakpoints)
        merged_breakpoints.update(breakpoints or {})
        merged_expressions = dict(self.media_expressions)
        merged_expressions.update(media_expressions or {})
        return self.model_copy(
            update={
                "breakpoints": {
                    name: coerce_breakpoint(name, value)
                    for name, value in merged_breakpoints.items()
                },
                "media_expressions": merged_expressions,
            }
        )

    def breakpoint(self, name: str) -> Length | None:
        return self.breakpoints.get(name)

    def is_media_expression(self, name: str) -> bool:
        return name in self.media_expressions
