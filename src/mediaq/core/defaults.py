"""
Default vocabulary for media expressions.

Plain configuration data: every table here can be extended or replaced
through mediaq.yaml or by constructing a ResolutionContext directly.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mediaq.core.ir.context import ResolutionContext

# Breakpoint name -> length
DEFAULT_BREAKPOINTS: dict[str, str] = {
    "phone": "320px",
    "tablet": "768px",
    "desktop": "1024px",
}

# Expression name -> literal media query clause
DEFAULT_MEDIA_EXPRESSIONS: dict[str, str] = {
    "screen": "screen",
    "print": "print",
    "handheld": "handheld",
    "landscape": "(orientation: landscape)",
    "portrait": "(orientation: portrait)",
    "retina2x": (
        "(-webkit-min-device-pixel-ratio: 2), (min-resolution: 192dpi), (min-resolution: 2dppx)"
    ),
    "retina3x": (
        "(-webkit-min-device-pixel-ratio: 3), (min-resolution: 350dpi), (min-resolution: 3dppx)"
    ),
}

# Unit -> increment used to turn an exclusive bound into an inclusive one
DEFAULT_UNIT_INTERVALS: dict[str, Decimal] = {
    "px": Decimal("1"),
    "em": Decimal("0.01"),
    "rem": Decimal("0.1"),
    "": Decimal("0"),
}

# Static (no media query support) emulation
DEFAULT_MEDIA_SUPPORT = True
DEFAULT_NO_MEDIA_BREAKPOINT = "desktop"
DEFAULT_NO_MEDIA_EXPRESSIONS: tuple[str, ...] = ("screen", "portrait", "landscape")


def default_context() -> ResolutionContext:
    """Build a ResolutionContext populated with the default tables."""
    from mediaq.core.ir.context import ResolutionContext

    return ResolutionContext()
