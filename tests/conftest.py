"""Shared pytest fixtures for mediaq tests."""

import pytest

from mediaq.core.defaults import default_context as build_default_context
from mediaq.core.ir import ResolutionContext


@pytest.fixture
def context() -> ResolutionContext:
    """Small vocabulary with a 640px tablet and pixel-only intervals."""
    return ResolutionContext(
        breakpoints={"phone": "320px", "tablet": "640px", "desktop": "1024px"},
        media_expressions={
            "screen": "screen",
            "retina2x": "(-webkit-min-device-pixel-ratio: 2), (min-resolution: 192dpi)",
        },
        unit_intervals={"px": 1},
    )


@pytest.fixture
def default_context() -> ResolutionContext:
    """The built-in vocabulary."""
    return build_default_context()


@pytest.fixture
def static_context(context: ResolutionContext) -> ResolutionContext:
    """The small vocabulary with media queries unsupported, emulating tablet."""
    return context.model_copy(
        update={
            "media_support": False,
            "no_media_breakpoint": "tablet",
            "no_media_expressions": ("screen",),
        }
    )
