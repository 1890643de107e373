"""
Configuration loading for mediaq.

Reads mediaq.yaml, validates it and builds the ResolutionContext and
Diagnostics used by the compiler, the stylesheet preprocessor and the CLI.

Default location: {project_root}/mediaq.yaml

Example:

    breakpoints:
      phone: 320px
      tablet: 768px
      desktop: 1024px
    media_expressions:
      hover: "(hover: hover)"
    unit_intervals:
      px: 1
      em: 0.01
    media_support: true
    no_media_breakpoint: desktop
    no_media_expressions: [screen, portrait, landscape]
    error_policy: raise
"""

from __future__ import annotations

import logging
from decimal import Decimal
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mediaq.core.defaults import (
    DEFAULT_BREAKPOINTS,
    DEFAULT_MEDIA_EXPRESSIONS,
    DEFAULT_MEDIA_SUPPORT,
    DEFAULT_NO_MEDIA_BREAKPOINT,
    DEFAULT_NO_MEDIA_EXPRESSIONS,
    DEFAULT_UNIT_INTERVALS,
)
from mediaq.core.diagnostics import Diagnostics, ErrorPolicy
from mediaq.core.errors import ConfigError, MediaQueryError
from mediaq.core.ir.context import ResolutionContext
from mediaq.core.ir.length import format_decimal

logger = logging.getLogger(__name__)

CONFIG_FILE = "mediaq.yaml"

RawValue = str | int | float


class MediaqConfig(BaseModel):
    """Validated contents of mediaq.yaml."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    breakpoints: dict[str, RawValue] = Field(
        default_factory=dict, description="Breakpoints added to (or replacing) the defaults"
    )
    media_expressions: dict[str, str] = Field(
        default_factory=dict, description="Media expressions added to (or replacing) the defaults"
    )
    unit_intervals: dict[str, RawValue] = Field(
        default_factory=dict, description="Unit intervals added to (or replacing) the defaults"
    )
    media_support: bool = Field(default=DEFAULT_MEDIA_SUPPORT)
    no_media_breakpoint: str = Field(default=DEFAULT_NO_MEDIA_BREAKPOINT)
    no_media_expressions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_NO_MEDIA_EXPRESSIONS)
    )
    error_policy: ErrorPolicy = Field(default=ErrorPolicy.RAISE)
    replace_defaults: bool = Field(
        default=False, description="Use the tables as given instead of extending the defaults"
    )

    def to_context(self) -> ResolutionContext:
        """Build the ResolutionContext described by this config.

        Raises:
            ConfigError: If a breakpoint or interval value is invalid.
        """
        if self.replace_defaults:
            breakpoints: dict[str, Any] = dict(self.breakpoints or DEFAULT_BREAKPOINTS)
            expressions = dict(self.media_expressions or DEFAULT_MEDIA_EXPRESSIONS)
            intervals: dict[str, Any] = dict(self.unit_intervals or DEFAULT_UNIT_INTERVALS)
        else:
            breakpoints = {**DEFAULT_BREAKPOINTS, **self.breakpoints}
            expressions = {**DEFAULT_MEDIA_EXPRESSIONS, **self.media_expressions}
            intervals = {**DEFAULT_UNIT_INTERVALS, **self.unit_intervals}

        try:
            return ResolutionContext(
                breakpoints=breakpoints,
                media_expressions=expressions,
                unit_intervals={unit: str(step) for unit, step in intervals.items()},
                media_support=self.media_support,
                no_media_breakpoint=self.no_media_breakpoint,
                no_media_expressions=tuple(self.no_media_expressions),
            )
        except (MediaQueryError, ValidationError) as e:
            raise ConfigError(f"Invalid mediaq configuration: {e}") from e

    def diagnostics(self) -> Diagnostics:
        return Diagnostics(policy=self.error_policy)


# =============================================================================
# Path helpers
# =============================================================================


def get_config_path(project_root: Path) -> Path:
    """Get the mediaq.yaml file path."""
    return project_root / CONFIG_FILE


def find_config(start: Path) -> Path | None:
    """Find mediaq.yaml in start or the nearest parent directory."""
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = get_config_path(directory)
        if candidate.exists():
            return candidate
    return None


# =============================================================================
# Loading
# =============================================================================


def load_config(path: Path | None, *, use_defaults: bool = True) -> MediaqConfig:
    """Load and validate a mediaq.yaml file.

    Args:
        path: Path to the config file; None means "no file".
        use_defaults: If True, return the default config when the file
            doesn't exist or is empty.

    Returns:
        MediaqConfig instance.

    Raises:
        ConfigError: If the file is missing (when use_defaults=False) or invalid.
    """
    if path is None or not path.exists():
        if use_defaults:
            logger.debug("No %s found, using defaults", CONFIG_FILE)
            return MediaqConfig()
        raise ConfigError(f"Config not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not data:
        if use_defaults:
            logger.warning("Empty %s at %s, using defaults", CONFIG_FILE, path)
            return MediaqConfig()
        raise ConfigError(f"Empty or invalid YAML in {path}")

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {path}")

    config = _parse_config_data(data, path)
    # Surface bad lengths and units at load time rather than on first use
    config.to_context()
    logger.debug("Loaded config from %s", path)
    return config


def _parse_config_data(data: dict[str, Any], path: Path) -> MediaqConfig:
    """Validate raw YAML data, normalizing the unit-less interval key."""
    data = dict(data)
    intervals = data.get("unit_intervals")
    if isinstance(intervals, dict):
        data["unit_intervals"] = {
            "" if unit is None else str(unit): step for unit, step in intervals.items()
        }
    try:
        return MediaqConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid mediaq schema in {path}: {e}") from e


def save_config(path: Path, config: MediaqConfig) -> Path:
    """Write a config to disk as YAML.

    Returns:
        The path written.
    """
    data = config.model_dump(mode="json")
    path.write_text(
        yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )
    logger.info("Saved config to %s", path)
    return path


def scaffold_config(project_root: Path, *, overwrite: bool = False) -> Path | None:
    """Create a mediaq.yaml that spells out the default tables.

    Args:
        project_root: Directory to write mediaq.yaml into.
        overwrite: If True, overwrite an existing file.

    Returns:
        Path to the created file, or None if skipped.
    """
    path = get_config_path(project_root)
    if path.exists() and not overwrite:
        logger.debug("Skipping existing config: %s", path)
        return None

    config = MediaqConfig(
        breakpoints=dict(DEFAULT_BREAKPOINTS),
        media_expressions=dict(DEFAULT_MEDIA_EXPRESSIONS),
        unit_intervals={unit: _yaml_number(step) for unit, step in DEFAULT_UNIT_INTERVALS.items()},
    )
    return save_config(path, config)


def _yaml_number(value: Decimal) -> int | float:
    return int(value) if value == value.to_integral_value() else float(value)


def context_summary(context: ResolutionContext) -> dict[str, Any]:
    """Plain-data view of a context, as printed by ``mediaq breakpoints --json``."""
    return {
        "breakpoints": {name: str(value) for name, value in context.breakpoints.items()},
        "media_expressions": dict(context.media_expressions),
        "unit_intervals": {
            unit: format_decimal(step) for unit, step in context.unit_intervals.items()
        },
        "media_support": context.media_support,
        "no_media_breakpoint": context.no_media_breakpoint,
        "no_media_expressions": list(context.no_media_expressions),
    }
