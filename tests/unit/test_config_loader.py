"""Tests for loading mediaq.yaml into a resolution context."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import pytest
from pydantic import ValidationError

from mediaq.core.config_loader import (
    MediaqConfig,
    context_summary,
    find_config,
    get_config_path,
    load_config,
    save_config,
    scaffold_config,
)
from mediaq.core.diagnostics import ErrorPolicy
from mediaq.core.errors import ConfigError
from mediaq.core.media_expr.compiler import parse_expression


class TestMediaqConfig:
    """Config model and context construction."""

    def test_defaults(self) -> None:
        context = MediaqConfig().to_context()
        assert str(context.breakpoints["tablet"]) == "768px"
        assert context.unit_intervals["em"] == Decimal("0.01")
        assert context.media_support is True
        assert context.no_media_breakpoint == "desktop"
        assert context.no_media_expressions == ("screen", "portrait", "landscape")

    def test_tables_extend_defaults(self) -> None:
        config = MediaqConfig(breakpoints={"wide": "1440px"}, media_expressions={"dark": "x"})
        context = config.to_context()
        assert set(context.breakpoints) == {"phone", "tablet", "desktop", "wide"}
        assert context.media_expressions["dark"] == "x"
        assert "retina2x" in context.media_expressions

    def test_replace_defaults(self) -> None:
        config = MediaqConfig(breakpoints={"small": "30em"}, replace_defaults=True)
        context = config.to_context()
        assert set(context.breakpoints) == {"small"}
        # Tables not given keep their defaults
        assert "retina2x" in context.media_expressions

    def test_numeric_breakpoint_rejected(self) -> None:
        with pytest.raises(ConfigError, match="positive length with a unit"):
            MediaqConfig(breakpoints={"n": 600}).to_context()

    def test_negative_breakpoint_rejected(self) -> None:
        with pytest.raises(ConfigError, match="Breakpoint `neg`"):
            MediaqConfig(breakpoints={"neg": "-5px"}).to_context()

    def test_float_interval(self) -> None:
        context = MediaqConfig(unit_intervals={"vw": 0.1}).to_context()
        assert parse_expression(">10vw", context) == "(min-width: 10.1vw)"

    def test_invalid_breakpoint_unit(self) -> None:
        with pytest.raises(ConfigError, match="Invalid unit"):
            MediaqConfig(breakpoints={"bad": "10parsec"}).to_context()

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MediaqConfig(breakpionts={})  # type: ignore[call-arg]

    def test_diagnostics(self) -> None:
        assert MediaqConfig(error_policy=ErrorPolicy.WARN).diagnostics().policy == "warn"


class TestLoadConfig:
    """Reading mediaq.yaml from disk."""

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        assert load_config(tmp_path / "mediaq.yaml") == MediaqConfig()

    def test_none_uses_defaults(self) -> None:
        assert load_config(None) == MediaqConfig()

    def test_missing_file_strict(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Config not found"):
            load_config(tmp_path / "mediaq.yaml", use_defaults=False)

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "mediaq.yaml"
        path.write_text("")
        assert load_config(path) == MediaqConfig()

    def test_full_file(self, tmp_path: Path) -> None:
        path = tmp_path / "mediaq.yaml"
        path.write_text(
            """
breakpoints:
  tablet: 640px
  wide: 90em
media_expressions:
  hover: "(hover: hover)"
unit_intervals:
  "": 1
media_support: false
no_media_breakpoint: tablet
no_media_expressions: [screen, hover]
error_policy: warn
"""
        )
        config = load_config(path)
        assert config.error_policy == ErrorPolicy.WARN
        context = config.to_context()
        assert str(context.breakpoints["tablet"]) == "640px"
        assert str(context.breakpoints["wide"]) == "90em"
        assert context.unit_intervals[""] == Decimal("1")
        assert context.media_support is False
        assert context.no_media_expressions == ("screen", "hover")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "mediaq.yaml"
        path.write_text("breakpoints: [unclosed")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "mediaq.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="Expected a mapping"):
            load_config(path)

    def test_invalid_schema(self, tmp_path: Path) -> None:
        path = tmp_path / "mediaq.yaml"
        path.write_text("error_policy: explode\n")
        with pytest.raises(ConfigError, match="Invalid mediaq schema"):
            load_config(path)

    def test_invalid_unit_reported_at_load(self, tmp_path: Path) -> None:
        path = tmp_path / "mediaq.yaml"
        path.write_text("breakpoints:\n  tablet: 768pxx\n")
        with pytest.raises(ConfigError, match="Invalid unit `pxx`"):
            load_config(path)

    def test_zero_breakpoint_reported_at_load(self, tmp_path: Path) -> None:
        path = tmp_path / "mediaq.yaml"
        path.write_text("breakpoints:\n  tablet: 0px\n")
        with pytest.raises(ConfigError, match="Breakpoint `tablet`"):
            load_config(path)

    def test_round_trip(self, tmp_path: Path) -> None:
        config = MediaqConfig(breakpoints={"wide": "1440px"}, error_policy=ErrorPolicy.WARN)
        path = save_config(tmp_path / "mediaq.yaml", config)
        assert load_config(path) == config


class TestScaffoldConfig:
    """mediaq.yaml with the default tables spelled out."""

    def test_creates_default_config(self, tmp_path: Path) -> None:
        path = scaffold_config(tmp_path)
        assert path == get_config_path(tmp_path)
        context = load_config(path).to_context()
        assert context_summary(context) == context_summary(MediaqConfig().to_context())

    def test_intervals_written_as_numbers(self, tmp_path: Path) -> None:
        path = scaffold_config(tmp_path)
        assert path is not None
        text = path.read_text()
        assert "  em: 0.01\n" in text
        assert "  px: 1\n" in text

    def test_skips_existing(self, tmp_path: Path) -> None:
        get_config_path(tmp_path).write_text("media_support: false\n")
        assert scaffold_config(tmp_path) is None
        assert get_config_path(tmp_path).read_text() == "media_support: false\n"

    def test_overwrite(self, tmp_path: Path) -> None:
        get_config_path(tmp_path).write_text("media_support: false\n")
        path = scaffold_config(tmp_path, overwrite=True)
        assert path is not None
        assert load_config(path).media_support is True


class TestFindConfig:
    """mediaq.yaml lookup from a directory upwards."""

    def test_found_in_parent(self, tmp_path: Path) -> None:
        get_config_path(tmp_path).write_text("media_support: true\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == get_config_path(tmp_path).resolve()

    def test_not_found(self, tmp_path: Path) -> None:
        assert find_config(tmp_path) is None


def test_context_summary() -> None:
    summary = context_summary(MediaqConfig().to_context())
    assert summary["breakpoints"]["phone"] == "320px"
    assert summary["unit_intervals"]["em"] == "0.01"
    assert summary["no_media_expressions"] == ["screen", "portrait", "landscape"]
