"""Tests for the raise/warn error policy and error formatting."""

from __future__ import annotations

import logging

import pytest

from mediaq.core.diagnostics import BlockAborted, Diagnostics, ErrorPolicy
from mediaq.core.errors import (
    ErrorContext,
    ExpressionSyntaxError,
    StylesheetStructureError,
    UnitError,
    make_stylesheet_error,
    make_syntax_error,
)


class TestDiagnostics:
    """report() always stops the block; the policy decides what follows."""

    def test_raise_policy_reraises(self) -> None:
        diagnostics = Diagnostics(ErrorPolicy.RAISE)
        error = UnitError("Unknown unit `vh`.")
        with pytest.raises(UnitError):
            diagnostics.report(error)
        assert diagnostics.errors == [error]

    def test_warn_policy_aborts_block(self, caplog: pytest.LogCaptureFixture) -> None:
        diagnostics = Diagnostics(ErrorPolicy.WARN)
        error = UnitError("Unknown unit `vh`.")
        with caplog.at_level(logging.WARNING, logger="mediaq.core.diagnostics"):
            with pytest.raises(BlockAborted) as exc_info:
                diagnostics.report(error)
        assert exc_info.value.error is error
        assert "Unknown unit `vh`." in caplog.text

    def test_guard_under_raise(self) -> None:
        diagnostics = Diagnostics()
        with pytest.raises(ExpressionSyntaxError):
            with diagnostics.guard():
                raise make_syntax_error("No operator found in `x`.", "x", 2)

    def test_guard_under_warn(self) -> None:
        diagnostics = Diagnostics(ErrorPolicy.WARN)
        with diagnostics.guard() as outcome:
            raise make_syntax_error("No operator found in `x`.", "x", 2)
        assert outcome.aborted
        assert isinstance(outcome.error, ExpressionSyntaxError)
        assert len(diagnostics.errors) == 1

    def test_guard_without_error(self) -> None:
        diagnostics = Diagnostics(ErrorPolicy.WARN)
        with diagnostics.guard() as outcome:
            pass
        assert not outcome.aborted
        assert diagnostics.errors == []

    def test_guard_lets_other_exceptions_through(self) -> None:
        diagnostics = Diagnostics(ErrorPolicy.WARN)
        with pytest.raises(KeyError):
            with diagnostics.guard():
                raise KeyError("x")

    def test_guard_reraises_structural_errors_under_warn(self) -> None:
        diagnostics = Diagnostics(ErrorPolicy.WARN)
        with pytest.raises(StylesheetStructureError):
            with diagnostics.guard():
                raise make_stylesheet_error("Unbalanced `{`", "a {", 2, structural=True)
        assert diagnostics.errors == []

    def test_strict(self) -> None:
        assert Diagnostics().strict
        assert not Diagnostics(ErrorPolicy.WARN).strict


class TestErrorFormatting:
    """Errors carry a marker under the offending column."""

    def test_expression_context(self) -> None:
        error = make_syntax_error("No operator found in `tablet`.", "tablet", 7)
        lines = str(error).splitlines()
        assert lines[0] == "  | tablet"
        assert lines[1] == " " * 10 + "^^^"
        assert lines[2] == "No operator found in `tablet`."

    def test_stylesheet_context(self) -> None:
        text = ".a {\n  @include media(>=) {\n}"
        offset = text.index("@include")
        error = make_stylesheet_error("Unbalanced `{`", text, offset)
        assert error.context is not None
        assert error.context.line == 2
        assert error.context.column == 3
        assert error.context.source == "  @include media(>=) {"
        assert str(error).startswith("line 2, column 3")

    def test_file_location(self, tmp_path) -> None:
        context = ErrorContext(source="x", column=1, line=4, file=tmp_path / "a.scss")
        assert context.format().splitlines()[0] == f"{tmp_path / 'a.scss'}:4:1"

    def test_message_only(self) -> None:
        assert str(UnitError("Invalid unit `pxx`.")) == "Invalid unit `pxx`."
