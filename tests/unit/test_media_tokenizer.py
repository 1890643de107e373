"""Tests for splitting media expressions into dimension, operator and value."""

from __future__ import annotations

import pytest

from mediaq.core.errors import ExpressionSyntaxError
from mediaq.core.ir import Operator
from mediaq.core.media_expr.tokenizer import find_operator, split_expression, tokenize


class TestFindOperator:
    """Longest operator first, leftmost position."""

    @pytest.mark.parametrize(
        "expression, operator",
        [
            (">=tablet", Operator.GE),
            (">tablet", Operator.GT),
            ("<=tablet", Operator.LE),
            ("<tablet", Operator.LT),
            ("≥tablet", Operator.GE_SIGN),
            ("≤tablet", Operator.LE_SIGN),
        ],
    )
    def test_each_operator(self, expression: str, operator: Operator) -> None:
        found, pos = find_operator(expression)
        assert found == operator
        assert pos == 0

    def test_two_character_operator_not_split(self) -> None:
        found, _ = find_operator("height>=600px")
        assert found == Operator.GE

    def test_position_after_dimension(self) -> None:
        _, pos = find_operator("height<600px")
        assert pos == len("height")

    def test_leftmost_occurrence_wins(self) -> None:
        found, pos = find_operator("a<b>=c")
        assert found == Operator.LT
        assert pos == 1

    def test_no_operator(self) -> None:
        with pytest.raises(ExpressionSyntaxError, match="No operator found in `tablet`"):
            find_operator("tablet")

    def test_no_operator_error_points_past_expression(self) -> None:
        with pytest.raises(ExpressionSyntaxError) as exc_info:
            find_operator("tablet")
        assert exc_info.value.context is not None
        assert exc_info.value.context.column == len("tablet") + 1


class TestTokenize:
    """Dimension defaults to width; the value is the remainder."""

    def test_default_dimension(self) -> None:
        tokens = tokenize(">=tablet")
        assert tokens.dimension == "width"
        assert tokens.operator == Operator.GE
        assert tokens.value == "tablet"

    def test_explicit_dimension(self) -> None:
        tokens = tokenize("height<600px")
        assert tokens.dimension == "height"
        assert tokens.operator == Operator.LT
        assert tokens.value == "600px"

    def test_surrounding_spaces_ignored(self) -> None:
        tokens = tokenize("height >= 40em")
        assert tokens.dimension == "height"
        assert tokens.value == "40em"

    def test_unicode_operator(self) -> None:
        tokens = tokenize("≤850px")
        assert tokens.operator == Operator.LE_SIGN
        assert tokens.value == "850px"

    def test_split_expression(self) -> None:
        assert split_expression("device-width>320px", Operator.GT, 12) == (
            "device-width",
            "320px",
        )

    def test_repr(self) -> None:
        assert "'>='" in repr(tokenize(">=phone"))


class TestOperator:
    """Prefix and exclusivity of each operator."""

    @pytest.mark.parametrize(
        "operator, prefix",
        [
            (Operator.GE, "min"),
            (Operator.GT, "min"),
            (Operator.GE_SIGN, "min"),
            (Operator.LE, "max"),
            (Operator.LT, "max"),
            (Operator.LE_SIGN, "max"),
        ],
    )
    def test_prefix(self, operator: Operator, prefix: str) -> None:
        assert operator.prefix == prefix

    def test_only_ascii_strict_operators_are_exclusive(self) -> None:
        exclusive = {op for op in Operator if op.is_exclusive}
        assert exclusive == {Operator.GT, Operator.LT}
