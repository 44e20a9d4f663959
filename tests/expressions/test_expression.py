"""
Tests for HyprVariable, Operator and the expression parser.
"""

from typing import NamedTuple

import pytest

from hyprdsl.exceptions import ConverterParseError
from hyprdsl.expressions import (
    Float,
    Formula,
    HyprExpression,
    HyprVariable,
    Operator,
    Uint,
    Variable,
)


class ExpressionCase(NamedTuple):
    """Test case for expression parsing."""

    name: str
    text: str
    expected: HyprExpression


MONITOR_W = Variable(HyprVariable.MONITOR_W)
WINDOW_W = Variable(HyprVariable.WINDOW_W)
CURSOR_X = Variable(HyprVariable.CURSOR_X)

VALID_EXPRESSIONS = [
    ExpressionCase("uint", "42", Uint(42)),
    ExpressionCase("float", "0.5", Float(0.5)),
    ExpressionCase("negative_number_is_float", "-5", Float(-5.0)),
    ExpressionCase("variable", "monitor_w", MONITOR_W),
    ExpressionCase("variable_any_case", "Cursor_X", CURSOR_X),
    ExpressionCase("parenthesised_literal", "(42)", Uint(42)),
    ExpressionCase(
        "multiply",
        "monitor_w*0.5",
        Formula(MONITOR_W, Operator.MULTIPLY, Float(0.5)),
    ),
    ExpressionCase(
        "additive_binds_looser",
        "monitor_w*0.5-10",
        Formula(Formula(MONITOR_W, Operator.MULTIPLY, Float(0.5)), Operator.SUBTRACT, Uint(10)),
    ),
    ExpressionCase(
        "left_associative",
        "10-2-3",
        Formula(Formula(Uint(10), Operator.SUBTRACT, Uint(2)), Operator.SUBTRACT, Uint(3)),
    ),
    ExpressionCase(
        "parentheses_group",
        "cursor_x-(window_w*0.5)",
        Formula(CURSOR_X, Operator.SUBTRACT, Formula(WINDOW_W, Operator.MULTIPLY, Float(0.5))),
    ),
    ExpressionCase(
        "outer_parentheses_stripped",
        "(monitor_w / 2)",
        Formula(MONITOR_W, Operator.DIVIDE, Uint(2)),
    ),
    ExpressionCase(
        "sibling_groups_not_stripped",
        "(1+2)*(3+4)",
        Formula(
            Formula(Uint(1), Operator.ADD, Uint(2)),
            Operator.MULTIPLY,
            Formula(Uint(3), Operator.ADD, Uint(4)),
        ),
    ),
]


class TestHyprVariable:
    """Tests for HyprVariable."""

    def test_every_variable_round_trips(self):
        """Test each variable parses from its own text."""
        for variable in HyprVariable:
            assert HyprVariable.from_str(str(variable)) is variable

    def test_wrapping_parentheses_ignored(self):
        """Test parentheses around a name are ignored."""
        assert HyprVariable.from_str("(window_h)") is HyprVariable.WINDOW_H

    def test_unknown_variable_raises(self):
        """Test unknown names are rejected."""
        with pytest.raises(ConverterParseError):
            HyprVariable.from_str("screen_w")


class TestOperator:
    """Tests for Operator."""

    def test_symbols(self):
        """Test each symbol parses to its operator."""
        assert Operator.from_str(" + ") is Operator.ADD
        assert Operator.from_str("/") is Operator.DIVIDE
        assert str(Operator.SUBTRACT) == "-"

    def test_unknown_operator_raises(self):
        """Test other symbols are rejected."""
        with pytest.raises(ConverterParseError):
            Operator.from_str("%")


class TestHyprExpression:
    """Tests for HyprExpression parsing and formatting."""

    def test_valid_expressions(self):
        """Test each expression parses into the expected tree."""
        for case in VALID_EXPRESSIONS:
            assert HyprExpression.from_str(case.text) == case.expected, case.name

    def test_formula_is_fully_parenthesised(self):
        """Test formulas format with parentheses and no spaces."""
        expression = Formula(CURSOR_X, Operator.SUBTRACT, Formula(WINDOW_W, Operator.MULTIPLY, Float(0.5)))
        assert str(expression) == "(cursor_x-(window_w*0.5))"

    def test_formatted_text_parses_back(self):
        """Test formatting then parsing gives the same tree."""
        for case in VALID_EXPRESSIONS:
            assert HyprExpression.from_str(str(case.expected)) == case.expected, case.name

    def test_integral_float_reads_back_as_uint(self):
        """Test Float(1.0) writes as "1", which parses as an integer literal."""
        expression = Formula(WINDOW_W, Operator.MULTIPLY, Float(1.0))
        assert str(expression) == "(window_w*1)"
        assert HyprExpression.from_str(str(expression)) == Formula(
            WINDOW_W, Operator.MULTIPLY, Uint(1)
        )

    @pytest.mark.parametrize(
        "text",
        ["", "foo", "(1+2", "1+2)", "1+", "*3", "monitor_w monitor_h"],
    )
    def test_invalid_expressions_raise(self, text):
        """Test malformed expressions are rejected."""
        with pytest.raises(ConverterParseError):
            HyprExpression.from_str(text)
