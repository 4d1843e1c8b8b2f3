"""Tests for infix to postfix conversion."""

from fractions import Fraction

import pytest

from calcexpr import (
    CalcExpr, CalcExprBinaryOp, CalcExprBinaryOperator, CalcExprConverter, CalcExprLexeme, CalcExprLexemeKind,
    CalcExprNumberType, CalcExprOperand, CalcExprParseError, CalcExprTokenizer, CalcExprUnaryOp,
    CalcExprUnaryOperator, CalcExprUnaryResolver
)


def _convert(expression, number_type=float):
    lexemes = CalcExprUnaryResolver().resolve(CalcExprTokenizer().tokenize(expression))
    return CalcExprConverter(CalcExprNumberType(number_type)).convert(lexemes)


class TestCalcExprConverter:
    """Test the shunting-yard conversion."""

    @pytest.mark.parametrize("expression,expected", [
        ("2+3*4", "2 3 4 * +"),
        ("(2+3)*4", "2 3 + 4 *"),
        ("10/2/5", "10 2 / 5 /"),
        ("1-2-3", "1 2 - 3 -"),
        ("1*2+3", "1 2 * 3 +"),
        ("1+2-3", "1 2 + 3 -"),
        ("-3+5", "3 neg 5 +"),
        ("--5", "5 neg neg"),
        ("-+5", "5 pos neg"),
        ("+-5", "5 neg pos"),
        ("2*-3", "2 3 neg *"),
        ("-2*3", "2 neg 3 *"),
        ("-(1+2)", "1 2 + neg"),
        ("((7))", "7"),
        ("1.50 + .5", "1.50 .5 +"),
        ("2 3", "2 3"),  # Adjacent operands are left for the evaluator
    ])
    def test_postfix_order(self, calc, expression, expected):
        """Test the postfix order produced for various expressions."""
        assert calc.format_postfix(expression) == expected

    def test_typed_tokens(self):
        """Test the token types and payloads in the output."""
        tokens = _convert("-1 / 4", Fraction)

        assert tokens == [
            CalcExprOperand(Fraction(1), "1", 1),
            CalcExprUnaryOperator(CalcExprUnaryOp.NEGATE, "-", 0),
            CalcExprOperand(Fraction(4), "4", 5),
            CalcExprBinaryOperator(CalcExprBinaryOp.DIVIDE, "/", 3),
        ]

    def test_operand_keeps_original_text(self):
        """Test that operands remember their source text."""
        [operand] = _convert("007.50")
        assert operand.value == 7.5
        assert operand.text == "007.50"

    def test_to_postfix_returns_tokens(self, calc):
        """Test the facade conversion method."""
        tokens = calc.to_postfix("1 + 2")
        assert [type(token) for token in tokens] == [CalcExprOperand, CalcExprOperand, CalcExprBinaryOperator]

    def test_to_postfix_empty_expression(self, calc):
        """Test that an empty expression can't be converted."""
        with pytest.raises(CalcExprParseError, match="Empty expression"):
            calc.to_postfix("  ")

    def test_converter_accepts_empty_lexemes(self):
        """Test that the converter itself returns an empty sequence for no input."""
        assert not CalcExprConverter(CalcExprNumberType(float)).convert([])

    def test_unbalanced_parentheses(self):
        """Test that conversion rejects unbalanced parentheses."""
        with pytest.raises(CalcExprParseError, match="Unclosed parenthesis"):
            _convert("(1")

        with pytest.raises(CalcExprParseError, match="Unexpected closing parenthesis"):
            _convert("1)")

    def test_invalid_operand(self):
        """Test that operands that don't parse are rejected with their position."""
        with pytest.raises(CalcExprParseError) as exc_info:
            _convert("1 + 1.2.3")

        assert exc_info.value.position == 4
        assert "1.2.3" in exc_info.value.message

    def test_unknown_operator_symbol(self):
        """Test that a non-operator lexeme can't become an operator token."""
        converter = CalcExprConverter(CalcExprNumberType(float))
        with pytest.raises(CalcExprParseError, match="Unknown operator"):
            converter._make_operator(CalcExprLexeme(CalcExprLexemeKind.LPAREN, "(", 0))

    def test_postfix_is_recomputed_per_call(self):
        """Test that conversions don't share output between calls."""
        calc = CalcExpr()
        first = calc.to_postfix("1+2")
        second = calc.to_postfix("1+2")
        assert first == second
        assert first is not second
