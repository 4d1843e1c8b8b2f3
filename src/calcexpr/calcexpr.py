"""Main calcexpr class: evaluates infix arithmetic expressions over a chosen numeric type."""

import logging
from typing import Any, Callable, List

from calcexpr.calcexpr_converter import CalcExprConverter
from calcexpr.calcexpr_error import CalcExprParseError
from calcexpr.calcexpr_evaluator import CalcExprEvaluator
from calcexpr.calcexpr_number_type import CalcExprNumberType
from calcexpr.calcexpr_token import CalcExprToken
from calcexpr.calcexpr_tokenizer import CalcExprTokenizer
from calcexpr.calcexpr_unary_resolver import CalcExprUnaryResolver


class CalcExpr:
    """
    Infix arithmetic calculator.

    Expressions contain numbers, + - * /, parentheses, unary signs and whitespace.  Each call
    runs the whole pipeline afresh (tokenize, resolve signs, convert to postfix, evaluate),
    so an instance carries no state between calls and may be shared between threads.
    """

    def __init__(self, number_type: Callable[[str], Any] = float):
        """
        Initialize calculator.

        Args:
            number_type: Numeric type used for operands and results (int, float, Decimal,
                Fraction, or any type constructible from text)
        """
        self.number_type = CalcExprNumberType(number_type)
        self._logger = logging.getLogger("CalcExpr")

    def to_postfix(self, expression: str) -> List[CalcExprToken]:
        """
        Convert an expression to its postfix token sequence without evaluating it.

        Args:
            expression: Infix expression string

        Returns:
            Postfix token list

        Raises:
            CalcExprTokenError: If the expression contains alphabetic characters
            CalcExprParseError: If the expression is empty, has an invalid operand, or has
                unbalanced parentheses
        """
        lexemes = CalcExprTokenizer().tokenize(expression)
        if not lexemes:
            raise CalcExprParseError(
                message="Empty expression",
                expected="An arithmetic expression",
                example="(2 + 3) * 4",
                suggestion="Provide an expression to evaluate",
                context="Expression cannot be empty or contain only whitespace"
            )

        resolved = CalcExprUnaryResolver().resolve(lexemes)
        return CalcExprConverter(self.number_type).convert(resolved)

    def evaluate(self, expression: str) -> Any:
        """
        Evaluate an expression.

        Args:
            expression: Infix expression string

        Returns:
            The value of the expression, of the configured numeric type

        Raises:
            CalcExprTokenError: If tokenization fails
            CalcExprParseError: If conversion to postfix fails
            CalcExprEvalError: If evaluation fails
        """
        tokens = self.to_postfix(expression)
        result = CalcExprEvaluator(self.number_type).evaluate(tokens)
        self._logger.debug("%r = %r", expression, result)
        return result

    def evaluate_and_format(self, expression: str) -> str:
        """Evaluate an expression and return the result as text."""
        return self.number_type.format(self.evaluate(expression))

    def format_postfix(self, expression: str) -> str:
        """Return the postfix form of an expression as space-separated text."""
        return " ".join(token.describe() for token in self.to_postfix(expression))


def calculate_expr(expression: str, number_type: Callable[[str], Any] = float) -> Any:
    """
    Evaluate an expression over the given numeric type.

    Args:
        expression: Infix expression string
        number_type: Numeric type used for operands and results

    Returns:
        The value of the expression

    Raises:
        CalcExprError: If the expression is invalid
    """
    return CalcExpr(number_type).evaluate(expression)
