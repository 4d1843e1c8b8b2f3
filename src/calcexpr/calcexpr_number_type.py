"""Numeric type adapter used to parse, divide and format calculator values."""

from decimal import Decimal
from fractions import Fraction
import numbers
import sys
from typing import Any, Callable, Dict

from calcexpr.calcexpr_error import CalcExprEvalError, CalcExprParseError


class CalcExprNumberType:
    """
    Wraps a Python numeric type so the calculator can work over any of them.

    The wrapped type must be constructible from text and support +, -, *, /, unary
    negation and comparison with zero.  Integral types divide with truncation toward
    zero so that the result stays integral.
    """

    def __init__(self, python_type: Callable[[str], Any]):
        """
        Initialize the adapter.

        Args:
            python_type: Numeric type (or factory) that builds a value from its text form
        """
        self.python_type = python_type
        self.is_integral = isinstance(python_type, type) and issubclass(python_type, numbers.Integral)

    @property
    def name(self) -> str:
        return getattr(self.python_type, "__name__", repr(self.python_type))

    def parse(self, text: str, position: int | None = None) -> Any:
        """
        Convert operand text into a value.

        Args:
            text: Operand text taken from the expression
            position: Character position of the operand

        Returns:
            The parsed value

        Raises:
            CalcExprParseError: If the text is not a valid literal for the numeric type
        """
        try:
            return self.python_type(text)

        except (ValueError, TypeError, ArithmeticError) as e:
            digit_limit = _max_str_digits()
            if digit_limit and sum(char.isdigit() for char in text) > digit_limit:
                raise CalcExprParseError(
                    message=f"Number too long: {len(text)} characters",
                    position=position,
                    received=f"Operand starting with: {text[:10]}...",
                    expected=f"At most {digit_limit} digits",
                    suggestion="Use a shorter literal or raise the limit with sys.set_int_max_str_digits()",
                    context="Python limits how many digits can be converted from text to an integer"
                ) from e

            raise CalcExprParseError(
                message=f"Invalid number: {text}",
                position=position,
                received=f"Operand: {text!r}",
                expected=f"A literal accepted by {self.name}",
                example="Valid: 42, 3.14, .5\\nInvalid: 1.2.3, .",
                suggestion="Check the number for stray characters or repeated decimal points",
                context="Every operand must parse as a number of the configured type"
            ) from e

    def is_zero(self, value: Any) -> bool:
        return bool(value == 0)

    def divide(self, lhs: Any, rhs: Any) -> Any:
        """Divide two values; the caller has already rejected a zero divisor."""
        if not self.is_integral:
            return lhs / rhs

        quotient = abs(lhs) // abs(rhs)
        if (lhs < 0) != (rhs < 0):
            quotient = -quotient

        return self.python_type(quotient)

    def format(self, value: Any) -> str:
        """
        Render a value as text.

        Raises:
            CalcExprEvalError: If the value has more digits than Python will convert to text
        """
        try:
            return str(value)

        except ValueError as e:
            raise CalcExprEvalError(
                message="Result too large to format",
                received=f"A {type(value).__name__} result with too many digits",
                expected=f"At most {_max_str_digits()} digits",
                suggestion="Split the calculation or raise the limit with sys.set_int_max_str_digits()",
                context="Python limits how many digits of an integer can be converted to text"
            ) from e

    def __repr__(self) -> str:
        return f"CalcExprNumberType({self.name})"


def _max_str_digits() -> int:
    """Return the interpreter's integer/text conversion digit limit, or 0 when there is none."""
    get_limit = getattr(sys, "get_int_max_str_digits", None)
    return get_limit() if get_limit is not None else 0


NUMBER_TYPES: Dict[str, Callable[[str], Any]] = {
    "int": int,
    "float": float,
    "decimal": Decimal,
    "fraction": Fraction,
}
