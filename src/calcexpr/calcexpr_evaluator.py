"""Postfix evaluator for calcexpr expressions."""

import logging
from typing import Any, List

from calcexpr.calcexpr_error import CalcExprEvalError
from calcexpr.calcexpr_number_type import CalcExprNumberType
from calcexpr.calcexpr_token import (
    CalcExprBinaryOp, CalcExprBinaryOperator, CalcExprOperand, CalcExprToken,
    CalcExprUnaryOp, CalcExprUnaryOperator
)


class CalcExprEvaluator:
    """Evaluates a postfix token sequence with an explicit value stack."""

    def __init__(self, number_type: CalcExprNumberType):
        """
        Initialize evaluator.

        Args:
            number_type: Numeric type supplying division and zero checks
        """
        self.number_type = number_type
        self._logger = logging.getLogger("CalcExprEvaluator")

    def evaluate(self, tokens: List[CalcExprToken]) -> Any:
        """
        Evaluate postfix tokens.

        Args:
            tokens: Postfix token sequence

        Returns:
            The single value left on the stack

        Raises:
            CalcExprEvalError: If an operator lacks operands, a division by zero occurs, or
                the stack doesn't hold exactly one value at the end
        """
        # The stack is local to this call, so a failure leaves nothing behind.
        stack: List[Any] = []

        for token in tokens:
            match token:
                case CalcExprOperand():
                    stack.append(token.value)

                case CalcExprBinaryOperator():
                    self._apply_binary(token, stack)

                case CalcExprUnaryOperator():
                    self._apply_unary(token, stack)

                case _:
                    raise CalcExprEvalError(
                        message="Unknown token in postfix sequence",
                        received=f"Token: {token!r}",
                        expected="An operand or an operator",
                        context="Only operands, unary signs and binary operators can be evaluated"
                    )

        if len(stack) != 1:
            if not stack:
                raise CalcExprEvalError(
                    message="Expression has no value",
                    expected="At least one number",
                    example="Correct: (1 + 2)\\nIncorrect: ()",
                    suggestion="Put a number or expression inside the parentheses",
                    context="An expression must produce exactly one value"
                )

            raise CalcExprEvalError(
                message="Missing operator between operands",
                received=f"{len(stack)} values left after evaluation",
                expected="Exactly one value",
                example="Correct: 2 * 3\\nIncorrect: 2 3",
                suggestion="Add an operator between adjacent numbers",
                context="An expression must produce exactly one value"
            )

        result = stack[0]
        self._logger.debug("result: %r", result)
        return result

    def _apply_binary(self, token: CalcExprBinaryOperator, stack: List[Any]) -> None:
        if len(stack) < 2:
            raise CalcExprEvalError(
                message=f"Operator '{token.text}' is missing an operand",
                position=token.position,
                received=f"{len(stack)} operand(s) available",
                expected="2 operands",
                example="Correct: 1 + 2\\nIncorrect: 1 +",
                suggestion="Add a number on both sides of the operator",
                context="Binary operators need a left and a right operand"
            )

        rhs = stack.pop()
        lhs = stack.pop()

        match token.op:
            case CalcExprBinaryOp.ADD:
                result = lhs + rhs

            case CalcExprBinaryOp.SUBTRACT:
                result = lhs - rhs

            case CalcExprBinaryOp.MULTIPLY:
                result = lhs * rhs

            case CalcExprBinaryOp.DIVIDE:
                if self.number_type.is_zero(rhs):
                    raise CalcExprEvalError(
                        message="Division by zero",
                        position=token.position,
                        received=f"Divisor: {self.number_type.format(rhs)}",
                        expected="A non-zero divisor",
                        suggestion="Check the right-hand side of the division"
                    )

                result = self.number_type.divide(lhs, rhs)

        stack.append(result)

    def _apply_unary(self, token: CalcExprUnaryOperator, stack: List[Any]) -> None:
        if not stack:
            raise CalcExprEvalError(
                message=f"Sign '{token.text}' is missing an operand",
                position=token.position,
                received="0 operands available",
                expected="1 operand",
                example="Correct: -5\\nIncorrect: -",
                suggestion="Put a number after the sign",
                context="Unary signs apply to the value that follows them"
            )

        operand = stack.pop()
        if token.op == CalcExprUnaryOp.NEGATE:
            stack.append(-operand)
            return

        stack.append(+operand)
