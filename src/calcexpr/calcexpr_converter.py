"""Infix to postfix conversion (shunting-yard) for calcexpr expressions."""

import logging
from typing import List

from calcexpr.calcexpr_error import CalcExprParseError
from calcexpr.calcexpr_lexeme import CalcExprLexeme, CalcExprLexemeKind, UNARY_OPERATOR_KINDS
from calcexpr.calcexpr_number_type import CalcExprNumberType
from calcexpr.calcexpr_token import (
    BINARY_OPS, PRECEDENCE, UNARY_OPS,
    CalcExprBinaryOperator, CalcExprOperand, CalcExprToken, CalcExprUnaryOperator
)


class CalcExprConverter:
    """
    Converts resolved infix lexemes into a postfix token sequence.

    Binary operators are left associative: an incoming operator first pops every stacked
    operator with greater or equal precedence.  Unary signs are prefix operators and never
    pop anything, which is what lets chains such as "--5" or "-+5" reach the evaluator with
    their operand in front of them.

    Adjacent operands ("2 3") are not rejected here; the evaluator's final stack check
    catches them.
    """

    def __init__(self, number_type: CalcExprNumberType):
        """
        Initialize converter.

        Args:
            number_type: Numeric type used to parse operand text
        """
        self.number_type = number_type
        self._logger = logging.getLogger("CalcExprConverter")

    def convert(self, lexemes: List[CalcExprLexeme]) -> List[CalcExprToken]:
        """
        Convert lexemes to postfix order.

        Args:
            lexemes: Lexemes with unary signs already resolved

        Returns:
            Postfix token list in evaluation order

        Raises:
            CalcExprParseError: If an operand can't be parsed or parentheses are unbalanced
        """
        output: List[CalcExprToken] = []
        op_stack: List[CalcExprLexeme] = []

        for lexeme in lexemes:
            if lexeme.is_operand():
                output.append(self._make_operand(lexeme))
                continue

            if lexeme.kind == CalcExprLexemeKind.LPAREN:
                op_stack.append(lexeme)
                continue

            if lexeme.kind == CalcExprLexemeKind.RPAREN:
                self._close_parenthesis(lexeme, output, op_stack)
                continue

            self._push_operator(lexeme, output, op_stack)

        while op_stack:
            top = op_stack.pop()
            if top.kind in (CalcExprLexemeKind.LPAREN, CalcExprLexemeKind.RPAREN):
                raise CalcExprParseError(
                    message="Unclosed parenthesis",
                    position=top.position,
                    received=f"'(' at position {top.position} has no matching ')'",
                    expected="A ')' for every '('",
                    example="Correct: (1 + 2) * 3\\nIncorrect: (1 + 2 * 3",
                    suggestion="Add the missing closing parenthesis",
                    context="Parentheses must be balanced"
                )

            output.append(self._make_operator(top))

        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug("postfix: %s", " ".join(token.describe() for token in output))

        return output

    def _close_parenthesis(
        self,
        lexeme: CalcExprLexeme,
        output: List[CalcExprToken],
        op_stack: List[CalcExprLexeme]
    ) -> None:
        """Pop operators to the output until the matching '(' is found and discarded."""
        while op_stack and op_stack[-1].kind != CalcExprLexemeKind.LPAREN:
            output.append(self._make_operator(op_stack.pop()))

        if not op_stack:
            raise CalcExprParseError(
                message="Unexpected closing parenthesis",
                position=lexeme.position,
                received="')' with no matching '('",
                expected="A '(' before every ')'",
                example="Correct: (1 + 2)\\nIncorrect: 1 + 2)",
                suggestion="Remove the extra ')' or add the missing '('",
                context="Parentheses must be balanced"
            )

        op_stack.pop()

    def _push_operator(
        self,
        lexeme: CalcExprLexeme,
        output: List[CalcExprToken],
        op_stack: List[CalcExprLexeme]
    ) -> None:
        """Push an operator, first popping stacked ones of equal or higher precedence unless it is a sign."""
        if lexeme.kind not in UNARY_OPERATOR_KINDS:
            precedence = PRECEDENCE[lexeme.kind]
            while op_stack and PRECEDENCE.get(op_stack[-1].kind, 0) >= precedence:
                output.append(self._make_operator(op_stack.pop()))

        op_stack.append(lexeme)

    def _make_operand(self, lexeme: CalcExprLexeme) -> CalcExprOperand:
        # Only digit runs may parse; some numeric types would accept non-ASCII digits.
        if lexeme.kind == CalcExprLexemeKind.OTHER:
            raise CalcExprParseError(
                message=f"Unexpected character: {lexeme.text}",
                position=lexeme.position,
                received=f"Character: {lexeme.text} (code {ord(lexeme.text)})",
                expected="A number, + - * /, or a parenthesis",
                example="Valid: (1 + 2) * 3\\nInvalid: 1 % 2, [1], 1,5",
                suggestion="Remove the character or replace it with a supported operator",
                context="Only the four arithmetic operators and parentheses are supported"
            )

        value = self.number_type.parse(lexeme.text, lexeme.position)
        return CalcExprOperand(value, lexeme.text, lexeme.position)

    def _make_operator(self, lexeme: CalcExprLexeme) -> CalcExprToken:
        """Turn a stacked operator lexeme into a typed operator token."""
        unary_op = UNARY_OPS.get(lexeme.kind)
        if unary_op is not None:
            return CalcExprUnaryOperator(unary_op, lexeme.text, lexeme.position)

        binary_op = BINARY_OPS.get(lexeme.kind)
        if binary_op is not None:
            return CalcExprBinaryOperator(binary_op, lexeme.text, lexeme.position)

        raise CalcExprParseError(
            message=f"Unknown operator: {lexeme.text}",
            position=lexeme.position,
            received=f"Lexeme: {lexeme!r}",
            expected="One of + - * /",
            context="Only the four arithmetic operators and unary signs are supported"
        )
