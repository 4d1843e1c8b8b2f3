"""Tokenizer for calcexpr expressions with detailed error messages."""

import logging
from typing import List

from calcexpr.calcexpr_error import CalcExprTokenError
from calcexpr.calcexpr_lexeme import CalcExprLexeme, CalcExprLexemeKind, SINGLE_CHAR_KINDS


class CalcExprTokenizer:
    """Splits an expression string into lexemes."""

    def __init__(self) -> None:
        self._logger = logging.getLogger("CalcExprTokenizer")

    def tokenize(self, expression: str) -> List[CalcExprLexeme]:
        """
        Tokenize an expression.

        Numbers are maximal runs of digits and '.' characters and are not validated here;
        a malformed number such as "1.2.3" is rejected when it is parsed later.  Characters
        that are not operators or parentheses become single-character lexemes and are also
        rejected later.

        Args:
            expression: The expression string to tokenize

        Returns:
            List of lexemes in source order

        Raises:
            CalcExprTokenError: If the expression contains an alphabetic character
        """
        lexemes: List[CalcExprLexeme] = []
        i = 0

        while i < len(expression):
            char = expression[i]

            # Skip whitespace
            if char.isspace():
                i += 1
                continue

            if self._is_number_char(char):
                start = i
                while i < len(expression) and self._is_number_char(expression[i]):
                    i += 1

                lexemes.append(CalcExprLexeme(CalcExprLexemeKind.NUMBER, expression[start:i], start))
                continue

            if char.isalpha():
                end = i
                while end < len(expression) and expression[end].isalnum():
                    end += 1

                raise CalcExprTokenError(
                    message=f"Invalid character: {char}",
                    position=i,
                    received=f"Identifier: {expression[i:end]}",
                    expected="Digits, '.', + - * /, parentheses or whitespace",
                    example="Valid: (2 + 3) * 4\\nInvalid: x + 1",
                    suggestion="Replace names with numeric values",
                    context="Variables and functions are not supported"
                )

            kind = SINGLE_CHAR_KINDS.get(char, CalcExprLexemeKind.OTHER)
            lexemes.append(CalcExprLexeme(kind, char, i))
            i += 1

        self._logger.debug("tokenized %r into %d lexemes", expression, len(lexemes))
        return lexemes

    def _is_number_char(self, char: str) -> bool:
        """Only ASCII digits count; other Unicode digits are rejected later as operands."""
        return '0' <= char <= '9' or char == '.'
