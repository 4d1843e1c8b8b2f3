"""Resolves sign characters into unary markers."""

from typing import List

from calcexpr.calcexpr_lexeme import CalcExprLexeme, CalcExprLexemeKind


class CalcExprUnaryResolver:
    """
    Reclassifies '+' and '-' lexemes that act as signs.

    A '+' or '-' is a sign when nothing that can end an operand precedes it: it is the
    first lexeme, or it follows '(' or another operator (including a sign that was just
    resolved).  Otherwise it stays a binary operator.  The rule only looks back one lexeme.
    """

    _UNARY_KINDS = {
        CalcExprLexemeKind.PLUS: CalcExprLexemeKind.UNARY_PLUS,
        CalcExprLexemeKind.MINUS: CalcExprLexemeKind.UNARY_MINUS,
    }

    def resolve(self, lexemes: List[CalcExprLexeme]) -> List[CalcExprLexeme]:
        """
        Resolve unary signs.

        Args:
            lexemes: Lexemes produced by the tokenizer

        Returns:
            A new list of the same length with sign lexemes replaced by unary markers
        """
        result: List[CalcExprLexeme] = []
        previous: CalcExprLexeme | None = None

        for lexeme in lexemes:
            unary_kind = self._UNARY_KINDS.get(lexeme.kind)
            if unary_kind is not None and self._starts_operand(previous):
                lexeme = CalcExprLexeme(unary_kind, lexeme.text, lexeme.position)

            result.append(lexeme)
            previous = lexeme

        return result

    def _starts_operand(self, previous: CalcExprLexeme | None) -> bool:
        if previous is None:
            return True

        return previous.kind == CalcExprLexemeKind.LPAREN or previous.is_operator()
