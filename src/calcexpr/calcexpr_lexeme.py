"""Lexeme kinds and lexeme representation for calcexpr expressions."""

from dataclasses import dataclass
from enum import Enum


class CalcExprLexemeKind(Enum):
    """Lexeme kinds produced by the tokenizer and the unary resolver."""
    NUMBER = "NUMBER"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    LPAREN = "("
    RPAREN = ")"
    UNARY_PLUS = "UNARY_PLUS"
    UNARY_MINUS = "UNARY_MINUS"
    OTHER = "OTHER"


BINARY_OPERATOR_KINDS = frozenset({
    CalcExprLexemeKind.PLUS,
    CalcExprLexemeKind.MINUS,
    CalcExprLexemeKind.STAR,
    CalcExprLexemeKind.SLASH,
})

UNARY_OPERATOR_KINDS = frozenset({
    CalcExprLexemeKind.UNARY_PLUS,
    CalcExprLexemeKind.UNARY_MINUS,
})

OPERATOR_KINDS = BINARY_OPERATOR_KINDS | UNARY_OPERATOR_KINDS

# Single characters that map straight onto a lexeme kind.
SINGLE_CHAR_KINDS = {
    '+': CalcExprLexemeKind.PLUS,
    '-': CalcExprLexemeKind.MINUS,
    '*': CalcExprLexemeKind.STAR,
    '/': CalcExprLexemeKind.SLASH,
    '(': CalcExprLexemeKind.LPAREN,
    ')': CalcExprLexemeKind.RPAREN,
}


@dataclass(frozen=True)
class CalcExprLexeme:
    """A slice of the source expression classified as one indivisible unit."""
    kind: CalcExprLexemeKind
    text: str
    position: int

    def is_operator(self) -> bool:
        """Return True for binary operators and unary markers."""
        return self.kind in OPERATOR_KINDS

    def is_operand(self) -> bool:
        """Anything that is neither an operator nor a parenthesis is treated as an operand."""
        return self.kind in (CalcExprLexemeKind.NUMBER, CalcExprLexemeKind.OTHER)

    def __repr__(self) -> str:
        return f"CalcExprLexeme({self.kind.name}, {self.text!r}, pos={self.position})"
