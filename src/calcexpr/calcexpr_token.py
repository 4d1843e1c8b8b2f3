"""Postfix token types for calcexpr expressions."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from calcexpr.calcexpr_lexeme import CalcExprLexemeKind


class CalcExprUnaryOp(Enum):
    """Unary sign operations."""
    NEGATE = "-"
    IDENTITY = "+"


class CalcExprBinaryOp(Enum):
    """Binary arithmetic operations."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


# Operator precedence, keyed by lexeme kind.  Unary signs bind tighter than every binary
# operator; an opening parenthesis on the operator stack has the lowest precedence.
PRECEDENCE = {
    CalcExprLexemeKind.LPAREN: 0,
    CalcExprLexemeKind.PLUS: 1,
    CalcExprLexemeKind.MINUS: 1,
    CalcExprLexemeKind.STAR: 2,
    CalcExprLexemeKind.SLASH: 2,
    CalcExprLexemeKind.UNARY_PLUS: 3,
    CalcExprLexemeKind.UNARY_MINUS: 3,
}

UNARY_OPS = {
    CalcExprLexemeKind.UNARY_MINUS: CalcExprUnaryOp.NEGATE,
    CalcExprLexemeKind.UNARY_PLUS: CalcExprUnaryOp.IDENTITY,
}

BINARY_OPS = {
    CalcExprLexemeKind.PLUS: CalcExprBinaryOp.ADD,
    CalcExprLexemeKind.MINUS: CalcExprBinaryOp.SUBTRACT,
    CalcExprLexemeKind.STAR: CalcExprBinaryOp.MULTIPLY,
    CalcExprLexemeKind.SLASH: CalcExprBinaryOp.DIVIDE,
}


@dataclass(frozen=True)
class CalcExprOperand:
    """A numeric value together with the text it was read from."""
    value: Any
    text: str
    position: Optional[int] = None

    def describe(self) -> str:
        return self.text


@dataclass(frozen=True)
class CalcExprUnaryOperator:
    """A prefix sign operator."""
    op: CalcExprUnaryOp
    text: str
    position: Optional[int] = None

    def describe(self) -> str:
        """Postfix rendering; unary signs are spelled out so they can't be confused with binary ones."""
        return "neg" if self.op == CalcExprUnaryOp.NEGATE else "pos"


@dataclass(frozen=True)
class CalcExprBinaryOperator:
    """An infix arithmetic operator."""
    op: CalcExprBinaryOp
    text: str
    position: Optional[int] = None

    def describe(self) -> str:
        return self.text


CalcExprToken = Union[CalcExprOperand, CalcExprUnaryOperator, CalcExprBinaryOperator]
