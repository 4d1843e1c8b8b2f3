"""calcexpr: infix arithmetic expression evaluator over a caller-chosen numeric type."""

# Main API
from calcexpr.calcexpr import CalcExpr, calculate_expr

# Exceptions
from calcexpr.calcexpr_error import (
    CalcExprError, InvalidExpression, CalcExprTokenError, CalcExprParseError, CalcExprEvalError
)

# Lower-level components (for advanced usage)
from calcexpr.calcexpr_lexeme import CalcExprLexeme, CalcExprLexemeKind
from calcexpr.calcexpr_token import (
    CalcExprToken, CalcExprOperand, CalcExprUnaryOperator, CalcExprBinaryOperator,
    CalcExprUnaryOp, CalcExprBinaryOp
)
from calcexpr.calcexpr_number_type import CalcExprNumberType
from calcexpr.calcexpr_tokenizer import CalcExprTokenizer
from calcexpr.calcexpr_unary_resolver import CalcExprUnaryResolver
from calcexpr.calcexpr_converter import CalcExprConverter
from calcexpr.calcexpr_evaluator import CalcExprEvaluator


__all__ = [
    # Main API
    "CalcExpr", "calculate_expr",

    # Exceptions
    "CalcExprError", "InvalidExpression", "CalcExprTokenError", "CalcExprParseError", "CalcExprEvalError",

    # Lower-level components
    "CalcExprLexeme", "CalcExprLexemeKind",
    "CalcExprToken", "CalcExprOperand", "CalcExprUnaryOperator", "CalcExprBinaryOperator",
    "CalcExprUnaryOp", "CalcExprBinaryOp",
    "CalcExprNumberType", "CalcExprTokenizer", "CalcExprUnaryResolver", "CalcExprConverter",
    "CalcExprEvaluator"
]
