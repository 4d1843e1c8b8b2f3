"""Exception classes for calcexpr with detailed context."""

from typing import Optional


class CalcExprError(Exception):
    """
    Raised for any invalid expression.

    This is the single error kind the calculator reports.  Subclasses only say which stage
    of the pipeline detected the problem, so callers can catch this class and ignore the rest.

    Every detail is optional.  ``str()`` gives the message followed by one labelled line
    per detail that was supplied, in the order of ``_DETAIL_LABELS``.
    """

    _DETAIL_LABELS = (
        ("position", "Position"),
        ("received", "Received"),
        ("expected", "Expected"),
        ("context", "Context"),
        ("suggestion", "Suggestion"),
        ("example", "Example"),
    )

    def __init__(
        self,
        message: str,
        *,
        position: Optional[int] = None,
        received: Optional[str] = None,
        expected: Optional[str] = None,
        context: Optional[str] = None,
        suggestion: Optional[str] = None,
        example: Optional[str] = None
    ):
        """
        Initialize error.

        Args:
            message: What went wrong
            position: Character offset in the expression, if known
            received: The offending input
            expected: What would have been valid there
            context: The rule that was broken
            suggestion: How to fix the expression
            example: Valid and invalid forms side by side
        """
        self.message = message
        self.position = position
        self.received = received
        self.expected = expected
        self.context = context
        self.suggestion = suggestion
        self.example = example

        super().__init__(self._render())

    def _render(self) -> str:
        lines = [f"Error: {self.message}"]
        for attr, label in self._DETAIL_LABELS:
            value = getattr(self, attr)

            # Position 0 is meaningful; empty strings are not.
            if value is None or value == "":
                continue

            lines.append(f"{label}: {value}")

        return "\n".join(lines)


# The calculator has exactly one failure kind; this is its public name.
InvalidExpression = CalcExprError


class CalcExprTokenError(CalcExprError):
    """Tokenization errors with detailed context."""


class CalcExprParseError(CalcExprError):
    """Conversion (infix to postfix) errors with detailed context."""


class CalcExprEvalError(CalcExprError):
    """Evaluation errors with detailed context."""
