"""
Typed errors raised while building or evaluating expression trees.

Construction faults (MalformedExpressionError, UnknownTokenError,
UnbalancedParenthesesError) come from the builders. Evaluation faults share
the EvaluationError base so a driver can tell a bad line from a bad value.
"""

from typing import Optional


class ExpressionError(ValueError):
    """Base class for every error raised by the calculator core"""


class MalformedExpressionError(ExpressionError):
    """Token stream does not reduce to exactly one tree"""


class UnknownTokenError(ExpressionError):
    """Token is neither a numeral, an operator nor a grouping symbol"""

    def __init__(self, token: str, message: Optional[str] = None):
        self.token = token
        super().__init__(message or f"Unknown token: {token!r}")


class UnbalancedParenthesesError(ExpressionError):
    """A ')' without a pending '(' or a '(' that is never closed"""


class EvaluationError(ExpressionError):
    """Base class for arithmetic faults found while evaluating a tree"""


class DivisionByZeroError(EvaluationError):
    pass


class NumericOverflowError(EvaluationError):
    """Arithmetic produced a non-finite value (inf or nan)"""


class NonNumericLiteralError(EvaluationError):
    def __init__(self, literal: str):
        self.literal = literal
        super().__init__(f"Operand is not a decimal integer: {literal!r}")
