"""Expression Calculator Package

Builds binary expression trees from infix or postfix token streams and
evaluates or re-serializes them.
"""

from .expression_tree import (
  ExpressionTree, BuildMode, construct, evaluate, to_infix, to_postfix,
  Node, OperandNode, BinaryOpNode, UnaryOpNode,
  InfixBuilder, PostfixBuilder, precedence,
  ExpressionValidator, SymPyEvaluator, exact_value
)
from .errors import (
  ExpressionError, MalformedExpressionError, UnknownTokenError,
  UnbalancedParenthesesError, EvaluationError, DivisionByZeroError,
  NumericOverflowError, NonNumericLiteralError
)
from .config import CalculatorConfig
from .logging_system import LogLevel, configure_logging, get_logger

__version__ = "0.1.0"
__all__ = [
  "ExpressionTree", "BuildMode", "construct", "evaluate", "to_infix", "to_postfix",
  "Node", "OperandNode", "BinaryOpNode", "UnaryOpNode",
  "InfixBuilder", "PostfixBuilder", "precedence",
  "ExpressionValidator", "SymPyEvaluator", "exact_value",
  "ExpressionError", "MalformedExpressionError", "UnknownTokenError",
  "UnbalancedParenthesesError", "EvaluationError", "DivisionByZeroError",
  "NumericOverflowError", "NonNumericLiteralError",
  "CalculatorConfig", "LogLevel", "configure_logging", "get_logger"
]
