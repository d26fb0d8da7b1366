"""Expression Tree Module

Infix and postfix builders, evaluation and serialization for arithmetic
expression trees.
"""

from .expression import (
  ExpressionTree, BuildMode, construct, evaluate, to_infix, to_postfix
)
from .core.node import Node, OperandNode, BinaryOpNode, UnaryOpNode
from .core.operators import (
  NodeType,
  OpType,
  BINARY_OP_MAP,
  UNARY_OP_MAP,
  OPERATOR_PRECEDENCE,
  precedence,
  apply_binary_op,
  apply_unary_op
)
from .builders import InfixBuilder, PostfixBuilder, tokenize
from .utils import ExpressionValidator, SymPyEvaluator, exact_value, latex_representation

__all__ = [
  "ExpressionTree", "BuildMode", "construct", "evaluate", "to_infix", "to_postfix",
  "Node", "OperandNode", "BinaryOpNode", "UnaryOpNode",
  "NodeType", "OpType", "BINARY_OP_MAP", "UNARY_OP_MAP", "OPERATOR_PRECEDENCE",
  "precedence", "apply_binary_op", "apply_unary_op",
  "InfixBuilder", "PostfixBuilder", "tokenize",
  "ExpressionValidator", "SymPyEvaluator", "exact_value", "latex_representation"
]
