"""Core expression tree components."""

from .node import Node, OperandNode, BinaryOpNode, UnaryOpNode, make_operator_node, iter_postorder
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP, OPERATOR_PRECEDENCE,
    LEFT_PAREN, RIGHT_PAREN, precedence, is_numeral, is_operator, is_unary,
    is_right_associative, arity, evaluate_binary_op, evaluate_unary_op,
    apply_binary_op, apply_unary_op
)

__all__ = [
    'Node', 'OperandNode', 'BinaryOpNode', 'UnaryOpNode', 'make_operator_node', 'iter_postorder',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'UNARY_OP_MAP', 'OPERATOR_PRECEDENCE',
    'LEFT_PAREN', 'RIGHT_PAREN', 'precedence', 'is_numeral', 'is_operator', 'is_unary',
    'is_right_associative', 'arity', 'evaluate_binary_op', 'evaluate_unary_op',
    'apply_binary_op', 'apply_unary_op'
]
