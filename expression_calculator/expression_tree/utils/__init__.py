"""Utilities for expression trees."""

from .tree_utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_type,
    find_nodes_by_operator, count_operators, apply_to_all_nodes,
    validate_tree_structure, get_operands, get_binary_ops, get_unary_ops
)
from .validator import ExpressionValidator
from .sympy_utils import SymPyEvaluator, exact_value, latex_representation

__all__ = [
    'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_type',
    'find_nodes_by_operator', 'count_operators', 'apply_to_all_nodes',
    'validate_tree_structure', 'get_operands', 'get_binary_ops', 'get_unary_ops',
    'ExpressionValidator', 'SymPyEvaluator', 'exact_value', 'latex_representation'
]
