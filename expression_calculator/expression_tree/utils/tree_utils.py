"""
Tree Utility Functions

Traversal and structural analysis helpers for expression trees. Every
helper walks the generic ``left``/``right`` links, so it works for any
node class.
"""

from collections import Counter, deque
from typing import List, Dict, Callable, Any, Optional, cast

from ..core.node import Node, OperandNode, BinaryOpNode, UnaryOpNode
from ..core.operators import is_operator, arity


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()  # FIFO for breadth-first
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.pop()  # LIFO, left child on top
        all_nodes.append(current_node)
        nodes_to_visit.extend(reversed(current_node.children()))

    return all_nodes


def calculate_tree_depth(node: Optional[Node]) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1, an empty subtree 0)
    """
    if node is None:
        return 0
    max_depth = 0
    nodes_to_visit = [(node, 1)]
    while nodes_to_visit:
        current_node, depth = nodes_to_visit.pop()
        max_depth = max(max_depth, depth)
        nodes_to_visit.extend((child, depth + 1) for child in current_node.children())
    return max_depth


def find_nodes_by_type(node: Node, node_type: type) -> List[Node]:
    """Find all nodes of a specific class in the tree."""
    return [n for n in get_all_nodes(node) if isinstance(n, node_type)]


def find_nodes_by_operator(node: Node, operator: str) -> List[Node]:
    """
    Find all operator nodes with a specific operator.

    Args:
        node: Root node of the tree
        operator: Operator symbol to search for

    Returns:
        List of nodes with the specified operator
    """
    return [n for n in get_all_nodes(node) if n.is_operator() and n.token == operator]


def count_operators(node: Node) -> Dict[str, int]:
    """Usage count of each operator symbol in the tree."""
    return dict(Counter(n.token for n in get_all_nodes(node) if n.is_operator()))


def apply_to_all_nodes(node: Node, func: Callable[[Node], Any],
                       filter_type: Optional[type] = None) -> List[Any]:
    """Apply a function to all nodes (optionally filtered by class)."""
    all_nodes = get_all_nodes(node)

    if filter_type is not None:
        all_nodes = [n for n in all_nodes if isinstance(n, filter_type)]

    return [func(n) for n in all_nodes]


def validate_tree_structure(node: Node) -> bool:
    """
    Check the arity invariant on every node.

    Operands have no children; ``!`` has an empty ``left`` and its operand in
    ``right``; every other operator has both children.
    """
    return all(_has_valid_arity(n) for n in get_all_nodes(node, 'depth_first'))


def _has_valid_arity(node: Node) -> bool:
    if isinstance(node, OperandNode):
        return node.left is None and node.right is None and not is_operator(node.token)

    if not is_operator(node.token):
        return False

    if arity(node.token) == 1:
        return node.left is None and node.right is not None

    return node.left is not None and node.right is not None


# Convenience functions for common operations
def get_operands(node: Node) -> List[OperandNode]:
    """Get all operand leaves in the tree."""
    return cast(List[OperandNode], find_nodes_by_type(node, OperandNode))


def get_binary_ops(node: Node) -> List[BinaryOpNode]:
    """Get all binary operation nodes in the tree."""
    return cast(List[BinaryOpNode], find_nodes_by_type(node, BinaryOpNode))


def get_unary_ops(node: Node) -> List[UnaryOpNode]:
    """Get all unary operation nodes in the tree."""
    return cast(List[UnaryOpNode], find_nodes_by_type(node, UnaryOpNode))
