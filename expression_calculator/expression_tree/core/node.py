import re
import sympy as sp
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, Optional, List
from .operators import (
  NodeType, BINARY_OP_MAP, UNARY_OP_MAP, LEFT_PAREN, RIGHT_PAREN,
  is_numeral, apply_binary_op, apply_unary_op
)
from ...errors import DivisionByZeroError, NonNumericLiteralError, NumericOverflowError

_DECIMAL_LITERAL = re.compile(r'[0-9]+')


def iter_postorder(root: 'Node') -> Iterator['Node']:
  """Post-order walk (left, right, node) with an explicit stack"""
  stack = [(root, False)]
  while stack:
    node, expanded = stack.pop()
    if expanded:
      yield node
      continue
    stack.append((node, True))
    if node.right is not None:
      stack.append((node.right, False))
    if node.left is not None:
      stack.append((node.left, False))


class Node(ABC):
  """Base tree node: a token plus up to two exclusively owned children.

  Nodes are only created by the builders and are never mutated afterwards,
  so size and hash are cached on first use. Every walk uses an explicit
  stack, so tree depth is bounded by memory only.
  """

  __slots__ = ('token', 'left', 'right', '_hash_cache', '_size_cache')

  def __init__(self, token: str, left: Optional['Node'] = None, right: Optional['Node'] = None):
    self.token = token
    self.left = left
    self.right = right
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None

  @abstractmethod
  def _apply(self, values: List[float]) -> float:
    """Float value of this node given its children's values"""

  @abstractmethod
  def _sympy_node(self, args: List[sp.Expr], evaluate: bool) -> sp.Expr:
    pass

  @abstractmethod
  def _compute_hash(self, child_hashes: List[int]) -> int:
    pass

  def _fold(self, combine: Callable[['Node', list], Any]) -> Any:
    """Bottom-up reduction over the subtree"""
    results = {}
    for node in iter_postorder(self):
      results[id(node)] = combine(node, [results.pop(id(child)) for child in node.children()])
    return results[id(self)]

  def evaluate(self) -> float:
    return self._fold(lambda node, values: node._apply(values))

  def to_sympy(self, evaluate: bool = True) -> sp.Expr:
    return self._fold(lambda node, args: node._sympy_node(args, evaluate))

  def is_operator(self) -> bool:
    return not is_numeral(self.token)

  def postfix_tokens(self) -> List[str]:
    """Post-order walk: left, right, then this node's token"""
    return [node.token for node in iter_postorder(self)]

  def infix_tokens(self) -> List[str]:
    """In-order walk; operator nodes are wrapped in a pair of parentheses"""
    tokens: List[str] = []
    # pending items are either tokens to emit or nodes to expand
    stack: list = [self]
    while stack:
      item = stack.pop()
      if isinstance(item, str):
        tokens.append(item)
        continue
      grouped = item.is_operator()
      if grouped:
        stack.append(RIGHT_PAREN)
      if item.right is not None:
        stack.append(item.right)
      stack.append(item.token)
      if item.left is not None:
        stack.append(item.left)
      if grouped:
        stack.append(LEFT_PAREN)
    return tokens

  def to_string(self) -> str:
    return ' '.join(self.infix_tokens())

  def children(self) -> List['Node']:
    return [child for child in (self.left, self.right) if child is not None]

  def _fill_caches(self):
    """Compute size and hash for every uncached node, skipping cached subtrees"""
    stack = [(self, False)]
    while stack:
      node, expanded = stack.pop()
      if node._hash_cache is not None:
        continue
      children = node.children()
      if expanded:
        node._size_cache = 1 + sum(child._size_cache for child in children)
        node._hash_cache = node._compute_hash([child._hash_cache for child in children])
        continue
      stack.append((node, True))
      stack.extend((child, False) for child in reversed(children))

  def size(self) -> int:
    """Node count of this subtree"""
    if self._size_cache is None:
      self._fill_caches()
    return self._size_cache

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._fill_caches()
    return self._hash_cache

  def __eq__(self, other) -> bool:
    if not isinstance(other, Node):
      return NotImplemented
    if hash(self) != hash(other):
      return False
    pairs = [(self, other)]
    while pairs:
      a, b = pairs.pop()
      if a is b:
        continue
      if a is None or b is None or type(a) is not type(b) or a.token != b.token:
        return False
      pairs.append((a.left, b.left))
      pairs.append((a.right, b.right))
    return True

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()!r})"


class OperandNode(Node):
  """Leaf holding the literal text of a numeral"""

  __slots__ = ()

  def __init__(self, literal: str):
    super().__init__(literal)

  @property
  def literal(self) -> str:
    return self.token

  def value(self) -> int:
    if not _DECIMAL_LITERAL.fullmatch(self.token):
      raise NonNumericLiteralError(self.token)
    return int(self.token)

  def _apply(self, values: List[float]) -> float:
    try:
      return float(self.value())
    except OverflowError:
      raise NumericOverflowError(f"Literal too large for float64: {self.token}")

  def _sympy_node(self, args: List[sp.Expr], evaluate: bool) -> sp.Expr:
    return sp.Integer(self.value())

  def _compute_hash(self, child_hashes: List[int]) -> int:
    return hash((NodeType.OPERAND, self.token))


class BinaryOpNode(Node):
  __slots__ = ()

  def __init__(self, operator: str, left: Node, right: Node):
    if operator not in BINARY_OP_MAP:
      raise ValueError(f"Not a binary operator: {operator!r}")
    super().__init__(operator, left, right)

  @property
  def operator(self) -> str:
    return self.token

  def _apply(self, values: List[float]) -> float:
    left_val, right_val = values
    return apply_binary_op(self.operator, left_val, right_val)

  def _sympy_node(self, args: List[sp.Expr], evaluate: bool) -> sp.Expr:
    left, right = args
    if self.operator == '+':
      return sp.Add(left, right, evaluate=evaluate)
    elif self.operator == '-':
      return sp.Add(left, sp.Mul(-1, right, evaluate=evaluate), evaluate=evaluate)
    elif self.operator == '*':
      return sp.Mul(left, right, evaluate=evaluate)
    elif self.operator == '/':
      if evaluate and right == 0:
        raise DivisionByZeroError(f"Division by zero: {left} / 0")
      return sp.Mul(left, sp.Pow(right, -1, evaluate=evaluate), evaluate=evaluate)
    else:
      if evaluate and left == 0 and right.is_negative:
        raise DivisionByZeroError(f"Zero raised to a negative power: 0 ^ {right}")
      return sp.Pow(left, right, evaluate=evaluate)

  def _compute_hash(self, child_hashes: List[int]) -> int:
    left_hash, right_hash = child_hashes
    return hash((NodeType.BINARY_OP, self.operator, left_hash, right_hash))


class UnaryOpNode(Node):
  """Unary negation; the sole operand lives in ``right`` and ``left`` stays empty"""

  __slots__ = ()

  def __init__(self, operator: str, operand: Node):
    if operator not in UNARY_OP_MAP:
      raise ValueError(f"Not a unary operator: {operator!r}")
    super().__init__(operator, None, operand)

  @property
  def operator(self) -> str:
    return self.token

  @property
  def operand(self) -> Node:
    return self.right

  def _apply(self, values: List[float]) -> float:
    # children() skips the empty left link, so the operand's value is last
    return apply_unary_op(self.operator, values[-1])

  def _sympy_node(self, args: List[sp.Expr], evaluate: bool) -> sp.Expr:
    return sp.Mul(-1, args[-1], evaluate=evaluate)

  def _compute_hash(self, child_hashes: List[int]) -> int:
    return hash((NodeType.UNARY_OP, self.operator, child_hashes[-1]))


def make_operator_node(symbol: str, operands: List[Node]) -> Node:
  """Build the operator node for ``symbol`` from operands in left-to-right order"""
  if symbol in UNARY_OP_MAP:
    (operand,) = operands
    return UnaryOpNode(symbol, operand)
  left, right = operands
  return BinaryOpNode(symbol, left, right)
