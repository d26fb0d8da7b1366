from typing import List

from ..core.node import Node, OperandNode, make_operator_node
from ..core.operators import (
  LEFT_PAREN, RIGHT_PAREN, GROUPING_SYMBOLS,
  is_numeral, is_operator, is_right_associative, precedence, arity
)
from ...errors import MalformedExpressionError, UnbalancedParenthesesError, UnknownTokenError
from ...logging_system import LogLevel, log_debug, log_enabled


class InfixBuilder:
  """Shunting-yard builder with an operand stack and an operator stack.

  Precedence: ``+ -`` < ``* /`` < ``^`` < ``!``. Ties reduce the stacked
  operator first (left associativity) except for ranks above 1, which stack
  (``^`` and ``!`` are right associative).

  Both stacks belong to the builder instance and are reset by every
  ``build`` call, so one instance must not be shared between threads.
  """

  __slots__ = ('operands', 'operators')

  def __init__(self):
    self.operands: List[Node] = []
    self.operators: List[str] = []

  def build(self, tokens: List[str]) -> Node:
    self.operands = []
    self.operators = []

    for token in tokens:
      if is_numeral(token):
        self.operands.append(OperandNode(token))
      else:
        self.resolve(token)

    # Whatever is still pending binds in stack order
    while self.operators:
      symbol = self.operators.pop()
      if symbol == LEFT_PAREN:
        raise UnbalancedParenthesesError("Unclosed '(' in infix expression")
      self.reduce(symbol)

    if len(self.operands) != 1:
      if not self.operands:
        raise MalformedExpressionError("Infix expression produced no tree")
      raise MalformedExpressionError(
        f"Infix expression left {len(self.operands)} operands without an operator: "
        + ', '.join(node.to_string() for node in self.operands))
    return self.operands.pop()

  def resolve(self, token: str):
    """Push ``token`` onto the operator stack, reducing whatever must bind first"""
    if not is_operator(token) and token not in GROUPING_SYMBOLS:
      raise UnknownTokenError(token)

    if token == RIGHT_PAREN:
      if LEFT_PAREN not in reversed(self.operators):
        raise UnbalancedParenthesesError("')' without a matching '(' in infix expression")
      while self.operators[-1] != LEFT_PAREN:
        self.reduce(self.operators.pop())
      self.operators.pop()
      return

    while self.operators and token != LEFT_PAREN and self.operators[-1] != LEFT_PAREN:
      on_stack = precedence(self.operators[-1])
      current = precedence(token)
      if current > on_stack or (current == on_stack and is_right_associative(token)):
        break
      self.reduce(self.operators.pop())
    self.operators.append(token)

  def reduce(self, symbol: str):
    """Bind ``symbol`` to the most recent operand(s) and push the result"""
    needed = arity(symbol)
    if len(self.operands) < needed:
      raise MalformedExpressionError(
        f"Operator {symbol!r} needs {needed} operands, found {len(self.operands)}")
    # first pop is the right operand, second pop the left
    operands = [self.operands.pop() for _ in range(needed)][::-1]
    node = make_operator_node(symbol, operands)
    if log_enabled(LogLevel.VERBOSE):
      log_debug(f"infix reduce {symbol!r} -> {node.to_string()}")
    self.operands.append(node)


def build_infix(tokens: List[str]) -> Node:
  return InfixBuilder().build(tokens)
