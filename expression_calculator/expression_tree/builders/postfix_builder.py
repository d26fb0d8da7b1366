from typing import List

from ..core.node import Node, OperandNode, make_operator_node
from ..core.operators import is_numeral, is_operator, arity
from ...errors import MalformedExpressionError, UnknownTokenError
from ...logging_system import LogLevel, log_debug, log_enabled, log_warning


class PostfixBuilder:
  """Reduces a postfix token stream to a tree with a single node stack.

  Underflow policy: an operator that arrives while the stack is empty is
  skipped (logged as a warning) and builds no node. An operator that finds
  some operands but fewer than its arity raises MalformedExpressionError,
  as does a stream that does not end with exactly one node.
  """

  @staticmethod
  def build(tokens: List[str]) -> Node:
    stack: List[Node] = []

    for position, token in enumerate(tokens):
      if is_numeral(token):
        stack.append(OperandNode(token))
        continue

      if not is_operator(token):
        raise UnknownTokenError(token, f"Unknown token {token!r} at position {position} in postfix expression")

      if not stack:
        log_warning(f"Skipping operator {token!r} at position {position}: no operands on the stack")
        continue

      needed = arity(token)
      if len(stack) < needed:
        raise MalformedExpressionError(
          f"Operator {token!r} at position {position} needs {needed} operands, found {len(stack)}")

      # first pop is the right operand, second pop the left
      operands = [stack.pop() for _ in range(needed)][::-1]
      node = make_operator_node(token, operands)
      if log_enabled(LogLevel.VERBOSE):
        log_debug(f"postfix reduce {token!r} -> {node.to_string()}")
      stack.append(node)

    if not stack:
      raise MalformedExpressionError("Postfix expression produced no tree")
    if len(stack) > 1:
      raise MalformedExpressionError(
        f"Postfix expression left {len(stack)} unreduced operands: "
        + ', '.join(node.to_string() for node in stack))
    return stack.pop()


def build_postfix(tokens: List[str]) -> Node:
  return PostfixBuilder.build(tokens)
