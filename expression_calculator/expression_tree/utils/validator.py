from typing import Iterable, List
from ..core.node import Node
from ..core.operators import GROUPING_SYMBOLS, is_numeral, is_operator
from .tree_utils import validate_tree_structure
from ...errors import EvaluationError


class ExpressionValidator:

  @staticmethod
  def is_valid_expression(node: Node, check_evaluation: bool = False) -> bool:
    """Well-formed, and (optionally) evaluates without an arithmetic fault"""
    if not ExpressionValidator.is_well_formed(node):
      return False

    if check_evaluation:
      return ExpressionValidator._test_evaluation(node)

    return True

  @staticmethod
  def is_well_formed(node: Node) -> bool:
    return validate_tree_structure(node)

  @staticmethod
  def find_unknown_tokens(tokens: Iterable[str], allow_grouping: bool = True) -> List[str]:
    """Tokens that are neither numerals, operators nor (optionally) parentheses"""
    unknown = []
    for token in tokens:
      if is_numeral(token) or is_operator(token):
        continue
      if allow_grouping and token in GROUPING_SYMBOLS:
        continue
      unknown.append(token)
    return unknown

  @staticmethod
  def _test_evaluation(node: Node) -> bool:
    try:
      node.evaluate()
      return True
    except EvaluationError:
      return False
