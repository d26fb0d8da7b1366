"""Tree builders for infix and postfix token streams."""

from typing import Iterable, List, Union

from .infix_builder import InfixBuilder, build_infix
from .postfix_builder import PostfixBuilder, build_postfix


def tokenize(expression: Union[str, Iterable[str]]) -> List[str]:
  """Split on arbitrary whitespace; an already tokenized sequence is copied as-is"""
  if isinstance(expression, str):
    return expression.split()
  return list(expression)


__all__ = ['InfixBuilder', 'PostfixBuilder', 'build_infix', 'build_postfix', 'tokenize']
