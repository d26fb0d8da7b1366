from enum import IntEnum
from typing import Iterable, List, Optional, Union
import sympy as sp

from .core.node import Node
from .builders import InfixBuilder, PostfixBuilder, tokenize
from ..logging_system import LogLevel, log_enabled, log_info

TokenSource = Union[str, Iterable[str]]


class BuildMode(IntEnum):
  INFIX = 1
  POSTFIX = 2

  @classmethod
  def parse(cls, mode: Union['BuildMode', str, int]) -> 'BuildMode':
    if isinstance(mode, str):
      try:
        return cls[mode.upper()]
      except KeyError:
        raise ValueError(f"Unknown build mode {mode!r} (expected 'infix' or 'postfix')")
    return cls(mode)


def _join(tokens: List[str]) -> str:
  # every token is followed by one separating space, trailing one included
  return ''.join(f"{token} " for token in tokens)


class ExpressionTree:
  """Owns the root of one expression; read-only once built"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Optional[Node] = None):
    self.root = root
    self._string_cache: Optional[str] = None

  @classmethod
  def construct(cls, tokens: TokenSource, mode: Union[BuildMode, str] = BuildMode.INFIX) -> 'ExpressionTree':
    """Build a tree from infix or postfix tokens.

    ``tokens`` is either a raw line (split on whitespace) or a sequence of
    tokens. Raises MalformedExpressionError, UnknownTokenError or
    UnbalancedParenthesesError on bad input.
    """
    mode = BuildMode.parse(mode)
    token_list = tokenize(tokens)
    if mode == BuildMode.INFIX:
      root = InfixBuilder().build(token_list)
    else:
      root = PostfixBuilder.build(token_list)
    tree = cls(root)
    if log_enabled(LogLevel.DETAILED):
      log_info(f"Built {mode.name.lower()} tree with {tree.size()} node(s): {tree.to_string()}",
               LogLevel.DETAILED)
    return tree

  @classmethod
  def from_infix(cls, tokens: TokenSource) -> 'ExpressionTree':
    return cls.construct(tokens, BuildMode.INFIX)

  @classmethod
  def from_postfix(cls, tokens: TokenSource) -> 'ExpressionTree':
    return cls.construct(tokens, BuildMode.POSTFIX)

  def is_empty(self) -> bool:
    return self.root is None

  def evaluate(self) -> float:
    """Float64 value of the tree; an empty tree evaluates to 0"""
    if self.root is None:
      return 0.0
    return self.root.evaluate()

  def infix_tokens(self) -> List[str]:
    return [] if self.root is None else self.root.infix_tokens()

  def postfix_tokens(self) -> List[str]:
    return [] if self.root is None else self.root.postfix_tokens()

  def to_infix(self) -> str:
    """Fully parenthesized infix, e.g. ``"( ( 3 + 4 ) * 2 ) "``"""
    return _join(self.infix_tokens())

  def to_postfix(self) -> str:
    """Postfix with a trailing space, e.g. ``"3 4 + 2 * "``"""
    return _join(self.postfix_tokens())

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = ' '.join(self.infix_tokens())
    return self._string_cache

  def size(self) -> int:
    """Node count"""
    return 0 if self.root is None else self.root.size()

  def to_sympy(self, evaluate: bool = True) -> sp.Expr:
    if self.root is None:
      return sp.Integer(0)
    return self.root.to_sympy(evaluate)

  def is_well_formed(self) -> bool:
    from .utils.validator import ExpressionValidator
    return self.root is None or ExpressionValidator.is_well_formed(self.root)

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, ExpressionTree):
      return NotImplemented
    return self.root == other.root

  def __repr__(self) -> str:
    return f"ExpressionTree({self.to_string()!r})"


def construct(tokens: TokenSource, mode: Union[BuildMode, str] = BuildMode.INFIX) -> ExpressionTree:
  return ExpressionTree.construct(tokens, mode)


def evaluate(tree: ExpressionTree) -> float:
  return tree.evaluate()


def to_infix(tree: ExpressionTree) -> str:
  return tree.to_infix()


def to_postfix(tree: ExpressionTree) -> str:
  return tree.to_postfix()
