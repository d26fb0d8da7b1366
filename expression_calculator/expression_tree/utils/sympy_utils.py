import math
import sympy as sp

from ..expression import ExpressionTree
from ...errors import EvaluationError, NumericOverflowError

_NON_FINITE = (sp.zoo, sp.nan, sp.oo, -sp.oo)


class SymPyEvaluator:
  """Exact (rational) evaluation and rendering through SymPy"""

  def exact_value(self, tree: ExpressionTree) -> sp.Expr:
    """Exact value of the tree.

    Follows the float evaluator's policy: division by zero raises
    DivisionByZeroError, an infinite or undefined result raises
    NumericOverflowError. Towers of large powers are computed in full, which
    can be slow.
    """
    result = tree.to_sympy(evaluate=True)
    if result.has(*_NON_FINITE):
      raise NumericOverflowError(f"Exact evaluation is not finite: {result}")
    return result

  def agrees_with_float(self, tree: ExpressionTree, rel_tol: float = 1e-9) -> bool:
    """True when the float64 and exact evaluations match within ``rel_tol``"""
    try:
      approx = tree.evaluate()
    except EvaluationError:
      return False
    exact = complex(sp.N(self.exact_value(tree)))
    if exact.imag != 0.0:
      return False
    return math.isclose(approx, exact.real, rel_tol=rel_tol, abs_tol=1e-12)

  def latex_representation(self, tree: ExpressionTree) -> str:
    """LaTeX of the tree's structure (numeric sub-results are not folded)"""
    return sp.latex(tree.to_sympy(evaluate=False))


def exact_value(tree: ExpressionTree) -> sp.Expr:
  return SymPyEvaluator().exact_value(tree)


def latex_representation(tree: ExpressionTree) -> str:
  return SymPyEvaluator().latex_representation(tree)
