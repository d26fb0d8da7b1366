import numpy as np
import numba
from enum import IntEnum
from typing import Dict

from ...errors import DivisionByZeroError, NumericOverflowError

class NodeType(IntEnum):
  OPERAND = 0
  BINARY_OP = 1
  UNARY_OP = 2

class OpType(IntEnum):
  # Binary ops
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  POW = 4
  # Unary ops
  NEG = 5

# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV, '^': OpType.POW}
UNARY_OP_MAP = {'!': OpType.NEG}

# Precedence ranks; ranks above RIGHT_ASSOCIATIVE_ABOVE stack instead of reducing on ties
OPERATOR_PRECEDENCE: Dict[str, int] = {
  '+': 0,
  '-': 0,
  '*': 1,
  '/': 1,
  '^': 2,
  '!': 3,
}
RIGHT_ASSOCIATIVE_ABOVE = 1

LEFT_PAREN = '('
RIGHT_PAREN = ')'
GROUPING_SYMBOLS = (LEFT_PAREN, RIGHT_PAREN)


def precedence(symbol: str) -> int:
  """Precedence rank of an operator symbol, -1 when it is not an operator"""
  return OPERATOR_PRECEDENCE.get(symbol, -1)


def is_numeral(token: str) -> bool:
  # Classification looks at the first character only; the full literal is
  # checked when the operand is evaluated.
  return bool(token) and '0' <= token[0] <= '9'


def is_operator(token: str) -> bool:
  return token in OPERATOR_PRECEDENCE


def is_unary(symbol: str) -> bool:
  return symbol in UNARY_OP_MAP


def is_right_associative(symbol: str) -> bool:
  return precedence(symbol) > RIGHT_ASSOCIATIVE_ABOVE


def arity(symbol: str) -> int:
  if symbol in UNARY_OP_MAP:
    return 1
  if symbol in BINARY_OP_MAP:
    return 2
  raise KeyError(symbol)


@numba.njit(cache=True)
def evaluate_binary_op(left_val, right_val, op_type):
  if op_type == OpType.ADD:
    return left_val + right_val
  elif op_type == OpType.SUB:
    return left_val - right_val
  elif op_type == OpType.MUL:
    return left_val * right_val
  elif op_type == OpType.DIV:
    return left_val / right_val
  elif op_type == OpType.POW:
    return left_val ** right_val
  return 0.0

@numba.njit(cache=True)
def evaluate_unary_op(operand_val, op_type):
  if op_type == OpType.NEG:
    return -operand_val
  return 0.0


def _check_finite(value: float, symbol: str, left_val: float, right_val: float) -> float:
  if not np.isfinite(value):
    raise NumericOverflowError(
      f"'{symbol}' produced a non-finite result ({value}) from {left_val} and {right_val}")
  return float(value)


def apply_binary_op(symbol: str, left_val: float, right_val: float) -> float:
  """Apply a binary operator with float64 semantics.

  Division by zero (including 0 to a negative power) raises
  DivisionByZeroError; any inf or nan result
  (overflow, or a negative base raised to a fractional power) raises
  NumericOverflowError.
  """
  op_type = BINARY_OP_MAP[symbol]
  left_val = np.float64(left_val)
  right_val = np.float64(right_val)
  if op_type == OpType.DIV and right_val == 0.0:
    raise DivisionByZeroError(f"Division by zero: {float(left_val)} / {float(right_val)}")
  if op_type == OpType.POW and left_val == 0.0 and right_val < 0.0:
    # 0 ^ -n is 1 / 0 ^ n
    raise DivisionByZeroError(f"Zero raised to a negative power: 0 ^ {float(right_val)}")
  result = evaluate_binary_op(left_val, right_val, int(op_type))
  return _check_finite(result, symbol, float(left_val), float(right_val))


def apply_unary_op(symbol: str, operand_val: float) -> float:
  op_type = UNARY_OP_MAP[symbol]
  return float(evaluate_unary_op(np.float64(operand_val), int(op_type)))
