import numpy as np
import numba
from enum import IntEnum

class NodeType(IntEnum):
  CONSTANT = 0
  VARIABLE = 1
  UNARY_OP = 2
  BINARY_OP = 3
  FUNCTION = 4

class OpType(IntEnum):
  # Leaves
  CONSTANT = 0
  VARIABLE = 1
  # Unary ops
  UNARY_PLUS = 2
  UNARY_MINUS = 3
  # Binary ops
  ADD = 4
  SUB = 5
  MUL = 6
  DIV = 7
  # Named functions
  SQRT = 8
  SIN = 9
  COS = 10
  TAN = 11
  COT = 12

# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV}
UNARY_OP_MAP = {'+': OpType.UNARY_PLUS, '-': OpType.UNARY_MINUS}
FUNCTION_MAP = {
    'sqrt': OpType.SQRT, 'sin': OpType.SIN, 'cos': OpType.COS,
    'tan': OpType.TAN, 'cot': OpType.COT
}

# Display names used when rendering function nodes
FUNCTION_NAMES = {
    'sqrt': 'Sqrt', 'sin': 'Sin', 'cos': 'Cos', 'tan': 'Tan', 'cot': 'Cot'
}

# Weight-table keys for unary operators (binary ops use their symbol)
UNARY_SYMBOLS = {'+': 'pos', '-': 'neg'}

LEAF_OPS = frozenset((OpType.CONSTANT, OpType.VARIABLE))
SIGN_OPS = frozenset(UNARY_OP_MAP.values())
ARITHMETIC_OPS = frozenset(BINARY_OP_MAP.values())
FUNCTION_OPS = frozenset(FUNCTION_MAP.values())
TRIG_OPS = frozenset((OpType.SIN, OpType.COS, OpType.TAN, OpType.COT))


def apply_binary_op(left: float, right: float, op_type: OpType) -> float:
  """Scalar arithmetic with IEEE semantics (x / 0 gives inf or nan, never raises)"""
  a = np.float64(left)
  b = np.float64(right)
  with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
    if op_type == OpType.ADD:
      result = a + b
    elif op_type == OpType.SUB:
      result = a - b
    elif op_type == OpType.MUL:
      result = a * b
    elif op_type == OpType.DIV:
      result = np.divide(a, b)
    else:
      raise ValueError(f"Not a binary operation: {op_type!r}")
  return float(result)


def apply_unary_op(value: float, op_type: OpType) -> float:
  """Scalar unary operators and named functions; domains are checked by the caller"""
  v = np.float64(value)
  with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
    if op_type == OpType.UNARY_PLUS:
      result = v
    elif op_type == OpType.UNARY_MINUS:
      result = -v
    elif op_type == OpType.SQRT:
      result = np.sqrt(v)
    elif op_type == OpType.SIN:
      result = np.sin(v)
    elif op_type == OpType.COS:
      result = np.cos(v)
    elif op_type == OpType.TAN:
      result = np.tan(v)
    elif op_type == OpType.COT:
      result = np.divide(1.0, np.tan(v))
    else:
      raise ValueError(f"Not a unary operation: {op_type!r}")
  return float(result)


@numba.njit(cache=True, inline='always')
def evaluate_variable(X, index):
  return X[:, index].astype(np.float64)

@numba.njit(cache=True, inline='always')
def evaluate_constant(n_samples, value):
  return np.full(n_samples, value, dtype=np.float64)

@numba.njit(cache=True, error_model='numpy')
def evaluate_binary_op(left_val, right_val, op_type):
  if op_type == OpType.ADD:
    return left_val + right_val
  elif op_type == OpType.SUB:
    return left_val - right_val
  elif op_type == OpType.MUL:
    return left_val * right_val
  elif op_type == OpType.DIV:
    return left_val / right_val
  return np.zeros_like(left_val)

@numba.njit(cache=True, error_model='numpy')
def evaluate_unary_op(operand_val, op_type):
  if op_type == OpType.UNARY_PLUS:
    return operand_val.copy()
  elif op_type == OpType.UNARY_MINUS:
    return -operand_val
  elif op_type == OpType.SQRT:
    return np.sqrt(operand_val)
  elif op_type == OpType.SIN:
    return np.sin(operand_val)
  elif op_type == OpType.COS:
    return np.cos(operand_val)
  elif op_type == OpType.TAN:
    return np.tan(operand_val)
  elif op_type == OpType.COT:
    # Reciprocal of tan: a zero tangent gives a signed infinity
    return 1.0 / np.tan(operand_val)
  return np.zeros_like(operand_val)
