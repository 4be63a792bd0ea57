import math
import numbers
import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, Dict, Mapping, Sequence, Tuple, Any
from .operators import (
  NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP, FUNCTION_MAP, FUNCTION_NAMES, UNARY_SYMBOLS,
  apply_binary_op, apply_unary_op,
  evaluate_variable, evaluate_constant, evaluate_binary_op, evaluate_unary_op
)
from .errors import UndefinedVariableError, DivisionByZeroError, InvalidDomainError
from ...logging_system import log_debug

# Weighted complexity per node symbol, reported by Node.complexity()
COMPLEXITY_WEIGHTS: Dict[str, float] = {
  # Binary operations
  '+': 1.0,
  '-': 1.0,
  '*': 1.1,
  '/': 1.5,

  # Unary sign operators
  'pos': 0.5,  # No effect on the value
  'neg': 1.0,

  # Named functions
  'sqrt': 1.2,
  'sin': 1.2,
  'cos': 1.2,
  'tan': 1.6,  # Poles at odd multiples of pi/2
  'cot': 1.8,  # Reciprocal of tan, poles at multiples of pi

  # Terminal nodes
  'variable': 1.0,
  'constant': 1.0,
}

# Added to complexity() when child sits directly under parent, keyed (parent, child)
COMBINATION_PENALTIES: Dict[tuple, float] = {
  ('sin', 'sin'): 0.3,
  ('cos', 'cos'): 0.3,
  ('sin', 'cos'): 0.2,
  ('cos', 'sin'): 0.2,
  ('tan', 'cot'): 0.5,  # Poles of both functions compose
  ('cot', 'tan'): 0.5,
  ('sqrt', 'sqrt'): 0.4,
  ('/', '/'): 0.3,  # Nested fraction
  ('neg', 'neg'): 0.2,
}

SYMPY_FUNCTIONS = {
  'sqrt': sp.sqrt,
  'sin': sp.sin,
  'cos': sp.cos,
  'tan': sp.tan,
  'cot': sp.cot,
}


def format_number(value: float) -> str:
  """Integral values print without a decimal point, others as Python's shortest repr"""
  if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
    return str(int(value))
  return repr(value)


def as_node(value: Any) -> 'Node':
  """Lift a real literal to a ConstantNode; nodes are returned unchanged"""
  if isinstance(value, Node):
    return value
  if isinstance(value, numbers.Real):
    return ConstantNode(value)
  raise TypeError(f"Cannot use {type(value).__name__} as an expression operand")


def _coerce(value: Any) -> Optional['Node']:
  if isinstance(value, (Node, numbers.Real)):
    return as_node(value)
  return None


class Node(ABC):
  """Immutable expression tree node with cached structural properties.

  Payload is exposed through read-only properties; every rewrite builds new
  nodes. Equality is structural, and the hash is consistent with it.
  """

  __slots__ = ('_hash_cache', '_size_cache', '_complexity_cache', '_string_cache')

  node_type: NodeType

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None
    self._complexity_cache: Optional[float] = None
    self._string_cache: Optional[str] = None

  @property
  @abstractmethod
  def op_type(self) -> OpType:
    pass

  @property
  @abstractmethod
  def symbol(self) -> str:
    """Key of this node in COMPLEXITY_WEIGHTS"""
    pass

  @property
  def children(self) -> Tuple['Node', ...]:
    return ()

  @abstractmethod
  def _payload(self) -> tuple:
    pass

  def compute(self, bindings: Optional[Mapping[str, float]] = None) -> float:
    """Evaluate the tree to a float under a name -> value binding"""
    return self._compute(bindings if bindings is not None else {})

  @abstractmethod
  def _compute(self, bindings: Mapping[str, float]) -> float:
    pass

  def evaluate(self, X: np.ndarray, variable_names: Sequence[str] = ()) -> np.ndarray:
    """Evaluate over a sample matrix, column i bound to variable_names[i]"""
    X = np.asarray(X, dtype=np.float64)
    if X.ndim != 2:
      raise ValueError(f"Sample matrix must be 2-dimensional, got shape {X.shape}")
    if X.shape[1] != len(variable_names):
      raise ValueError(
        f"Sample matrix has {X.shape[1]} columns but {len(variable_names)} variable names were given")
    index_map = {name: i for i, name in enumerate(variable_names)}
    return self._evaluate(X, index_map)

  @abstractmethod
  def _evaluate(self, X: np.ndarray, index_map: Dict[str, int]) -> np.ndarray:
    pass

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self._render()
    return self._string_cache

  @abstractmethod
  def _render(self) -> str:
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = 1 + sum(child.size() for child in self.children)
    return self._size_cache

  def complexity(self) -> float:
    """Weighted complexity score"""
    if self._complexity_cache is None:
      self._complexity_cache = self._compute_complexity()
    return self._complexity_cache

  def _compute_complexity(self) -> float:
    complexity = COMPLEXITY_WEIGHTS.get(self.symbol, 1.0)
    for child in self.children:
      complexity += child.complexity()
      complexity += COMBINATION_PENALTIES.get((self.symbol, child.symbol), 0.0)
    return complexity

  def __eq__(self, other) -> bool:
    if not isinstance(other, Node):
      return NotImplemented
    if self is other:
      return True
    return (self.op_type == other.op_type
            and self._payload() == other._payload()
            and self.children == other.children)

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = hash((self.op_type, self._payload(), self.children))
    return self._hash_cache

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"{type(self).__name__}<{self.to_string()}>"

  # Combinators through operator overloading; real literals become constants

  def __pos__(self) -> 'Node':
    return UnaryOpNode('+', self)

  def __neg__(self) -> 'Node':
    return UnaryOpNode('-', self)

  def __add__(self, other):
    other = _coerce(other)
    return NotImplemented if other is None else BinaryOpNode('+', self, other)

  def __radd__(self, other):
    other = _coerce(other)
    return NotImplemented if other is None else BinaryOpNode('+', other, self)

  def __sub__(self, other):
    other = _coerce(other)
    return NotImplemented if other is None else BinaryOpNode('-', self, other)

  def __rsub__(self, other):
    other = _coerce(other)
    return NotImplemented if other is None else BinaryOpNode('-', other, self)

  def __mul__(self, other):
    other = _coerce(other)
    return NotImplemented if other is None else BinaryOpNode('*', self, other)

  def __rmul__(self, other):
    other = _coerce(other)
    return NotImplemented if other is None else BinaryOpNode('*', other, self)

  def __truediv__(self, other):
    other = _coerce(other)
    return NotImplemented if other is None else BinaryOpNode('/', self, other)

  def __rtruediv__(self, other):
    other = _coerce(other)
    return NotImplemented if other is None else BinaryOpNode('/', other, self)


class ConstantNode(Node):
  __slots__ = ('_value',)

  node_type = NodeType.CONSTANT

  def __init__(self, value: float):
    super().__init__()
    self._value = float(value)

  @property
  def value(self) -> float:
    return self._value

  @property
  def op_type(self) -> OpType:
    return OpType.CONSTANT

  @property
  def symbol(self) -> str:
    return 'constant'

  def _payload(self) -> tuple:
    # All NaN payloads share one key
    if math.isnan(self._value):
      return ('nan',)
    return (self._value,)

  def _compute(self, bindings: Mapping[str, float]) -> float:
    return self._value

  def _evaluate(self, X: np.ndarray, index_map: Dict[str, int]) -> np.ndarray:
    return evaluate_constant(X.shape[0], self._value)

  def _render(self) -> str:
    return format_number(self._value)

  def to_sympy(self) -> sp.Expr:
    if math.isfinite(self._value) and self._value.is_integer():
      return sp.Integer(int(self._value))
    return sp.sympify(self._value)


class VariableNode(Node):
  __slots__ = ('_name',)

  node_type = NodeType.VARIABLE

  def __init__(self, name: str):
    super().__init__()
    self._name = name

  @property
  def name(self) -> str:
    return self._name

  @property
  def op_type(self) -> OpType:
    return OpType.VARIABLE

  @property
  def symbol(self) -> str:
    return 'variable'

  def _payload(self) -> tuple:
    return (self._name,)

  def _compute(self, bindings: Mapping[str, float]) -> float:
    if self._name not in bindings:
      log_debug(f"Undefined variable {self._name!r}; bound names: {sorted(bindings)}")
      raise UndefinedVariableError(self._name)
    return float(bindings[self._name])

  def _evaluate(self, X: np.ndarray, index_map: Dict[str, int]) -> np.ndarray:
    if self._name not in index_map:
      raise UndefinedVariableError(self._name)
    return evaluate_variable(X, index_map[self._name])

  def _render(self) -> str:
    return self._name

  def to_sympy(self) -> sp.Expr:
    return sp.Symbol(self._name)


class UnaryOpNode(Node):
  """Unary plus or minus applied to one operand"""

  __slots__ = ('_operator', '_op_type', '_operand')

  node_type = NodeType.UNARY_OP

  def __init__(self, operator: str, operand: Node):
    super().__init__()
    if operator not in UNARY_OP_MAP:
      raise ValueError(f"Unknown unary operator: {operator!r}")
    self._operator = operator
    self._op_type = UNARY_OP_MAP[operator]
    self._operand = as_node(operand)

  @property
  def operator(self) -> str:
    return self._operator

  @property
  def operand(self) -> Node:
    return self._operand

  @property
  def op_type(self) -> OpType:
    return self._op_type

  @property
  def symbol(self) -> str:
    return UNARY_SYMBOLS[self._operator]

  @property
  def children(self) -> Tuple[Node, ...]:
    return (self._operand,)

  def _payload(self) -> tuple:
    return (self._operator,)

  def _compute(self, bindings: Mapping[str, float]) -> float:
    return apply_unary_op(self._operand._compute(bindings), self._op_type)

  def _evaluate(self, X: np.ndarray, index_map: Dict[str, int]) -> np.ndarray:
    return evaluate_unary_op(self._operand._evaluate(X, index_map), self._op_type)

  def _render(self) -> str:
    return f"{self._operator}({self._operand.to_string()})"

  def to_sympy(self) -> sp.Expr:
    operand_sympy = self._operand.to_sympy()
    if self._op_type == OpType.UNARY_MINUS:
      return -operand_sympy
    return operand_sympy


class BinaryOpNode(Node):
  """Addition, subtraction, multiplication or division of two operands"""

  __slots__ = ('_operator', '_op_type', '_left', '_right')

  node_type = NodeType.BINARY_OP

  def __init__(self, operator: str, left: Node, right: Node):
    super().__init__()
    if operator not in BINARY_OP_MAP:
      raise ValueError(f"Unknown binary operator: {operator!r}")
    self._operator = operator
    self._op_type = BINARY_OP_MAP[operator]
    self._left = as_node(left)
    self._right = as_node(right)

  @property
  def operator(self) -> str:
    return self._operator

  @property
  def left(self) -> Node:
    return self._left

  @property
  def right(self) -> Node:
    return self._right

  @property
  def op_type(self) -> OpType:
    return self._op_type

  @property
  def symbol(self) -> str:
    return self._operator

  @property
  def children(self) -> Tuple[Node, ...]:
    return (self._left, self._right)

  def _payload(self) -> tuple:
    return (self._operator,)

  def _compute(self, bindings: Mapping[str, float]) -> float:
    if self._op_type == OpType.DIV:
      # Divisor first so a zero divisor fails before the dividend is touched
      divisor = self._right._compute(bindings)
      if divisor == 0:
        log_debug(f"Zero divisor in {self.to_string()}")
        raise DivisionByZeroError(self._left.to_string(), self._right.to_string())
      return apply_binary_op(self._left._compute(bindings), divisor, self._op_type)
    left_val = self._left._compute(bindings)
    right_val = self._right._compute(bindings)
    return apply_binary_op(left_val, right_val, self._op_type)

  def _evaluate(self, X: np.ndarray, index_map: Dict[str, int]) -> np.ndarray:
    if self._op_type == OpType.DIV:
      right_val = self._right._evaluate(X, index_map)
      if np.any(right_val == 0):
        raise DivisionByZeroError(self._left.to_string(), self._right.to_string())
      left_val = self._left._evaluate(X, index_map)
    else:
      left_val = self._left._evaluate(X, index_map)
      right_val = self._right._evaluate(X, index_map)
    return evaluate_binary_op(left_val, right_val, self._op_type)

  def _render(self) -> str:
    return f"({self._left.to_string()} {self._operator} {self._right.to_string()})"

  def to_sympy(self) -> sp.Expr:
    left = self._left.to_sympy()
    right = self._right.to_sympy()
    if self._op_type == OpType.ADD:
      return sp.Add(left, right)
    elif self._op_type == OpType.SUB:
      return sp.Add(left, sp.Mul(-1, right))
    elif self._op_type == OpType.MUL:
      return sp.Mul(left, right)
    return sp.Mul(left, sp.Pow(right, -1))


class FunctionNode(Node):
  """Named function (sqrt, sin, cos, tan, cot) of one operand"""

  __slots__ = ('_function', '_op_type', '_operand')

  node_type = NodeType.FUNCTION

  def __init__(self, function: str, operand: Node):
    super().__init__()
    if function not in FUNCTION_MAP:
      raise ValueError(f"Unknown function: {function!r}")
    self._function = function
    self._op_type = FUNCTION_MAP[function]
    self._operand = as_node(operand)

  @property
  def function(self) -> str:
    return self._function

  @property
  def operand(self) -> Node:
    return self._operand

  @property
  def op_type(self) -> OpType:
    return self._op_type

  @property
  def symbol(self) -> str:
    return self._function

  @property
  def children(self) -> Tuple[Node, ...]:
    return (self._operand,)

  def _payload(self) -> tuple:
    return (self._function,)

  def _compute(self, bindings: Mapping[str, float]) -> float:
    value = self._operand._compute(bindings)
    if self._op_type == OpType.SQRT and value < 0:
      log_debug(f"Negative radicand {value!r} in {self.to_string()}")
      raise InvalidDomainError(FUNCTION_NAMES[self._function], value)
    return apply_unary_op(value, self._op_type)

  def _evaluate(self, X: np.ndarray, index_map: Dict[str, int]) -> np.ndarray:
    operand_val = self._operand._evaluate(X, index_map)
    if self._op_type == OpType.SQRT and np.any(operand_val < 0):
      raise InvalidDomainError(FUNCTION_NAMES[self._function], float(np.min(operand_val)))
    return evaluate_unary_op(operand_val, self._op_type)

  def _render(self) -> str:
    return f"{FUNCTION_NAMES[self._function]}({self._operand.to_string()})"

  def to_sympy(self) -> sp.Expr:
    return SYMPY_FUNCTIONS[self._function](self._operand.to_sympy())
