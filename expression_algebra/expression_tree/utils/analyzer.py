from dataclasses import dataclass
from typing import FrozenSet, Tuple
from ..core.node import Node
from ..core.operators import OpType, SIGN_OPS, ARITHMETIC_OPS, FUNCTION_OPS, TRIG_OPS

# Degree sentinel for expressions that are not classified as polynomial
NOT_POLYNOMIAL_DEGREE = -1

_NOT_POLYNOMIAL: Tuple[bool, int] = (False, NOT_POLYNOMIAL_DEGREE)


@dataclass(frozen=True)
class ExpressionProfile:
  """All structural properties of one expression"""
  variables: FrozenSet[str]
  is_constant: bool
  is_polynomial: bool
  polynomial_degree: int


class StructuralAnalyzer:
  """Structural queries over expression trees.

  Every query is a fold over the tree that dispatches on the node's
  ``op_type``. The results describe the tree as written: nothing is
  simplified first, so ``x*x - x*x`` reports degree 2. Call the simplifier
  beforehand when the reduced shape is what matters.
  """

  @staticmethod
  def variables(node: Node) -> FrozenSet[str]:
    """Names of all variables reachable from node"""
    op = node.op_type
    if op == OpType.CONSTANT:
      return frozenset()
    if op == OpType.VARIABLE:
      return frozenset((node.name,))
    names: FrozenSet[str] = frozenset()
    for child in node.children:
      names |= StructuralAnalyzer.variables(child)
    return names

  @staticmethod
  def is_constant(node: Node) -> bool:
    """True when no variable can influence the value.

    Functions of a constant operand are constant whichever function is
    applied, so this always agrees with ``not variables(node)``.
    """
    op = node.op_type
    if op == OpType.CONSTANT:
      return True
    if op == OpType.VARIABLE:
      return False
    if op in SIGN_OPS or op in ARITHMETIC_OPS or op in FUNCTION_OPS:
      return all(StructuralAnalyzer.is_constant(child) for child in node.children)
    raise TypeError(f"Unsupported node type: {type(node).__name__}")

  @staticmethod
  def is_polynomial(node: Node) -> bool:
    return StructuralAnalyzer._classify(node)[0]

  @staticmethod
  def polynomial_degree(node: Node) -> int:
    """Structural degree, or -1 when the expression is not polynomial"""
    return StructuralAnalyzer._classify(node)[1]

  @staticmethod
  def profile(node: Node) -> ExpressionProfile:
    is_poly, degree = StructuralAnalyzer._classify(node)
    names = StructuralAnalyzer.variables(node)
    return ExpressionProfile(
      variables=names,
      is_constant=not names,
      is_polynomial=is_poly,
      polynomial_degree=degree
    )

  @staticmethod
  def _classify(node: Node) -> Tuple[bool, int]:
    """(is_polynomial, degree) in a single pass"""
    op = node.op_type

    if op == OpType.CONSTANT:
      return True, 0
    if op == OpType.VARIABLE:
      return True, 1

    if op in SIGN_OPS:
      return StructuralAnalyzer._classify(node.operand)

    if op in TRIG_OPS:
      return _NOT_POLYNOMIAL

    if op == OpType.SQRT:
      # Even-degree radicand is taken as reducing to a polynomial: sqrt(x*x) ~ x.
      # Heuristic only, sqrt(x*x + x*x) also passes.
      is_poly, degree = StructuralAnalyzer._classify(node.operand)
      if is_poly and degree % 2 == 0:
        return True, degree // 2
      return _NOT_POLYNOMIAL

    if op in ARITHMETIC_OPS:
      left_poly, left_degree = StructuralAnalyzer._classify(node.left)
      right_poly, right_degree = StructuralAnalyzer._classify(node.right)
      if not (left_poly and right_poly):
        return _NOT_POLYNOMIAL
      if op == OpType.ADD or op == OpType.SUB:
        return True, max(left_degree, right_degree)
      if op == OpType.MUL:
        return True, left_degree + right_degree
      # Division by a constant keeps the dividend's degree
      if StructuralAnalyzer.is_constant(node.right):
        return True, left_degree
      return _NOT_POLYNOMIAL

    raise TypeError(f"Unsupported node type: {type(node).__name__}")
