# expression_utils.py
from typing import FrozenSet, Mapping, Optional, Union
from .expression_tree import Expression, Node, as_node
from .expression_tree.utils.analyzer import StructuralAnalyzer
from .expression_tree.utils.simplifier import ExpressionSimplifier, DEFAULT_MAX_PASSES

ExpressionLike = Union[Expression, Node, float]


def _root(expr: ExpressionLike) -> Node:
  if isinstance(expr, Expression):
    return expr.root
  return as_node(expr)


def compute(expr: ExpressionLike, bindings: Optional[Mapping[str, float]] = None) -> float:
  """Evaluate to a float; raises the EvaluationError subclasses"""
  return _root(expr).compute(bindings)


def simplify(expr: ExpressionLike, max_passes: int = DEFAULT_MAX_PASSES) -> Node:
  return ExpressionSimplifier.simplify_expression(_root(expr), max_passes)


def variables(expr: ExpressionLike) -> FrozenSet[str]:
  return StructuralAnalyzer.variables(_root(expr))


def is_constant(expr: ExpressionLike) -> bool:
  return StructuralAnalyzer.is_constant(_root(expr))


def is_polynomial(expr: ExpressionLike) -> bool:
  return StructuralAnalyzer.is_polynomial(_root(expr))


def polynomial_degree(expr: ExpressionLike) -> int:
  return StructuralAnalyzer.polynomial_degree(_root(expr))


def to_string(expr: ExpressionLike) -> str:
  return _root(expr).to_string()
