import numpy as np
import sympy as sp
from typing import FrozenSet, Mapping, Optional, Sequence
from .core.node import Node, as_node
from .utils.analyzer import StructuralAnalyzer, ExpressionProfile
from .utils.simplifier import ExpressionSimplifier, DEFAULT_MAX_PASSES
from .utils.tree_utils import calculate_tree_depth


class Expression:
  """Expression wrapping a root node.

  Trees are immutable, so ``simplify`` returns a new Expression and the
  original keeps its meaning.
  """

  __slots__ = ('root',)

  def __init__(self, root):
    self.root: Node = as_node(root)

  def compute(self, bindings: Optional[Mapping[str, float]] = None) -> float:
    return self.root.compute(bindings)

  def evaluate(self, X: np.ndarray, variable_names: Sequence[str] = ()) -> np.ndarray:
    return self.root.evaluate(X, variable_names)

  def to_string(self) -> str:
    return self.root.to_string()

  def variables(self) -> FrozenSet[str]:
    return StructuralAnalyzer.variables(self.root)

  @property
  def is_constant(self) -> bool:
    return StructuralAnalyzer.is_constant(self.root)

  @property
  def is_polynomial(self) -> bool:
    return StructuralAnalyzer.is_polynomial(self.root)

  @property
  def polynomial_degree(self) -> int:
    return StructuralAnalyzer.polynomial_degree(self.root)

  def profile(self) -> ExpressionProfile:
    return StructuralAnalyzer.profile(self.root)

  def simplify(self, max_passes: int = DEFAULT_MAX_PASSES) -> 'Expression':
    return Expression(ExpressionSimplifier.simplify_expression(self.root, max_passes))

  def copy(self) -> 'Expression':
    # Nodes are immutable, sharing the root is safe
    return Expression(self.root)

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def complexity(self) -> float:
    """Weighted complexity score"""
    return self.root.complexity()

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def latex(self) -> str:
    return sp.latex(self.to_sympy())

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.to_string()})"

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.root == other.root
