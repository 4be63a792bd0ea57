import sympy as sp
from ..core.node import Node


class SymPyBridge:
  """Conversion of expression trees to SymPy, for checking and display"""

  @staticmethod
  def to_sympy(node: Node) -> sp.Expr:
    return node.to_sympy()

  @staticmethod
  def is_equivalent(first: Node, second: Node) -> bool:
    """
    Whether two trees denote the same function.

    Uses SymPy's simplify on the difference, so a False result can also mean
    SymPy could not prove the identity.
    """
    difference = sp.simplify(first.to_sympy() - second.to_sympy())
    return difference == 0

  @staticmethod
  def count_ops(node: Node) -> int:
    """Operation count of the SymPy form (after SymPy's own auto-evaluation)"""
    return int(sp.count_ops(node.to_sympy()))

  @staticmethod
  def latex(node: Node) -> str:
    """Get LaTeX representation of the expression"""
    return sp.latex(node.to_sympy())
