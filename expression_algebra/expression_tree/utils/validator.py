import math
from typing import List, Mapping, Optional
from ..core.node import Node, ConstantNode, VariableNode
from ..core.errors import EvaluationError
from .tree_utils import get_all_nodes


class ExpressionValidator:
  """Checks that construction deliberately skips.

  Nodes accept any payload when built; this reports the problems that would
  otherwise only show up during evaluation. Validation never raises.
  """

  @staticmethod
  def is_valid_expression(node: Node, bindings: Optional[Mapping[str, float]] = None) -> bool:
    if not ExpressionValidator._is_structurally_valid(node):
      return False

    if bindings is not None:
      return ExpressionValidator._test_evaluation(node, bindings)

    return True

  @staticmethod
  def find_problems(node: Node) -> List[str]:
    """Human-readable description of every structural problem"""
    problems = []
    for current in get_all_nodes(node, 'depth_first'):
      if isinstance(current, ConstantNode) and not math.isfinite(current.value):
        problems.append(f"Constant {current.value!r} is not finite")
      elif isinstance(current, VariableNode):
        name = current.name
        if not isinstance(name, str) or not name.isidentifier():
          problems.append(f"Variable name {name!r} is not an identifier")
    return problems

  @staticmethod
  def _is_structurally_valid(node: Node) -> bool:
    return not ExpressionValidator.find_problems(node)

  @staticmethod
  def _test_evaluation(node: Node, bindings: Mapping[str, float]) -> bool:
    try:
      result = node.compute(bindings)
    except EvaluationError:
      return False
    return math.isfinite(result)
