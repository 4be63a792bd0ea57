import numpy as np
from ..core.node import Node, ConstantNode, UnaryOpNode, BinaryOpNode, FunctionNode
from ..core.operators import OpType, BINARY_OP_MAP, FUNCTION_OPS, apply_binary_op
from ...logging_system import log_debug, log_warning

# Upper bound on bottom-up passes per simplify call
DEFAULT_MAX_PASSES = 8


def _is_constant_value(node: Node, target: float) -> bool:
  return node.op_type == OpType.CONSTANT and node.value == target


def _both_constant(left: Node, right: Node) -> bool:
  return left.op_type == OpType.CONSTANT and right.op_type == OpType.CONSTANT


def _fold(operator: str, left: ConstantNode, right: ConstantNode) -> ConstantNode:
  # No zero check: 1/0 folds to inf and 0/0 to nan, only evaluation rejects them
  result = apply_binary_op(left.value, right.value, BINARY_OP_MAP[operator])
  if not np.isfinite(result):
    log_warning(f"Folding ({left} {operator} {right}) produced non-finite constant {result}")
  log_debug(f"fold ({left} {operator} {right}) -> {result}")
  return ConstantNode(result)


def _rewrite_addition(left: Node, right: Node) -> Node:
  if _both_constant(left, right):
    return _fold('+', left, right)
  if _is_constant_value(left, 0.0):
    log_debug(f"0 + x -> x for {right}")
    return right
  if _is_constant_value(right, 0.0):
    log_debug(f"x + 0 -> x for {left}")
    return left
  return BinaryOpNode('+', left, right)


def _rewrite_subtraction(left: Node, right: Node) -> Node:
  if _both_constant(left, right):
    return _fold('-', left, right)
  if left == right:
    log_debug(f"x - x -> 0 for {left}")
    return ConstantNode(0.0)
  return BinaryOpNode('-', left, right)


def _rewrite_multiplication(left: Node, right: Node) -> Node:
  if _both_constant(left, right):
    return _fold('*', left, right)
  if _is_constant_value(left, 0.0) or _is_constant_value(right, 0.0):
    log_debug(f"0 * x -> 0 for ({left} * {right})")
    return ConstantNode(0.0)
  if _is_constant_value(left, 1.0):
    log_debug(f"1 * x -> x for {right}")
    return right
  if _is_constant_value(right, 1.0):
    log_debug(f"x * 1 -> x for {left}")
    return left
  return BinaryOpNode('*', left, right)


def _rewrite_division(left: Node, right: Node) -> Node:
  if _both_constant(left, right):
    return _fold('/', left, right)
  if _is_constant_value(right, 1.0):
    log_debug(f"x / 1 -> x for {left}")
    return left
  return BinaryOpNode('/', left, right)


_BINARY_REWRITES = {
  OpType.ADD: _rewrite_addition,
  OpType.SUB: _rewrite_subtraction,
  OpType.MUL: _rewrite_multiplication,
  OpType.DIV: _rewrite_division,
}


class ExpressionSimplifier:
  """Constant folding and identity/absorbing-element elimination"""

  @staticmethod
  def simplify_expression(node: Node, max_passes: int = DEFAULT_MAX_PASSES) -> Node:
    """Return an equivalent tree, repeating passes until nothing changes.

    A single bottom-up pass already reaches the fixed point for the current
    rule set; the loop keeps that explicit and stops after max_passes.
    """
    if max_passes < 1:
      raise ValueError(f"max_passes must be at least 1, got {max_passes}")
    current = ExpressionSimplifier._apply_simplification_rules(node)
    for _ in range(max_passes - 1):
      simplified = ExpressionSimplifier._apply_simplification_rules(current)
      if simplified == current:
        break
      current = simplified
    return current

  @staticmethod
  def _apply_simplification_rules(node: Node) -> Node:
    op = node.op_type

    if op == OpType.CONSTANT or op == OpType.VARIABLE:
      return node

    if op == OpType.UNARY_PLUS:
      return ExpressionSimplifier._apply_simplification_rules(node.operand)

    if op == OpType.UNARY_MINUS:
      return UnaryOpNode('-', ExpressionSimplifier._apply_simplification_rules(node.operand))

    if op in FUNCTION_OPS:
      return FunctionNode(node.function, ExpressionSimplifier._apply_simplification_rules(node.operand))

    rewrite = _BINARY_REWRITES.get(op)
    if rewrite is None:
      raise TypeError(f"Unsupported node type: {type(node).__name__}")
    left = ExpressionSimplifier._apply_simplification_rules(node.left)
    right = ExpressionSimplifier._apply_simplification_rules(node.right)
    return rewrite(left, right)
