import math

import pytest

from expression_algebra import (
  ConstantNode, VariableNode, UnaryOpNode, BinaryOpNode, FunctionNode,
  Expression, ExpressionSimplifier, SymPyBridge,
  simplify, compute, to_string, add, multiply, divide, unary_plus,
  sqrt, sin, cos, tan, cot, DivisionByZeroError
)

x = VariableNode("x")
y = VariableNode("y")
c = ConstantNode(3)

CORPUS = [
  c,
  x,
  +(+x),
  -(-x),
  0 + x * 1,
  (x * 1 + 0) * (y - y),
  x - x,
  sin(x) - sin(x),
  (x + 0) - x,
  2 * 3 + x,
  x / 1 / 1,
  (5 - 3 * c) * sqrt(16 + c * c),
  cot(0 + x) + tan(1 * y),
  -(2 + 3) * x,
  x / (y - y),
  (x * y) / (2 * y),
  sqrt(x * x + 0 * y) - cos(y / 1),
]


def test_unary_plus_is_dropped():
  assert simplify(+x) == x
  assert simplify(unary_plus(2 + 3)) == ConstantNode(5)
  assert simplify(+(+x)) == x


def test_unary_minus_is_kept():
  result = simplify(-(ConstantNode(2) + 3))
  assert isinstance(result, UnaryOpNode)
  assert result.operand == ConstantNode(5)
  assert compute(result) == -5.0
  # No double negation collapsing
  assert to_string(simplify(-(-x))) == "-(-(x))"


def test_addition_rules():
  assert simplify(ConstantNode(2) + 3) == ConstantNode(5)
  assert simplify(0 + x) == x
  assert simplify(x + 0) == x
  assert simplify(x + y) == x + y
  assert simplify(x + 1) == BinaryOpNode('+', x, ConstantNode(1))


def test_subtraction_rules():
  assert simplify(ConstantNode(5) - 2) == ConstantNode(3)
  assert simplify(x - x) == ConstantNode(0)
  assert simplify(sin(x * 1) - sin(x)) == ConstantNode(0)
  assert simplify(x - y) == x - y
  # Only the right operand of addition absorbs a zero, subtraction keeps it
  assert simplify(0 - x) == BinaryOpNode('-', ConstantNode(0), x)
  assert simplify(x - 0) == BinaryOpNode('-', x, ConstantNode(0))


def test_multiplication_rules():
  assert simplify(ConstantNode(2) * 3) == ConstantNode(6)
  assert simplify(0 * x) == ConstantNode(0)
  assert simplify(x * 0) == ConstantNode(0)
  assert simplify(1 * x) == x
  assert simplify(x * 1) == x
  assert simplify(multiply(ConstantNode(1), VariableNode("x"))) == VariableNode("x")
  assert simplify(2 * x) == 2 * x


def test_multiplication_by_zero_absorbs_any_operand():
  for e in CORPUS:
    assert simplify(multiply(ConstantNode(0), e)) == ConstantNode(0)


def test_adding_zero_is_neutral():
  for e in CORPUS:
    assert simplify(add(ConstantNode(0), e)) == simplify(e)


def test_division_rules():
  assert simplify(ConstantNode(6) / 3) == ConstantNode(2)
  assert simplify(x / 1) == x
  assert simplify(1 / x) == 1 / x
  assert simplify(x / 2) == x / 2


def test_constant_division_by_zero_folds_without_error():
  folded = simplify(divide(ConstantNode(1), ConstantNode(0)))
  assert isinstance(folded, ConstantNode)
  assert math.isinf(folded.value)
  assert math.isnan(simplify(divide(ConstantNode(0), ConstantNode(0))).value)


def test_zero_divisor_with_variables_still_fails_at_evaluation():
  reduced = simplify(x / (y - y))
  assert reduced == x / 0
  with pytest.raises(DivisionByZeroError):
    compute(reduced, {"x": 1.0, "y": 2.0})


def test_functions_only_simplify_their_operand():
  result = simplify(sin(0 + x))
  assert result == sin(x)
  assert isinstance(simplify(sqrt(ConstantNode(16) + 9)), FunctionNode)
  assert simplify(sqrt(ConstantNode(16) + 9)) == sqrt(ConstantNode(25))
  assert simplify(cot(c)) == cot(c)


def test_end_to_end_constant_folding():
  expr = (5 - 3 * c) * sqrt(16 + c * c)
  reduced = simplify(expr)

  assert to_string(reduced) == "(-4 * Sqrt(25))"
  assert compute(reduced, {}) == -20.0


def test_nested_identities_collapse():
  assert simplify((x * 1 + 0) * (y - y)) == ConstantNode(0)
  assert simplify((x + 0) - x) == ConstantNode(0)
  assert simplify(2 * 3 + x) == 6 + x


def test_simplify_is_idempotent():
  for e in CORPUS:
    once = simplify(e)
    assert simplify(once) == once


def test_simplify_builds_new_trees():
  expr = 0 + x * 1
  before = to_string(expr)
  simplify(expr)
  assert to_string(expr) == before


def test_simplify_preserves_meaning():
  for e in CORPUS:
    if e == x / (y - y):
      continue
    assert SymPyBridge.is_equivalent(e, simplify(e))


def test_simplify_preserves_values():
  bindings = {"x": 0.7, "y": 1.3}
  for e in CORPUS:
    if e == x / (y - y):
      continue
    assert compute(simplify(e), bindings) == pytest.approx(compute(e, bindings))


def test_single_pass_bound():
  reduced = ExpressionSimplifier.simplify_expression(1 * (x + 0), max_passes=1)
  assert reduced == x


def test_pass_bound_must_be_positive():
  for bad in (0, -1):
    with pytest.raises(ValueError):
      ExpressionSimplifier.simplify_expression(x + 0, max_passes=bad)
  with pytest.raises(ValueError):
    simplify(x + 0, max_passes=0)


def test_folded_nan_subtrees_cancel():
  nan_branch = sin(ConstantNode(0) / 0)
  assert simplify(nan_branch - nan_branch) == ConstantNode(0)
  assert simplify(x + ConstantNode(0) / 0) == simplify(x + ConstantNode(0) / 0)
  assert simplify(simplify(ConstantNode(0) / 0)) == simplify(ConstantNode(0) / 0)


def test_expression_wrapper_simplify():
  expr = Expression(1 * x + 0)
  reduced = expr.simplify()
  assert isinstance(reduced, Expression)
  assert reduced.root == x
  assert expr.root == 1 * x + 0
