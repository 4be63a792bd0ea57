from expression_algebra import (
  ConstantNode, VariableNode, StructuralAnalyzer,
  variables, is_constant, is_polynomial, polynomial_degree, simplify,
  sqrt, sin, cos, tan, cot
)

x = VariableNode("x")
y = VariableNode("y")
c = ConstantNode(3)

CORPUS = [
  c,
  x,
  +x,
  -c,
  x + y,
  x - c,
  x * y * x,
  x / 2,
  x / y,
  sqrt(x),
  sqrt(c),
  sin(x),
  cos(c),
  tan(x + c),
  cot(c * c),
  (5 - 3 * c) * sqrt(16 + c * c),
  sin(x) + sqrt(y * y) / (c - 1),
  -(x * x) - +(y / 4),
]


def _collect_names(node):
  if isinstance(node, VariableNode):
    return [node.name]
  names = []
  for child in node.children:
    names.extend(_collect_names(child))
  return names


def test_variables_are_exactly_the_reachable_names():
  for expr in CORPUS:
    assert variables(expr) == set(_collect_names(expr))
  assert variables(sin(x) * x + y * x) == {"x", "y"}
  assert variables(c) == frozenset()


def test_is_constant_iff_no_variables():
  for expr in CORPUS:
    assert is_constant(expr) == (not variables(expr))


def test_functions_of_constants_are_constant():
  for func in (sqrt, sin, cos, tan, cot):
    assert is_constant(func(c))
    assert not is_constant(func(x))


def test_leaf_classification():
  assert is_polynomial(c) and polynomial_degree(c) == 0
  assert is_polynomial(x) and polynomial_degree(x) == 1


def test_sum_and_product_degrees():
  assert polynomial_degree(x + x * y) == 2
  assert polynomial_degree(x * x * x - y) == 3
  assert polynomial_degree(-(x * x)) == 2
  assert polynomial_degree(+(x * c)) == 1


def test_degree_is_additive_under_multiplication():
  polys = [c, x, x * y, x * x - y, (x + 1) / 2, sqrt(x * x)]
  for p in polys:
    for q in polys:
      assert is_polynomial(p * q)
      assert polynomial_degree(p * q) == polynomial_degree(p) + polynomial_degree(q)


def test_division_requires_a_constant_divisor():
  assert is_polynomial(x / 2)
  assert polynomial_degree(x * x / (c + 1)) == 2
  assert not is_polynomial(x / y)
  assert polynomial_degree(x / y) == -1
  assert not is_polynomial(c / x)
  # A constant divisor must itself be polynomial
  assert not is_polynomial(x / sin(c))


def test_trigonometric_functions_are_never_polynomial():
  for func in (sin, cos, tan, cot):
    assert not is_polynomial(func(x))
    assert not is_polynomial(func(c))
    assert polynomial_degree(func(c)) == -1


def test_non_polynomial_operand_poisons_the_tree():
  assert not is_polynomial(x + sin(x))
  assert polynomial_degree(x + sin(x)) == -1
  assert polynomial_degree(x * cos(x)) == -1
  assert polynomial_degree(-sin(x)) == -1


def test_square_root_even_degree_rule():
  assert is_polynomial(sqrt(x * x))
  assert polynomial_degree(sqrt(x * x)) == 1
  assert polynomial_degree(sqrt(x * x * y * y)) == 2
  assert polynomial_degree(sqrt(c)) == 0
  assert not is_polynomial(sqrt(x))
  assert polynomial_degree(sqrt(x * x * x)) == -1
  assert not is_polynomial(sqrt(sin(x) * sin(x)))


def test_square_root_rule_is_a_heuristic():
  # sqrt(2x^2) is not a polynomial, the even-degree rule still accepts it
  assert is_polynomial(sqrt(x * x + x * x))
  assert polynomial_degree(sqrt(x * x + x * x)) == 1


def test_degree_is_structural_not_simplified():
  expr = x * x - x * x
  assert polynomial_degree(expr) == 2

  reduced = simplify(expr)
  assert reduced == ConstantNode(0)
  assert polynomial_degree(reduced) == 0


def test_profile_bundles_all_queries():
  expr = sqrt(y * y) + x / 2
  profile = StructuralAnalyzer.profile(expr)

  assert profile.variables == {"x", "y"}
  assert profile.is_constant is False
  assert profile.is_polynomial is True
  assert profile.polynomial_degree == 1


def test_analysis_does_not_evaluate():
  # Division by zero and negative radicands are only errors at evaluation time
  expr = sqrt(ConstantNode(-1)) / ConstantNode(0)
  assert is_constant(expr)
  assert is_polynomial(expr)
  assert polynomial_degree(expr) == 0
