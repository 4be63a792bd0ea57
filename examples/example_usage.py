import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from expression_algebra import (
  Expression, VariableNode, ConstantNode, sin, sqrt,
  EvaluationError, LogLevel, configure_logging, get_logger
)


def describe(title, expr: Expression, bindings):
  """Print the properties of one expression through the logger"""
  logger = get_logger()
  profile = expr.profile()
  try:
    value = expr.compute(bindings)
  except EvaluationError as e:
    value = f"error: {e}"
  logger.result_summary(title, {
    'expression': expr.to_string(),
    'variables': sorted(profile.variables),
    'is_constant': profile.is_constant,
    'is_polynomial': profile.is_polynomial,
    'polynomial_degree': profile.polynomial_degree,
    'value': value,
  })


def main():
  configure_logging(LogLevel.MODERATE)

  x = VariableNode("x")
  c = ConstantNode(3)
  bindings = {"x": 1.0, "y": 2.0}

  describe("Sin(x)", Expression(sin(x)), bindings)

  product = Expression((5 - 3 * c) * sqrt(16 + c * c))
  describe("Constant product", product, bindings)
  describe("Constant product, simplified", product.simplify(), bindings)

  # Structural degree does not see the cancellation; simplify first
  cancelled = Expression(x * x - x * x)
  describe("x^2 - x^2", cancelled, bindings)
  describe("x^2 - x^2, simplified", cancelled.simplify(), bindings)

  describe("Division by zero", Expression(x / (c - 3)), bindings)


if __name__ == "__main__":
  main()
