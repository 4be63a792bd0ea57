"""Errors raised while evaluating expression trees.

Construction, analysis and simplification never raise these; only
``Node.compute`` and ``Node.evaluate`` do.
"""


class EvaluationError(Exception):
  """Base class for failures during numeric evaluation"""


class UndefinedVariableError(EvaluationError, LookupError):
  """A variable has no value in the bindings passed to evaluation"""

  def __init__(self, name: str):
    super().__init__(f"Variable {name} is not defined.")
    self.name = name


class DivisionByZeroError(EvaluationError, ZeroDivisionError):
  """A division node's divisor evaluated to exactly zero"""

  def __init__(self, dividend_expr: str = "", divisor_expr: str = ""):
    message = "Division by zero is not allowed."
    if divisor_expr:
      message += f" Divisor {divisor_expr} evaluated to 0."
    super().__init__(message)
    self.dividend_expr = dividend_expr
    self.divisor_expr = divisor_expr


class InvalidDomainError(EvaluationError, ValueError):
  """A function was applied outside its real domain (negative square root)"""

  def __init__(self, function: str, value: float):
    super().__init__(f"{function} of a negative number is not allowed (got {value!r}).")
    self.function = function
    self.value = value
