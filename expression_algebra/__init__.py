# Python

"""Expression Algebra Package

Immutable mathematical expression trees: numeric evaluation, structural
analysis (free variables, constancy, polynomial degree) and algebraic
simplification.
"""

from .expression_tree import (
  Expression, Node, ConstantNode, VariableNode, UnaryOpNode, BinaryOpNode, FunctionNode,
  NodeType, OpType,
  EvaluationError, UndefinedVariableError, DivisionByZeroError, InvalidDomainError,
  constant, variable, unary_plus, unary_minus,
  add, subtract, multiply, divide,
  sqrt, sin, cos, tan, cot,
  StructuralAnalyzer, ExpressionProfile, ExpressionSimplifier,
  SymPyBridge, ExpressionValidator
)
from .expression_utils import (
  compute, simplify, variables, is_constant, is_polynomial, polynomial_degree, to_string
)
from .logging_system import LogLevel, configure_logging, set_log_level, get_logger

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "ConstantNode", "VariableNode", "UnaryOpNode", "BinaryOpNode",
  "FunctionNode", "NodeType", "OpType",
  "EvaluationError", "UndefinedVariableError", "DivisionByZeroError", "InvalidDomainError",
  "constant", "variable", "unary_plus", "unary_minus",
  "add", "subtract", "multiply", "divide",
  "sqrt", "sin", "cos", "tan", "cot",
  "StructuralAnalyzer", "ExpressionProfile", "ExpressionSimplifier",
  "SymPyBridge", "ExpressionValidator",
  "compute", "simplify", "variables", "is_constant", "is_polynomial",
  "polynomial_degree", "to_string",
  "LogLevel", "configure_logging", "set_log_level", "get_logger"
]
