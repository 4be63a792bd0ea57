"""Expression Tree Module

Immutable expression trees with evaluation, structural analysis and
simplification.
"""

from .expression import Expression
from .core.node import (
    Node,
    ConstantNode,
    VariableNode,
    UnaryOpNode,
    BinaryOpNode,
    FunctionNode,
    COMPLEXITY_WEIGHTS,
    as_node
)
from .core.operators import (
    NodeType,
    OpType,
    BINARY_OP_MAP,
    UNARY_OP_MAP,
    FUNCTION_MAP,
    FUNCTION_NAMES
)
from .core.errors import (
    EvaluationError,
    UndefinedVariableError,
    DivisionByZeroError,
    InvalidDomainError
)
from .combinators import (
    constant, variable, unary_plus, unary_minus,
    add, subtract, multiply, divide,
    sqrt, sin, cos, tan, cot
)
from .utils import (
    StructuralAnalyzer, ExpressionProfile, NOT_POLYNOMIAL_DEGREE,
    ExpressionSimplifier, DEFAULT_MAX_PASSES,
    SymPyBridge, ExpressionValidator
)

__all__ = [
    "Expression",
    "Node", "ConstantNode", "VariableNode", "UnaryOpNode", "BinaryOpNode", "FunctionNode",
    "COMPLEXITY_WEIGHTS", "as_node",
    "NodeType", "OpType", "BINARY_OP_MAP", "UNARY_OP_MAP", "FUNCTION_MAP", "FUNCTION_NAMES",
    "EvaluationError", "UndefinedVariableError", "DivisionByZeroError", "InvalidDomainError",
    "constant", "variable", "unary_plus", "unary_minus",
    "add", "subtract", "multiply", "divide",
    "sqrt", "sin", "cos", "tan", "cot",
    "StructuralAnalyzer", "ExpressionProfile", "NOT_POLYNOMIAL_DEGREE",
    "ExpressionSimplifier", "DEFAULT_MAX_PASSES",
    "SymPyBridge", "ExpressionValidator"
]
