"""Core expression tree components."""

from .node import (
    Node, ConstantNode, VariableNode, UnaryOpNode, BinaryOpNode, FunctionNode,
    COMPLEXITY_WEIGHTS, as_node, format_number
)
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP, FUNCTION_MAP, FUNCTION_NAMES,
    apply_binary_op, apply_unary_op,
    evaluate_variable, evaluate_constant, evaluate_binary_op, evaluate_unary_op
)
from .errors import (
    EvaluationError, UndefinedVariableError, DivisionByZeroError, InvalidDomainError
)

__all__ = [
    'Node', 'ConstantNode', 'VariableNode', 'UnaryOpNode', 'BinaryOpNode', 'FunctionNode',
    'COMPLEXITY_WEIGHTS', 'as_node', 'format_number',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'UNARY_OP_MAP', 'FUNCTION_MAP', 'FUNCTION_NAMES',
    'apply_binary_op', 'apply_unary_op',
    'evaluate_variable', 'evaluate_constant', 'evaluate_binary_op', 'evaluate_unary_op',
    'EvaluationError', 'UndefinedVariableError', 'DivisionByZeroError', 'InvalidDomainError'
]
