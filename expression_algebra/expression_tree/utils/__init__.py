"""Utilities for expression trees."""

from .analyzer import StructuralAnalyzer, ExpressionProfile, NOT_POLYNOMIAL_DEGREE
from .simplifier import ExpressionSimplifier, DEFAULT_MAX_PASSES
from .sympy_utils import SymPyBridge
from .validator import ExpressionValidator
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, count_nested_depth,
    find_nodes_by_type, find_nodes_by_operator, get_variable_usage_counts,
    get_constants, get_variables
)

__all__ = [
    'StructuralAnalyzer', 'ExpressionProfile', 'NOT_POLYNOMIAL_DEGREE',
    'ExpressionSimplifier', 'DEFAULT_MAX_PASSES',
    'SymPyBridge', 'ExpressionValidator',
    'get_all_nodes', 'calculate_tree_depth', 'count_nested_depth',
    'find_nodes_by_type', 'find_nodes_by_operator', 'get_variable_usage_counts',
    'get_constants', 'get_variables'
]
