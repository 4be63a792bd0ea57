"""Constructors for building expression trees.

Every argument that expects a node also accepts a real literal, which is
lifted to a ConstantNode. Nothing is validated here; domain problems surface
when the tree is evaluated.
"""

from .core.node import (
  Node, ConstantNode, VariableNode, UnaryOpNode, BinaryOpNode, FunctionNode, as_node
)


def constant(value: float) -> ConstantNode:
  return ConstantNode(value)


def variable(name: str) -> VariableNode:
  return VariableNode(name)


def unary_plus(operand) -> Node:
  return UnaryOpNode('+', as_node(operand))


def unary_minus(operand) -> Node:
  return UnaryOpNode('-', as_node(operand))


def add(left, right) -> Node:
  return BinaryOpNode('+', as_node(left), as_node(right))


def subtract(left, right) -> Node:
  return BinaryOpNode('-', as_node(left), as_node(right))


def multiply(left, right) -> Node:
  return BinaryOpNode('*', as_node(left), as_node(right))


def divide(left, right) -> Node:
  return BinaryOpNode('/', as_node(left), as_node(right))


def sqrt(operand) -> Node:
  return FunctionNode('sqrt', as_node(operand))


def sin(operand) -> Node:
  return FunctionNode('sin', as_node(operand))


def cos(operand) -> Node:
  return FunctionNode('cos', as_node(operand))


def tan(operand) -> Node:
  return FunctionNode('tan', as_node(operand))


def cot(operand) -> Node:
  return FunctionNode('cot', as_node(operand))
