"""
Tree Utility Functions

Traversal and lookup helpers for expression trees. All of them walk
``Node.children`` so they work for every node variant.
"""

from collections import Counter, deque
from typing import List, Dict, Type, TypeVar

from ..core.node import Node, ConstantNode, VariableNode

T = TypeVar('T', bound=Node)


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree, root first
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children)

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (recursive)"""
    nodes = [node]
    for child in node.children:
        nodes.extend(_depth_first_traversal(child))
    return nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Leaf nodes have depth 1.
    """
    if not node.children:
        return 1
    return 1 + max(calculate_tree_depth(child) for child in node.children)


def count_nested_depth(node: Node) -> int:
    """Length of the chain of single-operand nodes starting at node"""
    depth = 0
    current = node
    while len(current.children) == 1:
        depth += 1
        current = current.children[0]
    return depth


def find_nodes_by_type(node: Node, node_type: Type[T]) -> List[T]:
    """
    Find all nodes of a specific class in the tree.

    Args:
        node: Root node of the tree
        node_type: Class of nodes to find (e.g., ConstantNode, FunctionNode)
    """
    return [n for n in get_all_nodes(node) if isinstance(n, node_type)]


def find_nodes_by_operator(node: Node, symbol: str) -> List[Node]:
    """
    Find all nodes with the given symbol.

    Binary operators use their character ('+', '-', '*', '/'), unary sign
    operators 'pos'/'neg', functions their lowercase name ('sqrt', 'sin').
    """
    return [n for n in get_all_nodes(node) if n.symbol == symbol]


def get_variable_usage_counts(node: Node) -> Dict[str, int]:
    """Number of occurrences of each variable name"""
    return dict(Counter(n.name for n in get_variables(node)))


def get_constants(node: Node) -> List[ConstantNode]:
    return find_nodes_by_type(node, ConstantNode)


def get_variables(node: Node) -> List[VariableNode]:
    return find_nodes_by_type(node, VariableNode)
