"""
Tree Utility Functions

Traversal and query helpers for expression trees. Everything here is read-only:
no helper mutates the tree it is given.
"""

from typing import Callable, List, TypeVar

from ..core.node import Node, NodeType, ConstantNode, UnaryOpNode, BinaryOpNode
from ..visitors.metrics import DepthCalculator

T = TypeVar('T')


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.pop(0)  # FIFO for breadth-first
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (recursive)"""
    nodes = [node]
    for child in node.children():
        nodes.extend(_depth_first_traversal(child))
    return nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    return DepthCalculator().apply(node)


def find_nodes_by_type(node: Node, node_type: NodeType) -> List[Node]:
    """Find all nodes carrying the given NodeType tag, in pre-order."""
    return [n for n in _depth_first_traversal(node) if n.node_type == node_type]


def find_nodes_by_name(node: Node, name: str) -> List[Node]:
    """
    Find all operator nodes with the given name tag.

    Args:
        node: Root node of the tree
        name: Operator name tag to search for (e.g. 'plus', 'neg')

    Returns:
        List of unary and binary nodes with that tag
    """
    return [n for n in _depth_first_traversal(node)
            if n.node_type != NodeType.CONSTANT and n.name == name]


def fold_tree(node: Node, func: Callable[[T, Node], T], initial: T) -> T:
    """
    Fold over every node of the tree in depth-first pre-order.

    func(accumulator, node) returns the next accumulator; the tree is not touched.
    """
    result = initial
    for current_node in _depth_first_traversal(node):
        result = func(result, current_node)
    return result


def get_constants(node: Node) -> List[ConstantNode]:
    return find_nodes_by_type(node, NodeType.CONSTANT)


def get_unary_ops(node: Node) -> List[UnaryOpNode]:
    return find_nodes_by_type(node, NodeType.UNARY_OP)


def get_binary_ops(node: Node) -> List[BinaryOpNode]:
    return find_nodes_by_type(node, NodeType.BINARY_OP)
