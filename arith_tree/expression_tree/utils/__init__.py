"""Utilities for expression trees."""

from .sympy_utils import latex_representation
from .validator import ExpressionValidator
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_type, find_nodes_by_name,
    fold_tree, get_constants, get_unary_ops, get_binary_ops
)

__all__ = [
    'latex_representation', 'ExpressionValidator',
    'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_type', 'find_nodes_by_name',
    'fold_tree', 'get_constants', 'get_unary_ops', 'get_binary_ops'
]
