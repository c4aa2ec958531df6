"""Core expression tree components."""

from .node import Node, NodeType, ConstantNode, UnaryOpNode, BinaryOpNode
from .operators import (
    NEG, SQR, PLUS, MINUS, MUL, DIV,
    UNARY_OPERATORS, BINARY_OPERATORS,
    negate, square_value, add_values, subtract_values, multiply_values, divide_values,
    negation, square, addition, subtraction, multiplication, division
)

__all__ = [
    'Node', 'NodeType', 'ConstantNode', 'UnaryOpNode', 'BinaryOpNode',
    'NEG', 'SQR', 'PLUS', 'MINUS', 'MUL', 'DIV',
    'UNARY_OPERATORS', 'BINARY_OPERATORS',
    'negate', 'square_value', 'add_values', 'subtract_values', 'multiply_values', 'divide_values',
    'negation', 'square', 'addition', 'subtraction', 'multiplication', 'division'
]
