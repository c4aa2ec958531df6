"""Expression Tree Module

Immutable arithmetic expression trees and the visitors that walk them.
"""

from .expression import Expression
from .core.node import Node, NodeType, ConstantNode, UnaryOpNode, BinaryOpNode
from .core.operators import (
    NEG, SQR, PLUS, MINUS, MUL, DIV,
    UNARY_OPERATORS, BINARY_OPERATORS,
    negation, square, addition, subtraction, multiplication, division
)
from .visitors import (
    NodeVisitor, dispatch,
    Evaluator, Printer, AllEven, Mirror,
    SizeCounter, DepthCalculator, ComplexityScorer, ConstantFolder, SymPyConverter
)
from .utils import latex_representation, ExpressionValidator

__all__ = [
    "Expression",
    "Node", "NodeType", "ConstantNode", "UnaryOpNode", "BinaryOpNode",
    "NEG", "SQR", "PLUS", "MINUS", "MUL", "DIV",
    "UNARY_OPERATORS", "BINARY_OPERATORS",
    "negation", "square", "addition", "subtraction", "multiplication", "division",
    "NodeVisitor", "dispatch",
    "Evaluator", "Printer", "AllEven", "Mirror",
    "SizeCounter", "DepthCalculator", "ComplexityScorer", "ConstantFolder", "SymPyConverter",
    "latex_representation", "ExpressionValidator"
]
