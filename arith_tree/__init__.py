"""Arithmetic Expression Tree Package

Immutable expression trees with double-dispatch visitors for evaluation,
printing, structural predicates and rewrites.
"""

from .expression_tree import (
  Expression, Node, NodeType, ConstantNode, UnaryOpNode, BinaryOpNode,
  negation, square, addition, subtraction, multiplication, division,
  NodeVisitor, Evaluator, Printer, AllEven, Mirror,
  SizeCounter, DepthCalculator, ComplexityScorer, ConstantFolder, SymPyConverter,
  latex_representation, ExpressionValidator
)
from .exceptions import InvalidNodeError
from .logging_system import LogLevel, configure_logging, get_logger, set_log_level

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "NodeType", "ConstantNode", "UnaryOpNode", "BinaryOpNode",
  "negation", "square", "addition", "subtraction", "multiplication", "division",
  "NodeVisitor", "Evaluator", "Printer", "AllEven", "Mirror",
  "SizeCounter", "DepthCalculator", "ComplexityScorer", "ConstantFolder", "SymPyConverter",
  "latex_representation", "ExpressionValidator",
  "InvalidNodeError",
  "LogLevel", "configure_logging", "get_logger", "set_log_level"
]
