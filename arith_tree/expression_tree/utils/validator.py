import numpy as np
from typing import Set

from ..core.node import Node, ConstantNode, UnaryOpNode, BinaryOpNode
from ...logging_system import log_warning


class ExpressionValidator:

  @staticmethod
  def is_valid_expression(node: Node, allow_non_finite: bool = False) -> bool:
    """Structural check: real nodes only, no cycles, finite constants unless allowed"""
    try:
      return ExpressionValidator._is_structurally_valid_recursive(node, set(), allow_non_finite)
    except RecursionError:
      log_warning("ExpressionValidator: tree too deep to validate")
      return False

  @staticmethod
  def _is_structurally_valid_recursive(node: Node, path: Set[int], allow_non_finite: bool) -> bool:
    if not isinstance(node, Node):
      return False

    # A node already on the current root-to-leaf path means a cycle
    if id(node) in path:
      return False

    if isinstance(node, ConstantNode):
      return allow_non_finite or bool(np.isfinite(node.value))

    if not isinstance(node, (UnaryOpNode, BinaryOpNode)):
      return False
    if not ExpressionValidator._is_valid_operator(node):
      return False

    path.add(id(node))
    try:
      return all(ExpressionValidator._is_structurally_valid_recursive(child, path, allow_non_finite)
                 for child in node.children())
    finally:
      path.discard(id(node))

  @staticmethod
  def _is_valid_operator(node: Node) -> bool:
    return callable(node.function) and isinstance(node.name, str) and bool(node.name)
