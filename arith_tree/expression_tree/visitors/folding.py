import numpy as np

from .base import NodeVisitor
from ..core.node import Node, NodeType, ConstantNode, UnaryOpNode, BinaryOpNode
from ...logging_system import log_debug


def _is_constant(node: Node) -> bool:
  return node.node_type == NodeType.CONSTANT


class ConstantFolder(NodeVisitor[Node]):
  """Collapses operator nodes whose operands are all constants.

  Only finite results are folded; (div 1.0 0.0) stays in the tree.
  Always returns a new tree.
  """

  def on_constant(self, node: ConstantNode) -> Node:
    return ConstantNode(node.value)

  def on_unary(self, node: UnaryOpNode) -> Node:
    operand = node.operand.accept(self)
    if _is_constant(operand):
      with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        result = np.float64(node.function(np.float64(operand.value)))
      if np.isfinite(result):
        return ConstantNode(result)
      log_debug(f"ConstantFolder: kept ({node.name} {operand.value}), result {result}")
    return UnaryOpNode(node.function, node.name, operand)

  def on_binary(self, node: BinaryOpNode) -> Node:
    left = node.left.accept(self)
    right = node.right.accept(self)
    if _is_constant(left) and _is_constant(right):
      with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        result = np.float64(node.function(np.float64(left.value), np.float64(right.value)))
      if np.isfinite(result):
        return ConstantNode(result)
      log_debug(f"ConstantFolder: kept ({node.name} {left.value} {right.value}), result {result}")
    return BinaryOpNode(node.function, node.name, left, right)
