import numpy as np

from .base import NodeVisitor
from ..core.node import ConstantNode, UnaryOpNode, BinaryOpNode
from ...logging_system import log_debug


class Evaluator(NodeVisitor[float]):
  """Numeric folding of a tree.

  Values travel as numpy.float64 so operator functions get IEEE semantics:
  dividing by zero yields inf or nan rather than raising.
  """

  def on_constant(self, node: ConstantNode) -> float:
    return np.float64(node.value)

  def on_unary(self, node: UnaryOpNode) -> float:
    operand_val = node.operand.accept(self)
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
      result = np.float64(node.function(operand_val))
    if not np.isfinite(result):
      log_debug(f"Evaluator: ({node.name} {operand_val}) produced {result}")
    return result

  def on_binary(self, node: BinaryOpNode) -> float:
    left_val = node.left.accept(self)
    right_val = node.right.accept(self)
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
      result = np.float64(node.function(left_val, right_val))
    if not np.isfinite(result):
      log_debug(f"Evaluator: ({node.name} {left_val} {right_val}) produced {result}")
    return result
