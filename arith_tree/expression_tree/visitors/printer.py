from .base import NodeVisitor
from ..core.node import ConstantNode, UnaryOpNode, BinaryOpNode


class Printer(NodeVisitor[str]):
  """Renders a tree as an s-expression, e.g. (plus 1.0 2.0)"""

  def on_constant(self, node: ConstantNode) -> str:
    return repr(float(node.value))

  def on_unary(self, node: UnaryOpNode) -> str:
    return f"({node.name} {node.operand.accept(self)})"

  def on_binary(self, node: BinaryOpNode) -> str:
    return f"({node.name} {node.left.accept(self)} {node.right.accept(self)})"
