from .base import NodeVisitor
from ..core.node import Node, ConstantNode, UnaryOpNode, BinaryOpNode


class Mirror(NodeVisitor[Node]):
  """Swaps the operands of every binary node. Applying it twice is the identity."""

  def on_constant(self, node: ConstantNode) -> Node:
    return ConstantNode(node.value)

  def on_unary(self, node: UnaryOpNode) -> Node:
    return UnaryOpNode(node.function, node.name, node.operand.accept(self))

  def on_binary(self, node: BinaryOpNode) -> Node:
    return BinaryOpNode(node.function, node.name,
                        node.right.accept(self), node.left.accept(self))
