from .base import NodeVisitor
from ..core.node import ConstantNode, UnaryOpNode, BinaryOpNode


class AllEven(NodeVisitor[bool]):
  """True when every constant in the tree is even.

  Evenness is the plain float check value % 2 == 0, so 2.5 and nan are not even.
  """

  def on_constant(self, node: ConstantNode) -> bool:
    return node.value % 2 == 0

  def on_unary(self, node: UnaryOpNode) -> bool:
    return node.operand.accept(self)

  def on_binary(self, node: BinaryOpNode) -> bool:
    left_even = node.left.accept(self)
    right_even = node.right.accept(self)
    return left_even and right_even
