"""
Visitor Protocol

Double dispatch over the closed node variant set. A node forwards itself to
the one handler matching its NodeType tag; handlers recurse into children
explicitly, so each visitor controls its own traversal order.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ..core.node import Node, NodeType, ConstantNode, UnaryOpNode, BinaryOpNode

R = TypeVar('R')


class NodeVisitor(ABC, Generic[R]):
  """Base class for tree operations producing a result of type R"""

  @abstractmethod
  def on_constant(self, node: ConstantNode) -> R:
    pass

  @abstractmethod
  def on_unary(self, node: UnaryOpNode) -> R:
    pass

  @abstractmethod
  def on_binary(self, node: BinaryOpNode) -> R:
    pass

  def apply(self, node: Node) -> R:
    """Same as node.accept(self)"""
    return dispatch(node, self)


def dispatch(node: Node, visitor: NodeVisitor[R]) -> R:
  node_type = getattr(node, 'node_type', None)
  if node_type == NodeType.CONSTANT:
    return visitor.on_constant(node)
  elif node_type == NodeType.UNARY_OP:
    return visitor.on_unary(node)
  elif node_type == NodeType.BINARY_OP:
    return visitor.on_binary(node)
  raise TypeError(f"Cannot dispatch on {type(node).__name__}: not an expression node")
