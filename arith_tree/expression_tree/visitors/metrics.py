from typing import Dict, Optional, Tuple

from .base import NodeVisitor
from ..core.node import Node, NodeType, ConstantNode, UnaryOpNode, BinaryOpNode

# Complexity weights keyed on operator name tags
COMPLEXITY_WEIGHTS: Dict[str, float] = {
  'plus': 1.0,
  'minus': 1.0,
  'mul': 1.1,  # Slightly more expensive than addition
  'div': 1.5,
  'neg': 1.0,  # Unary minus - trivial
  'sqr': 1.0,

  # Terminal nodes
  'constant': 1.0,
}

# Additive penalties for (parent, child) operator pairs
COMBINATION_PENALTIES: Dict[Tuple[str, str], float] = {
  ('div', 'div'): 0.3,  # Nested divisions can amplify errors
  ('neg', 'neg'): 0.5,  # neg(neg(x)) = x
  ('sqr', 'sqr'): 0.4,  # Grows fast
}


class SizeCounter(NodeVisitor[int]):
  """Node count"""

  def on_constant(self, node: ConstantNode) -> int:
    return 1

  def on_unary(self, node: UnaryOpNode) -> int:
    return 1 + node.operand.accept(self)

  def on_binary(self, node: BinaryOpNode) -> int:
    return 1 + node.left.accept(self) + node.right.accept(self)


class DepthCalculator(NodeVisitor[int]):
  """Maximum depth, leaf nodes have depth 1"""

  def on_constant(self, node: ConstantNode) -> int:
    return 1

  def on_unary(self, node: UnaryOpNode) -> int:
    return 1 + node.operand.accept(self)

  def on_binary(self, node: BinaryOpNode) -> int:
    return 1 + max(node.left.accept(self), node.right.accept(self))


class ComplexityScorer(NodeVisitor[float]):
  """Weighted complexity with additive penalties for nested operator pairs"""

  def __init__(self, weights: Optional[Dict[str, float]] = None,
               penalties: Optional[Dict[Tuple[str, str], float]] = None):
    self.weights = COMPLEXITY_WEIGHTS if weights is None else weights
    self.penalties = COMBINATION_PENALTIES if penalties is None else penalties

  def _penalty(self, name: str, child: Node) -> float:
    if child.node_type == NodeType.CONSTANT:
      return 0.0
    return self.penalties.get((name, child.name), 0.0)

  def on_constant(self, node: ConstantNode) -> float:
    return self.weights.get('constant', 1.0)

  def on_unary(self, node: UnaryOpNode) -> float:
    complexity = self.weights.get(node.name, 1.0) + node.operand.accept(self)
    return complexity + self._penalty(node.name, node.operand)

  def on_binary(self, node: BinaryOpNode) -> float:
    complexity = (self.weights.get(node.name, 1.0) +
                  node.left.accept(self) + node.right.accept(self))
    penalty = self._penalty(node.name, node.left) + self._penalty(node.name, node.right)
    return complexity + penalty
