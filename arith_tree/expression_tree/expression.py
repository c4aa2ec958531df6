import sympy as sp
from typing import Optional

from .core.node import Node
from .visitors import (
  Evaluator, Printer, AllEven, Mirror, ConstantFolder,
  DepthCalculator, ComplexityScorer, SymPyConverter
)


class Expression:
  """Expression tree root with a cached printed form"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Node):
    if not isinstance(root, Node):
      raise TypeError(f"Expression root must be a Node, got {type(root).__name__}")
    self.root = root
    self._string_cache: Optional[str] = None

  def evaluate(self) -> float:
    return Evaluator().apply(self.root)

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = Printer().apply(self.root)
    return self._string_cache

  def all_even(self) -> bool:
    return AllEven().apply(self.root)

  def mirror(self) -> 'Expression':
    return Expression(Mirror().apply(self.root))

  def fold_constants(self) -> 'Expression':
    return Expression(ConstantFolder().apply(self.root))

  def copy(self) -> 'Expression':
    return Expression(self.root.copy())

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def depth(self) -> int:
    return DepthCalculator().apply(self.root)

  def complexity(self) -> float:
    """Weighted complexity score"""
    return ComplexityScorer().apply(self.root)

  def to_sympy(self) -> sp.Expr:
    return SymPyConverter().apply(self.root)

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.to_string()})"

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return NotImplemented
    return self.root == other.root
