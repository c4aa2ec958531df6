import numpy as np
import sympy as sp

from .base import NodeVisitor
from ..core.node import ConstantNode, UnaryOpNode, BinaryOpNode
from ..core.operators import NEG, SQR, PLUS, MINUS, MUL, DIV


class SymPyConverter(NodeVisitor[sp.Expr]):
  """Builds the equivalent SymPy expression.

  Known name tags map to SymPy arithmetic; any other tag becomes an undefined
  SymPy function of the same name so the structure is preserved.
  """

  def on_constant(self, node: ConstantNode) -> sp.Expr:
    value = node.value
    if np.isnan(value):
      return sp.nan
    if np.isinf(value):
      return sp.oo if value > 0 else -sp.oo
    if value.is_integer():
      return sp.Integer(int(value))
    return sp.Float(value)

  def on_unary(self, node: UnaryOpNode) -> sp.Expr:
    operand_sympy = node.operand.accept(self)

    if node.name == NEG:
      return -operand_sympy
    elif node.name == SQR:
      return operand_sympy**2
    else:
      return sp.Function(node.name)(operand_sympy)

  def on_binary(self, node: BinaryOpNode) -> sp.Expr:
    left = node.left.accept(self)
    right = node.right.accept(self)

    if node.name == PLUS:
      return sp.Add(left, right)
    elif node.name == MINUS:
      return sp.Add(left, sp.Mul(-1, right))
    elif node.name == MUL:
      return sp.Mul(left, right)
    elif node.name == DIV:
      return sp.Mul(left, sp.Pow(right, -1))
    else:
      return sp.Function(node.name)(left, right)
