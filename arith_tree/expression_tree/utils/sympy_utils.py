import sympy as sp

from ..core.node import Node
from ..visitors.sympy_converter import SymPyConverter


def latex_representation(node: Node) -> str:
  """Get LaTeX representation of the expression"""
  return sp.latex(SymPyConverter().apply(node))
