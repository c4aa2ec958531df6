import numba
from typing import Dict, Union

from .node import Node, ConstantNode, UnaryOpNode, BinaryOpNode, UnaryFunction, BinaryFunction

# Name tags used when rendering the named operators
NEG = 'neg'
SQR = 'sqr'
PLUS = 'plus'
MINUS = 'minus'
MUL = 'mul'
DIV = 'div'

Operand = Union[Node, float]


# error_model='numpy' keeps IEEE semantics: x / 0.0 gives +-inf or nan instead of raising
@numba.njit(cache=True, error_model='numpy')
def negate(x):
  return -x

@numba.njit(cache=True, error_model='numpy')
def square_value(x):
  return x * x

@numba.njit(cache=True, error_model='numpy')
def add_values(a, b):
  return a + b

@numba.njit(cache=True, error_model='numpy')
def subtract_values(a, b):
  return a - b

@numba.njit(cache=True, error_model='numpy')
def multiply_values(a, b):
  return a * b

@numba.njit(cache=True, error_model='numpy')
def divide_values(a, b):
  return a / b


UNARY_OPERATORS: Dict[str, UnaryFunction] = {
  NEG: negate,
  SQR: square_value,
}

BINARY_OPERATORS: Dict[str, BinaryFunction] = {
  PLUS: add_values,
  MINUS: subtract_values,
  MUL: multiply_values,
  DIV: divide_values,
}


def _as_node(operand: Operand) -> Node:
  """Wrap raw numbers in a ConstantNode, pass nodes through"""
  if isinstance(operand, Node):
    return operand
  return ConstantNode(operand)


def negation(operand: Operand) -> UnaryOpNode:
  return UnaryOpNode(negate, NEG, _as_node(operand))


def square(operand: Operand) -> UnaryOpNode:
  return UnaryOpNode(square_value, SQR, _as_node(operand))


def addition(left: Operand, right: Operand) -> BinaryOpNode:
  return BinaryOpNode(add_values, PLUS, _as_node(left), _as_node(right))


def subtraction(left: Operand, right: Operand) -> BinaryOpNode:
  return BinaryOpNode(subtract_values, MINUS, _as_node(left), _as_node(right))


def multiplication(left: Operand, right: Operand) -> BinaryOpNode:
  return BinaryOpNode(multiply_values, MUL, _as_node(left), _as_node(right))


def division(left: Operand, right: Operand) -> BinaryOpNode:
  return BinaryOpNode(divide_values, DIV, _as_node(left), _as_node(right))
