import numpy as np
from abc import ABC, abstractmethod
from enum import IntEnum
from numbers import Real
from typing import Callable, Optional, Tuple, TypeVar, TYPE_CHECKING

from ...exceptions import InvalidNodeError

if TYPE_CHECKING:
  from ..visitors.base import NodeVisitor

R = TypeVar('R')

UnaryFunction = Callable[[float], float]
BinaryFunction = Callable[[float, float], float]


class NodeType(IntEnum):
  CONSTANT = 0
  UNARY_OP = 1
  BINARY_OP = 2


def _check_operator(function, name) -> None:
  if function is None or not callable(function):
    raise InvalidNodeError(f"Operator function must be callable, got {function!r}")
  if not isinstance(name, str) or not name:
    raise InvalidNodeError(f"Operator name must be a non-empty string, got {name!r}")


def _check_child(child, role: str) -> None:
  if child is None:
    raise InvalidNodeError(f"{role} must not be None")
  if not isinstance(child, Node):
    raise InvalidNodeError(f"{role} must be a Node, got {type(child).__name__}")


class Node(ABC):
  """Immutable expression tree node.

  The variant set is closed: every node carries a NodeType tag and visitors
  are dispatched on that tag, never on the concrete class.
  """

  __slots__ = ('_hash_cache', '_size_cache')

  node_type: NodeType

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None

  def accept(self, visitor: 'NodeVisitor[R]') -> R:
    # Import here to avoid circular imports
    from ..visitors.base import dispatch
    return dispatch(self, visitor)

  @abstractmethod
  def children(self) -> Tuple['Node', ...]:
    pass

  @abstractmethod
  def to_base(self) -> 'Node':
    """Structural copy built only from the generic node classes"""
    pass

  def copy(self) -> 'Node':
    return self.to_base()

  def evaluate(self) -> float:
    from ..visitors.evaluator import Evaluator
    return self.accept(Evaluator())

  def to_string(self) -> str:
    from ..visitors.printer import Printer
    return self.accept(Printer())

  def all_even(self) -> bool:
    from ..visitors.all_even import AllEven
    return self.accept(AllEven())

  def mirror(self) -> 'Node':
    from ..visitors.mirror import Mirror
    return self.accept(Mirror())

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = 1 + sum(child.size() for child in self.children())
    return self._size_cache

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = self._compute_hash()
    return self._hash_cache

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  def __eq__(self, other) -> bool:
    if not isinstance(other, Node):
      return NotImplemented
    if self is other:
      return True
    if self.node_type != other.node_type or hash(self) != hash(other):
      return False
    return self._same_structure(other)

  @abstractmethod
  def _same_structure(self, other: 'Node') -> bool:
    pass


class ConstantNode(Node):
  __slots__ = ('_value',)

  node_type = NodeType.CONSTANT

  def __init__(self, value: float):
    super().__init__()
    if isinstance(value, bool) or not isinstance(value, Real):
      raise InvalidNodeError(f"Constant value must be a real number, got {value!r}")
    try:
      self._value = float(value)
    except OverflowError as e:
      raise InvalidNodeError(f"Constant value {value!r} does not fit in a float") from e

  @property
  def value(self) -> float:
    return self._value

  def children(self) -> Tuple[Node, ...]:
    return ()

  def to_base(self) -> 'ConstantNode':
    return ConstantNode(self._value)

  def _compute_hash(self) -> int:
    # hash(nan) is identity based, so every NaN constant shares one key
    if np.isnan(self._value):
      return hash((NodeType.CONSTANT, 'nan'))
    return hash((NodeType.CONSTANT, self._value))

  def _same_structure(self, other: 'ConstantNode') -> bool:
    if np.isnan(self._value) and np.isnan(other._value):
      return True
    return self._value == other._value

  def __repr__(self) -> str:
    return f"ConstantNode({self._value!r})"


class UnaryOpNode(Node):
  __slots__ = ('_function', '_name', '_operand')

  node_type = NodeType.UNARY_OP

  def __init__(self, function: UnaryFunction, name: str, operand: Node):
    super().__init__()
    _check_operator(function, name)
    _check_child(operand, 'operand')
    self._function = function
    self._name = name
    self._operand = operand

  @property
  def function(self) -> UnaryFunction:
    return self._function

  @property
  def name(self) -> str:
    return self._name

  @property
  def operand(self) -> Node:
    return self._operand

  def children(self) -> Tuple[Node, ...]:
    return (self._operand,)

  def to_base(self) -> 'UnaryOpNode':
    return UnaryOpNode(self._function, self._name, self._operand.to_base())

  def _compute_hash(self) -> int:
    return hash((NodeType.UNARY_OP, self._name, hash(self._operand)))

  def _same_structure(self, other: 'UnaryOpNode') -> bool:
    return self._name == other._name and self._operand == other._operand

  def __repr__(self) -> str:
    return f"UnaryOpNode({self._name!r}, {self._operand!r})"


class BinaryOpNode(Node):
  __slots__ = ('_function', '_name', '_left', '_right')

  node_type = NodeType.BINARY_OP

  def __init__(self, function: BinaryFunction, name: str, left: Node, right: Node):
    super().__init__()
    _check_operator(function, name)
    _check_child(left, 'left')
    _check_child(right, 'right')
    self._function = function
    self._name = name
    self._left = left
    self._right = right

  @property
  def function(self) -> BinaryFunction:
    return self._function

  @property
  def name(self) -> str:
    return self._name

  @property
  def left(self) -> Node:
    return self._left

  @property
  def right(self) -> Node:
    return self._right

  def children(self) -> Tuple[Node, ...]:
    return (self._left, self._right)

  def to_base(self) -> 'BinaryOpNode':
    return BinaryOpNode(self._function, self._name, self._left.to_base(), self._right.to_base())

  def _compute_hash(self) -> int:
    return hash((NodeType.BINARY_OP, self._name, hash(self._left), hash(self._right)))

  def _same_structure(self, other: 'BinaryOpNode') -> bool:
    return (self._name == other._name and
            self._left == other._left and
            self._right == other._right)

  def __repr__(self) -> str:
    return f"BinaryOpNode({self._name!r}, {self._left!r}, {self._right!r})"
