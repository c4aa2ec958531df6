"""Tree operations built on the visitor protocol."""

from .base import NodeVisitor, dispatch
from .evaluator import Evaluator
from .printer import Printer
from .all_even import AllEven
from .mirror import Mirror
from .metrics import SizeCounter, DepthCalculator, ComplexityScorer, COMPLEXITY_WEIGHTS, COMBINATION_PENALTIES
from .folding import ConstantFolder
from .sympy_converter import SymPyConverter

__all__ = [
    'NodeVisitor', 'dispatch',
    'Evaluator', 'Printer', 'AllEven', 'Mirror',
    'SizeCounter', 'DepthCalculator', 'ComplexityScorer',
    'COMPLEXITY_WEIGHTS', 'COMBINATION_PENALTIES',
    'ConstantFolder', 'SymPyConverter'
]
