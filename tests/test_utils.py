import math

import pytest
import sympy as sp

from arith_tree import (
    Node, ConstantNode, NodeType, ExpressionValidator, latex_representation,
    negation, square, addition, subtraction, multiplication, division
)
from arith_tree.expression_tree.utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_type, find_nodes_by_name,
    fold_tree, get_constants, get_unary_ops, get_binary_ops
)


def _labels(nodes):
    return [n.value if n.node_type == NodeType.CONSTANT else n.name for n in nodes]


def test_get_all_nodes_breadth_first():
    tree = addition(negation(1), 2)
    assert _labels(get_all_nodes(tree)) == ['plus', 'neg', 2.0, 1.0]


def test_get_all_nodes_depth_first():
    tree = addition(negation(1), 2)
    assert _labels(get_all_nodes(tree, 'depth_first')) == ['plus', 'neg', 1.0, 2.0]


def test_get_all_nodes_rejects_unknown_order():
    with pytest.raises(ValueError):
        get_all_nodes(ConstantNode(1), 'sideways')


def test_calculate_tree_depth():
    assert calculate_tree_depth(ConstantNode(3)) == 1
    assert calculate_tree_depth(division(addition(1, negation(2)), 3)) == 4


def test_find_nodes():
    tree = multiplication(addition(1, 2), addition(negation(3), square(4)))
    assert len(find_nodes_by_name(tree, 'plus')) == 2
    assert find_nodes_by_name(tree, 'div') == []
    assert len(find_nodes_by_type(tree, NodeType.UNARY_OP)) == 2
    assert _labels(get_constants(tree)) == [1.0, 2.0, 3.0, 4.0]
    assert _labels(get_unary_ops(tree)) == ['neg', 'sqr']
    assert _labels(get_binary_ops(tree)) == ['mul', 'plus', 'plus']


def test_fold_tree_accumulates_without_mutation():
    tree = subtraction(addition(1, 2), negation(4))
    total = fold_tree(
        tree,
        lambda acc, node: acc + node.value if node.node_type == NodeType.CONSTANT else acc,
        0.0,
    )
    assert total == 7.0
    assert fold_tree(tree, lambda acc, node: acc + 1, 0) == tree.size()
    assert tree.to_string() == "(minus (plus 1.0 2.0) (neg 4.0))"


def test_validator_accepts_well_formed_trees():
    assert ExpressionValidator.is_valid_expression(division(addition(1, 2), negation(3)))


def test_validator_non_finite_constants():
    tree = addition(ConstantNode(math.inf), 1)
    assert not ExpressionValidator.is_valid_expression(tree)
    assert ExpressionValidator.is_valid_expression(tree, allow_non_finite=True)
    assert not ExpressionValidator.is_valid_expression(ConstantNode(math.nan))


def test_validator_rejects_non_nodes():
    assert not ExpressionValidator.is_valid_expression(None)
    assert not ExpressionValidator.is_valid_expression("(plus 1.0 2.0)")


def test_validator_detects_cycles():
    node = negation(1)
    # Bypass immutability to build a self-referencing node
    object.__setattr__(node, '_operand', node)
    assert not ExpressionValidator.is_valid_expression(node)


def test_validator_allows_shared_subtrees():
    shared = addition(1, 2)
    assert ExpressionValidator.is_valid_expression(multiplication(shared, shared))


def test_validator_rejects_unknown_node_classes():
    class Stray(Node):
        __slots__ = ()

        def children(self):
            return ()

        def to_base(self):
            return self

        def _compute_hash(self):
            return 0

        def _same_structure(self, other):
            return True

    assert not ExpressionValidator.is_valid_expression(Stray())
    assert not ExpressionValidator.is_valid_expression(addition(Stray(), 1))


def test_latex_representation():
    assert latex_representation(division(1, 2)) == r"\frac{1}{2}"
    assert latex_representation(ConstantNode(math.inf)) == r"\infty"
