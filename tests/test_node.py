import math

import pytest

from arith_tree import (
    ConstantNode, UnaryOpNode, BinaryOpNode, NodeType, InvalidNodeError,
    negation, square, addition, subtraction, multiplication, division
)
from arith_tree.expression_tree.core.operators import (
    negate, add_values, multiply_values, UNARY_OPERATORS, BINARY_OPERATORS
)


def test_constant_stores_float():
    node = ConstantNode(2)
    assert node.value == 2.0
    assert isinstance(node.value, float)
    assert node.node_type == NodeType.CONSTANT
    assert node.children() == ()


def test_operator_nodes_expose_parts():
    child = ConstantNode(3)
    unary = UnaryOpNode(negate, 'neg', child)
    assert unary.node_type == NodeType.UNARY_OP
    assert unary.name == 'neg'
    assert unary.operand is child
    assert unary.function is negate

    left, right = ConstantNode(1), ConstantNode(2)
    binary = BinaryOpNode(add_values, 'plus', left, right)
    assert binary.node_type == NodeType.BINARY_OP
    assert binary.left is left
    assert binary.right is right
    assert binary.children() == (left, right)


def test_construction_does_not_evaluate():
    """Functions are stored, not called, when a node is built"""
    calls = []

    def spy(x):
        calls.append(x)
        return x

    UnaryOpNode(spy, 'spy', ConstantNode(1))
    assert calls == []


@pytest.mark.parametrize("value", [None, "2", True, [1], object(), 10 ** 400, -(10 ** 400)])
def test_constant_rejects_non_numbers(value):
    with pytest.raises(InvalidNodeError):
        ConstantNode(value)


def test_unary_rejects_missing_parts():
    with pytest.raises(InvalidNodeError):
        UnaryOpNode(None, 'neg', ConstantNode(1))
    with pytest.raises(InvalidNodeError):
        UnaryOpNode(negate, 'neg', None)
    with pytest.raises(InvalidNodeError):
        UnaryOpNode(negate, '', ConstantNode(1))
    with pytest.raises(InvalidNodeError):
        UnaryOpNode(negate, 'neg', 1.0)


def test_binary_rejects_missing_parts():
    with pytest.raises(InvalidNodeError):
        BinaryOpNode(None, 'plus', ConstantNode(1), ConstantNode(2))
    with pytest.raises(InvalidNodeError):
        BinaryOpNode(add_values, 'plus', ConstantNode(1), None)
    with pytest.raises(InvalidNodeError):
        BinaryOpNode(add_values, 'plus', None, ConstantNode(2))
    with pytest.raises(InvalidNodeError):
        BinaryOpNode("not callable", 'plus', ConstantNode(1), ConstantNode(2))


def test_invalid_node_error_is_value_error():
    with pytest.raises(ValueError):
        addition(1, None)


def test_nodes_are_immutable():
    node = addition(1, 2)
    with pytest.raises(AttributeError):
        node.left = ConstantNode(5)
    with pytest.raises(AttributeError):
        node.name = 'minus'
    with pytest.raises(AttributeError):
        ConstantNode(1).value = 2.0
    with pytest.raises(AttributeError):
        node.extra = 1


def test_equality_ignores_function_identity():
    """Independently built operators with the same tag and children are equal"""
    built_by_factory = multiplication(2, 3)
    built_by_hand = BinaryOpNode(lambda a, b: a * b, 'mul', ConstantNode(2), ConstantNode(3))
    assert built_by_factory == built_by_hand
    assert hash(built_by_factory) == hash(built_by_hand)


def test_equality_with_base_form():
    tree = square(multiplication(square(10), negation(subtraction(4, 1))))
    base = tree.to_base()
    assert base == tree
    assert base is not tree
    assert base.to_string() == tree.to_string()


def test_inequality_by_name_order_and_value():
    assert addition(1, 2) != subtraction(1, 2)
    assert addition(1, 2) != addition(2, 1)
    assert ConstantNode(1) != ConstantNode(1.5)
    assert negation(1) != square(1)
    assert ConstantNode(1) != addition(1, 0)
    assert addition(1, 2) != "(plus 1.0 2.0)"


def test_nan_constants_compare_equal():
    assert ConstantNode(math.nan) == ConstantNode(float('nan'))
    assert hash(ConstantNode(math.nan)) == hash(ConstantNode(float('nan')))


def test_equal_trees_share_hash_in_sets():
    trees = {addition(1, 2), addition(1.0, 2.0), BinaryOpNode(add_values, 'plus', ConstantNode(1), ConstantNode(2))}
    assert len(trees) == 1


def test_copy_is_structural():
    tree = division(addition(1, 2), negation(3))
    copied = tree.copy()
    assert copied == tree
    assert copied.left is not tree.left


def test_size_counts_nodes():
    assert ConstantNode(1).size() == 1
    assert negation(1).size() == 2
    assert division(addition(1, 2), negation(3)).size() == 6


def test_repr_shows_structure():
    assert repr(addition(1, negation(2))) == \
        "BinaryOpNode('plus', ConstantNode(1.0), UnaryOpNode('neg', ConstantNode(2.0)))"


def test_multiply_kernel_directly():
    assert multiply_values(3.0, 4.0) == 12.0


def test_factories_use_registered_kernels():
    assert addition(1, 2).function is BINARY_OPERATORS['plus']
    assert division(1, 2).function is BINARY_OPERATORS['div']
    assert negation(1).function is UNARY_OPERATORS['neg']
    assert square(1).function is UNARY_OPERATORS['sqr']
