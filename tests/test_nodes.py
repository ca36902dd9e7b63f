"""Test the abstract syntax tree models."""
from pydantic import ValidationError
import pytest

from postfix_interpreter.common.nodes import (
    ExpressionKind,
    InteriorNode,
    LeafNode,
    OperatorKind,
)


def leaf(token: str) -> LeafNode:
    return LeafNode(kind=ExpressionKind.INTEGER, token=token)


def test_interior_node_owns_two_children() -> None:
    """An interior node holds its operator, token and both children."""
    node = InteriorNode(op=OperatorKind.ADD, token="+", left=leaf("1"), right=leaf("2"))
    assert node.node_type == "interior"
    assert node.left.token == "1"
    assert node.right.token == "2"


def test_interior_node_requires_children() -> None:
    """Both children are mandatory."""
    with pytest.raises(ValidationError):
        InteriorNode(op=OperatorKind.ADD, token="+", left=leaf("1"))


def test_leaf_requires_token() -> None:
    """A leaf without text is rejected."""
    with pytest.raises(ValidationError):
        LeafNode(kind=ExpressionKind.SYMBOL, token="")


def test_nodes_are_immutable() -> None:
    """Nodes cannot be changed once built."""
    node = leaf("1")
    with pytest.raises(ValidationError):
        node.token = "2"


def test_tree_from_dict_uses_discriminator() -> None:
    """Nested dictionaries are validated into the matching node variant."""
    node = InteriorNode.model_validate({
        "op": "mul",
        "token": "*",
        "left": {"node_type": "leaf", "kind": "symbol", "token": "x"},
        "right": {
            "node_type": "interior",
            "op": "add",
            "token": "+",
            "left": {"node_type": "leaf", "kind": "integer", "token": "1"},
            "right": {"node_type": "leaf", "kind": "integer", "token": "2"},
        },
    })
    assert isinstance(node.left, LeafNode)
    assert node.left.is_symbol
    assert isinstance(node.right, InteriorNode)
    assert isinstance(node.right.right, LeafNode)
    assert node.right.right.token == "2"
