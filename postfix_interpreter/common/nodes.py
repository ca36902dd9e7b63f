"""Pydantic models for the abstract syntax tree of a postfix expression."""
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ExpressionKind(str, Enum):
    """Kind of value held by a leaf node."""

    INTEGER = "integer"
    SYMBOL = "symbol"


class OperatorKind(str, Enum):
    """Operation performed by an interior node."""

    ADD = "add"
    SUBTRACT = "sub"
    MULTIPLY = "mul"
    DIVIDE = "div"
    MODULO = "mod"
    ASSIGN = "assign"
    TERNARY_CONDITION = "cond"
    TERNARY_ALTERNATIVE = "alt"


class LeafNode(BaseModel):
    """Integer literal or symbol reference. Has no children."""

    model_config = ConfigDict(frozen=True)

    node_type: Literal["leaf"] = "leaf"
    kind: ExpressionKind = Field(..., description="Whether the token is an integer or a symbol name")
    token: str = Field(..., min_length=1, description="Literal text of the number or variable name")

    @property
    def is_symbol(self) -> bool:
        return self.kind is ExpressionKind.SYMBOL


class InteriorNode(BaseModel):
    """
    Operator node owning exactly two children.

    A ternary expression is stored as two interior nodes: a ``cond`` node whose
    left child is the condition and whose right child is an ``alt`` node joining
    the true branch (left) and the false branch (right).
    """

    model_config = ConfigDict(frozen=True)

    node_type: Literal["interior"] = "interior"
    op: OperatorKind = Field(..., description="Operation performed by this node")
    token: str = Field(..., min_length=1, description="Operator text used when rendering")
    left: "Node" = Field(..., description="Left operand")
    right: "Node" = Field(..., description="Right operand")


# Tagged union over the two node variants
Node = Annotated[Union[LeafNode, InteriorNode], Field(discriminator="node_type")]

InteriorNode.model_rebuild()
