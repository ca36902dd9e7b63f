"""Evaluate abstract syntax trees against an environment."""
from collections.abc import Callable as ABCCallable
from typing import Callable, Dict

from pydantic import BaseModel, ConfigDict, Field

from postfix_interpreter.common.environment import Environment
from postfix_interpreter.common.errors import (
    DivisionByZeroError,
    InvalidAssignTargetError,
    TooDeepError,
    UndefinedVariableError,
    UnknownOperatorError,
)
from postfix_interpreter.common.logger import logger
from postfix_interpreter.common.nodes import InteriorNode, LeafNode, Node, OperatorKind
from postfix_interpreter.common.renderer import InfixRenderer


# Type alias for operator functions (taking two ints, returning an int)
OperatorFn: ABCCallable[[int, int], int] = Callable[[int, int], int]


def truncated_div(a: int, b: int) -> int:
    """Integer division rounding toward zero, as machine integers divide."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def truncated_mod(a: int, b: int) -> int:
    """Remainder carrying the sign of the dividend, matching ``truncated_div``."""
    return a - b * truncated_div(a, b)


ARITHMETIC: Dict[OperatorKind, OperatorFn] = {
    OperatorKind.ADD: lambda a, b: a + b,
    OperatorKind.SUBTRACT: lambda a, b: a - b,
    OperatorKind.MULTIPLY: lambda a, b: a * b,
    OperatorKind.DIVIDE: truncated_div,
    OperatorKind.MODULO: truncated_mod,
}


class Evaluator(BaseModel):
    """
    Compute the integer value of a tree.

    Rules:
        - Operands are evaluated left first, then right
        - Assignment updates an existing symbol and yields the stored value
        - A ternary evaluates its condition and only the selected branch
        - Results wrap around at ``int_bits`` like two's-complement integers
    """

    model_config = ConfigDict(frozen=True)

    int_bits: int = Field(default=32, ge=8, le=64, description="Width of the wrapping integer arithmetic")
    max_depth: int = Field(default=500, ge=1, le=900, description="Maximum tree depth evaluated")

    def wrap(self, value: int) -> int:
        """
        Reduce ``value`` to the signed range of ``int_bits``.

        :param int value: Unbounded integer

        :return: Two's-complement wrapped integer
        :rtype: int
        """
        modulus = 1 << self.int_bits
        value &= modulus - 1
        if value >= modulus >> 1:
            value -= modulus
        return value

    def evaluate(self, node: Node, env: Environment) -> int:
        """
        Evaluate ``node`` against ``env``.

        :param Node node: Root of the tree
        :param Environment env: Symbol bindings, updated by assignments

        :return: Integer result
        :rtype: int
        :raises EvaluationError: On undefined symbols, bad assignments or division by zero
        :raises TooDeepError: If the tree is deeper than ``max_depth``
        """
        return self._evaluate(node, env, depth=1)

    def _evaluate(self, node: Node, env: Environment, depth: int) -> int:
        if depth > self.max_depth:
            raise TooDeepError(self.max_depth)
        if isinstance(node, LeafNode):
            return self._evaluate_leaf(node, env)

        if node.op is OperatorKind.ASSIGN:
            name = self._assignment_target(node, env)
            value = self._evaluate(node.right, env, depth + 1)
            env.assign(name, value)
            logger.debug(f"📝 {name} <- {value}")
            return value

        if node.op is OperatorKind.TERNARY_CONDITION:
            condition = self._evaluate(node.left, env, depth + 1)
            branch = self._select(node.right, condition != 0)
            logger.debug(f"🔀 Ternary condition evaluated to {condition}")
            return self._evaluate(branch, env, depth + 2)

        operation = ARITHMETIC.get(node.op)
        if operation is None:
            raise UnknownOperatorError(node.token)

        left = self._evaluate(node.left, env, depth + 1)
        right = self._evaluate(node.right, env, depth + 1)
        if right == 0 and node.op in (OperatorKind.DIVIDE, OperatorKind.MODULO):
            raise DivisionByZeroError(node.token)

        result = self.wrap(operation(left, right))
        logger.debug(f"🧮 {left} {node.token} {right} = {result}")
        return result

    def _evaluate_leaf(self, node: LeafNode, env: Environment) -> int:
        if not node.is_symbol:
            return self.wrap(int(node.token))
        value = env.lookup(node.token)
        if value is None:
            raise UndefinedVariableError(node.token)
        return self.wrap(value)

    @staticmethod
    def _assignment_target(node: InteriorNode, env: Environment) -> str:
        """Return the name receiving an assignment, which must be an already defined symbol."""
        target = node.left
        if not (isinstance(target, LeafNode) and target.is_symbol):
            raise InvalidAssignTargetError(InfixRenderer.render(target))
        if target.token not in env:
            raise UndefinedVariableError(target.token)
        return target.token

    @staticmethod
    def _select(node: Node, condition: bool) -> Node:
        """
        Pick the branch of an ``alt`` node without evaluating either side.

        A condition whose right child is not an ``alt`` node has no branches to
        choose from, so that child is used for both outcomes.
        """
        if isinstance(node, InteriorNode) and node.op is OperatorKind.TERNARY_ALTERNATIVE:
            return node.left if condition else node.right
        return node
