"""Build abstract syntax trees from postfix token sequences."""
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from postfix_interpreter.common.errors import (
    ArityMismatchError,
    EmptyExpressionError,
    InvalidTokenError,
    TooDeepError,
    TrailingTokensError,
)
from postfix_interpreter.common.logger import logger
from postfix_interpreter.common.nodes import (
    ExpressionKind,
    InteriorNode,
    LeafNode,
    Node,
    OperatorKind,
)
from postfix_interpreter.common.tokenizer import (
    ALTERNATIVE_MARKER,
    BINARY_OPERATORS,
    TERNARY_MARKER,
    Tokenizer,
    TokenKind,
)


# Number of operands each kind of token consumes
ARITY: Dict[TokenKind, int] = {
    TokenKind.INTEGER: 0,
    TokenKind.SYMBOL: 0,
    TokenKind.OPERATOR: 2,
    TokenKind.ALTERNATIVE: 2,
    TokenKind.TERNARY: 3,
}


class PostfixParser(BaseModel):
    """
    Recursive-descent parser for postfix expressions.

    Algorithm:
        1. Check arity with a forward pass over the tokens, the way a postfix
           evaluator would count operands on its stack
        2. Push the tokens onto a stack in input order
        3. Pop the last token and build its subtree, recursing for operands

    Because the stack exposes the rightmost remaining token first, an operator
    parses its RIGHT operand before its LEFT operand. A ternary "?" parses its
    condition, then its true branch, then its false branch.

    Examples:
        - "5 3 +"        -> (5 + 3)
        - "x 2 ="        -> (x = 2)
        - "7 9 1 ?"      -> (1 ? (9 : 7))
    """

    model_config = ConfigDict(frozen=True)

    max_depth: int = Field(default=500, ge=1, le=900, description="Maximum tree depth accepted")

    def parse(self, tokens: List[str]) -> Node:
        """
        Parse a full token sequence into a single tree.

        :param List[str] tokens: Tokens in postfix (left-to-right) order

        :return: Root of the tree
        :rtype: Node
        :raises ParseError: If the expression is empty, malformed or too deep
        """
        if not tokens:
            raise EmptyExpressionError()

        self._check_arity(tokens)

        stack: List[str] = list(tokens)
        root = self._parse(stack, depth=1)

        # Unreachable once the arity check passed, kept for direct stack use
        if stack:
            raise TrailingTokensError(len(stack))
        return root

    def parse_text(self, text: str) -> Node:
        """Tokenize ``text`` and parse it."""
        return self.parse(Tokenizer.tokenize(text))

    @staticmethod
    def _check_arity(tokens: List[str]) -> None:
        """
        Verify that the tokens form exactly one postfix expression.

        :param List[str] tokens: Tokens in postfix order

        :raises InvalidTokenError: If a token cannot be classified
        :raises ArityMismatchError: If an operator lacks operands
        :raises TrailingTokensError: If operands are left without an operator
        """
        available = 0
        for token in tokens:
            kind = Tokenizer.classify(token)
            if kind is TokenKind.INVALID:
                raise InvalidTokenError(token)
            needed = ARITY[kind]
            if available < needed:
                raise ArityMismatchError(token)
            available += 1 - needed

        if available > 1:
            raise TrailingTokensError(available - 1)

    def _parse(self, stack: List[str], depth: int, parent: Optional[str] = None) -> Node:
        """
        Pop one token and build the subtree it heads.

        :param List[str] stack: Remaining tokens, top of stack last
        :param int depth: Level of the node being built (root is 1)
        :param str parent: Operator requesting this operand, for error messages

        :return: Subtree root
        :rtype: Node
        """
        if depth > self.max_depth:
            raise TooDeepError(self.max_depth)
        if not stack:
            raise ArityMismatchError(parent or "")

        token = stack.pop()
        kind = Tokenizer.classify(token)
        logger.debug(f"🌳 Parsing token {token!r} ({kind.value}) at depth {depth}")

        if kind is TokenKind.INTEGER:
            return LeafNode(kind=ExpressionKind.INTEGER, token=token)

        if kind is TokenKind.SYMBOL:
            return LeafNode(kind=ExpressionKind.SYMBOL, token=token)

        if kind is TokenKind.OPERATOR:
            if len(stack) < 2:
                raise ArityMismatchError(token)
            # Right operand first: it sits on top of the stack
            right = self._parse(stack, depth + 1, token)
            left = self._parse(stack, depth + 1, token)
            return InteriorNode(op=BINARY_OPERATORS[token], token=token, left=left, right=right)

        if kind is TokenKind.TERNARY:
            if len(stack) < 3:
                raise ArityMismatchError(token)
            condition = self._parse(stack, depth + 1, token)
            alternative = self._parse_alternative(stack, depth + 1, token)
            return InteriorNode(
                op=OperatorKind.TERNARY_CONDITION,
                token=TERNARY_MARKER,
                left=condition,
                right=alternative,
            )

        if kind is TokenKind.ALTERNATIVE:
            if len(stack) < 2:
                raise ArityMismatchError(token)
            return self._parse_alternative(stack, depth, token)

        raise InvalidTokenError(token)

    def _parse_alternative(self, stack: List[str], depth: int, parent: str) -> InteriorNode:
        """Build an ``alt`` node from the true branch and then the false branch."""
        if depth > self.max_depth:
            raise TooDeepError(self.max_depth)
        when_true = self._parse(stack, depth + 1, parent)
        when_false = self._parse(stack, depth + 1, parent)
        return InteriorNode(
            op=OperatorKind.TERNARY_ALTERNATIVE,
            token=ALTERNATIVE_MARKER,
            left=when_true,
            right=when_false,
        )
