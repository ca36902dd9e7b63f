"""Split postfix expressions into tokens and classify them."""
from enum import Enum
import re
from typing import Dict, List

from postfix_interpreter.common.nodes import OperatorKind


COMMENT_MARKER: str = "#"
TERNARY_MARKER: str = "?"
ALTERNATIVE_MARKER: str = ":"

# Mapping of binary operator symbols to the node operation they build
BINARY_OPERATORS: Dict[str, OperatorKind] = {
    "+": OperatorKind.ADD,
    "-": OperatorKind.SUBTRACT,
    "*": OperatorKind.MULTIPLY,
    "/": OperatorKind.DIVIDE,
    "%": OperatorKind.MODULO,
    "=": OperatorKind.ASSIGN,
}

INTEGER_PATTERN = re.compile(r"-?[0-9]+")
SYMBOL_NAME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9]*")


class TokenKind(str, Enum):
    INTEGER = "integer"
    SYMBOL = "symbol"
    OPERATOR = "operator"
    TERNARY = "ternary"
    ALTERNATIVE = "alternative"
    INVALID = "invalid"


class Tokenizer:
    """
    Turn a line of text into postfix tokens.

    Tokens are whitespace-separated (e.g. "x 3 4 + ="). The tokenizer keeps
    input order and makes no judgment about meaning: classification happens
    when the parser pops each token.
    """

    @staticmethod
    def strip_comment(text: str) -> str:
        """
        Remove a '#' comment running to the end of the line.

        :param str text: Raw input line

        :return: Text before the comment marker
        :rtype: str
        """
        return text.split(COMMENT_MARKER, 1)[0]

    @staticmethod
    def tokenize(text: str) -> List[str]:
        """
        Split an expression into tokens.

        Empty and comment-only lines produce an empty list.

        :param str text: Postfix expression, possibly followed by a comment

        :return: List of tokens in left-to-right order
        :rtype: List[str]
        """
        return Tokenizer.strip_comment(text).split()

    @staticmethod
    def classify(token: str) -> TokenKind:
        """
        Determine what a single token stands for.

        A lone "-" is the subtraction operator; "-12" is an integer.

        :param str token: Token string

        :return: Token classification
        :rtype: TokenKind
        """
        if INTEGER_PATTERN.fullmatch(token):
            return TokenKind.INTEGER
        if token[:1].isascii() and token[:1].isalpha():
            return TokenKind.SYMBOL
        if token in BINARY_OPERATORS:
            return TokenKind.OPERATOR
        if token == TERNARY_MARKER:
            return TokenKind.TERNARY
        if token == ALTERNATIVE_MARKER:
            return TokenKind.ALTERNATIVE
        return TokenKind.INVALID


def is_valid_symbol_name(name: str) -> bool:
    """Return True if ``name`` starts with a letter and holds only letters and digits."""
    return SYMBOL_NAME_PATTERN.fullmatch(name) is not None
