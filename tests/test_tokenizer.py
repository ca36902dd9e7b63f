"""Test class Tokenizer."""
import pytest

from postfix_interpreter.common.tokenizer import Tokenizer, TokenKind, is_valid_symbol_name


def test_tokenize_basic():
    """Tokenize splits a postfix expression into tokens in input order."""
    assert Tokenizer.tokenize("x 3 4 + =") == ["x", "3", "4", "+", "="]


def test_tokenize_collapses_whitespace():
    """Runs of spaces, tabs and newlines are a single separator."""
    assert Tokenizer.tokenize("  5\t\t3   -\n") == ["5", "3", "-"]


@pytest.mark.parametrize("line", ["", "   ", "# only a comment", "   # indented comment"])
def test_tokenize_empty_lines(line):
    """Blank and comment-only lines produce no tokens."""
    assert Tokenizer.tokenize(line) == []


def test_tokenize_strips_trailing_comment():
    """Everything after '#' is discarded."""
    assert Tokenizer.tokenize("1 2 + # add them # twice") == ["1", "2", "+"]


@pytest.mark.parametrize("token,expected", [
    ("123", TokenKind.INTEGER),
    ("-8", TokenKind.INTEGER),
    ("0", TokenKind.INTEGER),
    ("x", TokenKind.SYMBOL),
    ("count2", TokenKind.SYMBOL),
    ("+", TokenKind.OPERATOR),
    ("-", TokenKind.OPERATOR),
    ("%", TokenKind.OPERATOR),
    ("=", TokenKind.OPERATOR),
    ("?", TokenKind.TERNARY),
    (":", TokenKind.ALTERNATIVE),
    ("4.5", TokenKind.INVALID),
    ("--3", TokenKind.INVALID),
    ("@", TokenKind.INVALID),
    ("2x", TokenKind.INVALID),
])
def test_classify(token, expected):
    """classify maps each token to its kind."""
    assert Tokenizer.classify(token) is expected


@pytest.mark.parametrize("name,expected", [
    ("x", True),
    ("x1", True),
    ("Total", True),
    ("1x", False),
    ("x_1", False),
    ("", False),
    ("é", False),
])
def test_is_valid_symbol_name(name, expected):
    """Symbol names start with a letter and hold only letters and digits."""
    assert is_valid_symbol_name(name) == expected
