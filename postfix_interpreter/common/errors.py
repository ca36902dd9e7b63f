"""Error types raised by the tokenizer, parser, evaluator and environment."""
from pathlib import Path
from typing import Union


class InterpreterError(ValueError):
    """Base class for every error reported for a single expression or symbol."""


class ParseError(InterpreterError):
    """The token sequence does not describe a well-formed expression."""


class EmptyExpressionError(ParseError):
    def __init__(self) -> None:
        super().__init__("Empty expression")


class InvalidTokenError(ParseError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid token '{token}'")


class ArityMismatchError(ParseError):
    def __init__(self, operator: str) -> None:
        self.operator = operator
        super().__init__(f"Not enough operands for operator '{operator}'")


class TrailingTokensError(ParseError):
    def __init__(self, remaining: int) -> None:
        self.remaining = remaining
        super().__init__(f"Invalid expression, too many tokens ({remaining} left over)")


class TooDeepError(ParseError):
    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Expression nesting exceeds the limit of {limit}")


class EvaluationError(InterpreterError):
    """A well-formed tree could not be evaluated."""


class UndefinedVariableError(EvaluationError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Undefined symbol '{name}'")


class InvalidAssignTargetError(EvaluationError):
    def __init__(self, target: str) -> None:
        self.target = target
        super().__init__(f"Invalid left-hand side for assignment: '{target}'")


class DivisionByZeroError(EvaluationError):
    def __init__(self, operator: str = "/") -> None:
        self.operator = operator
        super().__init__(f"Division by zero in '{operator}'")


class UnknownOperatorError(EvaluationError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unknown operation '{token}'")


class InvalidSymbolNameError(InterpreterError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Invalid symbol name '{name}': must start with a letter and contain only letters and digits"
        )


class InvalidSymbolValueError(InterpreterError):
    def __init__(self, name: str, value: object) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Invalid value {value!r} for symbol '{name}': expected an integer")


class SymbolFileError(InterpreterError):
    """A symbol file record could not be loaded."""

    def __init__(self, path: Union[str, Path], line_number: int, reason: str) -> None:
        self.path = Path(path)
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"{self.path}:{line_number}: {reason}")
