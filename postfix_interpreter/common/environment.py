"""Variable bindings consulted and updated while evaluating expressions."""
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from postfix_interpreter.common.errors import (
    InvalidSymbolNameError,
    InvalidSymbolValueError,
    UndefinedVariableError,
)
from postfix_interpreter.common.logger import logger
from postfix_interpreter.common.tokenizer import is_valid_symbol_name


def _check_value(name: str, value: object) -> None:
    # bool is an int subclass but is not a symbol value
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidSymbolValueError(name, value)


class Environment(BaseModel):
    """
    Mutable mapping from symbol name to integer value, owned by one session.

    Defining a name that already exists replaces its value in place, so the
    most recent definition always wins.
    """

    symbols: Dict[str, int] = Field(default_factory=dict, description="Current symbol bindings")

    def define(self, name: str, value: int) -> None:
        """
        Bind ``name`` to ``value``, creating or replacing the entry.

        :param str name: Symbol name (a letter followed by letters or digits)
        :param int value: Initial value

        :raises InvalidSymbolNameError: If the name is not a valid identifier
        :raises InvalidSymbolValueError: If the value is not an integer
        """
        if not is_valid_symbol_name(name):
            raise InvalidSymbolNameError(name)
        _check_value(name, value)
        if name in self.symbols:
            logger.debug(f"📒 Redefining symbol {name}: {self.symbols[name]} -> {value}")
            # Re-insert so the dump order reflects the latest definition
            del self.symbols[name]
        self.symbols[name] = value

    def lookup(self, name: str) -> Optional[int]:
        """Return the value bound to ``name``, or None when it is not defined."""
        return self.symbols.get(name)

    def assign(self, name: str, value: int) -> None:
        """
        Update an existing binding.

        :param str name: Symbol name
        :param int value: New value

        :raises UndefinedVariableError: If the symbol was never defined
        :raises InvalidSymbolValueError: If the value is not an integer
        """
        _check_value(name, value)
        if name not in self.symbols:
            raise UndefinedVariableError(name)
        self.symbols[name] = value

    def dump(self) -> List[str]:
        """
        Describe every binding, most recently defined first.

        :return: One "Name: <name>, Value: <value>" row per symbol
        :rtype: List[str]
        """
        return [f"Name: {name}, Value: {value}" for name, value in reversed(self.symbols.items())]

    def __contains__(self, name: object) -> bool:
        return name in self.symbols

    @property
    def size(self) -> int:
        return len(self.symbols)
