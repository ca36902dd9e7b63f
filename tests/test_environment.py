"""Test class Environment."""
import pytest

from postfix_interpreter.common.environment import Environment
from postfix_interpreter.common.errors import (
    InvalidSymbolNameError,
    InvalidSymbolValueError,
    UndefinedVariableError,
)


def test_define_and_lookup():
    """A defined symbol can be looked up."""
    env = Environment()
    env.define("x1", 5)
    assert env.lookup("x1") == 5
    assert "x1" in env
    assert env.size == 1


def test_lookup_missing_symbol():
    """Looking up an unknown name returns None."""
    assert Environment().lookup("nothing") is None


@pytest.mark.parametrize("name", ["1x", "_x", "x-y", "x y", "", "café"])
def test_define_invalid_name(name):
    """Names must start with a letter and hold only letters and digits."""
    env = Environment()
    with pytest.raises(InvalidSymbolNameError) as exc_info:
        env.define(name, 5)
    assert exc_info.value.name == name
    assert env.size == 0


def test_redefine_replaces_value():
    """Defining an existing name updates it in place: the last definition wins."""
    env = Environment()
    env.define("myVar", 1)
    env.define("other", 2)
    env.define("myVar", 99)
    assert env.lookup("myVar") == 99
    assert env.size == 2


def test_assign_existing_symbol():
    """assign updates a defined symbol."""
    env = Environment()
    env.define("x", 1)
    env.assign("x", 5)
    assert env.lookup("x") == 5


def test_assign_undefined_symbol():
    """assign never creates a symbol."""
    env = Environment()
    with pytest.raises(UndefinedVariableError):
        env.assign("x", 5)
    assert "x" not in env


def test_dump_most_recent_first():
    """dump lists bindings from the most recently defined to the oldest."""
    env = Environment()
    env.define("a", 1)
    env.define("b", 2)
    env.define("a", 3)
    assert env.dump() == ["Name: a, Value: 3", "Name: b, Value: 2"]


@pytest.mark.parametrize("value", ["5", 5.0, True, None])
def test_define_non_integer_value(value):
    """Only integers can be bound to a symbol."""
    env = Environment()
    with pytest.raises(InvalidSymbolValueError) as exc_info:
        env.define("x", value)
    assert exc_info.value.name == "x"
    assert "x" not in env


def test_assign_non_integer_value():
    """A rejected assignment leaves the previous value in place."""
    env = Environment()
    env.define("x", 1)
    with pytest.raises(InvalidSymbolValueError):
        env.assign("x", "5")
    assert env.lookup("x") == 1


def test_define_large_value_is_kept():
    """The environment stores integers as given, wrapping happens on evaluation."""
    env = Environment()
    env.define("big", 2**40)
    assert env.lookup("big") == 2**40


def test_environments_are_independent():
    """Each environment owns its own bindings."""
    first, second = Environment(), Environment()
    first.define("x", 1)
    assert second.lookup("x") is None
