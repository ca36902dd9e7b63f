"""Test classes ExpressionRequest and EvaluationResult."""
from pydantic import ValidationError
import pytest

from postfix_interpreter.common.operations import EvaluationResult, ExpressionRequest


def test_expression_request_valid() -> None:
    """Test that a valid ExpressionRequest can be created."""
    req = ExpressionRequest(expression="2 2 3 * +", line_number=4)
    assert req.expression == "2 2 3 * +"
    assert req.line_number == 4


def test_expression_request_invalid_type() -> None:
    """Test that non-string expressions raise a validation error."""
    with pytest.raises(ValidationError):
        ExpressionRequest(expression=123)


def test_expression_request_empty() -> None:
    """Test that blank expressions are rejected."""
    with pytest.raises(ValidationError):
        ExpressionRequest(expression="   ")


def test_expression_request_invalid_line_number() -> None:
    """Test that line numbers start at 1."""
    with pytest.raises(ValidationError):
        ExpressionRequest(expression="1", line_number=0)


def test_evaluation_result_success() -> None:
    """Test that a successful result carries its value."""
    res = EvaluationResult(expression="5 3 +", infix="(5 + 3)", value=8)
    assert res.ok
    assert res.value == 8
    assert isinstance(res.value, int)


def test_evaluation_result_error() -> None:
    """Test that a failed result carries its message and no value."""
    res = EvaluationResult(expression="5 0 /", infix="(5 / 0)", error="Division by zero in '/'")
    assert not res.ok
    assert res.value is None


def test_evaluation_result_invalid_value_type() -> None:
    """Test that non-integer values raise a validation error."""
    with pytest.raises(ValidationError):
        EvaluationResult(expression="1", value="not an int")
