"""Pydantic models for expression requests and their evaluation results."""
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ExpressionRequest(BaseModel):
    """A single postfix expression submitted to the interpreter."""

    expression: str = Field(..., description="Postfix expression as a string")
    line_number: int = Field(default=1, ge=1, description="Line number of the expression in its input")

    @field_validator("expression")
    def expression_must_not_be_empty(cls, v: str) -> str:
        """Ensure that the expression is not empty."""
        if not v.strip():
            raise ValueError("Expression cannot be empty")
        return v


class EvaluationResult(BaseModel):
    """Outcome of evaluating one expression: either a value or an error message."""

    expression: str = Field(..., description="Original postfix expression")
    line_number: int = Field(default=1, ge=1, description="Line number of the expression in its input")
    infix: Optional[str] = Field(default=None, description="Fully parenthesized infix rendering")
    value: Optional[int] = Field(default=None, description="Integer result of the evaluation")
    error: Optional[str] = Field(default=None, description="Diagnostic message when evaluation failed")

    @property
    def ok(self) -> bool:
        return self.error is None
