"""Runtime configuration for the interpreter."""
from pydantic import BaseModel, ConfigDict, Field


class InterpreterConfig(BaseModel):
    """Settings shared by the parser, the evaluator and the session."""

    model_config = ConfigDict(frozen=True)

    max_depth: int = Field(default=500, ge=1, le=900, description="Maximum expression nesting depth")
    int_bits: int = Field(default=32, ge=8, le=64, description="Width of the wrapping integer arithmetic")
    prompt: str = Field(default="> ", description="Prompt printed before each interactive line")
    verbose: bool = Field(default=False, description="Enable debug logging")
