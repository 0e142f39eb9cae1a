"""Pydantic models for request and response bodies."""

from pydantic import BaseModel, ConfigDict, Field


class MathRequest(BaseModel):
    """Two operands for a binary arithmetic operation."""

    model_config = ConfigDict(strict=True)

    operand1: float = Field(..., description="First operand")
    operand2: float = Field(..., description="Second operand")


class MathResponse(BaseModel):
    """Result of a successful operation."""

    result: float = Field(..., description="Finite numeric result")
    operation: str = Field(..., description="Label of the operation performed")


class ErrorResponse(BaseModel):
    """Body returned for any rejected request."""

    error: str = Field(..., description="Human-readable error message")
    status: str = Field(..., description="HTTP status code as a string")

    @classmethod
    def build(cls, message: str, status: int) -> "ErrorResponse":
        return cls(error=message, status=str(status))
