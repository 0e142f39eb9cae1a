"""Custom exceptions for the mathapi package."""

from typing import Any


class MathError(Exception):
    """Base exception for all caller-correctable arithmetic errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InvalidOperandError(MathError):
    """Raised when an operand is NaN, infinite, or not a number."""

    def __init__(self, operand: str, value: Any, reason: str) -> None:
        super().__init__(f"{operand} {reason}", value)
        self.operand = operand
        self.reason = reason


class DivisionByZeroError(MathError):
    """Raised when the divisor is exactly zero."""

    def __init__(self, numerator: float) -> None:
        super().__init__("Division by zero is not allowed", numerator)
        self.numerator = numerator


class PrecisionLossError(MathError):
    """Raised when the divisor is nonzero but too small to divide by safely."""

    def __init__(self, divisor: float) -> None:
        super().__init__("Divisor too small, may cause precision issues", divisor)
        self.divisor = divisor


class ResultOverflowError(MathError):
    """Raised when a calculation results in overflow."""

    def __init__(self, operation: str, *operands: float) -> None:
        super().__init__(f"{operation.capitalize()} result overflow", operands)
        self.operation = operation
        self.operands = operands


class UnknownOperationError(MathError):
    """Raised when an operation name does not match any known operation."""

    def __init__(self, name: Any) -> None:
        super().__init__(f"Unknown operation: {name}", name)
        self.name = name
