"""Operand validation."""

import math
from typing import Any

from mathapi.exceptions import InvalidOperandError


def validate_operand(value: Any, operand: str = "operand") -> float:
    """
    Validate that a value is a finite number and return it as a float.

    Args:
        value: The value to validate
        operand: Name of the operand, used in the error message

    Returns:
        The validated value as a float

    Raises:
        InvalidOperandError: If value is NaN, Inf, or not a number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidOperandError(
            operand, value, f"must be a number, got {type(value).__name__}"
        )

    try:
        number = float(value)
    except OverflowError as e:
        raise InvalidOperandError(operand, value, "is out of range") from e

    if math.isnan(number):
        raise InvalidOperandError(operand, value, "cannot be NaN")
    if math.isinf(number):
        raise InvalidOperandError(operand, value, "cannot be Infinity")

    return number


def validate_operands(a: Any, b: Any) -> tuple[float, float]:
    """Validate both operands, first before second."""
    return validate_operand(a, "operand1"), validate_operand(b, "operand2")
