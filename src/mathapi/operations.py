"""Core arithmetic operations with overflow protection."""

import math

from mathapi.exceptions import DivisionByZeroError, PrecisionLossError, ResultOverflowError
from mathapi.validators import validate_operands

# Divisors with a smaller magnitude are rejected (exclusive bound)
PRECISION_THRESHOLD = 1e-10


def _check_overflow(result: float, operation: str, a: float, b: float) -> float:
    if math.isinf(result):
        raise ResultOverflowError(operation, a, b)
    return result


def add(a: float, b: float) -> float:
    """
    Add two numbers with overflow protection.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Args:
        a: First operand
        b: Second operand

    Returns:
        Sum of a and b

    Raises:
        InvalidOperandError: If either operand is NaN or infinite
        ResultOverflowError: If the sum is not finite
    """
    a, b = validate_operands(a, b)
    return _check_overflow(a + b, "addition", a, b)


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a with overflow protection.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Identity: subtract(a, 0) == a

    Raises:
        InvalidOperandError: If either operand is NaN or infinite
        ResultOverflowError: If the difference is not finite
    """
    a, b = validate_operands(a, b)
    return _check_overflow(a - b, "subtraction", a, b)


def multiply(a: float, b: float) -> float:
    """
    Multiply two numbers with overflow protection.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a

    Raises:
        InvalidOperandError: If either operand is NaN or infinite
        ResultOverflowError: If the product is not finite
    """
    a, b = validate_operands(a, b)
    return _check_overflow(a * b, "multiplication", a, b)


def divide(a: float, b: float) -> float:
    """
    Divide a by b with zero, precision and overflow protection.

    Checks run in order: operands, zero divisor, tiny divisor, overflow.

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Quotient of a and b

    Raises:
        InvalidOperandError: If either operand is NaN or infinite
        DivisionByZeroError: If b is zero (either sign)
        PrecisionLossError: If 0 < abs(b) < PRECISION_THRESHOLD
        ResultOverflowError: If the quotient is not finite
    """
    a, b = validate_operands(a, b)

    if b == 0.0:
        raise DivisionByZeroError(a)

    if abs(b) < PRECISION_THRESHOLD:
        raise PrecisionLossError(b)

    return _check_overflow(a / b, "division", a, b)
