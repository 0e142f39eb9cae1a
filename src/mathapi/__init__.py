"""
Validated floating-point arithmetic.

Four guarded operations (add, subtract, multiply, divide) that reject
NaN/Infinity operands, overflowing results and unsafe divisors with typed
errors, plus a non-raising ``evaluate`` and a request handler that maps
outcomes to HTTP status codes.
"""

from mathapi.core import Failure, Operation, OperationResult, Outcome, Success, evaluate
from mathapi.exceptions import (
    DivisionByZeroError,
    InvalidOperandError,
    MathError,
    PrecisionLossError,
    ResultOverflowError,
    UnknownOperationError,
)
from mathapi.operations import PRECISION_THRESHOLD, add, divide, multiply, subtract
from mathapi.responses import handle
from mathapi.validators import validate_operand, validate_operands

__all__ = [
    "PRECISION_THRESHOLD",
    "DivisionByZeroError",
    "Failure",
    "InvalidOperandError",
    "MathError",
    "Operation",
    "OperationResult",
    "Outcome",
    "PrecisionLossError",
    "ResultOverflowError",
    "Success",
    "UnknownOperationError",
    "add",
    "divide",
    "evaluate",
    "handle",
    "multiply",
    "subtract",
    "validate_operand",
    "validate_operands",
]

__version__ = "0.1.0"
