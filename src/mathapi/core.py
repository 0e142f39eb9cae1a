"""Non-raising evaluation of arithmetic operations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

from mathapi.exceptions import MathError, UnknownOperationError
from mathapi.operations import add, divide, multiply, subtract

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class Operation(Enum):
    """The four supported operations, valued by their result label."""

    ADD = "addition"
    SUBTRACT = "subtraction"
    MULTIPLY = "multiplication"
    DIVIDE = "division"

    @property
    def label(self) -> str:
        return self.value

    @property
    def function(self) -> Callable[[float, float], float]:
        return _FUNCTIONS[self]

    @classmethod
    def from_name(cls, name: Operation | str) -> Operation:
        """
        Resolve an operation from its name, e.g. "add" or "DIVIDE".

        Raises:
            UnknownOperationError: If the name matches no operation
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            member = cls.__members__.get(name.strip().upper())
            if member is not None:
                return member
        raise UnknownOperationError(name)


_FUNCTIONS: dict[Operation, Callable[[float, float], float]] = {
    Operation.ADD: add,
    Operation.SUBTRACT: subtract,
    Operation.MULTIPLY: multiply,
    Operation.DIVIDE: divide,
}


@dataclass(frozen=True)
class OperationResult:
    """A finite result and the label of the operation that produced it."""

    value: float
    operation: str

    def to_dict(self) -> dict[str, Any]:
        return {"result": self.value, "operation": self.operation}

    def __str__(self) -> str:
        return f"{self.operation} = {self.value}"


@dataclass(frozen=True)
class Success:
    """Outcome of an operation that produced a result."""

    result: OperationResult
    ok: bool = True


@dataclass(frozen=True)
class Failure:
    """Outcome of an operation rejected with a typed error."""

    error: MathError
    ok: bool = False


Outcome = Union[Success, Failure]


def evaluate(operation: Operation | str, a: float, b: float) -> Outcome:
    """
    Apply an operation to two operands without raising for bad input.

    Args:
        operation: An Operation or its name
        a: First operand
        b: Second operand

    Returns:
        Success holding the OperationResult, or Failure holding the MathError.
        Exceptions that are not MathError propagate unchanged.
    """
    try:
        op = Operation.from_name(operation)
        value = op.function(a, b)
    except MathError as e:
        logger.debug("%s(%r, %r) rejected: %s", operation, a, b, e)
        return Failure(e)
    return Success(OperationResult(value=value, operation=op.label))
