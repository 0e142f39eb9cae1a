"""
Property-based tests for evaluate and the request handler.

Whatever the operands, evaluate never raises for arithmetic failures and the
handler always answers with a status it knows how to produce.
"""

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mathapi import Failure, MathError, Operation, Success, evaluate, handle

any_floats = st.floats(allow_nan=True, allow_infinity=True)

operation_names = st.sampled_from(["add", "subtract", "multiply", "divide"])


@pytest.mark.property
class TestEvaluateProperties:
    """Property-based tests for evaluate."""

    @given(op=st.sampled_from(list(Operation)), a=any_floats, b=any_floats)
    def test_total(self, op: Operation, a: float, b: float):
        """Every input yields a Success with a finite value or a typed Failure."""
        outcome = evaluate(op, a, b)
        if isinstance(outcome, Success):
            assert math.isfinite(outcome.result.value)
            assert outcome.result.operation == op.label
        else:
            assert isinstance(outcome, Failure)
            assert isinstance(outcome.error, MathError)

    @given(op=st.sampled_from(list(Operation)), a=any_floats, b=any_floats)
    def test_agrees_with_raising_functions(self, op: Operation, a: float, b: float):
        outcome = evaluate(op, a, b)
        try:
            expected = op.function(a, b)
        except MathError as e:
            assert not outcome.ok
            assert type(outcome.error) is type(e)
            assert str(outcome.error) == str(e)
        else:
            assert outcome.ok
            assert outcome.result.value == expected


@pytest.mark.property
class TestHandleProperties:
    """Property-based tests for handle."""

    @given(name=operation_names, a=any_floats, b=any_floats)
    def test_status_and_body_shape(self, name: str, a: float, b: float):
        status, body = handle(name, {"operand1": a, "operand2": b})
        if status == 200:
            assert set(body) == {"result", "operation"}
            assert math.isfinite(body["result"])
        else:
            assert status == 400
            assert body["status"] == "400"
            assert body["error"]
