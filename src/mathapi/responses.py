"""Request handling with a single mapping from outcomes to HTTP statuses.

Any HTTP adapter can mount ``handle`` behind its routes: it takes the
operation named by the route and the decoded JSON body, and returns the
status code and the JSON-ready body to send back.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from pydantic import ValidationError

from mathapi.core import Failure, Operation, evaluate
from mathapi.exceptions import UnknownOperationError
from mathapi.models import ErrorResponse, MathRequest, MathResponse

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR_MESSAGE = "Internal server error: "


def error_response(message: str, status: HTTPStatus) -> tuple[int, dict[str, Any]]:
    """Build an error body of the form ``{"error": ..., "status": "400"}``."""
    return int(status), ErrorResponse.build(message, int(status)).model_dump()


def _format_validation_error(error: ValidationError) -> str:
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'body'}: {err['msg']}"
        for err in error.errors()
    )
    return f"Invalid request body: {details}"


def handle(operation: Operation | str, payload: Any) -> tuple[int, dict[str, Any]]:
    """
    Evaluate a request body against an operation.

    Args:
        operation: An Operation or a route name such as "add"
        payload: Decoded JSON body, expected to carry operand1 and operand2

    Returns:
        (status_code, body). 200 with ``{result, operation}`` on success,
        400 for invalid bodies and arithmetic failures, 404 for unknown
        operations, 500 for anything unexpected.
    """
    try:
        op = Operation.from_name(operation)
    except UnknownOperationError as e:
        logger.info("Rejected request: %s", e)
        return error_response(str(e), HTTPStatus.NOT_FOUND)

    if payload is None:
        return error_response("Request body cannot be null", HTTPStatus.BAD_REQUEST)

    try:
        request = MathRequest.model_validate(payload)
    except ValidationError as e:
        message = _format_validation_error(e)
        logger.info("Rejected %s request: %s", op.name.lower(), message)
        return error_response(message, HTTPStatus.BAD_REQUEST)

    try:
        outcome = evaluate(op, request.operand1, request.operand2)
    except Exception as e:
        logger.exception("Unexpected failure in %s", op.name.lower())
        return error_response(
            f"{INTERNAL_SERVER_ERROR_MESSAGE}{e}", HTTPStatus.INTERNAL_SERVER_ERROR
        )

    if isinstance(outcome, Failure):
        logger.info("Rejected %s request: %s", op.name.lower(), outcome.error)
        return error_response(str(outcome.error), HTTPStatus.BAD_REQUEST)

    body = MathResponse(
        result=outcome.result.value, operation=outcome.result.operation
    ).model_dump()
    return int(HTTPStatus.OK), body
