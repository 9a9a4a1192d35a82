"""Server side of the envelope codec.

A backing operation's result is encoded into a `StatusResult` or
`StringResult` JSON body; any exception becomes HTTP 500 with the exception's
message as a plain-text body (not an envelope).
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from fastapi import status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from ntools.types import StatusResult, StringResult

logger = logging.getLogger(__name__)


def encode_status(result: bool, message: Optional[str] = None) -> JSONResponse:
    """Encode a boolean operation result; the boolean is the `success` flag."""
    envelope = StatusResult(success=result, message=None if result else message)
    return JSONResponse(envelope.model_dump(exclude_none=True))


def encode_string(value: str) -> JSONResponse:
    envelope = StringResult(success=True, value=value)
    return JSONResponse(envelope.model_dump(exclude_none=True))


def failure_response(exc: Exception) -> PlainTextResponse:
    """HTTP 500 whose body is the raw exception message."""
    return PlainTextResponse(
        str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def respond_status(
    operation: Callable[[], bool], false_message: Optional[str] = None
) -> Response:
    """Run a boolean backing operation at the controller boundary."""
    try:
        result = operation()
    except Exception as exc:
        logger.exception("Backing operation failed")
        return failure_response(exc)
    return encode_status(bool(result), false_message)


def respond_string(operation: Callable[[], str]) -> Response:
    """Run a string-producing backing operation at the controller boundary."""
    try:
        value = operation()
    except Exception as exc:
        logger.exception("Backing operation failed")
        return failure_response(exc)
    return encode_string(value)
