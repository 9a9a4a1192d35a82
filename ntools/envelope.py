"""Client side of the envelope codec.

The body is only parsed after confirming a 2xx status, since failures come
back as plain text. A parsed envelope with `success == false` is raised as a
`RemoteOperationError`. Encoding lives in `ntools.routers.envelope` so the
clients do not depend on FastAPI.
"""

from __future__ import annotations

from typing import Type, TypeVar

import httpx
from pydantic import ValidationError as ModelValidationError

from ntools.types import (
    DecodeError,
    RemoteOperationError,
    StatusResult,
    StringResult,
    TransportError,
)

E = TypeVar("E", bound=StatusResult)


def _parse(response: httpx.Response, model: Type[E]) -> E:
    if not response.is_success:
        raise TransportError(
            f"HTTP {response.status_code}",
            status_code=response.status_code,
            body=response.text,
        )
    try:
        data = response.json()
    except ValueError as exc:
        raise DecodeError(f"{model.__name__} body is not valid JSON") from exc
    if data is None:
        raise DecodeError(f"{model.__name__} is null")
    try:
        envelope = model.model_validate(data)
    except ModelValidationError as exc:
        raise DecodeError(f"Unexpected {model.__name__} shape: {exc}") from exc
    if not envelope.success:
        raise RemoteOperationError(envelope.message)
    return envelope


def decode_status(response: httpx.Response) -> bool:
    return _parse(response, StatusResult).success


def decode_string(response: httpx.Response) -> str:
    """Return the envelope's `value`; absent or null decodes to ``""``."""
    return _parse(response, StringResult).value or ""


__all__ = ["decode_status", "decode_string"]
