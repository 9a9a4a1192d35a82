"""Error taxonomy shared by the clients and the server.

Clients raise `TransportError`, `DecodeError` or `RemoteOperationError` and
never swallow them. The server raises `ValidationError` for requests missing a
required part; it is mapped to HTTP 400 with a plain-text body.
"""

from __future__ import annotations

from typing import Optional


class NToolsError(Exception):
    """Base for all ntools errors."""


class TransportError(NToolsError):
    """The HTTP call failed: non-2xx status or network failure.

    `status_code` is None when no response was received.
    """

    def __init__(
        self, message: str, status_code: Optional[int] = None, body: Optional[str] = None
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class DecodeError(NToolsError):
    """The response body could not be parsed into the expected envelope."""


class RemoteOperationError(NToolsError):
    """The envelope parsed but reported `success == false`."""

    def __init__(self, message: Optional[str]) -> None:
        super().__init__(message or "Remote operation failed")
        self.message = message


class ValidationError(NToolsError):
    """Request is missing a required part (server side only)."""


class MailProviderError(NToolsError):
    """The mail provider rejected the message."""

    def __init__(self, message: str, errors: Optional[dict] = None) -> None:
        super().__init__(message)
        self.errors = errors or {}


__all__ = [
    "NToolsError",
    "TransportError",
    "DecodeError",
    "RemoteOperationError",
    "ValidationError",
    "MailProviderError",
]
