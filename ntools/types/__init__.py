"""Core types for ntools.

Envelope models, the mail message model, backing-operation protocols and the
error taxonomy live here. Most modules should import types from this package
rather than from its submodules.

Usage:
    from ntools.types import StatusResult, MailMessage, TransportError
"""

from .errors import (
    DecodeError,
    MailProviderError,
    NToolsError,
    RemoteOperationError,
    TransportError,
    ValidationError,
)
from .mail import MailerErrorInfo, MailMessage, MailRecipient
from .protocols import FileStorage, MailSender
from .results import StatusResult, StringResult

__all__ = [
    "StatusResult",
    "StringResult",
    "MailRecipient",
    "MailMessage",
    "MailerErrorInfo",
    "FileStorage",
    "MailSender",
    "NToolsError",
    "TransportError",
    "DecodeError",
    "RemoteOperationError",
    "ValidationError",
    "MailProviderError",
]
