"""HTTP clients for the ntools service, one per capability."""

from .base import BaseClient
from .document import DocumentClient
from .file import FileClient
from .mail import MailClient
from .registry import ClientRegistry
from .string import StringClient

__all__ = [
    "BaseClient",
    "DocumentClient",
    "FileClient",
    "MailClient",
    "StringClient",
    "ClientRegistry",
]
