"""Services package for ntools: backing operations that call external providers."""

from .file_service import FileService, get_file_service
from .mailersend import MailerSendService, get_mail_service

__all__ = [
    "FileService",
    "get_file_service",
    "MailerSendService",
    "get_mail_service",
]
