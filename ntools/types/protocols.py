from __future__ import annotations

from typing import BinaryIO, Optional, Protocol

from .mail import MailMessage


class FileStorage(Protocol):
    """Protocol for the storage backend behind the File controller.

    Concrete implementations encapsulate the object-storage SDK so the router
    stays provider-agnostic and tests can swap in an in-memory fake.

    Minimal example:
        >>> from typing import BinaryIO, Optional
        >>> class MemoryStorage:
        ...     def __init__(self) -> None:
        ...         self.objects = {}
        ...     def get_file_url(self, bucket: str, file_name: Optional[str]) -> str:
        ...         return f"memory://{bucket}/{file_name}" if file_name else ""
        ...     def insert_from_stream(self, stream: BinaryIO, bucket: str, name: str,
        ...                            content_type: Optional[str] = None) -> str:
        ...         self.objects[(bucket, name)] = stream.read()
        ...         return name
    """

    def get_file_url(self, bucket: str, file_name: Optional[str]) -> str:
        """Return the public URL of `file_name` inside `bucket`."""
        ...

    def insert_from_stream(
        self,
        stream: BinaryIO,
        bucket: str,
        name: str,
        content_type: Optional[str] = None,
    ) -> str:
        """Store the stream and return the stored object name."""
        ...


class MailSender(Protocol):
    """Protocol for the transactional e-mail provider behind the Mail controller."""

    def send_mail(self, message: MailMessage) -> bool:
        """Send a message.

        Implementations should raise on provider rejection; the controller maps
        the exception message into the HTTP 500 body.
        """
        ...
