from __future__ import annotations

from typing import Optional

from ntools.envelope import decode_status
from ntools.types import MailMessage

from .base import BaseClient


class MailClient(BaseClient):
    """Client for the Mail capability."""

    def is_valid_email(self, email: str, *, timeout: Optional[float] = None) -> bool:
        return self._get_bool(self.url("Mail", "isValidEmail", email), timeout)

    def send_mail(self, message: MailMessage, *, timeout: Optional[float] = None) -> bool:
        """Send `message` through the remote service.

        Sent at most once: a failure is raised to the caller and never retried.
        """
        response = self._request(
            "POST",
            self.url("Mail", "sendmail"),
            timeout,
            json=message.model_dump(mode="json", by_alias=True),
        )
        return decode_status(response)
