"""MailerSend service for the Mail controller.

Forwards a `MailMessage` to the MailerSend `email` endpoint. The sender address
always comes from configuration; the caller-supplied display name is kept.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from ntools.types import MailerErrorInfo, MailMessage, MailProviderError
from server.config import Settings, get_settings

logger = logging.getLogger(__name__)


class MailerSendService:
    """Transactional e-mail backend implementing the MailSender protocol."""

    def __init__(self, settings: Settings) -> None:
        self.api_url = settings.mailersend_api_url
        self.api_token = settings.mailersend_api_token or ""
        self.sender = settings.mailersend_sender or ""
        self.timeout = settings.provider_timeout_seconds

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_token}",
            "Content-Type": "application/json",
            "X-Requested-With": "XMLHttpRequest",
        }

    def _build_payload(self, message: MailMessage) -> Dict[str, Any]:
        payload = message.model_dump(mode="json", by_alias=True, exclude_none=True)
        if self.sender:
            payload["from"]["email"] = self.sender
        return payload

    def send_mail(self, message: MailMessage) -> bool:
        """Send a message through MailerSend; return True when it is accepted.

        Raises:
            RuntimeError: if the API token is not configured.
            MailProviderError: if MailerSend rejects the message.
            httpx.RequestError: on network failure.
        """
        if not self.api_token:
            raise RuntimeError("Missing MAILERSEND_API_TOKEN environment variable")

        with httpx.Client(timeout=self.timeout) as client:
            response = client.post(
                self.api_url, headers=self._headers(), json=self._build_payload(message)
            )

        if response.is_success:
            logger.info(
                "Mail accepted by MailerSend (HTTP %s, %d recipients)",
                response.status_code,
                len(message.to),
            )
            return True

        raise self._to_error(response)

    @staticmethod
    def _to_error(response: httpx.Response) -> MailProviderError:
        # pydantic's ValidationError is a ValueError, as is a JSON decode error
        try:
            info = MailerErrorInfo.model_validate(response.json())
        except ValueError:
            info = None
        if info is not None and info.message:
            return MailProviderError(info.message, info.errors)
        return MailProviderError(
            response.text or f"MailerSend returned HTTP {response.status_code}"
        )


# Global mail service instance (singleton)
_mail_service: Optional[MailerSendService] = None


def get_mail_service() -> MailerSendService:
    """Get or create the mail service instance.

    Returns:
        MailerSendService instance
    """
    global _mail_service
    if _mail_service is None:
        _mail_service = MailerSendService(get_settings())
    return _mail_service
