from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from ntools.config import ClientSettings, get_client_settings
from ntools.envelope import decode_status, decode_string
from ntools.types import TransportError

logger = logging.getLogger(__name__)


def _encode_segment(segment: str) -> str:
    # "." and ".." would be collapsed as dot-segments by the URL parser
    if segment and set(segment) == {"."}:
        return segment.replace(".", "%2E")
    return quote(segment, safe="")


class BaseClient:
    """Common plumbing for the ntools HTTP clients.

    Each public client method issues exactly one request and decodes the
    envelope. There are no retries: mail sends and uploads are not idempotent.

    An `httpx.Client` may be injected to share a connection pool (or to mount
    an ASGI app in tests); otherwise the client owns one and closes it in
    `close()` / on context exit.
    """

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.settings = settings or get_client_settings()
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(
            timeout=self.settings.timeout_seconds,
            verify=self.settings.verify_ssl,
        )

    def __enter__(self) -> "BaseClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def url(self, *segments: str) -> str:
        """Join the base URL and percent-encoded path segments."""
        path = "/".join(_encode_segment(str(s)) for s in segments)
        return f"{self.settings.base_url}/{path}"

    def _request(
        self, method: str, url: str, timeout: Optional[float] = None, **kwargs: Any
    ) -> httpx.Response:
        extra: Dict[str, Any] = {"timeout": timeout} if timeout is not None else {}
        logger.debug("ntools request: %s %s", method, url)
        try:
            return self._http.request(method, url, **kwargs, **extra)
        except httpx.RequestError as e:
            logger.warning("ntools request failed: %s %s: %s", method, url, e)
            raise TransportError(f"Request to {url} failed: {e}") from e

    def _get_bool(self, url: str, timeout: Optional[float] = None) -> bool:
        return decode_status(self._request("GET", url, timeout))

    def _get_string(self, url: str, timeout: Optional[float] = None) -> str:
        return decode_string(self._request("GET", url, timeout))
