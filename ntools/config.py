from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env_float(name: str, fallback: float) -> float:
    try:
        return float(os.getenv(name, str(fallback)))
    except (TypeError, ValueError):
        return fallback


@dataclass(frozen=True)
class ClientSettings:
    """Settings shared by every ntools client. Build once, inject everywhere."""

    api_url: str = field(default_factory=lambda: os.getenv("NTOOLS_API_URL", "http://localhost:8000"))
    timeout_seconds: float = field(default_factory=lambda: _env_float("NTOOLS_TIMEOUT", 15.0))
    verify_ssl: bool = field(
        default_factory=lambda: os.getenv("NTOOLS_VERIFY_SSL", "true").lower() == "true"
    )

    @property
    def base_url(self) -> str:
        return self.api_url.rstrip("/")


def get_client_settings() -> ClientSettings:
    return ClientSettings()
