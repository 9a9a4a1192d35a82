"""Configuration management for the ntools server."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field


def _load_env_file() -> None:
    """Load .env from root directory if present."""
    env_path = Path(__file__).parent.parent / ".env"
    if not env_path.is_file():
        return
    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith("#") and "=" in stripped:
            key, value = stripped.split("=", 1)
            key, value = key.strip(), value.strip().strip("'\"")
            if key and value and key not in os.environ:
                os.environ[key] = value


_load_env_file()


DEFAULT_APP_NAME = "NTools API"
DEFAULT_APP_VERSION = "0.1.0"


def _env_int(name: str, fallback: int) -> int:
    try:
        return int(os.getenv(name, str(fallback)))
    except (TypeError, ValueError):
        return fallback


def _env_float(name: str, fallback: float) -> float:
    try:
        return float(os.getenv(name, str(fallback)))
    except (TypeError, ValueError):
        return fallback


class Settings(BaseModel):
    """Server settings: read once at startup, read-only afterwards."""

    # App metadata
    app_name: str = Field(default=DEFAULT_APP_NAME)
    app_version: str = Field(default=DEFAULT_APP_VERSION)

    # Server runtime
    server_host: str = Field(default=os.getenv("NTOOLS_HOST", "0.0.0.0"))
    server_port: int = Field(default=_env_int("NTOOLS_PORT", 8000))

    # Environment
    env: str = Field(default=os.getenv("ENV", "dev"))
    log_level: str = Field(default=os.getenv("LOG_LEVEL", "INFO"))

    # HTTP behaviour
    cors_allow_origins_raw: str = Field(default=os.getenv("CORS_ORIGINS", "*"))
    enable_docs: bool = Field(default=os.getenv("NTOOLS_ENABLE_DOCS", "1") != "0")
    docs_url: Optional[str] = Field(default=os.getenv("DOCS_URL", "/docs"))

    # S3-compatible object storage
    s3_access_key: Optional[str] = Field(default=os.getenv("S3_ACCESS_KEY"))
    s3_secret_key: Optional[str] = Field(default=os.getenv("S3_SECRET_KEY"))
    s3_endpoint: str = Field(default=os.getenv("S3_ENDPOINT", ""))
    s3_region: Optional[str] = Field(default=os.getenv("S3_REGION"))
    s3_object_acl: Optional[str] = Field(default=os.getenv("S3_OBJECT_ACL", "public-read"))

    # MailerSend
    mailersend_api_url: str = Field(
        default=os.getenv("MAILERSEND_API_URL", "https://api.mailersend.com/v1/email")
    )
    mailersend_api_token: Optional[str] = Field(default=os.getenv("MAILERSEND_API_TOKEN"))
    mailersend_sender: Optional[str] = Field(default=os.getenv("MAILERSEND_SENDER"))

    # Uploads larger than this are rejected with 413
    max_upload_bytes: int = Field(default=_env_int("NTOOLS_MAX_UPLOAD_BYTES", 100_000_000))

    # Outbound calls to storage/mail providers
    provider_timeout_seconds: float = Field(default=_env_float("PROVIDER_TIMEOUT", 30.0))

    @property
    def storage_configured(self) -> bool:
        return bool(self.s3_endpoint)

    @property
    def mail_configured(self) -> bool:
        return bool(self.mailersend_api_token)

    @property
    def cors_allow_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        if self.cors_allow_origins_raw.strip() in {"", "*"}:
            return ["*"]
        return [origin.strip() for origin in self.cors_allow_origins_raw.split(",") if origin.strip()]

    @property
    def resolved_docs_url(self) -> Optional[str]:
        """Return documentation URL when docs are enabled."""
        return (self.docs_url or "/docs") if self.enable_docs else None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
