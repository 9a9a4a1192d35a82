"""Object storage service for the File controller.

Talks to any S3-compatible endpoint (AWS, DigitalOcean Spaces, MinIO) via boto3.
Public URLs are built from the endpoint without calling the SDK.
"""

from __future__ import annotations

import logging
from typing import Any, BinaryIO, Dict, Optional

import boto3
import httpx

from server.config import Settings, get_settings

logger = logging.getLogger(__name__)


class FileService:
    """S3-compatible storage backend implementing the FileStorage protocol."""

    def __init__(self, settings: Settings, client: Any = None) -> None:
        self.endpoint = (settings.s3_endpoint or "").rstrip("/")
        self.object_acl = settings.s3_object_acl
        self.timeout = settings.provider_timeout_seconds
        self._settings = settings
        # A preconfigured client may be injected (tests, custom sessions)
        self._client = client

    @property
    def client(self) -> Any:
        """boto3 S3 client, built on first use."""
        if self._client is None:
            self._client = boto3.client(
                "s3",
                aws_access_key_id=self._settings.s3_access_key,
                aws_secret_access_key=self._settings.s3_secret_key,
                endpoint_url=self.endpoint or None,
                region_name=self._settings.s3_region,
            )
        return self._client

    def get_file_url(self, bucket: str, file_name: Optional[str]) -> str:
        """Return `{endpoint}/{bucket}/{file_name}`, or "" when there is no file name."""
        if not file_name:
            return ""
        return f"{self.endpoint}/{bucket}/{file_name}"

    def insert_from_stream(
        self,
        stream: BinaryIO,
        bucket: str,
        name: str,
        content_type: Optional[str] = None,
    ) -> str:
        """Upload `stream` to `bucket` under key `name` and return `name`.

        Raises:
            botocore.exceptions.BotoCoreError / ClientError: if the upload fails.
        """
        extra_args: Dict[str, str] = {}
        if self.object_acl:
            extra_args["ACL"] = self.object_acl
        if content_type:
            extra_args["ContentType"] = content_type

        self.client.upload_fileobj(stream, bucket, name, ExtraArgs=extra_args)
        logger.info("Stored object %s/%s", bucket, name)
        return name

    def download_file(self, url: str) -> bytes:
        """Fetch a stored object through its public URL."""
        with httpx.Client(timeout=self.timeout) as client:
            response = client.get(url)
            response.raise_for_status()
            return response.content


# Global file service instance (singleton)
_file_service: Optional[FileService] = None


def get_file_service() -> FileService:
    """Get or create the file service instance.

    Returns:
        FileService instance
    """
    global _file_service
    if _file_service is None:
        _file_service = FileService(get_settings())
    return _file_service
