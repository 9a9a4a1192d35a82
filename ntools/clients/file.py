from __future__ import annotations

from typing import BinaryIO, Optional, Union

from ntools.envelope import decode_string

from .base import BaseClient


class FileClient(BaseClient):
    """Client for the File capability (object storage)."""

    def get_file_url(
        self, bucket: str, file_name: str, *, timeout: Optional[float] = None
    ) -> str:
        return self._get_string(
            self.url("File", bucket, "getFileUrl", file_name), timeout
        )

    def upload_file(
        self,
        bucket: str,
        file_name: str,
        content_type: str,
        stream: Union[bytes, BinaryIO],
        *,
        timeout: Optional[float] = None,
    ) -> str:
        """Upload a file as multipart field `file`; return the stored name."""
        response = self._request(
            "POST",
            self.url("File", bucket, "uploadFile"),
            timeout,
            files={"file": (file_name, stream, content_type)},
        )
        return decode_string(response)
