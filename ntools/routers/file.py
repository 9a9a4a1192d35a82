from __future__ import annotations

import os
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.responses import Response

from ntools.routers.envelope import respond_string
from ntools.services import get_file_service
from ntools.types import FileStorage, StringResult, ValidationError
from server.config import Settings, get_settings

router = APIRouter(prefix="/File", tags=["file"])


def _upload_size(file: UploadFile) -> int:
    if file.size is not None:
        return file.size
    file.file.seek(0, os.SEEK_END)
    size = file.file.tell()
    file.file.seek(0)
    return size


@router.get("/{bucket}/getFileUrl/{file_name:path}", responses={200: {"model": StringResult}})
def get_file_url(
    bucket: str,
    file_name: str,
    storage: FileStorage = Depends(get_file_service),
) -> Response:
    return respond_string(lambda: storage.get_file_url(bucket, file_name))


@router.post("/{bucket}/uploadFile", responses={200: {"model": StringResult}})
def upload_file(
    bucket: str,
    file: Optional[UploadFile] = File(None),
    settings: Settings = Depends(get_settings),
    storage: FileStorage = Depends(get_file_service),
) -> Response:
    """Store the multipart `file` field in `bucket`; `value` is the stored name.

    A missing or empty file is rejected with 400, and a file larger than
    `max_upload_bytes` with 413, before storage is touched.
    """
    size = 0 if file is None else _upload_size(file)
    if size == 0:
        raise ValidationError("No file uploaded")
    if size > settings.max_upload_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File exceeds the {settings.max_upload_bytes} byte upload limit",
        )

    file.file.seek(0)
    return respond_string(
        lambda: storage.insert_from_stream(
            file.file, bucket, file.filename or "", file.content_type
        )
    )
