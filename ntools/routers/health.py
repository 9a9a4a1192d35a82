from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from server.config import Settings, get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    """Liveness plus which backing providers are configured.

    `ok` stays true when a provider is missing: the Document, String and
    e-mail validation endpoints still work without one.
    """
    return {
        "ok": True,
        "service": "ntools",
        "version": settings.app_version,
        "providers": {
            "storage": settings.storage_configured,
            "mail": settings.mail_configured,
        },
    }
