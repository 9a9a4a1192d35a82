"""Router aggregation."""

from __future__ import annotations

from fastapi import APIRouter

from ntools.routers import document as document_router_module
from ntools.routers import file as file_router_module
from ntools.routers import health as health_router_module
from ntools.routers import mail as mail_router_module
from ntools.routers import string as string_router_module

# Capability routes live at the root (/Document, /File, /Mail, /String)
api_router = APIRouter()

api_router.include_router(health_router_module.router)
api_router.include_router(document_router_module.router)
api_router.include_router(file_router_module.router)
api_router.include_router(mail_router_module.router)
api_router.include_router(string_router_module.router)

__all__ = ["api_router"]
