from __future__ import annotations

from typing import Dict, Optional

import httpx

from ntools.config import ClientSettings

from .base import BaseClient
from .document import DocumentClient
from .file import FileClient
from .mail import MailClient
from .string import StringClient


class ClientRegistry:
    """Registry for ntools clients by capability name.

    Lets callers resolve a client from configuration (e.g. "mail") and plug
    in extra capabilities without changing call sites.
    """

    _registry: Dict[str, type[BaseClient]] = {
        "document": DocumentClient,
        "file": FileClient,
        "mail": MailClient,
        "string": StringClient,
    }

    @classmethod
    def get(
        cls,
        name: str,
        settings: Optional[ClientSettings] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> BaseClient:
        client_cls = cls._registry.get(name)
        if client_cls is None:
            raise KeyError(f"Unknown ntools client: {name}")
        return client_cls(settings, http_client)

    @classmethod
    def register(cls, name: str, client_cls: type[BaseClient]) -> None:
        cls._registry[name] = client_cls
