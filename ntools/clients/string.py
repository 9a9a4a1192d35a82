from __future__ import annotations

from typing import Optional

from .base import BaseClient


class StringClient(BaseClient):
    """Client for the String utilities capability."""

    def generate_slug(self, text: str, *, timeout: Optional[float] = None) -> str:
        return self._get_string(self.url("String", "generateSlug", text), timeout)

    def only_digits(self, text: str, *, timeout: Optional[float] = None) -> str:
        return self._get_string(self.url("String", "onlyNumbers", text), timeout)

    def generate_short_unique_string(self, *, timeout: Optional[float] = None) -> str:
        return self._get_string(
            self.url("String", "generateShortUniqueString"), timeout
        )
