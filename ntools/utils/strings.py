"""String helpers behind the String controller."""

from __future__ import annotations

import re
import unicodedata
import uuid

_BASE62 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def only_numbers(text: str) -> str:
    """Keep only the ASCII digits of `text`."""
    if not text:
        return ""
    return re.sub(r"[^0-9]", "", text)


def generate_slug(text: str) -> str:
    """Turn free text into a lowercase, hyphen-separated ASCII slug.

    >>> generate_slug("  Olá, Mundo! ")
    'ola-mundo'
    """
    if not text:
        return ""
    # Strip accents: decompose, then drop combining marks
    normalized = unicodedata.normalize("NFKD", text)
    ascii_text = "".join(c for c in normalized if not unicodedata.combining(c))
    ascii_text = ascii_text.encode("ascii", "ignore").decode("ascii").lower()
    return re.sub(r"[^a-z0-9]+", "-", ascii_text).strip("-")


def generate_short_unique_string() -> str:
    """Random UUID4 rendered in base62 (at most 22 URL-safe characters)."""
    number = uuid.uuid4().int
    chars = []
    while number:
        number, rem = divmod(number, 62)
        chars.append(_BASE62[rem])
    return "".join(reversed(chars)) or "0"
