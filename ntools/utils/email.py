from __future__ import annotations

import re
from typing import Optional

# local@domain.tld, no whitespace, a single "@", no empty labels in the domain
_EMAIL_RE = re.compile(
    r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+@[A-Za-z0-9-]+(\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}$"
)


def is_valid_email(value: Optional[str]) -> bool:
    """Syntactic e-mail check; does not look up the domain."""
    if not value or len(value) > 254:
        return False
    value = value.strip()
    if ".." in value or value.startswith(".") or value.split("@")[0].endswith("."):
        return False
    return bool(_EMAIL_RE.match(value))
