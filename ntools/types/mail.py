from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class MailRecipient(BaseModel):
    """A mailbox: address plus optional display name."""

    email: str
    name: Optional[str] = None


class MailMessage(BaseModel):
    """Transactional e-mail passed from caller to the mail provider.

    The JSON shape matches the MailerSend `email` endpoint so the server can
    forward it as-is. `from` is a Python keyword, hence the `from_` attribute
    with a `from` alias; serialize with `by_alias=True`.

    Example:
        >>> from ntools.types import MailMessage, MailRecipient
        >>> MailMessage(
        ...     from_=MailRecipient(email="no-reply@example.com", name="Example"),
        ...     to=[MailRecipient(email="ana@example.com", name="Ana")],
        ...     subject="Welcome",
        ...     text="Hello Ana",
        ... )
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    from_: MailRecipient = Field(alias="from")
    to: List[MailRecipient] = Field(min_length=1)
    subject: Optional[str] = None
    text: Optional[str] = None
    html: Optional[str] = None

    @model_validator(mode="after")
    def _require_body(self) -> "MailMessage":
        if self.text is None and self.html is None:
            raise ValueError("Either text or html must be provided")
        return self


class MailerErrorInfo(BaseModel):
    """Error body returned by MailerSend on a rejected request.

    Example body::

        {"message": "Validation failed", "errors": {"to": ["The to field is required"]}}
    """

    message: Optional[str] = None
    errors: Dict[str, List[str]] = Field(default_factory=dict)
