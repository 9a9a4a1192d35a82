from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class StatusResult(BaseModel):
    """Envelope returned by boolean operations (validation, send confirmation).

    The operation's own boolean result *is* `success`; there is no separate
    payload field. A `success` of false therefore means either "the remote
    call failed" or "the answer was no", and clients treat both as an error.

    Attributes:
        success: Outcome of the operation.
        message: Human-readable reason, expected when `success` is false.

    Example:
        >>> from ntools.types import StatusResult
        >>> StatusResult(success=True)
    """

    model_config = ConfigDict(populate_by_name=True)

    # Older deployments serialize the Portuguese names
    success: bool = Field(validation_alias=AliasChoices("success", "sucesso"))
    message: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("message", "mensagem")
    )


class StringResult(StatusResult):
    """Envelope returned by string-producing operations.

    Attributes:
        value: Produced string when `success` is true. Absent or null decodes
            to the empty string on the client side.

    Example:
        >>> from ntools.types import StringResult
        >>> StringResult(success=True, value="my-slug")
    """

    value: Optional[str] = None
