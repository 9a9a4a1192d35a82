from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from ntools.routers.envelope import respond_status
from ntools.services import get_mail_service
from ntools.types import MailMessage, MailSender, StatusResult
from ntools.utils import is_valid_email

router = APIRouter(prefix="/Mail", tags=["mail"])


@router.post("/sendmail", responses={200: {"model": StatusResult}})
@router.post("/sendMail", include_in_schema=False)
def send_mail(
    message: MailMessage,
    mailer: MailSender = Depends(get_mail_service),
) -> Response:
    """Forward a message to the mail provider. Never retried."""
    return respond_status(lambda: mailer.send_mail(message), "Mail was not accepted")


@router.get("/isValidEmail/{email:path}", responses={200: {"model": StatusResult}})
def validate_email(email: str) -> Response:
    return respond_status(lambda: is_valid_email(email), "Invalid e-mail address")
