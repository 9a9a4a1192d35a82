from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import Response

from ntools.routers.envelope import respond_status
from ntools.types import StatusResult
from ntools.utils import validate_cpf_or_cnpj

router = APIRouter(prefix="/Document", tags=["document"])


# `path` so formatted CNPJs ("12.345.678/0001-95") still match
@router.get("/validarCpfOuCnpj/{tax_id:path}", responses={200: {"model": StatusResult}})
def validate_tax_id(tax_id: str) -> Response:
    """Validate a CPF or CNPJ; `success` carries the validity."""
    return respond_status(lambda: validate_cpf_or_cnpj(tax_id), "Invalid CPF or CNPJ")
