from __future__ import annotations

from typing import Optional

from .base import BaseClient


class DocumentClient(BaseClient):
    """Client for the Document capability (CPF/CNPJ validation)."""

    def validate_tax_id(self, tax_id: str, *, timeout: Optional[float] = None) -> bool:
        """Return True when the remote service accepts `tax_id` as a CPF or CNPJ.

        An invalid document comes back as `success == false` and is therefore
        raised as `RemoteOperationError`, not returned as False.
        """
        return self._get_bool(
            self.url("Document", "validarCpfOuCnpj", tax_id), timeout
        )
