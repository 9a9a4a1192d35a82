"""Pure backing operations for the Document, Mail and String controllers."""

from .document import validate_cnpj, validate_cpf, validate_cpf_or_cnpj
from .email import is_valid_email
from .strings import generate_short_unique_string, generate_slug, only_numbers

__all__ = [
    "validate_cpf",
    "validate_cnpj",
    "validate_cpf_or_cnpj",
    "is_valid_email",
    "generate_slug",
    "only_numbers",
    "generate_short_unique_string",
]
