"""Validators para requisições de envio de email (provedor Keplars).

Uso:
    from api.validators.email import validate_email_request

    result = validate_email_request(body)
    if not result.valid:
        ...  # result.error traz a mensagem para o chamador
"""

from api.validators.email.fields import (
    DELIVERY_TYPES,
    is_present,
    is_valid_email_address,
    is_valid_scheduled_at,
)
from api.validators.email.request import validate_email_request

__all__ = [
    "DELIVERY_TYPES",
    "is_present",
    "is_valid_email_address",
    "is_valid_scheduled_at",
    "validate_email_request",
]
