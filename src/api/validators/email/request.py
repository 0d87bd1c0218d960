"""Validação de requisições de envio de email.

Regras avaliadas em ordem; a primeira falha vence. Função pura,
sem efeitos colaterais.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.validators.email.fields import (
    DELIVERY_TYPES,
    is_present,
    is_valid_email_address,
    is_valid_scheduled_at,
)
from app.protocols.models import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Mapping

MISSING_RECIPIENTS = (
    'Missing or invalid "to" field. Must be a non-empty array of email addresses.'
)
TEMPLATE_CONTENT_CONFLICT = (
    "When using template_id, do not include subject, body, or html fields."
)
MISSING_SUBJECT = 'Missing "subject" field. Required when not using template_id.'
MISSING_CONTENT = 'Missing email content. Provide either "body" or "html" field.'
INVALID_DELIVERY_TYPE = 'Invalid delivery_type. Must be either "instant" or "queue".'
DELIVERY_SCHEDULE_CONFLICT = (
    "Cannot use both scheduled_at and delivery_type. "
    "Use scheduled_at for scheduled emails, or delivery_type for instant/queue delivery."
)
INVALID_SCHEDULED_AT = (
    "Invalid scheduled_at format. "
    "Use ISO 8601 (2026-01-20T10:00:00) or simplified (2026-01-20_10:00:00)."
)


def validate_email_request(body: Mapping[str, Any]) -> ValidationResult:
    """Valida estrutura e semântica de um EmailRequest.

    Args:
        body: Corpo JSON decodificado (qualquer objeto não-dict é
            tratado como objeto vazio)

    Returns:
        ValidationResult.ok() ou ValidationResult.fail(<mensagem>)
    """
    if not isinstance(body, dict):
        body = {}

    error = (
        _check_recipients(body.get("to"))
        or _check_content(body)
        or _check_delivery(body.get("delivery_type"), body.get("scheduled_at"))
    )
    if error:
        return ValidationResult.fail(error)
    return ValidationResult.ok()


def _check_recipients(recipients: Any) -> str | None:
    if not isinstance(recipients, list) or not recipients:
        return MISSING_RECIPIENTS

    for address in recipients:
        if not is_valid_email_address(address):
            return f"Invalid email address: {address}"
    return None


def _check_content(body: Mapping[str, Any]) -> str | None:
    has_body = is_present(body.get("body"))
    has_html = is_present(body.get("html"))

    if is_present(body.get("template_id")):
        if is_present(body.get("subject")) or has_body or has_html:
            return TEMPLATE_CONTENT_CONFLICT
        return None

    if not is_present(body.get("subject")):
        return MISSING_SUBJECT
    if not has_body and not has_html:
        return MISSING_CONTENT
    return None


def _check_delivery(delivery_type: Any, scheduled_at: Any) -> str | None:
    if is_present(delivery_type) and delivery_type not in DELIVERY_TYPES:
        return INVALID_DELIVERY_TYPE

    if is_present(scheduled_at) and is_present(delivery_type):
        return DELIVERY_SCHEDULE_CONFLICT

    if is_present(scheduled_at) and not is_valid_scheduled_at(scheduled_at):
        return INVALID_SCHEDULED_AT
    return None
