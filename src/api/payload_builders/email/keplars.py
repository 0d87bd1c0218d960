"""Roteamento e payload outbound para o provedor Keplars.

Recebe um EmailRequest já validado e decide endpoint + classificação
de entrega. Campos opcionais entram no payload apenas quando presentes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.validators.email.fields import is_present
from app.protocols.models import EmailDispatch, KeplarsEmailPayload
from config.settings.keplars import (
    INSTANT_SEND_PATH,
    QUEUE_SEND_PATH,
    SCHEDULE_SEND_PATH,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.models import DeliveryLabel

DEFAULT_DELIVERY_TYPE = "queue"


def resolve_route(body: Mapping[str, Any]) -> tuple[str, DeliveryLabel]:
    """Escolhe (endpoint_path, delivery_label) para a requisição."""
    if is_present(body.get("scheduled_at")):
        return SCHEDULE_SEND_PATH, "scheduled"

    delivery_label = body.get("delivery_type") or DEFAULT_DELIVERY_TYPE
    if delivery_label == "instant":
        return INSTANT_SEND_PATH, "instant"
    return QUEUE_SEND_PATH, "queue"


def build_payload(body: Mapping[str, Any]) -> KeplarsEmailPayload:
    """Constrói o payload Keplars (sem delivery_type).

    Args:
        body: EmailRequest validado

    Returns:
        Payload com apenas as chaves presentes
    """
    payload: KeplarsEmailPayload = {"to": body["to"]}

    if is_present(body.get("from")):
        payload["from"] = body["from"]
    if is_present(body.get("fromName")):
        payload["fromName"] = body["fromName"]

    if is_present(body.get("template_id")):
        payload["template_id"] = body["template_id"]
        if is_present(body.get("params")):
            payload["params"] = body["params"]
    else:
        payload["subject"] = body["subject"]
        if is_present(body.get("html")):
            payload["html"] = body["html"]
            payload["is_html"] = True
        else:
            payload["body"] = body["body"]
            payload["is_html"] = is_present(body.get("is_html"))

    if is_present(body.get("scheduled_at")):
        payload["scheduled_at"] = body["scheduled_at"]
        if is_present(body.get("timezone")):
            payload["timezone"] = body["timezone"]

    return payload


def build_email_dispatch(body: Mapping[str, Any]) -> EmailDispatch:
    """Roteia e constrói o payload completo para o provedor."""
    endpoint_path, delivery_label = resolve_route(body)
    return EmailDispatch(
        endpoint_path=endpoint_path,
        delivery_label=delivery_label,
        payload=build_payload(body),
    )
