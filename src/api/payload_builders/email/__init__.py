"""Payload builders para Email (provedor Keplars).

Responsabilidades:
- Escolher endpoint (instant, queue, schedule) e classificação de entrega
- Construir o payload outbound omitindo campos ausentes
"""

from api.payload_builders.email.keplars import (
    DEFAULT_DELIVERY_TYPE,
    build_email_dispatch,
    build_payload,
    resolve_route,
)

__all__ = [
    "DEFAULT_DELIVERY_TYPE",
    "build_email_dispatch",
    "build_payload",
    "resolve_route",
]
