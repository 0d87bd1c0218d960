"""Protocolos e contratos do core da aplicação."""

from .http_client import KeplarsHttpClientProtocol
from .models import (
    DeliveryLabel,
    DeliveryType,
    EmailDispatch,
    EmailRequest,
    KeplarsEmailPayload,
    ProviderHttpResponse,
    ProviderResponse,
    ValidationResult,
)
from .outbound_sender import EmailSenderProtocol
from .payload_builder import EmailDispatchBuilderProtocol
from .validator import EmailRequestValidatorProtocol

__all__ = [
    "DeliveryLabel",
    "DeliveryType",
    "EmailDispatch",
    "EmailDispatchBuilderProtocol",
    "EmailRequest",
    "EmailRequestValidatorProtocol",
    "EmailSenderProtocol",
    "KeplarsEmailPayload",
    "KeplarsHttpClientProtocol",
    "ProviderHttpResponse",
    "ProviderResponse",
    "ValidationResult",
]
