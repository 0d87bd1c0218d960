"""Connector Keplars — adapter de borda para a API de email transacional.

Responsabilidades:
- HTTP client (POST JSON com Bearer, corpo lido como texto)
- Decodificação e classificação da resposta do provedor
"""

from api.connectors.keplars.http_base import HttpClient, HttpClientConfig
from api.connectors.keplars.http_client import (
    KeplarsHttpClient,
    create_keplars_http_client,
)
from api.connectors.keplars.responses import (
    DEFAULT_FAILURE_MESSAGE,
    INVALID_RESPONSE_MESSAGE,
    MAX_DETAILS_LENGTH,
    interpret_provider_response,
    parse_provider_body,
)

__all__ = [
    "DEFAULT_FAILURE_MESSAGE",
    "INVALID_RESPONSE_MESSAGE",
    "MAX_DETAILS_LENGTH",
    "HttpClient",
    "HttpClientConfig",
    "KeplarsHttpClient",
    "create_keplars_http_client",
    "interpret_provider_response",
    "parse_provider_body",
]
