"""Interpretação da resposta do provedor Keplars.

Duas etapas: o corpo já chega como texto (http_client) e só então é
decodificado. Corpo não-JSON vira UpstreamParseError com um trecho
limitado do texto bruto para diagnóstico.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.protocols.models import ProviderResponse
from config.logging import log_fallback
from utils.errors import UpstreamParseError, UpstreamReportedError
from utils.json_strict import loads_strict

if TYPE_CHECKING:
    from app.protocols.models import ProviderHttpResponse

logger = logging.getLogger(__name__)

MAX_DETAILS_LENGTH = 200
INVALID_RESPONSE_MESSAGE = "Invalid response from email service"
DEFAULT_FAILURE_MESSAGE = "Failed to send email"


def parse_provider_body(text: str) -> Any:
    """Decodifica o texto da resposta como JSON.

    Raises:
        UpstreamParseError: Se o texto não for JSON válido
    """
    try:
        return loads_strict(text)
    except ValueError as exc:
        logger.error(
            "keplars_response_parse_failed",
            extra={"error": str(exc), "body_length": len(text)},
        )
        raise UpstreamParseError(
            INVALID_RESPONSE_MESSAGE,
            details=text[:MAX_DETAILS_LENGTH],
        ) from exc


def interpret_provider_response(response: ProviderHttpResponse) -> Any:
    """Decodifica e classifica a resposta do provedor.

    Returns:
        JSON do provedor, inalterado, quando o status indica sucesso

    Raises:
        UpstreamParseError: Corpo não-JSON (qualquer status)
        UpstreamReportedError: Status de falha (status/error/code repassados)
    """
    data = parse_provider_body(response.text)
    provider = ProviderResponse.from_payload(data)

    if not response.ok:
        logger.error(
            "keplars_api_error",
            extra={
                "status_code": response.status_code,
                "provider_error": provider.error,
                "provider_code": provider.code,
            },
        )
        if provider.error is None:
            log_fallback(logger, "provider_error", reason="missing_error_field")
        raise UpstreamReportedError(
            provider.error or DEFAULT_FAILURE_MESSAGE,
            status_code=response.status_code,
            code=provider.code,
            has_code=provider.has_code,
        )

    logger.info("keplars_email_accepted", extra={"message_id": provider.message_id})
    return data
