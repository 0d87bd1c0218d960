"""Endpoint de envio de email (proxy para o provedor Keplars).

Endpoint único:
- OPTIONS /: preflight CORS (204, sem corpo)
- POST /: valida, encaminha ao provedor e repassa a resposta
- demais métodos (qualquer verbo): 405

Todas as respostas carregam headers CORS permissivos. Cada falha vira
exatamente uma resposta JSON `{"success": false, "error": ...}`.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from app.bootstrap.dependencies import get_send_email_use_case
from app.observability import (
    get_correlation_id,
    record_outcome,
    reset_correlation_id,
    set_correlation_id,
)
from config.logging import log_fallback
from config.settings import get_keplars_settings
from utils.errors import (
    CallerInputError,
    EmailProxyError,
    ErrorResponse,
    ServerConfigError,
)
from utils.json_strict import loads_strict

logger = logging.getLogger(__name__)

router = APIRouter()

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed. Use POST."
MISSING_API_KEY_MESSAGE = "Server configuration error. API key not configured."
INVALID_JSON_MESSAGE = "Invalid JSON body."
UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


async def send_email(request: Request) -> Response:
    """Recebe um EmailRequest e o encaminha ao provedor.

    Returns:
        204 (preflight), 405, 400 (validação), 500 (config, resposta
        inválida do provedor ou erro inesperado), status do provedor
        em falha reportada, ou 200 com o JSON do provedor inalterado.
    """
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        if request.method == "OPTIONS":
            return Response(status_code=status.HTTP_204_NO_CONTENT, headers=CORS_HEADERS)

        if request.method != "POST":
            logger.warning("email_method_not_allowed", extra={"method": request.method})
            return _json_response(
                ErrorResponse(error=METHOD_NOT_ALLOWED_MESSAGE),
                status.HTTP_405_METHOD_NOT_ALLOWED,
            )

        return await _process_send(request)
    finally:
        reset_correlation_id(token)


# Sem lista de métodos: a rota casa com qualquer verbo e o 405 sai daqui.
router.add_route("/", send_email, include_in_schema=False)


async def _process_send(request: Request) -> Response:
    try:
        settings = get_keplars_settings()
        if settings.api_key is None:
            logger.error("keplars_api_key_missing", extra={"component": "email_route"})
            raise ServerConfigError(MISSING_API_KEY_MESSAGE)

        body = await _read_json_body(request)
        data = await get_send_email_use_case().execute(body, settings.api_key)
        response = JSONResponse(
            content=data, status_code=status.HTTP_200_OK, headers=CORS_HEADERS
        )

    except EmailProxyError as exc:
        record_outcome("email_proxy", exc.outcome, exc.status_code, get_correlation_id())
        if isinstance(exc, CallerInputError):
            logger.info("email_request_rejected", extra={"error": exc.message})
        return _json_response(exc.to_response(), exc.status_code)

    except Exception as exc:
        logger.exception("email_request_failed", extra={"error_type": type(exc).__name__})
        message = str(exc)
        if not message:
            log_fallback(logger, "unexpected_error", reason="empty_exception_message")
        record_outcome(
            "email_proxy", "unexpected_error", status.HTTP_500_INTERNAL_SERVER_ERROR,
            get_correlation_id(),
        )
        return _json_response(
            ErrorResponse(error=message or UNKNOWN_ERROR_MESSAGE),
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    record_outcome("email_proxy", "sent", status.HTTP_200_OK, get_correlation_id())
    return response


async def _read_json_body(request: Request) -> Any:
    """Decodifica o corpo JSON do chamador (corpo vazio = objeto vazio).

    Raises:
        CallerInputError: Se o corpo não for JSON válido
    """
    raw_body = await request.body()
    if not raw_body.strip():
        return {}
    try:
        return loads_strict(raw_body)
    except ValueError as exc:
        raise CallerInputError(INVALID_JSON_MESSAGE) from exc


def _json_response(error: ErrorResponse, status_code: int) -> JSONResponse:
    return JSONResponse(
        content=error.to_body(),
        status_code=status_code,
        headers=CORS_HEADERS,
    )
