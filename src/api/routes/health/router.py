"""Endpoints de health check para Cloud Run."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_keplars_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service="keplars-email-proxy",
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness probe: pronto apenas com a credencial do provedor configurada."""
    settings = get_keplars_settings()
    configured = settings.is_configured
    if not configured:
        logger.warning("readiness_keplars_not_configured")

    payload = {
        "status": "ready" if configured else "not_ready",
        "checks": {
            "keplars": {
                "status": "ok" if configured else "failed",
                "error": None if configured else "not_configured",
            },
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if configured else 503)
