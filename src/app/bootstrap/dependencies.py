"""Factories de dependências — criação de implementações concretas.

Centraliza o wiring do use case de envio com validator, builder e
sender do provedor Keplars.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from api.connectors.keplars.http_client import create_keplars_http_client
from app.bootstrap.keplars_adapters import (
    KeplarsDispatchBuilder,
    KeplarsEmailSender,
    KeplarsEmailValidator,
)
from app.use_cases.email import SendEmailUseCase
from config.settings import get_keplars_settings

logger = logging.getLogger(__name__)


def create_email_sender() -> KeplarsEmailSender:
    """Cria sender Keplars com cliente HTTP configurado pelo ambiente."""
    settings = get_keplars_settings()
    return KeplarsEmailSender(
        http_client=create_keplars_http_client(settings),
        settings=settings,
    )


@lru_cache(maxsize=1)
def get_send_email_use_case() -> SendEmailUseCase:
    """Obtém use case de envio de email (singleton, sem estado mutável)."""
    logger.debug("send_email_use_case_created", extra={"component": "bootstrap"})
    return SendEmailUseCase(
        validator=KeplarsEmailValidator(),
        builder=KeplarsDispatchBuilder(),
        sender=create_email_sender(),
    )
