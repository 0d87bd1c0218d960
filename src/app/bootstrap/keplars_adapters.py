"""Adapters concretos para o provedor Keplars (wiring em app/bootstrap).

Este módulo é o único autorizado a acoplar app <-> api.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.keplars.responses import interpret_provider_response
from api.payload_builders.email.keplars import build_email_dispatch
from api.validators.email.request import validate_email_request
from app.protocols.outbound_sender import EmailSenderProtocol
from app.protocols.payload_builder import EmailDispatchBuilderProtocol
from app.protocols.validator import EmailRequestValidatorProtocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.http_client import KeplarsHttpClientProtocol
    from app.protocols.models import EmailDispatch, ValidationResult
    from config.settings import KeplarsSettings

logger = logging.getLogger(__name__)


class KeplarsEmailValidator(EmailRequestValidatorProtocol):
    """Validador de EmailRequest com as regras do provedor Keplars."""

    def validate(self, body: Mapping[str, Any]) -> ValidationResult:
        return validate_email_request(body)


class KeplarsDispatchBuilder(EmailDispatchBuilderProtocol):
    """Roteamento (instant/queue/schedule) + payload Keplars."""

    def build_dispatch(self, body: Mapping[str, Any]) -> EmailDispatch:
        return build_email_dispatch(body)


class KeplarsEmailSender(EmailSenderProtocol):
    """Sender outbound: POST, leitura do corpo como texto, depois parse."""

    def __init__(
        self,
        http_client: KeplarsHttpClientProtocol,
        settings: KeplarsSettings,
    ) -> None:
        self._http_client = http_client
        self._settings = settings

    async def send(self, dispatch: EmailDispatch, api_key: str) -> Any:
        url = self._settings.get_endpoint(dispatch.endpoint_path)
        response = await self._http_client.post_json(url, api_key, dispatch.payload)
        return interpret_provider_response(response)
