"""Use case de envio de email via provedor Keplars."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from app.observability import get_correlation_id, record_latency
from utils.errors import CallerInputError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.outbound_sender import EmailSenderProtocol
    from app.protocols.payload_builder import EmailDispatchBuilderProtocol
    from app.protocols.validator import EmailRequestValidatorProtocol

logger = logging.getLogger(__name__)


class SendEmailUseCase:
    """Orquestra validação, roteamento/build e envio outbound.

    Etapas estritamente sequenciais; a primeira falha encerra a
    execução com um erro de utils.errors (nenhum retry).
    """

    def __init__(
        self,
        validator: EmailRequestValidatorProtocol,
        builder: EmailDispatchBuilderProtocol,
        sender: EmailSenderProtocol,
    ) -> None:
        self._validator = validator
        self._builder = builder
        self._sender = sender

    async def execute(self, body: Mapping[str, Any], api_key: str) -> Any:
        """Valida, constrói e encaminha a requisição.

        Args:
            body: EmailRequest decodificado do JSON do chamador
            api_key: Credencial do provedor (já verificada como presente)

        Returns:
            JSON de sucesso do provedor, inalterado

        Raises:
            CallerInputError: Requisição inválida
            UpstreamParseError: Resposta do provedor não-JSON
            UpstreamReportedError: Provedor respondeu status de falha
        """
        validation = self._validator.validate(body)
        if not validation.valid:
            raise CallerInputError(validation.error or "Invalid request.")

        dispatch = self._builder.build_dispatch(body)
        logger.info(
            "email_dispatching",
            extra={
                "delivery_type": dispatch.delivery_label,
                "endpoint_path": dispatch.endpoint_path,
                "recipient_count": len(dispatch.payload["to"]),
                "template": "template_id" in dispatch.payload,
            },
        )

        started_at = time.perf_counter()
        try:
            return await self._sender.send(dispatch, api_key)
        finally:
            record_latency(
                "keplars",
                "send_email",
                (time.perf_counter() - started_at) * 1000,
                get_correlation_id(),
            )
