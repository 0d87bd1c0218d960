"""Protocolos de envio outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import EmailDispatch


class EmailSenderProtocol(Protocol):
    """Contrato mínimo para encaminhar um EmailDispatch ao provedor.

    Retorna o JSON de sucesso do provedor, inalterado. Falhas do
    provedor são levantadas como erros de utils.errors.
    """

    async def send(self, dispatch: EmailDispatch, api_key: str) -> Any: ...
