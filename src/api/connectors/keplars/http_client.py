"""Cliente HTTP especializado para a API Keplars.

Estende HttpClient genérico com o que é específico do provedor:
- Header Authorization Bearer com a credencial configurada
- Logging estruturado sem credencial nem conteúdo do email
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.keplars.http_base import HttpClient, HttpClientConfig

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

    from app.protocols.models import ProviderHttpResponse
    from config.settings import KeplarsSettings

logger: logging.Logger = logging.getLogger(__name__)


class KeplarsHttpClient(HttpClient):
    """Cliente HTTP para os endpoints de envio da Keplars."""

    async def post_json(
        self,
        url: str,
        api_key: str,
        payload: Mapping[str, Any],
    ) -> ProviderHttpResponse:
        """Envia payload JSON ao endpoint do provedor.

        Args:
            url: URL completa (ex: .../send-email/queue)
            api_key: Credencial Bearer
            payload: KeplarsEmailPayload

        Returns:
            Status HTTP e corpo bruto (texto) da resposta

        Raises:
            ValueError: Se api_key vazia
            httpx.HTTPError: Falhas de rede/transporte
        """
        if not api_key or not api_key.strip():
            raise ValueError("api_key é obrigatória para envio de emails")

        response = await self.post(url, payload, headers=_build_headers(api_key))
        logger.info(
            "keplars_response_received",
            extra={"endpoint": url, "status_code": response.status_code},
        )
        return response


def _build_headers(api_key: str) -> dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }


def create_keplars_http_client(
    settings: KeplarsSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> KeplarsHttpClient:
    """Factory para criar cliente Keplars com config do ambiente.

    Args:
        settings: KeplarsSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx alternativo (testes)
    """
    from config.settings import get_keplars_settings

    keplars = settings or get_keplars_settings()
    config = HttpClientConfig(timeout_seconds=keplars.request_timeout_seconds)
    return KeplarsHttpClient(config=config, transport=transport)
