"""Cliente HTTP base para conectores da camada API.

Sem retry: cada POST é executado uma única vez e o corpo da resposta
é devolvido como texto, sem interpretação.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from app.protocols.models import ProviderHttpResponse

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP.

    timeout_seconds=None desativa o timeout do httpx; o limite passa a
    ser o tempo de vida da requisição no ambiente de hospedagem.
    """

    timeout_seconds: float | None = None
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpClient:
    """Cliente HTTP simples para chamadas externas."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def post(
        self,
        url: str,
        payload: Mapping[str, Any],
        headers: Mapping[str, str] | None = None,
    ) -> ProviderHttpResponse:
        """POST único; lê o corpo inteiro como texto.

        Raises:
            httpx.HTTPError: Falhas de rede/transporte (propagadas)
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        async with httpx.AsyncClient(
            verify=self._config.verify_ssl,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            response = await client.post(
                url,
                json=dict(payload),
                headers=merged_headers,
                timeout=self._config.timeout_seconds,
            )
            text = response.text
        logger.debug(
            "http_post_completed",
            extra={"status_code": response.status_code, "body_length": len(text)},
        )
        return ProviderHttpResponse(status_code=response.status_code, text=text)
