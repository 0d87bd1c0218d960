"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .models import ProviderHttpResponse


class KeplarsHttpClientProtocol(Protocol):
    """Contrato mínimo para cliente HTTP do provedor Keplars."""

    async def post_json(
        self,
        url: str,
        api_key: str,
        payload: Mapping[str, Any],
    ) -> ProviderHttpResponse: ...
