"""Protocolo de roteamento + construção de payload outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .models import EmailDispatch


class EmailDispatchBuilderProtocol(Protocol):
    """Contrato mínimo: EmailRequest validado -> EmailDispatch (puro)."""

    def build_dispatch(self, body: Mapping[str, Any]) -> EmailDispatch: ...
