"""Protocolo de validação de requisições de envio de email."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .models import ValidationResult


class EmailRequestValidatorProtocol(Protocol):
    """Contrato mínimo para validação de EmailRequest (puro, sem IO)."""

    def validate(self, body: Mapping[str, Any]) -> ValidationResult: ...
