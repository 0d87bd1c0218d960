"""Contratos canônicos do proxy de email.

EmailRequest e KeplarsEmailPayload são TypedDicts `total=False`:
chaves ausentes são omitidas, nunca serializadas como null.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, TypedDict

DeliveryType = Literal["instant", "queue"]
DeliveryLabel = Literal["instant", "queue", "scheduled"]

EmailRequest = TypedDict(
    "EmailRequest",
    {
        "to": list[str],
        "from": str,
        "fromName": str,
        "subject": str,
        "body": str,
        "html": str,
        "is_html": bool,
        "template_id": str,
        "params": dict[str, str | int | float],
        "delivery_type": DeliveryType,
        "scheduled_at": str,
        "timezone": str,
    },
    total=False,
)

KeplarsEmailPayload = TypedDict(
    "KeplarsEmailPayload",
    {
        "to": list[str],
        "from": str,
        "fromName": str,
        "subject": str,
        "body": str,
        "html": str,
        "is_html": bool,
        "template_id": str,
        "params": dict[str, str | int | float],
        "scheduled_at": str,
        "timezone": str,
    },
    total=False,
)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Resultado da validação de um EmailRequest."""

    valid: bool
    error: str | None = None

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(valid=True)

    @classmethod
    def fail(cls, error: str) -> ValidationResult:
        return cls(valid=False, error=error)


@dataclass(frozen=True, slots=True)
class EmailDispatch:
    """Decisão de roteamento + payload outbound para o provedor."""

    endpoint_path: str
    delivery_label: DeliveryLabel
    payload: KeplarsEmailPayload


@dataclass(frozen=True, slots=True)
class ProviderHttpResponse:
    """Resposta HTTP crua do provedor (status + corpo como texto)."""

    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass(frozen=True, slots=True)
class ProviderResponse:
    """Visão tipada do JSON do provedor (success, data, error, code)."""

    success: bool
    message_id: str | None = None
    message: str | None = None
    error: str | None = None
    code: Any = None
    has_code: bool = False

    @classmethod
    def from_payload(cls, payload: Any) -> ProviderResponse:
        """Extrai campos conhecidos; tolera JSON que não seja objeto."""
        if not isinstance(payload, dict):
            return cls(success=False)
        data = payload.get("data")
        data = data if isinstance(data, dict) else {}
        error = payload.get("error")
        return cls(
            success=payload.get("success") is True,
            message_id=data.get("id"),
            message=data.get("message"),
            error=error if isinstance(error, str) and error else None,
            code=payload.get("code"),
            has_code="code" in payload,
        )
