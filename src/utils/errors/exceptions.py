"""Taxonomia de erros do proxy de email.

Cada erro conhece o status HTTP devolvido ao chamador e o corpo JSON
correspondente. Todos são terminais: nenhum é retentado internamente.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Corpo JSON de erro devolvido ao chamador."""

    success: bool = False
    error: str
    code: Any = None
    details: str | None = None

    def to_body(self) -> dict[str, Any]:
        """Serializa apenas os campos informados (`code: null` explícito é mantido)."""
        return self.model_dump(include={"success", "error"} | self.model_fields_set)


class EmailProxyError(Exception):
    """Base dos erros mapeados para uma resposta JSON."""

    status_code: int = 500
    outcome: str = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(error=self.message)


class CallerInputError(EmailProxyError):
    """Requisição malformada/inválida (corrigível pelo chamador)."""

    status_code = 400
    outcome = "caller_input_error"


class ServerConfigError(EmailProxyError):
    """Credencial do provedor ausente (corrigível apenas pelo operador)."""

    status_code = 500
    outcome = "server_config_error"


class UpstreamParseError(EmailProxyError):
    """Resposta do provedor não é JSON válido."""

    status_code = 500
    outcome = "upstream_parse_error"

    def __init__(self, message: str, details: str) -> None:
        super().__init__(message)
        self.details = details

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(error=self.message, details=self.details)


class UpstreamReportedError(EmailProxyError):
    """Provedor respondeu status de falha; status e code são repassados."""

    outcome = "upstream_reported_error"

    def __init__(
        self,
        message: str,
        status_code: int,
        code: Any = None,
        *,
        has_code: bool | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.has_code = code is not None if has_code is None else has_code

    def to_response(self) -> ErrorResponse:
        if not self.has_code:
            return ErrorResponse(error=self.message)
        return ErrorResponse(error=self.message, code=self.code)
