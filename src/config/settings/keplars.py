"""Settings do provedor Keplars (email transacional).

A credencial é lida uma única vez do ambiente e mantida imutável.
Ausência é representada por None (nunca string vazia), para que o
handler diferencie "não configurado" de qualquer outro estado.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

KEPLARS_BASE_URL: str = "https://api.keplars.com/api/v1"

INSTANT_SEND_PATH: str = "/send-email/instant"
QUEUE_SEND_PATH: str = "/send-email/queue"
SCHEDULE_SEND_PATH: str = "/send-email/schedule"


@dataclass(frozen=True)
class KeplarsSettings:
    """Configurações do provedor Keplars.

    Attributes:
        api_key: Credencial Bearer do provedor (None = não configurada)
        api_base_url: URL base da API (sem barra final)
        request_timeout_seconds: Timeout do POST outbound (None = sem timeout)
    """

    api_key: str | None = None
    api_base_url: str = KEPLARS_BASE_URL
    request_timeout_seconds: float | None = None

    @property
    def is_configured(self) -> bool:
        """True quando a credencial está disponível."""
        return self.api_key is not None

    def get_endpoint(self, path: str) -> str:
        """Retorna URL completa para um sub-path de envio.

        Args:
            path: Sub-path (ex: /send-email/queue)

        Returns:
            URL no formato: https://api.keplars.com/api/v1/send-email/queue
        """
        return f"{self.api_base_url.rstrip('/')}{path}"

    def validate(self) -> list[str]:
        """Valida configurações estruturais do Keplars.

        A credencial fica de fora: sua ausência é verificada por
        requisição (is_configured) e não impede o startup.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_base_url.startswith(("http://", "https://")):
            errors.append("KEPLARS_BASE_URL deve começar com http:// ou https://")

        if self.request_timeout_seconds is not None and self.request_timeout_seconds <= 0:
            errors.append("KEPLARS_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _optional_env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _load_from_env() -> KeplarsSettings:
    """Carrega KeplarsSettings a partir de variáveis de ambiente."""
    timeout = _optional_env("KEPLARS_REQUEST_TIMEOUT_SECONDS")
    return KeplarsSettings(
        api_key=_optional_env("KEPLARS_API_KEY"),
        api_base_url=_optional_env("KEPLARS_BASE_URL") or KEPLARS_BASE_URL,
        request_timeout_seconds=float(timeout) if timeout is not None else None,
    )


@lru_cache(maxsize=1)
def get_keplars_settings() -> KeplarsSettings:
    """Retorna instância cacheada de KeplarsSettings.

    A cache garante leitura única do ambiente por processo.
    """
    return _load_from_env()
