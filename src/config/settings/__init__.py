"""Agregador de settings do Keplars Email Proxy.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.keplars import (
    INSTANT_SEND_PATH,
    KEPLARS_BASE_URL,
    QUEUE_SEND_PATH,
    SCHEDULE_SEND_PATH,
    KeplarsSettings,
    get_keplars_settings,
)

__all__ = [
    # Constants
    "INSTANT_SEND_PATH",
    "KEPLARS_BASE_URL",
    "QUEUE_SEND_PATH",
    "SCHEDULE_SEND_PATH",
    # Base
    "BaseSettings",
    "Environment",
    # Provider
    "KeplarsSettings",
    "get_base_settings",
    "get_keplars_settings",
]
