"""Configuração do pytest para o projeto Keplars Email Proxy."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings são cacheadas por processo; cada teste lê o ambiente de novo."""
    from app.bootstrap.dependencies import get_send_email_use_case
    from config.settings import get_base_settings, get_keplars_settings

    get_keplars_settings.cache_clear()
    get_base_settings.cache_clear()
    get_send_email_use_case.cache_clear()
    yield
    get_keplars_settings.cache_clear()
    get_base_settings.cache_clear()
    get_send_email_use_case.cache_clear()
