"""Campos, padrões e regra de presença do EmailRequest."""

from __future__ import annotations

import re
from typing import Any

DELIVERY_TYPES: tuple[str, ...] = ("instant", "queue")

EMAIL_ADDRESS_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

# Apenas prefixo; o restante (fração, offset) não é verificado.
SCHEDULED_AT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}", re.ASCII),
    re.compile(r"\d{4}-\d{2}-\d{2}_\d{2}:\d{2}:\d{2}", re.ASCII),
)


def is_present(value: Any) -> bool:
    """Presença de um campo opcional.

    None, False, "" e zero contam como ausentes; listas e dicts
    (mesmo vazios) contam como presentes.
    """
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


def is_valid_email_address(value: Any) -> bool:
    return isinstance(value, str) and EMAIL_ADDRESS_PATTERN.fullmatch(value) is not None


def is_valid_scheduled_at(value: Any) -> bool:
    return isinstance(value, str) and any(
        pattern.match(value) is not None for pattern in SCHEDULED_AT_PATTERNS
    )
