"""Decodificação JSON estrita (RFC 8259).

O módulo `json` aceita as constantes NaN, Infinity e -Infinity e converte
números fora do alcance de float em inf. Nenhum desses valores pode ser
reserializado como JSON, então aqui eles invalidam o documento.
"""

from __future__ import annotations

import json
import math
from typing import Any


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _parse_finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"Out of range JSON number: {literal[:32]}")
    return value


def loads_strict(text: str | bytes) -> Any:
    """Decodifica JSON rejeitando valores não representáveis.

    Raises:
        ValueError: JSON inválido, constante não padrão ou número infinito
    """
    return json.loads(
        text,
        parse_constant=_reject_constant,
        parse_float=_parse_finite_float,
    )
