"""Registro de métricas via structured logging.

As métricas são logs estruturados (metric_type) agregáveis depois
por BigQuery / Cloud Logging.

Uso:
    start = time.perf_counter()
    response = await client.post_json(...)
    record_latency("keplars", "send_email", (time.perf_counter() - start) * 1000)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "keplars")
        operation: Nome da operação (ex: "send_email")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_outcome(
    component: str,
    outcome: str,
    status_code: int,
    correlation_id: str | None = None,
) -> None:
    """Registra desfecho de uma requisição (counter por outcome/status).

    Args:
        component: Nome do componente (ex: "email_proxy")
        outcome: Classificação (ex: "sent", "caller_input_error")
        status_code: Status HTTP devolvido ao chamador
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_outcome",
        extra={
            "metric_type": "counter",
            "component": component,
            "outcome": outcome,
            "status_code": status_code,
            "correlation_id": correlation_id,
        },
    )
