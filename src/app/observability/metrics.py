"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e podem ser agregadas
pelo coletor de logs da plataforma (Cloud Logging, Loki, etc.).

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Entrega: counter de entregas por status, com número de tentativas

Uso:
    start = time.perf_counter()
    # ... operação ...
    record_latency("telegram_client", "send_message", elapsed_ms)
    record_delivery("delivered", attempts=1)
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
        component: Nome do componente (ex: "relay", "telegram_client")
        operation: Nome da operação (ex: "dispatch", "send_message")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação; se None, o filter injeta o atual
    """
    extra: dict[str, object] = {
        "metric_type": "latency",
        "component": component,
        "operation": operation,
        "latency_ms": round(latency_ms, 2),
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id
    logger.info("metric_latency", extra=extra)


def record_delivery(
    status: str,
    attempts: int,
    tenant: str | None = None,
) -> None:
    """Registra o desfecho de uma entrega.

    Args:
        status: "delivered" ou "failed"
        attempts: Tentativas HTTP consumidas
        tenant: Rótulo do tenant (nunca a API key completa)
    """
    logger.info(
        "metric_delivery",
        extra={
            "metric_type": "delivery",
            "status": status,
            "attempts": attempts,
            "tenant": tenant,
        },
    )
