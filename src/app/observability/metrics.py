"""Métricas emitidas como logs estruturados.

Cada métrica é um log INFO cuja mensagem é `metric_<tipo>` e cujos campos
vão no `extra`; a agregação fica a cargo do coletor de logs. O
correlation_id entra pelo CorrelationIdFilter. Nenhum campo carrega PII:
só contagens, estados e códigos de erro.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


def _emit(metric_type: str, component: str, **fields: Any) -> None:
    logger.info(
        f"metric_{metric_type}",
        extra={"metric_type": metric_type, "component": component, **fields},
    )


def record_latency(component: str, operation: str, latency_ms: float) -> None:
    """Duração de uma operação (ex.: "extraction_pipeline", "extract")."""
    _emit("latency", component, operation=operation, latency_ms=round(latency_ms, 2))


def record_extraction(
    strategy: str,
    chunk_count: int,
    contact_count: int,
    duplicated_count: int,
) -> None:
    _emit(
        "extraction",
        "extraction_pipeline",
        strategy=strategy,
        chunk_count=chunk_count,
        contact_count=contact_count,
        duplicated_count=duplicated_count,
    )


def record_sync_outcome(
    status: str,
    final_state: str,
    error_code: str | None = None,
    step_latencies_ms: dict[str, float] | None = None,
) -> None:
    """Desfecho do envio de um contato.

    Args:
        status: Bucket do relatório (succeeded, succeeded_with_caveat, failed, skipped).
        final_state: Estado terminal da FSM de envio.
        error_code: Código estável do erro, quando houver.
        step_latencies_ms: Latência por etapa, chaveada pelo estado de destino.
    """
    _emit(
        "sync_outcome",
        "spotter_sync",
        status=status,
        final_state=final_state,
        error_code=error_code,
        step_latencies_ms=step_latencies_ms or {},
    )


def record_bulk_send(
    total: int,
    succeeded: int,
    succeeded_with_caveat: int,
    failed: int,
    skipped: int,
) -> None:
    _emit(
        "bulk_send",
        "spotter_sync",
        total=total,
        succeeded=succeeded,
        succeeded_with_caveat=succeeded_with_caveat,
        failed=failed,
        skipped=skipped,
    )
