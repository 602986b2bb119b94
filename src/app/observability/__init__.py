"""correlation_id e métricas em log estruturado."""

from app.observability.correlation import (
    correlation_scope,
    get_correlation_id,
    new_correlation_id,
)
from app.observability.metrics import (
    record_bulk_send,
    record_extraction,
    record_latency,
    record_sync_outcome,
)

__all__ = [
    "correlation_scope",
    "get_correlation_id",
    "new_correlation_id",
    "record_bulk_send",
    "record_extraction",
    "record_latency",
    "record_sync_outcome",
]
