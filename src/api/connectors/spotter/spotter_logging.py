"""Helpers de logging para a API Spotter (sem PII nem token)."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_spotter_error(method: str, endpoint: str, status_code: int | None) -> None:
    """Loga erro HTTP do Spotter sem expor token nem dados do contato."""
    logger.warning(
        "spotter_http_error",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )


def log_success(method: str, endpoint: str, status_code: int) -> None:
    logger.debug(
        "spotter_http_success",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )
