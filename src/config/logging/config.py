"""Configuração do logging do processo (API ou CLI).

Um único handler JSON em stderr: stdout fica livre para a saída do CLI.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from config.logging.filters import CorrelationIdFilter, PiiMaskingFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "extrator_leads"

# httpx loga a URL em INFO, e a busca de lead leva o nome no $filter
QUIET_LOGGERS = ("httpx", "httpcore")


def _resolve_level(level: str) -> str:
    level_name = level.strip().upper()
    if level_name not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )
    return level_name


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    *,
    stream: TextIO | None = None,
    mask_pii: bool = True,
) -> logging.Handler:
    """Instala o handler JSON no root logger, substituindo os anteriores.

    Args:
        level: Nível de log (case insensitive).
        service_name: Valor do campo `service` em todo record.
        correlation_id_getter: Retorna o correlation_id do contexto atual.
        stream: Destino dos logs (padrão: sys.stderr).
        mask_pii: Aplica o PiiMaskingFilter nas mensagens.

    Returns:
        O handler instalado.

    Raises:
        ValueError: Nível de log inválido.
    """
    level_name = _resolve_level(level)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level_name)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    if mask_pii:
        handler.addFilter(PiiMaskingFilter())

    root = logging.getLogger()
    root.setLevel(level_name)
    root.handlers = [handler]

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return handler


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """Registra o uso de um caminho de fallback (sem PII).

    Ex.: nome do contato pela primeira linha do bloco, empresa pelo
    domínio do email, id do lead resolvido por busca.
    """
    extra: dict[str, object] = {"fallback_used": True, "component": component}
    if reason:
        extra["reason"] = reason
    if elapsed_ms is not None:
        extra["elapsed_ms"] = round(elapsed_ms, 2)
    logger.info("fallback_applied", extra=extra)
