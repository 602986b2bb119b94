"""Logs JSON em stderr, com correlation_id e mascaramento de PII.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="extrator_leads")

    logger = get_logger(__name__)
    logger.info("leads_extracted", extra={"contact_count": 12})

Eventos em snake_case; contexto sempre em `extra`. Nunca registrar nome,
email ou telefone de contatos.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter, PiiMaskingFilter, mask_pii
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "LOG_FIELDS",
    "CorrelationIdFilter",
    "PiiMaskingFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
    "mask_pii",
]
