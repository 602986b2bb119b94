"""Composition root do extrator de leads.

API e CLI chamam `initialize_app()` uma vez. As rotas recebem store e
adapter pelos getters abaixo, que podem ser trocados em testes via
`app.dependency_overrides`.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_extraction_settings,
    get_spotter_settings,
)
from config.settings.base.core import LOG_LEVELS

if TYPE_CHECKING:
    from app.protocols.contact_store import ContactStoreProtocol
    from app.protocols.credential_store import CredentialStoreProtocol
    from app.services.spotter_sync import SpotterSyncAdapter
    from config.settings import BaseSettings

logger = logging.getLogger(__name__)


def initialize_app(level: str | None = None) -> BaseSettings:
    """Configura o logging JSON a partir das settings base.

    Args:
        level: Sobrescreve LOG_LEVEL (ex.: "DEBUG" na CLI com --verbose).

    Returns:
        As settings base usadas.
    """
    settings = get_base_settings()
    requested = (level or settings.log_level).upper()
    effective = requested if requested in LOG_LEVELS else "INFO"

    configure_logging(
        level=effective,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
    )
    if effective != requested:
        logger.warning("log_level_invalid", extra={"requested": requested, "using": effective})
    return settings


def validate_runtime_settings() -> list[str]:
    """Valida todas as settings no startup.

    Em staging/production qualquer erro aborta o boot; nos demais
    ambientes os erros só são logados.

    Returns:
        Erros encontrados, prefixados pela seção.

    Raises:
        RuntimeError: Configuração inválida em ambiente estrito.
    """
    base = get_base_settings()
    errors = [
        *(f"base: {error}" for error in base.validate()),
        *(f"extraction: {error}" for error in get_extraction_settings().validate()),
        *(f"spotter: {error}" for error in get_spotter_settings().validate()),
    ]

    if not errors:
        logger.info("settings_validated", extra={"environment": base.environment})
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={"environment": base.environment, "error_count": len(errors), "errors": errors},
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
    return errors


@lru_cache(maxsize=1)
def get_contact_store() -> ContactStoreProtocol:
    from app.bootstrap.dependencies import create_contact_store

    return create_contact_store(get_base_settings())


@lru_cache(maxsize=1)
def get_credential_store() -> CredentialStoreProtocol:
    from app.bootstrap.dependencies import create_credential_store

    return create_credential_store(get_base_settings())


@lru_cache(maxsize=1)
def get_sync_adapter() -> SpotterSyncAdapter:
    """Adapter único por processo: a guarda de envio concorrente é por instância."""
    from app.bootstrap.dependencies import create_sync_adapter

    return create_sync_adapter(
        get_contact_store(),
        get_credential_store(),
        get_spotter_settings(),
    )


def reset_dependencies() -> None:
    """Descarta os singletons (testes e recarga de configuração)."""
    for getter in (get_sync_adapter, get_credential_store, get_contact_store):
        getter.cache_clear()


__all__ = [
    "get_contact_store",
    "get_credential_store",
    "get_sync_adapter",
    "initialize_app",
    "reset_dependencies",
    "validate_runtime_settings",
]
