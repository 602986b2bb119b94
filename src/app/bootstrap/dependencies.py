"""Factories das implementações concretas, escolhidas pelas settings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.spotter import create_spotter_http_client
from app.infra.secrets import EnvCredentialStore
from app.infra.stores import MemoryContactStore, MemoryCredentialStore
from app.services.spotter_sync import SpotterSyncAdapter

if TYPE_CHECKING:
    from app.protocols.contact_store import ContactStoreProtocol
    from app.protocols.credential_store import CredentialStoreProtocol
    from config.settings import BaseSettings, SpotterSettings

logger = logging.getLogger(__name__)


def create_contact_store(settings: BaseSettings) -> ContactStoreProtocol:
    """Store de contatos conforme CONTACT_STORE_BACKEND.

    Raises:
        ValueError: Backend desconhecido.
    """
    backend = settings.contact_store_backend
    if backend != "memory":
        raise ValueError(f"CONTACT_STORE_BACKEND inválido: {backend}")

    if not settings.is_development:
        logger.warning(
            "memory_store_in_non_dev",
            extra={"backend": backend, "environment": settings.environment},
        )
    logger.info("contact_store_created", extra={"backend": backend})
    return MemoryContactStore()


def create_credential_store(settings: BaseSettings) -> CredentialStoreProtocol:
    """Store de tokens do CRM conforme CREDENTIAL_STORE_BACKEND.

    - env: SPOTTER_TOKEN_<USER_ID>, com SPOTTER_TOKEN como padrão
    - memory: vazio, preenchido via set_token (dev/test)

    Raises:
        ValueError: Backend desconhecido.
    """
    backend = settings.credential_store_backend
    stores: dict[str, type[EnvCredentialStore] | type[MemoryCredentialStore]] = {
        "env": EnvCredentialStore,
        "memory": MemoryCredentialStore,
    }
    store_cls = stores.get(backend)
    if store_cls is None:
        raise ValueError(f"CREDENTIAL_STORE_BACKEND inválido: {backend}")

    logger.info("credential_store_created", extra={"backend": backend})
    return store_cls()


def create_sync_adapter(
    contact_store: ContactStoreProtocol,
    credential_store: CredentialStoreProtocol,
    settings: SpotterSettings,
) -> SpotterSyncAdapter:
    return SpotterSyncAdapter(
        http_client=create_spotter_http_client(settings),
        credential_store=credential_store,
        contact_store=contact_store,
        settings=settings,
    )
