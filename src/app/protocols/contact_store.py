"""Protocolo do store de contatos persistidos (tabela `contatos`)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.persisted_contact import PersistedContact
    from extraction.services.deduplicator import ExistingIdentityKeys


@dataclass(frozen=True, slots=True)
class InsertResult:
    """Resultado do insert de um contato (sem PII)."""

    contact_id: str
    success: bool
    error: str | None = None


class ContactStoreProtocol(Protocol):
    """Contrato para store de contatos."""

    async def insert_contacts(self, contacts: list[PersistedContact]) -> list[InsertResult]:
        """Insere contatos; um resultado por contato, na mesma ordem."""
        ...

    async def query_existing_identity_keys(self, user_id: str) -> ExistingIdentityKeys:
        """Emails e telefones (normalizados) já salvos pelo usuário."""
        ...

    async def list_contacts(
        self,
        user_id: str,
        contact_ids: list[str] | None = None,
    ) -> list[PersistedContact]:
        """Contatos do usuário (opcionalmente filtrados por id), mais recentes primeiro."""
        ...

    async def mark_synced(self, contact_id: str) -> None:
        """Marca o contato como enviado ao CRM."""
        ...
