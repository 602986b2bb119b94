"""Stores em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

import logging

from app.domain.contact import normalize_email_key, normalize_phone_key
from app.domain.persisted_contact import PersistedContact
from app.protocols.contact_store import ContactStoreProtocol, InsertResult
from app.protocols.credential_store import CredentialStoreProtocol
from extraction.services.deduplicator import ExistingIdentityKeys
from utils.errors import ContactStoreError

logger = logging.getLogger(__name__)


class MemoryContactStore(ContactStoreProtocol):
    """Store de contatos em memória — apenas para dev/test."""

    def __init__(self) -> None:
        self._contacts: dict[str, PersistedContact] = {}  # contact_id -> contato

    async def insert_contacts(self, contacts: list[PersistedContact]) -> list[InsertResult]:
        """Insere contatos; ids repetidos falham individualmente."""
        results: list[InsertResult] = []
        for contact in contacts:
            if contact.id in self._contacts:
                results.append(
                    InsertResult(contact_id=contact.id, success=False, error="duplicate_id")
                )
                continue
            self._contacts[contact.id] = contact
            results.append(InsertResult(contact_id=contact.id, success=True))
        return results

    async def query_existing_identity_keys(self, user_id: str) -> ExistingIdentityKeys:
        emails: set[str] = set()
        phones: set[str] = set()
        for contact in self._contacts.values():
            if contact.user_id != user_id:
                continue
            email_key = normalize_email_key(contact.email)
            phone_key = normalize_phone_key(contact.phone)
            if email_key:
                emails.add(email_key)
            if phone_key:
                phones.add(phone_key)
        return ExistingIdentityKeys(emails=frozenset(emails), phones=frozenset(phones))

    async def list_contacts(
        self,
        user_id: str,
        contact_ids: list[str] | None = None,
    ) -> list[PersistedContact]:
        wanted = set(contact_ids) if contact_ids is not None else None
        contacts = [
            contact
            for contact in self._contacts.values()
            if contact.user_id == user_id and (wanted is None or contact.id in wanted)
        ]
        return sorted(contacts, key=lambda contact: contact.created_at, reverse=True)

    async def mark_synced(self, contact_id: str) -> None:
        contact = self._contacts.get(contact_id)
        if contact is None:
            raise ContactStoreError(f"Contato não encontrado: {contact_id}")
        self._contacts[contact_id] = contact.mark_synced()

    async def get(self, contact_id: str) -> PersistedContact | None:
        """Busca contato por id (helper de dev/test)."""
        return self._contacts.get(contact_id)

    def clear(self) -> None:
        """Limpa todos os dados (apenas para testes)."""
        self._contacts.clear()


class MemoryCredentialStore(CredentialStoreProtocol):
    """Tokens do CRM por usuário em memória — apenas para dev/test."""

    def __init__(self, tokens: dict[str, str] | None = None) -> None:
        self._tokens: dict[str, str] = dict(tokens or {})

    async def get_crm_token(self, user_id: str) -> str | None:
        token = self._tokens.get(user_id)
        return token if token and token.strip() else None

    def set_token(self, user_id: str, token: str) -> None:
        self._tokens[user_id] = token

    def clear(self) -> None:
        """Limpa todos os dados (apenas para testes)."""
        self._tokens.clear()
