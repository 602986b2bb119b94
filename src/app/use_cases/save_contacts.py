"""Use case: salvar contatos extraídos no store do usuário."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.domain.persisted_contact import ContactSource, PersistedContact
from config.settings.extraction import DedupeKeyMode
from extraction.services.deduplicator import deduplicate
from utils.errors import ContactStoreError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.contact import Contact
    from app.protocols.contact_store import ContactStoreProtocol, InsertResult


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SaveContactsResult:
    """Resultado do salvamento.

    Attributes:
        inserted: Contatos gravados com sucesso
        duplicated: Contatos ignorados por já existirem (ou repetidos no lote)
        failed: Resultados de insert que falharam
    """

    inserted: tuple[PersistedContact, ...]
    duplicated: tuple[Contact, ...]
    failed: tuple[InsertResult, ...]

    @property
    def inserted_count(self) -> int:
        return len(self.inserted)


class SaveExtractedContactsUseCase:
    """Deduplica contra o store, monta as linhas e insere."""

    def __init__(
        self,
        contact_store: ContactStoreProtocol,
        dedupe_key: DedupeKeyMode = DedupeKeyMode.EMAIL_OR_PHONE,
    ) -> None:
        self._store = contact_store
        self._dedupe_key = dedupe_key

    async def execute(
        self,
        contacts: Sequence[Contact],
        user_id: str,
        source: ContactSource,
        niche_id: str | None = None,
        niche_name: str | None = None,
        origin: str | None = None,
        include_duplicates: bool = False,
    ) -> SaveContactsResult:
        """Salva contatos extraídos.

        Args:
            contacts: Contatos da extração.
            user_id: Dono dos contatos.
            source: Fonte da raspagem (Casa dos Dados, LinkedIn).
            niche_id: Nicho escolhido pelo usuário (opcional).
            niche_name: Nome do nicho (vai como "industry" no CRM).
            origin: Origem livre (sobrepõe a fonte no CRM).
            include_duplicates: Se True, grava mesmo os duplicados.

        Raises:
            ContactStoreError: Falha ao consultar/gravar no store.
        """
        if include_duplicates:
            to_insert: Sequence[Contact] = contacts
            duplicated: tuple[Contact, ...] = ()
        else:
            existing = await self._store.query_existing_identity_keys(user_id)
            result = deduplicate(contacts, existing, self._dedupe_key)
            to_insert, duplicated = result.unique, result.duplicated

        rows = [
            PersistedContact.from_contact(
                contact,
                user_id=user_id,
                source=source,
                niche_id=niche_id,
                niche_name=niche_name,
                origin=origin,
            )
            for contact in to_insert
        ]
        if not rows:
            return SaveContactsResult(inserted=(), duplicated=duplicated, failed=())

        insert_results = await self._store.insert_contacts(rows)
        if len(insert_results) != len(rows):
            raise ContactStoreError("Store retornou quantidade de resultados inconsistente")

        inserted = tuple(
            row for row, outcome in zip(rows, insert_results, strict=True) if outcome.success
        )
        failed = tuple(outcome for outcome in insert_results if not outcome.success)

        logger.info(
            "contacts_saved",
            extra={
                "inserted_count": len(inserted),
                "duplicated_count": len(duplicated),
                "failed_count": len(failed),
                "source": source.value,
            },
        )
        return SaveContactsResult(inserted=inserted, duplicated=duplicated, failed=failed)
