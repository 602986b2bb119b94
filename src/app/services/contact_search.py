"""Busca e filtros de contatos (extraídos ou persistidos)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING

from extraction.rules.gazetteer_loader import fold_text

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.contact import Contact
    from app.domain.persisted_contact import ContactSource, PersistedContact


class CrmStatus(StrEnum):
    """Status do contato em relação ao CRM."""

    SENT = "sent"
    PENDING = "pending"


def _matches_term(values: Sequence[str | None], term: str) -> bool:
    needle = term.strip().lower()
    return any(value and needle in value.lower() for value in values)


def search_contacts(contacts: Sequence[Contact], term: str) -> list[Contact]:
    """Busca textual (case-insensitive) em todos os campos do contato.

    Termo vazio devolve a lista inteira.
    """
    if not term.strip():
        return list(contacts)
    return [
        contact
        for contact in contacts
        if _matches_term(
            (
                contact.name,
                contact.job_title,
                contact.email,
                contact.company,
                contact.phone,
                contact.city,
                contact.source_text,
            ),
            term,
        )
    ]


@dataclass(frozen=True, slots=True)
class ContactFilters:
    """Filtros da listagem de contatos salvos (todos opcionais).

    Listas vazias não filtram. Cidade compara por substring, sem acento.
    """

    term: str = ""
    sources: frozenset[ContactSource] = field(default_factory=frozenset)
    niche_ids: frozenset[str] = field(default_factory=frozenset)
    statuses: frozenset[CrmStatus] = field(default_factory=frozenset)
    city: str = ""
    created_from: datetime | None = None
    created_to: datetime | None = None


def _persisted_matches(contact: PersistedContact, filters: ContactFilters) -> bool:
    if filters.term.strip() and not _matches_term(
        (
            contact.name,
            contact.job_title,
            contact.email,
            contact.company,
            contact.phone,
            contact.city,
            contact.origin,
            contact.niche_name,
            contact.source_text,
        ),
        filters.term,
    ):
        return False
    if filters.sources and contact.source not in filters.sources:
        return False
    if filters.niche_ids and (contact.niche_id or "") not in filters.niche_ids:
        return False
    if filters.statuses:
        status = CrmStatus.SENT if contact.synced_to_crm else CrmStatus.PENDING
        if status not in filters.statuses:
            return False
    if filters.city.strip() and fold_text(filters.city) not in fold_text(contact.city or ""):
        return False
    if filters.created_from and contact.created_at < filters.created_from:
        return False
    return not (filters.created_to and contact.created_at > filters.created_to)


def filter_contacts(
    contacts: Sequence[PersistedContact],
    filters: ContactFilters,
) -> list[PersistedContact]:
    """Aplica os filtros preservando a ordem de entrada."""
    return [contact for contact in contacts if _persisted_matches(contact, filters)]
