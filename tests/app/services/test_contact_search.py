"""Testes da busca e dos filtros de contatos."""

from __future__ import annotations

from datetime import UTC, datetime

from app.domain.contact import Contact
from app.domain.persisted_contact import ContactSource, PersistedContact
from app.services.contact_search import (
    ContactFilters,
    CrmStatus,
    filter_contacts,
    search_contacts,
)

CONTACTS = [
    Contact(source_text="Ana Souza\nGerente", name="Ana Souza", job_title="Gerente"),
    Contact(source_text="Bruno Lima", name="Bruno Lima", email="bruno@beta.com"),
    Contact(source_text="Carla", name="Carla", city="São Paulo"),
]


def _persisted(contact_id: str, **overrides: object) -> PersistedContact:
    data: dict[str, object] = {
        "id": contact_id,
        "user_id": "u-1",
        "name": f"Contato {contact_id}",
        "source": ContactSource.LINKEDIN,
        "created_at": datetime(2024, 3, 5, tzinfo=UTC),
    }
    data.update(overrides)
    return PersistedContact(**data)  # type: ignore[arg-type]


class TestSearchContacts:
    """Testes para search_contacts."""

    def test_empty_term_returns_all(self) -> None:
        assert search_contacts(CONTACTS, "  ") == CONTACTS

    def test_case_insensitive(self) -> None:
        assert [c.name for c in search_contacts(CONTACTS, "GERENTE")] == ["Ana Souza"]
        assert [c.name for c in search_contacts(CONTACTS, "beta.com")] == ["Bruno Lima"]

    def test_no_match(self) -> None:
        assert search_contacts(CONTACTS, "inexistente") == []


class TestFilterContacts:
    """Testes para filter_contacts."""

    CONTACTS = [
        _persisted(
            "a",
            source=ContactSource.CASA_DOS_DADOS,
            niche_id="n-1",
            city="São Paulo",
            synced_to_crm=True,
            created_at=datetime(2024, 1, 10, tzinfo=UTC),
        ),
        _persisted(
            "b",
            niche_id="n-2",
            city="Curitiba",
            origin="Feira",
            created_at=datetime(2024, 2, 10, tzinfo=UTC),
        ),
        _persisted("c", created_at=datetime(2024, 3, 10, tzinfo=UTC)),
    ]

    def _ids(self, filters: ContactFilters) -> list[str]:
        return [c.id for c in filter_contacts(self.CONTACTS, filters)]

    def test_no_filters(self) -> None:
        assert self._ids(ContactFilters()) == ["a", "b", "c"]

    def test_term_includes_origin(self) -> None:
        assert self._ids(ContactFilters(term="feira")) == ["b"]

    def test_sources(self) -> None:
        filters = ContactFilters(sources=frozenset({ContactSource.CASA_DOS_DADOS}))
        assert self._ids(filters) == ["a"]

    def test_niches(self) -> None:
        assert self._ids(ContactFilters(niche_ids=frozenset({"n-2", "n-9"}))) == ["b"]

    def test_statuses(self) -> None:
        assert self._ids(ContactFilters(statuses=frozenset({CrmStatus.SENT}))) == ["a"]
        assert self._ids(ContactFilters(statuses=frozenset({CrmStatus.PENDING}))) == ["b", "c"]

    def test_city_ignores_accents(self) -> None:
        assert self._ids(ContactFilters(city="sao pa")) == ["a"]

    def test_date_range_inclusive(self) -> None:
        filters = ContactFilters(
            created_from=datetime(2024, 2, 10, tzinfo=UTC),
            created_to=datetime(2024, 3, 10, tzinfo=UTC),
        )
        assert self._ids(filters) == ["b", "c"]

    def test_filters_combine(self) -> None:
        filters = ContactFilters(
            statuses=frozenset({CrmStatus.PENDING}),
            created_to=datetime(2024, 2, 28, tzinfo=UTC),
        )
        assert self._ids(filters) == ["b"]
