"""Testes das rotas /v1/leads (FastAPI TestClient com dependências trocadas)."""

from __future__ import annotations

import asyncio
from collections.abc import Iterator
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.routes import create_api_router
from app.bootstrap import get_contact_store, get_sync_adapter
from app.domain.persisted_contact import ContactSource, PersistedContact
from app.infra.stores import MemoryContactStore, MemoryCredentialStore
from app.services.spotter_sync import SpotterSyncAdapter
from config.settings import ExtractionSettings, SpotterSettings, get_extraction_settings
from utils.errors import ContactStoreError

USER_ID = "u-1"
HEADER_TEXT = "Acme LTDA\nContato: acme@acme.com\nGerente Comercial"


class _Deps:
    def __init__(self) -> None:
        self.store = MemoryContactStore()
        self.credentials = MemoryCredentialStore({USER_ID: "tok"})
        self.http = MagicMock()
        self.http.add_lead = AsyncMock(return_value={"value": 42})
        self.http.find_leads_by_name = AsyncMock(return_value=[])
        self.http.add_person = AsyncMock(return_value={})
        self.adapter = SpotterSyncAdapter(
            http_client=self.http,
            credential_store=self.credentials,
            contact_store=self.store,
            settings=SpotterSettings(),
        )
        self.settings = ExtractionSettings(max_input_length=200)


@pytest.fixture
def deps() -> _Deps:
    return _Deps()


@pytest.fixture
def client(deps: _Deps) -> Iterator[TestClient]:
    app = FastAPI()
    app.include_router(create_api_router())
    app.dependency_overrides[get_contact_store] = lambda: deps.store
    app.dependency_overrides[get_sync_adapter] = lambda: deps.adapter
    app.dependency_overrides[get_extraction_settings] = lambda: deps.settings
    with TestClient(app) as test_client:
        yield test_client


def _seed(store: MemoryContactStore, contacts: list[PersistedContact]) -> None:
    asyncio.run(store.insert_contacts(contacts))


def _persisted(contact_id: str, **overrides: Any) -> PersistedContact:
    return PersistedContact(
        id=contact_id,
        user_id=USER_ID,
        name=f"Contato {contact_id}",
        email=f"{contact_id}@acme.com",
        source=ContactSource.LINKEDIN,
        **overrides,
    )


class TestExtractRoute:
    """POST /v1/leads/extract."""

    def test_extracts_contacts(self, client: TestClient) -> None:
        response = client.post(
            "/v1/leads/extract",
            json={"text": HEADER_TEXT, "strategy": "header"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["strategy"] == "header"
        assert body["chunk_count"] == 1
        assert body["contacts"][0]["email"] == "acme@acme.com"
        assert body["contacts"][0]["company"] == "Acme"
        assert body["message"] is None

    def test_no_contacts_is_empty_result(self, client: TestClient) -> None:
        response = client.post(
            "/v1/leads/extract",
            json={"text": "nada relevante aqui", "strategy": "window"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["contacts"] == []
        assert body["strategy"] == "window"
        assert body["message"] == "Nenhum lead encontrado no texto"

    def test_input_too_large(self, client: TestClient) -> None:
        response = client.post("/v1/leads/extract", json={"text": "a" * 201})

        assert response.status_code == 413
        assert "201" in response.json()["detail"]

    def test_invalid_strategy(self, client: TestClient) -> None:
        response = client.post(
            "/v1/leads/extract",
            json={"text": HEADER_TEXT, "strategy": "magic"},
        )
        assert response.status_code == 422


class TestSaveRoute:
    """POST /v1/leads/save."""

    def test_saves_and_reports_duplicates(self, client: TestClient, deps: _Deps) -> None:
        payload = {
            "user_id": USER_ID,
            "source": "LINKEDIN",
            "niche_name": "Tecnologia",
            "contacts": [
                {"name": "Ana Souza", "email": "ana@acme.com", "source_text": "Ana"},
                {"name": "Ana S.", "email": "ANA@acme.com", "source_text": "Ana S."},
            ],
        }

        response = client.post("/v1/leads/save", json=payload)

        assert response.status_code == 200
        body = response.json()
        assert [c["name"] for c in body["inserted"]] == ["Ana Souza"]
        assert body["duplicated_count"] == 1
        assert body["failed_count"] == 0

    def test_store_failure(self, client: TestClient, deps: _Deps) -> None:
        deps.store.query_existing_identity_keys = AsyncMock(  # type: ignore[method-assign]
            side_effect=ContactStoreError("down")
        )

        response = client.post(
            "/v1/leads/save",
            json={"user_id": USER_ID, "source": "LINKEDIN", "contacts": []},
        )

        assert response.status_code == 503

    def test_invalid_source(self, client: TestClient) -> None:
        response = client.post(
            "/v1/leads/save",
            json={"user_id": USER_ID, "source": "ORKUT", "contacts": []},
        )
        assert response.status_code == 422


class TestSpotterSendRoute:
    """POST /v1/leads/spotter/send."""

    def test_report(self, client: TestClient, deps: _Deps) -> None:
        _seed(deps.store, [_persisted("c-1"), _persisted("c-2", synced_to_crm=True)])

        response = client.post(
            "/v1/leads/spotter/send",
            json={"user_id": USER_ID, "contact_ids": ["c-1", "c-2", "c-x"]},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 2
        assert body["succeeded"] == 1
        assert body["skipped"] == 1
        assert body["not_found"] == ["c-x"]
        assert body["success_rate"] == 1.0
        outcome = next(o for o in body["outcomes"] if o["contact_id"] == "c-1")
        assert outcome["status"] == "succeeded"
        assert outcome["final_state"] == "DONE"
        assert outcome["lead_id"] == 42

    def test_missing_credential(self, client: TestClient, deps: _Deps) -> None:
        deps.credentials.clear()
        _seed(deps.store, [_persisted("c-1")])

        response = client.post(
            "/v1/leads/spotter/send",
            json={"user_id": USER_ID, "contact_ids": ["c-1"]},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Configure seu token do Spotter"
        deps.http.add_lead.assert_not_awaited()

    def test_empty_ids_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/v1/leads/spotter/send",
            json={"user_id": USER_ID, "contact_ids": []},
        )
        assert response.status_code == 422
