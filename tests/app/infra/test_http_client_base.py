"""Testes do HttpClient base (httpx com MockTransport)."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from app.infra import http as http_module
from app.infra.http import HttpClient, HttpClientConfig, HttpError, is_retryable_status


def _install_transport(
    monkeypatch: pytest.MonkeyPatch,
    handler: Any,
) -> list[httpx.Request]:
    """Faz o HttpClient usar um MockTransport e registra as requests."""
    seen: list[httpx.Request] = []
    original_client = httpx.AsyncClient

    def _recording_handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    def _client_factory(**kwargs: Any) -> httpx.AsyncClient:
        kwargs.pop("verify", None)
        return original_client(transport=httpx.MockTransport(_recording_handler), **kwargs)

    monkeypatch.setattr(http_module.httpx, "AsyncClient", _client_factory)
    return seen


class TestRetryableStatus:
    @pytest.mark.parametrize(("status", "expected"), [(429, True), (500, True), (503, True)])
    def test_retryable(self, status: int, expected: bool) -> None:
        assert is_retryable_status(status) is expected

    @pytest.mark.parametrize("status", [200, 400, 401, 404])
    def test_not_retryable(self, status: int) -> None:
        assert is_retryable_status(status) is False


class TestHttpClient:
    """Testes para HttpClient."""

    @pytest.mark.asyncio
    async def test_post_sends_json_and_headers(self, monkeypatch: pytest.MonkeyPatch) -> None:
        seen = _install_transport(monkeypatch, lambda request: httpx.Response(201, json={"ok": 1}))
        client = HttpClient(HttpClientConfig(default_headers={"X-App": "leads"}))

        response = await client.post("https://api.test/items", json={"a": 1}, headers={"X-B": "2"})

        assert response.status_code == 201
        assert seen[0].method == "POST"
        assert seen[0].headers["X-App"] == "leads"
        assert seen[0].headers["X-B"] == "2"
        assert json.loads(seen[0].content) == {"a": 1}

    @pytest.mark.asyncio
    async def test_get_sends_params(self, monkeypatch: pytest.MonkeyPatch) -> None:
        seen = _install_transport(monkeypatch, lambda request: httpx.Response(200, json={}))

        await HttpClient().get("https://api.test/items", params={"$filter": "lead eq 'A'"})

        assert seen[0].url.params["$filter"] == "lead eq 'A'"

    @pytest.mark.asyncio
    async def test_client_error_is_returned(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _install_transport(monkeypatch, lambda request: httpx.Response(400))
        response = await HttpClient().post("https://api.test/items", json={})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_server_error_without_retries(self, monkeypatch: pytest.MonkeyPatch) -> None:
        seen = _install_transport(monkeypatch, lambda request: httpx.Response(503))

        with pytest.raises(HttpError) as exc_info:
            await HttpClient().post("https://api.test/items", json={})

        assert exc_info.value.status_code == 503
        assert len(seen) == 1

    @pytest.mark.asyncio
    async def test_retries_when_configured(self, monkeypatch: pytest.MonkeyPatch) -> None:
        statuses = iter([429, 200])
        seen = _install_transport(monkeypatch, lambda request: httpx.Response(next(statuses)))
        client = HttpClient(HttpClientConfig(max_retries=1, backoff_base_seconds=0))

        response = await client.get("https://api.test/items")

        assert response.status_code == 200
        assert len(seen) == 2

    @pytest.mark.asyncio
    async def test_connection_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _fail(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("boom", request=request)

        _install_transport(monkeypatch, _fail)

        with pytest.raises(HttpError, match="http_connection_error"):
            await HttpClient().get("https://api.test/items")
