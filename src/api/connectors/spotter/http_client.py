"""Cliente HTTP especializado para a API do Exact Spotter (v3).

Estende HttpClient genérico com comportamentos do Spotter:
- Autenticação por header `token_exact` (token por usuário, por chamada)
- Status fora de 2xx viram HttpError com o status_code original
- Logging estruturado sem PII (token, nome, email, telefone)
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit

from api.connectors.spotter.spotter_logging import log_spotter_error, log_success
from api.connectors.spotter.spotter_responses import (
    build_lead_filter,
    extract_lead_items,
)
from app.infra.http import HttpClient, HttpClientConfig, HttpError

if TYPE_CHECKING:
    import httpx

    from config.settings import SpotterSettings

logger: logging.Logger = logging.getLogger(__name__)

TOKEN_HEADER = "token_exact"


class SpotterHttpClient(HttpClient):
    """Cliente das rotas LeadsAdd, Leads (filtro OData) e personsAdd."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        settings: SpotterSettings | None = None,
    ) -> None:
        # Import local para evitar dependência circular
        from config.settings import get_spotter_settings

        super().__init__(config)
        self._settings = settings or get_spotter_settings()

    async def add_lead(self, token: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Cria lead (POST /LeadsAdd).

        Returns:
            Corpo JSON da resposta ({} se vazio ou não-JSON).

        Raises:
            ValueError: Se token vazio.
            HttpError: Status fora de 2xx ou falha de rede.
        """
        response = await self.post(
            self._settings.leads_add_endpoint,
            json=payload,
            headers=self._headers(token),
        )
        return self._process_response(response, "POST", self._settings.leads_add_endpoint)

    async def find_leads_by_name(self, token: str, lead_name: str) -> list[dict[str, Any]]:
        """Lista leads com o nome exato (GET /Leads?$filter=lead eq '<nome>')."""
        response = await self.get(
            self._settings.leads_endpoint,
            params={"$filter": build_lead_filter(lead_name)},
            headers=self._headers(token),
        )
        body = self._process_response(response, "GET", self._settings.leads_endpoint)
        return extract_lead_items(body)

    async def add_person(self, token: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Cria pessoa vinculada a um lead (POST /personsAdd)."""
        response = await self.post(
            self._settings.persons_add_endpoint,
            json=payload,
            headers=self._headers(token),
        )
        return self._process_response(response, "POST", self._settings.persons_add_endpoint)

    @staticmethod
    def _headers(token: str) -> dict[str, str]:
        if not token or not token.strip():
            raise ValueError("token do Spotter não pode ser vazio")
        return {
            "Content-Type": "application/json",
            TOKEN_HEADER: token.strip(),
        }

    @staticmethod
    def _process_response(response: httpx.Response, method: str, url: str) -> Any:
        endpoint = urlsplit(url).path
        if not response.is_success:
            log_spotter_error(method, endpoint, response.status_code)
            raise HttpError(
                f"Erro na API Spotter: {response.status_code}",
                status_code=response.status_code,
            )

        log_success(method, endpoint, response.status_code)
        if not response.content:
            return {}
        try:
            return response.json()
        except json.JSONDecodeError:
            logger.info("spotter_non_json_response", extra={"endpoint": endpoint})
            return {}


def create_spotter_http_client(settings: SpotterSettings | None = None) -> SpotterHttpClient:
    """Factory do cliente Spotter com timeouts/retries das settings."""
    from config.settings import get_spotter_settings

    spotter = settings or get_spotter_settings()
    config = HttpClientConfig(
        timeout_seconds=spotter.request_timeout_seconds,
        max_retries=spotter.max_retries,
    )
    return SpotterHttpClient(config=config, settings=spotter)
