"""Chamadas ao Exact Spotter de que o SpotterSyncAdapter precisa.

A implementação concreta (api.connectors.spotter) levanta HttpError para
status fora de 2xx e falhas de rede; o adapter traduz em erros de envio.
"""

from __future__ import annotations

from typing import Any, Protocol


class SpotterHttpClientProtocol(Protocol):
    async def add_lead(self, token: str, payload: dict[str, Any]) -> dict[str, Any]:
        """POST /LeadsAdd; corpo da resposta pode ou não trazer o id."""
        ...

    async def find_leads_by_name(self, token: str, lead_name: str) -> list[dict[str, Any]]:
        """GET /Leads filtrando pelo nome exato do lead."""
        ...

    async def add_person(self, token: str, payload: dict[str, Any]) -> dict[str, Any]: ...
