"""Helpers de parsing para respostas da API Spotter (v3, OData)."""

from __future__ import annotations

from typing import Any

_LEAD_ID_KEYS = ("id", "leadId", "lead_id")


def build_lead_filter(lead_name: str) -> str:
    """Monta o filtro OData por nome de lead.

    Aspas simples são duplicadas (escape OData):
        build_lead_filter("D'Ávila") -> "lead eq 'D''Ávila'"
    """
    escaped = lead_name.replace("'", "''")
    return f"lead eq '{escaped}'"


def _coerce_id(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def extract_lead_id(body: Any) -> int | None:
    """Id do lead no corpo da resposta de LeadsAdd, quando presente.

    Formatos aceitos: `{"value": 123}`, `{"value": {"id": 123}}`,
    `{"id": 123}`, `{"leadId": 123}`.
    """
    if not isinstance(body, dict):
        return _coerce_id(body)

    value = body.get("value")
    if isinstance(value, dict):
        return extract_lead_id(value)
    lead_id = _coerce_id(value)
    if lead_id is not None:
        return lead_id

    for key in _LEAD_ID_KEYS:
        lead_id = _coerce_id(body.get(key))
        if lead_id is not None:
            return lead_id
    return None


def extract_lead_items(body: Any) -> list[dict[str, Any]]:
    """Itens de uma listagem OData (`{"value": [...]}`)."""
    if isinstance(body, dict):
        body = body.get("value")
    if not isinstance(body, list):
        return []
    return [item for item in body if isinstance(item, dict)]


def pick_most_recent_lead_id(items: list[dict[str, Any]]) -> int | None:
    """Maior id entre os leads retornados (o mais recente)."""
    ids = [lead_id for item in items if (lead_id := extract_lead_id(item)) is not None]
    return max(ids) if ids else None
