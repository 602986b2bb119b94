"""Conector Spotter — adapter de borda para a API do Exact Spotter.

Este módulo é o único ponto de IO com o CRM.
Responsabilidades:
- HTTP client (LeadsAdd, Leads com filtro OData, personsAdd)
- Parsing de respostas (id do lead, listagens)
- Logging sem PII
"""

from .http_client import TOKEN_HEADER, SpotterHttpClient, create_spotter_http_client
from .spotter_responses import (
    build_lead_filter,
    extract_lead_id,
    extract_lead_items,
    pick_most_recent_lead_id,
)

__all__ = [
    "TOKEN_HEADER",
    "SpotterHttpClient",
    "build_lead_filter",
    "create_spotter_http_client",
    "extract_lead_id",
    "extract_lead_items",
    "pick_most_recent_lead_id",
]
