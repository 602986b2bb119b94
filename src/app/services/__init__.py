"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.contact_export import (
    export_contacts_csv,
    export_persisted_contacts_csv,
    export_spotter_template_csv,
)
from app.services.contact_search import (
    ContactFilters,
    CrmStatus,
    filter_contacts,
    search_contacts,
)
from app.services.spotter_sync import (
    BulkSendReport,
    SendOutcome,
    SendStatus,
    SpotterSyncAdapter,
)

__all__ = [
    "BulkSendReport",
    "ContactFilters",
    "CrmStatus",
    "SendOutcome",
    "SendStatus",
    "SpotterSyncAdapter",
    "export_contacts_csv",
    "export_persisted_contacts_csv",
    "export_spotter_template_csv",
    "filter_contacts",
    "search_contacts",
]
