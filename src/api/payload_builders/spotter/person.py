"""Builder do payload de criação de pessoa (POST /personsAdd)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.spotter.lead import lead_name
from extraction.rules.phone import normalize_phone

if TYPE_CHECKING:
    from app.domain.persisted_contact import PersistedContact


class PersonPayloadBuilder:
    """Pessoa principal (mainContact) vinculada ao lead recém-criado."""

    def build(self, contact: PersistedContact, lead_id: int) -> dict[str, Any]:
        phone = normalize_phone(contact.phone)
        return {
            "leadId": lead_id,
            "name": lead_name(contact),
            "email": contact.email or "",
            "jobTitle": contact.job_title or "",
            "ddiPhone1": phone.ddi,
            "phone1": phone.local,
            "mainContact": True,
        }
