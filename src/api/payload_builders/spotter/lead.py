"""Builder do payload de criação de lead (POST /LeadsAdd)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from extraction.rules.phone import normalize_phone

if TYPE_CHECKING:
    from app.domain.persisted_contact import PersistedContact

NAME_FALLBACK = "Nome não informado"
DESCRIPTION_SEPARATOR = " | "


def build_description(contact: PersistedContact) -> str:
    """Descrição do lead com cargo, empresa, email e data de importação.

    Exemplo:
        "Cargo: Gerente | Empresa: Acme | Email: a@acme.com | Data de importação: 05/03/2024"
    """
    parts: list[str] = []
    if contact.job_title:
        parts.append(f"Cargo: {contact.job_title}")
    if contact.company:
        parts.append(f"Empresa: {contact.company}")
    if contact.email:
        parts.append(f"Email: {contact.email}")
    parts.append(f"Data de importação: {contact.created_at.strftime('%d/%m/%Y')}")
    return DESCRIPTION_SEPARATOR.join(parts)


def lead_name(contact: PersistedContact) -> str:
    """Nome enviado ao CRM (também usado na busca do id)."""
    return contact.name or NAME_FALLBACK


class LeadPayloadBuilder:
    """Builder do corpo `{duplicityValidation, lead: {...}}`."""

    def __init__(self, duplicity_validation: bool = True) -> None:
        self._duplicity_validation = duplicity_validation

    def build(self, contact: PersistedContact) -> dict[str, Any]:
        phone = normalize_phone(contact.phone)
        return {
            "duplicityValidation": self._duplicity_validation,
            "lead": {
                "name": lead_name(contact),
                "industry": contact.niche_name or "",
                "source": contact.origin or contact.source.label,
                "subSource": contact.source.label,
                "ddiPhone": phone.ddi,
                "phone": phone.local,
                "city": contact.city or "",
                "description": build_description(contact),
            },
        }
