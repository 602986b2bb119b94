"""PersistedContact — contato salvo no store (tabela `contatos`).

Entidade do colaborador de storage. O core só monta payloads de insert
e interpreta a flag de sincronização com o CRM.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from app.domain.contact import Contact


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _new_id() -> str:
    return str(uuid.uuid4())


class ContactSource(StrEnum):
    """Fonte de onde o texto foi raspado."""

    CASA_DOS_DADOS = "CASA_DOS_DADOS"
    LINKEDIN = "LINKEDIN"

    @property
    def label(self) -> str:
        """Rótulo legível usado no CRM e nos CSVs."""
        return "Casa dos Dados" if self is ContactSource.CASA_DOS_DADOS else "LinkedIn"


class PersistedContact(BaseModel):
    """Contato persistido de um usuário."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(default_factory=_new_id)
    user_id: str
    name: str | None = None
    job_title: str | None = None
    email: str | None = None
    company: str | None = None
    phone: str | None = None
    city: str | None = None

    source: ContactSource
    origin: str | None = None
    niche_id: str | None = None
    niche_name: str | None = None
    source_text: str | None = None

    synced_to_crm: bool = False
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    @classmethod
    def from_contact(
        cls,
        contact: Contact,
        *,
        user_id: str,
        source: ContactSource,
        niche_id: str | None = None,
        niche_name: str | None = None,
        origin: str | None = None,
    ) -> PersistedContact:
        """Monta o payload de insert a partir de um contato extraído."""
        return cls(
            user_id=user_id,
            name=contact.name or None,
            job_title=contact.job_title or None,
            email=contact.email or None,
            company=contact.company or None,
            phone=contact.phone or None,
            city=contact.city or None,
            source=source,
            origin=origin,
            niche_id=niche_id,
            niche_name=niche_name,
            source_text=contact.source_text or None,
        )

    def to_insert_row(self) -> dict[str, Any]:
        """Serializa com os nomes de coluna do storage."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "nome": self.name,
            "cargo": self.job_title,
            "email": self.email,
            "empresa": self.company,
            "whatsapp": self.phone,
            "cidade": self.city,
            "fonte": self.source.value,
            "origem": self.origin,
            "nicho_id": self.niche_id,
            "texto_original": self.source_text,
            "enviado_spotter": self.synced_to_crm,
            "created_at": self.created_at.isoformat(),
        }

    def mark_synced(self) -> PersistedContact:
        """Retorna cópia marcada como enviada ao CRM."""
        return self.model_copy(update={"synced_to_crm": True, "updated_at": _utcnow()})
