"""Schemas HTTP (pydantic) das rotas de leads."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from app.domain.persisted_contact import ContactSource
from config.settings.extraction import SegmenterStrategy

if TYPE_CHECKING:
    from app.domain.contact import Contact
    from app.domain.persisted_contact import PersistedContact
    from app.services.spotter_sync import BulkSendReport, SendOutcome


class ContactSchema(BaseModel):
    """Contato extraído (campos ausentes como null)."""

    name: str | None = None
    job_title: str | None = None
    email: str | None = None
    company: str | None = None
    phone: str | None = None
    city: str | None = None
    source_text: str = ""

    @classmethod
    def from_contact(cls, contact: Contact) -> ContactSchema:
        return cls(
            name=contact.name,
            job_title=contact.job_title,
            email=contact.email,
            company=contact.company,
            phone=contact.phone,
            city=contact.city,
            source_text=contact.source_text,
        )


class ExtractRequest(BaseModel):
    text: str
    strategy: SegmenterStrategy | None = None


class ExtractResponse(BaseModel):
    contacts: list[ContactSchema] = Field(default_factory=list)
    duplicated: list[ContactSchema] = Field(default_factory=list)
    strategy: str
    chunk_count: int = 0
    message: str | None = None


class SaveRequest(BaseModel):
    user_id: str
    source: ContactSource
    contacts: list[ContactSchema]
    niche_id: str | None = None
    niche_name: str | None = None
    origin: str | None = None
    include_duplicates: bool = False


class SavedContactSchema(BaseModel):
    id: str
    name: str | None = None
    email: str | None = None
    synced_to_crm: bool = False

    @classmethod
    def from_persisted(cls, contact: PersistedContact) -> SavedContactSchema:
        return cls(
            id=contact.id,
            name=contact.name,
            email=contact.email,
            synced_to_crm=contact.synced_to_crm,
        )


class SaveResponse(BaseModel):
    inserted: list[SavedContactSchema]
    duplicated_count: int
    failed_count: int


class SpotterSendRequest(BaseModel):
    user_id: str
    contact_ids: list[str] = Field(min_length=1)


class SendOutcomeSchema(BaseModel):
    contact_id: str
    status: str
    final_state: str | None = None
    lead_id: int | None = None
    error_code: str | None = None
    error_message: str | None = None
    marked_synced: bool = False

    @classmethod
    def from_outcome(cls, outcome: SendOutcome) -> SendOutcomeSchema:
        return cls(
            contact_id=outcome.contact_id,
            status=outcome.status.value,
            final_state=outcome.final_state.value if outcome.final_state else None,
            lead_id=outcome.lead_id,
            error_code=outcome.error_code,
            error_message=outcome.error_message,
            marked_synced=outcome.marked_synced,
        )


class BulkSendReportSchema(BaseModel):
    total: int
    succeeded: int
    succeeded_with_caveat: int
    failed: int
    skipped: int
    not_found: list[str] = Field(default_factory=list)
    success_rate: float
    outcomes: list[SendOutcomeSchema]

    @classmethod
    def from_report(cls, report: BulkSendReport, not_found: list[str]) -> BulkSendReportSchema:
        return cls(
            total=report.total,
            succeeded=report.succeeded,
            succeeded_with_caveat=report.succeeded_with_caveat,
            failed=report.failed,
            skipped=report.skipped,
            not_found=not_found,
            success_rate=round(report.success_rate, 4),
            outcomes=[SendOutcomeSchema.from_outcome(o) for o in report.outcomes],
        )
