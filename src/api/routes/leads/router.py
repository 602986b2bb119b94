"""Endpoints de extração, salvamento e envio de leads ao Spotter."""

from __future__ import annotations

import dataclasses
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from api.routes.leads.schemas import (
    BulkSendReportSchema,
    ContactSchema,
    ExtractRequest,
    ExtractResponse,
    SavedContactSchema,
    SaveRequest,
    SaveResponse,
    SpotterSendRequest,
)
from app.bootstrap import get_contact_store, get_sync_adapter
from app.domain.contact import Contact
from app.protocols.contact_store import ContactStoreProtocol
from app.services.spotter_sync import SpotterSyncAdapter
from app.use_cases.save_contacts import SaveExtractedContactsUseCase
from config.settings import ExtractionSettings, get_extraction_settings
from extraction.services.pipeline import ExtractionPipeline
from utils.errors import (
    ContactStoreError,
    CredentialMissingError,
    InputTooLargeError,
    NoContactsFoundError,
)

logger = logging.getLogger(__name__)

router = APIRouter()

SettingsDep = Annotated[ExtractionSettings, Depends(get_extraction_settings)]
ContactStoreDep = Annotated[ContactStoreProtocol, Depends(get_contact_store)]
SyncAdapterDep = Annotated[SpotterSyncAdapter, Depends(get_sync_adapter)]


@router.post("/extract", response_model=ExtractResponse)
async def extract_leads(request: ExtractRequest, settings: SettingsDep) -> ExtractResponse:
    """Extrai contatos de texto colado (sem persistir)."""
    if request.strategy is not None:
        settings = dataclasses.replace(settings, segmenter_strategy=request.strategy)

    try:
        result = ExtractionPipeline(settings).extract(request.text)
    except InputTooLargeError as exc:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=str(exc),
        ) from exc
    except NoContactsFoundError as exc:
        return ExtractResponse(strategy=settings.segmenter_strategy.value, message=str(exc))

    return ExtractResponse(
        contacts=[ContactSchema.from_contact(c) for c in result.contacts],
        duplicated=[ContactSchema.from_contact(c) for c in result.duplicated],
        strategy=result.strategy,
        chunk_count=result.chunk_count,
    )


@router.post("/save", response_model=SaveResponse)
async def save_leads(
    request: SaveRequest,
    store: ContactStoreDep,
    settings: SettingsDep,
) -> SaveResponse:
    """Salva contatos extraídos, ignorando os já existentes."""
    contacts = [
        Contact(
            source_text=item.source_text,
            name=item.name,
            job_title=item.job_title,
            email=item.email,
            company=item.company,
            phone=item.phone,
            city=item.city,
        )
        for item in request.contacts
    ]
    use_case = SaveExtractedContactsUseCase(store, dedupe_key=settings.dedupe_key)
    try:
        result = await use_case.execute(
            contacts,
            user_id=request.user_id,
            source=request.source,
            niche_id=request.niche_id,
            niche_name=request.niche_name,
            origin=request.origin,
            include_duplicates=request.include_duplicates,
        )
    except ContactStoreError as exc:
        logger.error("save_leads_store_failed", extra={"error_type": type(exc).__name__})
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Falha ao salvar contatos",
        ) from exc

    return SaveResponse(
        inserted=[SavedContactSchema.from_persisted(c) for c in result.inserted],
        duplicated_count=len(result.duplicated),
        failed_count=len(result.failed),
    )


@router.post("/spotter/send", response_model=BulkSendReportSchema)
async def send_leads_to_spotter(
    request: SpotterSendRequest,
    store: ContactStoreDep,
    adapter: SyncAdapterDep,
) -> BulkSendReportSchema:
    """Envia contatos salvos ao Spotter e devolve o relatório por contato."""
    contacts = await store.list_contacts(request.user_id, request.contact_ids)
    found_ids = {contact.id for contact in contacts}
    not_found = [cid for cid in request.contact_ids if cid not in found_ids]

    try:
        report = await adapter.send_many(contacts, request.user_id)
    except CredentialMissingError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return BulkSendReportSchema.from_report(report, not_found)
