"""SpotterSyncAdapter — envia contatos persistidos ao CRM Exact Spotter.

Cada envio percorre uma máquina de estados própria:
lead (LeadsAdd) → id do lead (resposta ou busca por nome) → pessoa (personsAdd).

Regras:
- Token do usuário é lido a cada envio (nunca cacheado)
- Sem token: CredentialMissingError antes de qualquer chamada de rede
- Um envio em andamento por contato; o segundo é rejeitado (SendInFlightError)
- Lead criado conta como efeito colateral: DONE e PARTIAL_FAILURE marcam
  o contato como enviado
- Nada é repetido automaticamente (criação de lead não é idempotente)
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from api.connectors.spotter.spotter_responses import (
    extract_lead_id,
    pick_most_recent_lead_id,
)
from api.payload_builders.spotter import (
    LeadPayloadBuilder,
    PersonPayloadBuilder,
    lead_name,
)
from app.infra.http import HttpError
from app.observability import (
    correlation_scope,
    record_bulk_send,
    record_latency,
    record_sync_outcome,
)
from config.logging import log_fallback
from config.settings.spotter import SpotterSettings, get_spotter_settings
from fsm import SyncState, SyncStateMachine
from utils.errors import (
    CredentialMissingError,
    InfrastructureError,
    LeadCreateError,
    LeadIdNotFoundError,
    PersonCreateError,
    SendInFlightError,
    SpotterSyncError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.persisted_contact import PersistedContact
    from app.protocols.contact_store import ContactStoreProtocol
    from app.protocols.credential_store import CredentialStoreProtocol
    from app.protocols.http_client import SpotterHttpClientProtocol

logger = logging.getLogger(__name__)


class SendStatus(StrEnum):
    """Desfecho de um contato no envio ao CRM."""

    SUCCEEDED = "succeeded"
    SUCCEEDED_WITH_CAVEAT = "succeeded_with_caveat"
    FAILED = "failed"
    SKIPPED = "skipped"


_STATUS_BY_STATE: dict[SyncState, SendStatus] = {
    SyncState.DONE: SendStatus.SUCCEEDED,
    SyncState.PARTIAL_FAILURE: SendStatus.SUCCEEDED_WITH_CAVEAT,
    SyncState.FAILED: SendStatus.FAILED,
}


@dataclass(frozen=True, slots=True)
class SendOutcome:
    """Resultado do envio de um contato (sem PII).

    Attributes:
        contact_id: Id do contato persistido
        status: Desfecho agregado
        final_state: Estado terminal da máquina (None se pulado/rejeitado)
        lead_id: Id do lead no CRM, quando resolvido
        error_code: Código estável do erro (ex.: LEAD_ID_NOT_FOUND)
        error_message: Mensagem legível do erro
        marked_synced: Se o contato foi marcado como enviado no store
        mark_synced_error: Falha ao marcar como enviado (lead já existe no CRM)
        correlation_id: Correlation id do envio
        history: Transições da máquina (para auditoria)
    """

    contact_id: str
    status: SendStatus
    final_state: SyncState | None = None
    lead_id: int | None = None
    error_code: str | None = None
    error_message: str | None = None
    marked_synced: bool = False
    mark_synced_error: str | None = None
    correlation_id: str = ""
    history: tuple[dict[str, Any], ...] = ()

    @property
    def lead_created(self) -> bool:
        return self.final_state in (SyncState.DONE, SyncState.PARTIAL_FAILURE)


@dataclass(frozen=True, slots=True)
class BulkSendReport:
    """Relatório agregado de um envio em massa."""

    total: int
    succeeded: int
    succeeded_with_caveat: int
    failed: int
    skipped: int
    outcomes: tuple[SendOutcome, ...] = field(default_factory=tuple)

    @property
    def attempted(self) -> int:
        return self.total - self.skipped

    @property
    def success_rate(self) -> float:
        """Fração de envios tentados em que o lead foi criado (0.0 a 1.0)."""
        if self.attempted == 0:
            return 0.0
        return (self.succeeded + self.succeeded_with_caveat) / self.attempted

    def by_status(self, status: SendStatus) -> list[SendOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status is status]

    @classmethod
    def from_outcomes(cls, outcomes: Sequence[SendOutcome]) -> BulkSendReport:
        counts = dict.fromkeys(SendStatus, 0)
        for outcome in outcomes:
            counts[outcome.status] += 1
        return cls(
            total=len(outcomes),
            succeeded=counts[SendStatus.SUCCEEDED],
            succeeded_with_caveat=counts[SendStatus.SUCCEEDED_WITH_CAVEAT],
            failed=counts[SendStatus.FAILED],
            skipped=counts[SendStatus.SKIPPED],
            outcomes=tuple(outcomes),
        )


class SpotterSyncAdapter:
    """Executa envios ao Spotter com uma FSM por contato.

    O mapa de máquinas (contact_id → SyncStateMachine) pertence à
    instância e serve de guarda contra envios concorrentes.
    """

    def __init__(
        self,
        http_client: SpotterHttpClientProtocol,
        credential_store: CredentialStoreProtocol,
        contact_store: ContactStoreProtocol,
        settings: SpotterSettings | None = None,
    ) -> None:
        self._http = http_client
        self._credentials = credential_store
        self._contacts = contact_store
        self._settings = settings or get_spotter_settings()
        self._lead_builder = LeadPayloadBuilder(self._settings.duplicity_validation)
        self._person_builder = PersonPayloadBuilder()
        self._machines: dict[str, SyncStateMachine] = {}

    def state_of(self, contact_id: str) -> SyncState | None:
        """Estado atual do envio do contato (None se nunca enviado)."""
        machine = self._machines.get(contact_id)
        return machine.current_state if machine else None

    def is_in_flight(self, contact_id: str) -> bool:
        machine = self._machines.get(contact_id)
        return machine is not None and not machine.is_terminal

    async def send(self, contact: PersistedContact, user_id: str) -> SendOutcome:
        """Envia um contato (lead + pessoa) ao CRM.

        Erros de HTTP viram o desfecho do contato; só a guarda de
        concorrência e a credencial ausente são levantadas.

        Raises:
            SendInFlightError: Já existe envio em andamento para o contato.
            CredentialMissingError: Usuário sem token configurado.
        """
        if self.is_in_flight(contact.id):
            logger.warning("spotter_send_in_flight", extra={"contact_id": contact.id})
            raise SendInFlightError(f"Envio já em andamento para o contato {contact.id}")

        # Registrado antes de qualquer await: fecha a janela de concorrência
        machine = SyncStateMachine(contact_id=contact.id)
        self._machines[contact.id] = machine

        try:
            token = await self._credentials.get_crm_token(user_id)
        except BaseException:
            self._machines.pop(contact.id, None)
            raise
        if not token:
            self._machines.pop(contact.id, None)
            logger.warning("spotter_credential_missing", extra={"user_id": user_id})
            raise CredentialMissingError()

        with correlation_scope() as correlation_id:
            try:
                return await self._run(machine, contact, token, correlation_id)
            except Exception:
                # Erro inesperado: libera a guarda para permitir novo envio
                if not machine.is_terminal:
                    self._machines.pop(contact.id, None)
                raise

    async def send_many(
        self,
        contacts: Sequence[PersistedContact],
        user_id: str,
    ) -> BulkSendReport:
        """Envia vários contatos em paralelo, uma máquina isolada por contato.

        Contatos já enviados (synced_to_crm) são pulados. A falha de um
        contato nunca interrompe os demais.

        Raises:
            CredentialMissingError: Usuário sem token (nenhum envio é tentado).
        """
        token = await self._credentials.get_crm_token(user_id)
        if not token:
            logger.warning("spotter_credential_missing", extra={"user_id": user_id})
            raise CredentialMissingError()

        start = time.perf_counter()
        results = await asyncio.gather(
            *(self._send_isolated(contact, user_id) for contact in contacts),
            return_exceptions=True,
        )

        outcomes: list[SendOutcome] = []
        for contact, result in zip(contacts, results, strict=True):
            if isinstance(result, SendOutcome):
                outcomes.append(result)
                continue
            logger.error(
                "spotter_send_unexpected_error",
                extra={"contact_id": contact.id, "error_type": type(result).__name__},
            )
            outcomes.append(
                SendOutcome(
                    contact_id=contact.id,
                    status=SendStatus.FAILED,
                    error_code="UNEXPECTED_ERROR",
                    error_message=str(result),
                )
            )

        report = BulkSendReport.from_outcomes(outcomes)
        record_latency("spotter_sync", "send_many", (time.perf_counter() - start) * 1000)
        record_bulk_send(
            report.total,
            report.succeeded,
            report.succeeded_with_caveat,
            report.failed,
            report.skipped,
        )
        return report

    async def _send_isolated(self, contact: PersistedContact, user_id: str) -> SendOutcome:
        if contact.synced_to_crm:
            return SendOutcome(contact_id=contact.id, status=SendStatus.SKIPPED)
        try:
            return await self.send(contact, user_id)
        except SpotterSyncError as exc:
            return SendOutcome(
                contact_id=contact.id,
                status=SendStatus.FAILED,
                error_code=exc.code,
                error_message=str(exc),
            )

    async def _run(
        self,
        machine: SyncStateMachine,
        contact: PersistedContact,
        token: str,
        correlation_id: str,
    ) -> SendOutcome:
        start = time.perf_counter()
        lead_id: int | None = None
        error: SpotterSyncError | None = None

        try:
            machine.advance(SyncState.LEAD_SUBMITTING, "send_requested")
            create_body = await self._submit_lead(token, contact)
            machine.advance(SyncState.LEAD_ID_RESOLVING, "lead_created")
            lead_id = await self._resolve_lead_id(token, contact, create_body)
            machine.advance(SyncState.PERSON_SUBMITTING, "lead_id_resolved")
            await self._submit_person(token, contact, lead_id)
            machine.advance(SyncState.DONE, "person_created")
        except LeadCreateError as exc:
            error = exc
            machine.advance(SyncState.FAILED, "lead_create_failed", {"error_code": exc.code})
        except (LeadIdNotFoundError, PersonCreateError) as exc:
            error = exc
            machine.advance(
                SyncState.PARTIAL_FAILURE,
                "person_step_failed",
                {"error_code": exc.code},
            )

        marked_synced, mark_error = await self._mark_synced_if_created(machine)
        outcome = SendOutcome(
            contact_id=contact.id,
            status=_STATUS_BY_STATE[machine.current_state],
            final_state=machine.current_state,
            lead_id=lead_id,
            error_code=error.code if error else None,
            error_message=str(error) if error else None,
            marked_synced=marked_synced,
            mark_synced_error=mark_error,
            correlation_id=correlation_id,
            history=tuple(machine.get_history_summary()),
        )

        logger.info(
            "spotter_send_finished",
            extra={
                "contact_id": contact.id,
                "final_state": machine.current_state.value,
                "error_code": outcome.error_code,
                "marked_synced": marked_synced,
            },
        )
        record_latency("spotter_sync", "send", (time.perf_counter() - start) * 1000)
        record_sync_outcome(
            outcome.status.value,
            machine.current_state.value,
            outcome.error_code,
            {step.to_state.name: step.elapsed_ms for step in machine.history},
        )
        return outcome

    async def _submit_lead(self, token: str, contact: PersistedContact) -> dict[str, Any]:
        payload = self._lead_builder.build(contact)
        try:
            return await self._http.add_lead(token, payload)
        except HttpError as exc:
            raise LeadCreateError(
                "Erro ao criar lead no Spotter",
                status_code=exc.status_code,
            ) from exc

    async def _resolve_lead_id(
        self,
        token: str,
        contact: PersistedContact,
        create_body: dict[str, Any],
    ) -> int:
        mode = self._settings.lead_id_resolution
        if mode in ("auto", "response"):
            lead_id = extract_lead_id(create_body)
            if lead_id is not None:
                return lead_id
            if mode == "response":
                raise LeadIdNotFoundError(
                    "Lead criado, mas a resposta não trouxe o id; contato não vinculado"
                )

        log_fallback(logger, "spotter_sync.lead_id", reason="search_by_name")
        try:
            items = await self._http.find_leads_by_name(token, lead_name(contact))
        except HttpError as exc:
            raise LeadIdNotFoundError(
                "Lead criado, mas a busca pelo id falhou; contato não vinculado",
                status_code=exc.status_code,
            ) from exc

        if len(items) > 1:
            # Corrida conhecida: leads homônimos; usamos o mais recente
            logger.warning(
                "spotter_lead_id_ambiguous",
                extra={"contact_id": contact.id, "match_count": len(items)},
            )

        lead_id = pick_most_recent_lead_id(items)
        if lead_id is None:
            raise LeadIdNotFoundError(
                "Lead criado, mas o id não foi encontrado; contato não vinculado"
            )
        return lead_id

    async def _submit_person(self, token: str, contact: PersistedContact, lead_id: int) -> None:
        payload = self._person_builder.build(contact, lead_id)
        try:
            await self._http.add_person(token, payload)
        except HttpError as exc:
            raise PersonCreateError(
                "Lead criado, mas o contato (pessoa) não foi cadastrado",
                status_code=exc.status_code,
            ) from exc

    async def _mark_synced_if_created(self, machine: SyncStateMachine) -> tuple[bool, str | None]:
        if not machine.lead_created:
            return False, None
        try:
            await self._contacts.mark_synced(machine.contact_id)
        except InfrastructureError as exc:
            logger.error(
                "mark_synced_failed",
                extra={"contact_id": machine.contact_id, "error_type": type(exc).__name__},
            )
            return False, str(exc)
        return True, None
