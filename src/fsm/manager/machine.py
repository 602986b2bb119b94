"""SyncStateMachine: acompanha o envio de UM contato ao CRM.

O SpotterSyncAdapter cria uma máquina por envio e a avança depois de cada
chamada HTTP. O estado final decide o status do resultado e se o contato
é marcado como enviado.
"""

from __future__ import annotations

import time
from typing import Any

from fsm.states.sync import (
    DEFAULT_INITIAL_STATE,
    LEAD_CREATED_STATES,
    SyncState,
    is_terminal,
)
from fsm.transitions.rules import get_valid_targets
from fsm.types.transition import StateTransition, TransitionResult


class InvalidTransitionError(RuntimeError):
    """Etapa fora do mapa. Indica bug no adapter, nunca falha do CRM."""

    def __init__(self, contact_id: str, current: SyncState, target: SyncState) -> None:
        super().__init__(
            f"Transição inválida para o contato {contact_id}: {current.name} → {target.name}"
        )
        self.contact_id = contact_id
        self.current = current
        self.target = target


class SyncStateMachine:
    __slots__ = ("_contact_id", "_state", "_steps", "_last_step_at")

    def __init__(self, contact_id: str, initial_state: SyncState | None = None) -> None:
        self._contact_id = contact_id
        self._state = initial_state or DEFAULT_INITIAL_STATE
        self._steps: list[StateTransition] = []
        self._last_step_at = time.monotonic()

    @property
    def contact_id(self) -> str:
        return self._contact_id

    @property
    def current_state(self) -> SyncState:
        return self._state

    @property
    def history(self) -> list[StateTransition]:
        """Cópia das etapas já aplicadas."""
        return list(self._steps)

    @property
    def is_terminal(self) -> bool:
        return is_terminal(self._state)

    @property
    def lead_created(self) -> bool:
        """Lead existe no CRM (DONE ou PARTIAL_FAILURE)."""
        return self._state in LEAD_CREATED_STATES

    @property
    def elapsed_ms(self) -> float:
        """Soma das latências das etapas aplicadas."""
        return round(sum(step.elapsed_ms for step in self._steps), 2)

    def get_valid_targets(self) -> frozenset[SyncState]:
        return get_valid_targets(self._state)

    def can_transition_to(self, target: SyncState) -> bool:
        return target in self.get_valid_targets()

    def transition(
        self,
        target: SyncState,
        trigger: str,
        metadata: dict[str, Any] | None = None,
    ) -> TransitionResult:
        """Aplica a etapa se o mapa permitir. Nunca levanta por etapa inválida.

        Args:
            target: Próximo estado.
            trigger: Evento que causou a etapa (ex.: "lead_created").
            metadata: Dados sem PII anexados ao histórico.
        """
        if not self.can_transition_to(target):
            return TransitionResult(
                success=False,
                error_reason=f"{self._state.name} → {target.name} fora do mapa",
            )

        now = time.monotonic()
        step = StateTransition(
            from_state=self._state,
            to_state=target,
            trigger=trigger,
            metadata=dict(metadata or {}),
            elapsed_ms=round((now - self._last_step_at) * 1000, 2),
        )
        self._steps.append(step)
        self._state = target
        self._last_step_at = now
        return TransitionResult(success=True, transition=step)

    def advance(
        self,
        target: SyncState,
        trigger: str,
        metadata: dict[str, Any] | None = None,
    ) -> StateTransition:
        """Versão estrita de transition(), usada pelo adapter.

        Raises:
            InvalidTransitionError: Etapa fora do mapa.
        """
        result = self.transition(target, trigger, metadata)
        if result.transition is None:
            raise InvalidTransitionError(self._contact_id, self._state, target)
        return result.transition

    def get_state_summary(self) -> dict[str, Any]:
        return {
            "contact_id": self._contact_id,
            "current_state": self._state.name,
            "is_terminal": self.is_terminal,
            "lead_created": self.lead_created,
            "transition_count": len(self._steps),
            "elapsed_ms": self.elapsed_ms,
            "valid_targets": sorted(target.name for target in self.get_valid_targets()),
        }

    def get_history_summary(self) -> list[dict[str, Any]]:
        return [step.to_log_dict() for step in self._steps]


def create_sync_fsm(contact_id: str, initial_state: SyncState | None = None) -> SyncStateMachine:
    return SyncStateMachine(contact_id, initial_state)
