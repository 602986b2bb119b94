"""Registros imutáveis do histórico de um envio ao CRM."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from fsm.states.sync import SyncState


@dataclass(frozen=True, slots=True)
class StateTransition:
    """Uma etapa concluída do envio.

    `elapsed_ms` é o tempo desde a etapa anterior (ou desde a criação da
    máquina), ou seja, a latência da chamada ao CRM que motivou a etapa.
    `metadata` vai para os logs como está: só códigos de erro e contagens.
    """

    from_state: SyncState
    to_state: SyncState
    trigger: str
    metadata: dict[str, Any] = field(default_factory=dict)
    elapsed_ms: float = 0.0
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if not self.trigger.strip():
            raise ValueError("trigger obrigatório")

    def to_log_dict(self) -> dict[str, Any]:
        return {
            "from_state": self.from_state.name,
            "to_state": self.to_state.name,
            "trigger": self.trigger,
            "elapsed_ms": self.elapsed_ms,
            "timestamp": self.timestamp.isoformat(),
            "metadata": dict(self.metadata),
        }


@dataclass(frozen=True, slots=True)
class TransitionResult:
    """Retorno de SyncStateMachine.transition: a etapa aplicada ou o motivo da recusa."""

    success: bool
    transition: StateTransition | None = None
    error_reason: str | None = None

    def __post_init__(self) -> None:
        if self.success != (self.transition is not None):
            raise ValueError("transition deve vir preenchida só quando success=True")
        if not self.success and not self.error_reason:
            raise ValueError("recusa sem error_reason")
