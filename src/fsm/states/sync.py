"""Estados do envio de um contato ao Exact Spotter.

O envio tem três chamadas (LeadsAdd, resolução do id, personsAdd); cada
estado não-terminal corresponde a uma delas em andamento.
"""

from enum import StrEnum


class SyncState(StrEnum):
    """Estado de um envio.

    DONE e PARTIAL_FAILURE implicam lead existente no CRM; FAILED não.
    """

    IDLE = "IDLE"
    LEAD_SUBMITTING = "LEAD_SUBMITTING"
    LEAD_ID_RESOLVING = "LEAD_ID_RESOLVING"
    PERSON_SUBMITTING = "PERSON_SUBMITTING"

    DONE = "DONE"
    PARTIAL_FAILURE = "PARTIAL_FAILURE"
    FAILED = "FAILED"

    def __str__(self) -> str:
        return self.value


LEAD_CREATED_STATES: frozenset[SyncState] = frozenset(
    {SyncState.DONE, SyncState.PARTIAL_FAILURE}
)
TERMINAL_STATES: frozenset[SyncState] = LEAD_CREATED_STATES | {SyncState.FAILED}

DEFAULT_INITIAL_STATE = SyncState.IDLE


def is_terminal(state: SyncState) -> bool:
    return state in TERMINAL_STATES


def is_valid_state(state: object) -> bool:
    """False para strings soltas: só membros do enum contam."""
    return isinstance(state, SyncState)
