"""FSM do envio de contatos ao Exact Spotter.

IDLE → LEAD_SUBMITTING → LEAD_ID_RESOLVING → PERSON_SUBMITTING → DONE,
saindo para FAILED antes do lead existir e para PARTIAL_FAILURE depois.
"""

from fsm.manager import InvalidTransitionError, SyncStateMachine, create_sync_fsm
from fsm.states import (
    DEFAULT_INITIAL_STATE,
    LEAD_CREATED_STATES,
    TERMINAL_STATES,
    SyncState,
    is_terminal,
    is_valid_state,
)
from fsm.transitions import (
    VALID_TRANSITIONS,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)
from fsm.types import StateTransition, TransitionResult

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "LEAD_CREATED_STATES",
    "TERMINAL_STATES",
    "VALID_TRANSITIONS",
    "InvalidTransitionError",
    "StateTransition",
    "SyncState",
    "SyncStateMachine",
    "TransitionResult",
    "create_sync_fsm",
    "get_valid_targets",
    "is_terminal",
    "is_transition_valid",
    "is_valid_state",
    "validate_transition_map",
]
