"""SyncState e os conjuntos de estados terminais."""

from fsm.states.sync import (
    DEFAULT_INITIAL_STATE,
    LEAD_CREATED_STATES,
    TERMINAL_STATES,
    SyncState,
    is_terminal,
    is_valid_state,
)

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "LEAD_CREATED_STATES",
    "TERMINAL_STATES",
    "SyncState",
    "is_terminal",
    "is_valid_state",
]
