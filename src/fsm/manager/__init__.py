"""Máquina por contato em envio."""

from fsm.manager.machine import InvalidTransitionError, SyncStateMachine, create_sync_fsm

__all__ = ["InvalidTransitionError", "SyncStateMachine", "create_sync_fsm"]
