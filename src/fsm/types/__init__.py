"""Histórico do envio."""

from fsm.types.transition import StateTransition, TransitionResult

__all__ = ["StateTransition", "TransitionResult"]
