"""Casos de uso da aplicação (inputs/outputs, IO só via protocolos)."""

from app.use_cases.save_contacts import SaveContactsResult, SaveExtractedContactsUseCase

__all__ = [
    "SaveContactsResult",
    "SaveExtractedContactsUseCase",
]
