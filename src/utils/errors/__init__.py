"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ContactStoreError,
    CredentialMissingError,
    ExtractionError,
    InfrastructureError,
    InputTooLargeError,
    LeadCreateError,
    LeadIdNotFoundError,
    LeadsError,
    NoContactsFoundError,
    PersonCreateError,
    SendInFlightError,
    SpotterSyncError,
)

__all__ = [
    "ContactStoreError",
    "CredentialMissingError",
    "ExtractionError",
    "InfrastructureError",
    "InputTooLargeError",
    "LeadCreateError",
    "LeadIdNotFoundError",
    "LeadsError",
    "NoContactsFoundError",
    "PersonCreateError",
    "SendInFlightError",
    "SpotterSyncError",
]
