"""Serviços da extração: construção, deduplicação e pipeline."""

from extraction.services.contact_builder import (
    ContactBuilder,
    email_domain_label,
    is_accepted,
)
from extraction.services.deduplicator import (
    DeduplicationResult,
    ExistingIdentityKeys,
    deduplicate,
    identity_key,
)
from extraction.services.pipeline import (
    ExtractionPipeline,
    ExtractionResult,
    extract_contacts,
)

__all__ = [
    "ContactBuilder",
    "DeduplicationResult",
    "ExistingIdentityKeys",
    "ExtractionPipeline",
    "ExtractionResult",
    "deduplicate",
    "email_domain_label",
    "extract_contacts",
    "identity_key",
    "is_accepted",
]
