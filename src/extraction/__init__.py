"""Motor de extração de contatos a partir de texto não estruturado.

Camadas:
- rules/: matchers de campo puros e gazetteers (asset YAML)
- segmenters/: estratégias de divisão do texto em chunks
- services/: ContactBuilder, Deduplicator e ExtractionPipeline

Padrão: rules reconhecem; segmenters dividem; services montam.
"""

from extraction.services import (
    ContactBuilder,
    DeduplicationResult,
    ExistingIdentityKeys,
    ExtractionPipeline,
    ExtractionResult,
    deduplicate,
    extract_contacts,
)

__all__ = [
    "ContactBuilder",
    "DeduplicationResult",
    "ExistingIdentityKeys",
    "ExtractionPipeline",
    "ExtractionResult",
    "deduplicate",
    "extract_contacts",
]
