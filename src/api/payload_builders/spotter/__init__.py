"""Builders de payload para a API do Exact Spotter."""

from api.payload_builders.spotter.lead import (
    NAME_FALLBACK,
    LeadPayloadBuilder,
    build_description,
    lead_name,
)
from api.payload_builders.spotter.person import PersonPayloadBuilder

__all__ = [
    "NAME_FALLBACK",
    "LeadPayloadBuilder",
    "PersonPayloadBuilder",
    "build_description",
    "lead_name",
]
