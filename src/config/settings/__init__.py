"""Agregador de settings do extrator de leads.

Re-exporta as settings de cada domínio (base, extração, Spotter).
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.extraction import (
    DEFAULT_MAX_INPUT_LENGTH,
    DEFAULT_WINDOW_RADIUS,
    AcceptancePolicy,
    CompanyHeuristic,
    DedupeKeyMode,
    ExtractionSettings,
    SegmenterStrategy,
    get_extraction_settings,
)
from config.settings.spotter import (
    SPOTTER_API_BASE_URL,
    LeadIdResolution,
    SpotterSettings,
    get_spotter_settings,
)

__all__ = [
    "DEFAULT_MAX_INPUT_LENGTH",
    "DEFAULT_WINDOW_RADIUS",
    "SPOTTER_API_BASE_URL",
    "AcceptancePolicy",
    "BaseSettings",
    "CompanyHeuristic",
    "DedupeKeyMode",
    "Environment",
    "ExtractionSettings",
    "LeadIdResolution",
    "SegmenterStrategy",
    "SpotterSettings",
    "get_base_settings",
    "get_extraction_settings",
    "get_spotter_settings",
]
