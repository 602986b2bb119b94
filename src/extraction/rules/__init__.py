"""Matchers de campo e gazetteers usados pelo ContactBuilder."""

from extraction.rules.gazetteer_loader import (
    GazetteerAssetError,
    Gazetteers,
    fold_text,
    load_gazetteers,
)
from extraction.rules.matchers import (
    contains_url,
    is_company_line,
    is_excluded_line,
    match_city,
    match_company,
    match_email,
    match_job_title,
    match_proper_name,
    names_known_source,
    strip_document_fragment,
)
from extraction.rules.phone import (
    DEFAULT_DDI,
    PhoneNumber,
    digits_only,
    match_phone,
    normalize_phone,
)

__all__ = [
    "DEFAULT_DDI",
    "GazetteerAssetError",
    "Gazetteers",
    "PhoneNumber",
    "contains_url",
    "digits_only",
    "fold_text",
    "is_company_line",
    "is_excluded_line",
    "load_gazetteers",
    "match_city",
    "match_company",
    "match_email",
    "match_job_title",
    "match_phone",
    "match_proper_name",
    "names_known_source",
    "normalize_phone",
    "strip_document_fragment",
]
