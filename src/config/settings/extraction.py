"""Settings do motor de extração de contatos.

Estratégia de segmentação, limites de entrada e heurísticas plugáveis.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache
from typing import TypeVar


class SegmenterStrategy(StrEnum):
    """Estratégias de segmentação do texto bruto em chunks."""

    PARAGRAPH = "paragraph"
    HEADER = "header"
    WINDOW = "window"


class AcceptancePolicy(StrEnum):
    """Campos mínimos para um contato ser emitido.

    - NAME_ONLY: exige nome
    - NAME_PLUS_ONE: exige nome e mais algum campo
    - ANY_IDENTITY: exige email, telefone ou nome (padrão)
    """

    NAME_ONLY = "name_only"
    NAME_PLUS_ONE = "name_plus_one"
    ANY_IDENTITY = "any_identity"


class CompanyHeuristic(StrEnum):
    """Como o campo empresa é inferido dentro do chunk."""

    SUFFIX = "suffix"
    PROXIMITY = "proximity"


class DedupeKeyMode(StrEnum):
    """Chave de identidade usada na deduplicação."""

    EMAIL_OR_PHONE = "email_or_phone"
    EMAIL_AND_PHONE = "email_and_phone"


DEFAULT_MAX_INPUT_LENGTH = 100_000
DEFAULT_WINDOW_RADIUS = 5

_E = TypeVar("_E", bound=StrEnum)


@dataclass(frozen=True)
class ExtractionSettings:
    """Configurações da extração.

    Attributes:
        segmenter_strategy: Estratégia ativa de segmentação
        max_input_length: Tamanho máximo do texto (acima disso, rejeita)
        window_radius: Linhas antes/depois da âncora na estratégia window
        acceptance_policy: Política mínima de campos para emitir contato
        company_heuristic: Sub-heurística de empresa do ContactBuilder
        dedupe_key: Modo da chave de identidade do Deduplicator
    """

    segmenter_strategy: SegmenterStrategy = SegmenterStrategy.WINDOW
    max_input_length: int = DEFAULT_MAX_INPUT_LENGTH
    window_radius: int = DEFAULT_WINDOW_RADIUS
    acceptance_policy: AcceptancePolicy = AcceptancePolicy.ANY_IDENTITY
    company_heuristic: CompanyHeuristic = CompanyHeuristic.SUFFIX
    dedupe_key: DedupeKeyMode = DedupeKeyMode.EMAIL_OR_PHONE

    def validate(self) -> list[str]:
        """Valida configurações de extração.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.max_input_length <= 0:
            errors.append("EXTRACTION_MAX_INPUT_LENGTH deve ser > 0")

        if self.window_radius < 0:
            errors.append("EXTRACTION_WINDOW_RADIUS deve ser >= 0")

        return errors


def _parse_enum(enum_cls: type[_E], raw: str | None, default: _E) -> _E:
    """Converte string de env para enum, caindo no default se inválida."""
    if not raw:
        return default
    try:
        return enum_cls(raw.strip().lower())
    except ValueError:
        return default


def _load_extraction_from_env() -> ExtractionSettings:
    """Carrega ExtractionSettings de variáveis de ambiente."""
    return ExtractionSettings(
        segmenter_strategy=_parse_enum(
            SegmenterStrategy,
            os.getenv("EXTRACTION_STRATEGY"),
            SegmenterStrategy.WINDOW,
        ),
        max_input_length=int(
            os.getenv("EXTRACTION_MAX_INPUT_LENGTH", str(DEFAULT_MAX_INPUT_LENGTH))
        ),
        window_radius=int(
            os.getenv("EXTRACTION_WINDOW_RADIUS", str(DEFAULT_WINDOW_RADIUS))
        ),
        acceptance_policy=_parse_enum(
            AcceptancePolicy,
            os.getenv("EXTRACTION_ACCEPTANCE_POLICY"),
            AcceptancePolicy.ANY_IDENTITY,
        ),
        company_heuristic=_parse_enum(
            CompanyHeuristic,
            os.getenv("EXTRACTION_COMPANY_HEURISTIC"),
            CompanyHeuristic.SUFFIX,
        ),
        dedupe_key=_parse_enum(
            DedupeKeyMode,
            os.getenv("EXTRACTION_DEDUPE_KEY"),
            DedupeKeyMode.EMAIL_OR_PHONE,
        ),
    )


@lru_cache(maxsize=1)
def get_extraction_settings() -> ExtractionSettings:
    """Retorna instância cacheada de ExtractionSettings."""
    return _load_extraction_from_env()
