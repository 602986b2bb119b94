"""ExtractionPipeline — texto bruto → contatos únicos.

Fluxo: validação de tamanho → Segmenter → ContactBuilder → Deduplicator.
Síncrono, sem IO e reentrante: cada chamada usa apenas seus argumentos
e as settings recebidas na construção.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.observability import record_extraction, record_latency
from config.settings.extraction import ExtractionSettings, get_extraction_settings
from extraction.segmenters import create_segmenter
from extraction.services.contact_builder import ContactBuilder
from extraction.services.deduplicator import deduplicate
from utils.errors import InputTooLargeError, NoContactsFoundError

if TYPE_CHECKING:
    from app.domain.contact import Contact
    from extraction.services.deduplicator import ExistingIdentityKeys

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExtractionResult:
    """Resultado de uma execução da extração.

    Attributes:
        contacts: Contatos únicos, na ordem do texto
        duplicated: Contatos descartados como duplicados
        strategy: Estratégia de segmentação usada
        chunk_count: Quantidade de chunks produzidos pelo segmenter
    """

    contacts: tuple[Contact, ...]
    duplicated: tuple[Contact, ...]
    strategy: str
    chunk_count: int

    @property
    def total_found(self) -> int:
        return len(self.contacts) + len(self.duplicated)


class ExtractionPipeline:
    """Orquestra segmentação, construção e deduplicação de contatos."""

    def __init__(self, settings: ExtractionSettings | None = None) -> None:
        self._settings = settings or get_extraction_settings()
        self._segmenter = create_segmenter(
            self._settings.segmenter_strategy,
            window_radius=self._settings.window_radius,
        )
        self._builder = ContactBuilder(
            acceptance_policy=self._settings.acceptance_policy,
            company_heuristic=self._settings.company_heuristic,
        )

    @property
    def settings(self) -> ExtractionSettings:
        return self._settings

    def extract(
        self,
        raw_text: str,
        existing: ExistingIdentityKeys | None = None,
    ) -> ExtractionResult:
        """Extrai contatos do texto bruto.

        Args:
            raw_text: Texto colado pelo usuário.
            existing: Chaves já persistidas, para marcar duplicados.

        Returns:
            ExtractionResult com únicos e duplicados.

        Raises:
            InputTooLargeError: Texto acima de max_input_length.
            NoContactsFoundError: Nenhum contato aceito (inclui texto vazio).
        """
        limit = self._settings.max_input_length
        if len(raw_text) > limit:
            logger.warning(
                "extraction_input_rejected",
                extra={"length": len(raw_text), "limit": limit},
            )
            raise InputTooLargeError(len(raw_text), limit)

        strategy = self._settings.segmenter_strategy.value
        if not raw_text.strip():
            raise NoContactsFoundError(strategy)

        start = time.perf_counter()
        chunks = self._segmenter.segment(raw_text)
        contacts = self._builder.build_all(chunks)
        if not contacts:
            logger.info(
                "no_contacts_found",
                extra={"strategy": strategy, "chunk_count": len(chunks)},
            )
            raise NoContactsFoundError(strategy)

        deduplicated = deduplicate(contacts, existing, self._settings.dedupe_key)
        elapsed_ms = (time.perf_counter() - start) * 1000

        logger.info(
            "leads_extracted",
            extra={
                "strategy": strategy,
                "chunk_count": len(chunks),
                "contact_count": len(deduplicated.unique),
                "duplicated_count": len(deduplicated.duplicated),
            },
        )
        record_latency("extraction_pipeline", "extract", elapsed_ms)
        record_extraction(
            strategy,
            len(chunks),
            len(deduplicated.unique),
            len(deduplicated.duplicated),
        )

        return ExtractionResult(
            contacts=deduplicated.unique,
            duplicated=deduplicated.duplicated,
            strategy=strategy,
            chunk_count=len(chunks),
        )


def extract_contacts(
    raw_text: str,
    settings: ExtractionSettings | None = None,
    existing: ExistingIdentityKeys | None = None,
) -> ExtractionResult:
    """Atalho: constrói o pipeline e executa uma extração."""
    return ExtractionPipeline(settings).extract(raw_text, existing)
