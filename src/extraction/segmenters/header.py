"""Estratégia header: cada linha de empresa (LTDA, S.A., CNPJ...) abre um chunk.

Formato típico de listagens de diretório (ex.: Casa dos Dados):

    ACME COMERCIO LTDA - CNPJ 12.345.678/0001-90
    Contato: contato@acme.com.br
    Gerente Comercial
    SEGUNDA EMPRESA EIRELI
    ...
"""

from __future__ import annotations

from config.settings.extraction import SegmenterStrategy
from extraction.rules.matchers import (
    is_company_line,
    is_excluded_line,
    strip_document_fragment,
)
from extraction.segmenters.base import (
    Chunk,
    Segmenter,
    SourceLine,
    slice_source,
    split_source_lines,
)


def is_header_line(line: str) -> bool:
    """Linha de empresa que não cita fonte conhecida nem URL."""
    return bool(line) and is_company_line(line) and not is_excluded_line(line)


class HeaderSegmenter(Segmenter):
    """Agrupa linhas a partir de cada cabeçalho de empresa.

    Linhas anteriores ao primeiro cabeçalho são descartadas. O nome de
    fallback é o cabeçalho sem o fragmento de CNPJ.
    """

    strategy = SegmenterStrategy.HEADER

    def segment(self, text: str) -> list[Chunk]:
        groups: list[list[SourceLine]] = []
        for line in split_source_lines(text):
            if not line.text:
                continue
            if is_header_line(line.text):
                groups.append([line])
            elif groups:
                groups[-1].append(line)

        return [self._build_chunk(text, group) for group in groups]

    @staticmethod
    def _build_chunk(text: str, group: list[SourceLine]) -> Chunk:
        header = group[0].text
        return Chunk(
            lines=tuple(line.text for line in group),
            source_text=slice_source(text, group),
            fallback_name=strip_document_fragment(header) or header,
        )
