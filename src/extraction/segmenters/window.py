"""Estratégia window: janela de linhas ao redor de cada email (âncora).

Mais robusta para texto ruidoso de resultados de busca, onde não há
separador confiável entre entidades. Só produz contatos com email.
"""

from __future__ import annotations

from config.settings.extraction import DEFAULT_WINDOW_RADIUS, SegmenterStrategy
from extraction.rules.matchers import is_excluded_line, match_email
from extraction.segmenters.base import (
    Chunk,
    Segmenter,
    SourceLine,
    slice_source,
    split_source_lines,
)


class WindowSegmenter(Segmenter):
    """Um chunk por linha com email, cobrindo `radius` linhas antes/depois.

    Ordem de varredura dentro da janela: a âncora primeiro e depois as
    demais linhas por distância crescente (a de cima antes da de baixo),
    de modo que o primeiro match de cada campo é o mais próximo da âncora.
    """

    strategy = SegmenterStrategy.WINDOW

    def __init__(self, radius: int = DEFAULT_WINDOW_RADIUS) -> None:
        if radius < 0:
            raise ValueError("radius deve ser >= 0")
        self._radius = radius

    @property
    def radius(self) -> int:
        return self._radius

    def segment(self, text: str) -> list[Chunk]:
        lines = split_source_lines(text)
        chunks: list[Chunk] = []
        for position, line in enumerate(lines):
            if not line.text or is_excluded_line(line.text):
                continue
            if match_email(line.text) is None:
                continue
            chunks.append(self._build_chunk(text, lines, position))
        return chunks

    def _build_chunk(self, text: str, lines: list[SourceLine], anchor: int) -> Chunk:
        start = max(0, anchor - self._radius)
        end = min(len(lines) - 1, anchor + self._radius)

        ordered: list[SourceLine] = [lines[anchor]]
        for distance in range(1, self._radius + 1):
            for position in (anchor - distance, anchor + distance):
                if start <= position <= end:
                    ordered.append(lines[position])

        return Chunk(
            lines=tuple(line.text for line in ordered if line.text),
            source_text=slice_source(text, lines[start:end + 1]),
            anchor_line=lines[anchor].text,
        )
