"""Estratégias de segmentação do texto bruto em chunks.

Selecionadas por configuração (EXTRACTION_STRATEGY), nunca por
duplicação de código: cada variante implementa `Segmenter.segment`.
"""

from __future__ import annotations

from config.settings.extraction import DEFAULT_WINDOW_RADIUS, SegmenterStrategy
from extraction.segmenters.base import (
    Chunk,
    Segmenter,
    SourceLine,
    slice_source,
    split_source_lines,
)
from extraction.segmenters.header import HeaderSegmenter, is_header_line
from extraction.segmenters.paragraph import ParagraphSegmenter
from extraction.segmenters.window import WindowSegmenter


def create_segmenter(
    strategy: SegmenterStrategy | str,
    window_radius: int = DEFAULT_WINDOW_RADIUS,
) -> Segmenter:
    """Factory da estratégia configurada.

    Raises:
        ValueError: Se a estratégia for desconhecida.
    """
    selected = SegmenterStrategy(strategy)
    if selected is SegmenterStrategy.PARAGRAPH:
        return ParagraphSegmenter()
    if selected is SegmenterStrategy.HEADER:
        return HeaderSegmenter()
    return WindowSegmenter(radius=window_radius)


__all__ = [
    "Chunk",
    "HeaderSegmenter",
    "ParagraphSegmenter",
    "Segmenter",
    "SourceLine",
    "WindowSegmenter",
    "create_segmenter",
    "is_header_line",
    "slice_source",
    "split_source_lines",
]
