"""Estratégia paragraph: um chunk por bloco separado por linha em branco."""

from __future__ import annotations

import re

from config.settings.extraction import SegmenterStrategy
from extraction.rules.matchers import is_excluded_line
from extraction.segmenters.base import Chunk, Segmenter

# Linha em branco (com ou sem espaços) ou sequência de 2+ tabs
_BLOCK_SEPARATOR = re.compile(r"\n\s*\n|\t\t+")


class ParagraphSegmenter(Segmenter):
    """Divide o texto em blocos; cada bloco não vazio vira um chunk.

    O nome de fallback é a primeira linha do bloco que não cita fonte
    conhecida nem URL.
    """

    strategy = SegmenterStrategy.PARAGRAPH

    def segment(self, text: str) -> list[Chunk]:
        chunks: list[Chunk] = []
        position = 0
        for separator in _BLOCK_SEPARATOR.finditer(text):
            self._append_block(chunks, text[position:separator.start()])
            position = separator.end()
        self._append_block(chunks, text[position:])
        return chunks

    @staticmethod
    def _append_block(chunks: list[Chunk], block: str) -> None:
        lines = tuple(line.strip() for line in block.splitlines() if line.strip())
        if not lines:
            return
        chunks.append(
            Chunk(
                lines=lines,
                source_text=block.strip(),
                fallback_name=next(
                    (line for line in lines if not is_excluded_line(line)),
                    None,
                ),
            )
        )
