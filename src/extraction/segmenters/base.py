"""Contrato comum das estratégias de segmentação.

Um Segmenter recebe o texto bruto colado pelo usuário e devolve a
sequência de chunks candidatos (um por entidade), sempre de forma
determinística e preservando a ordem do texto.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Sequence

    from config.settings.extraction import SegmenterStrategy


@dataclass(frozen=True, slots=True)
class SourceLine:
    """Linha do texto original com seus offsets.

    Attributes:
        index: Posição da linha no texto (0-based)
        text: Conteúdo sem espaços nas bordas
        start: Offset do primeiro caractere da linha
        end: Offset logo após o último caractere (sem quebra de linha)
    """

    index: int
    text: str
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class Chunk:
    """Fatia contígua do texto tratada como um contato candidato.

    Attributes:
        lines: Linhas não vazias, já aparadas, na ordem de varredura
        source_text: Fatia literal do texto de entrada
        fallback_name: Nome usado quando nenhum matcher de nome disparar
        anchor_line: Linha com email que originou a janela (estratégia window)
    """

    lines: tuple[str, ...]
    source_text: str
    fallback_name: str | None = None
    anchor_line: str | None = None


def split_source_lines(text: str) -> list[SourceLine]:
    """Quebra o texto em linhas preservando offsets (\\n, \\r\\n, \\r)."""
    lines: list[SourceLine] = []
    offset = 0
    for index, raw in enumerate(text.splitlines(keepends=True)):
        content = raw.rstrip("\r\n")
        lines.append(
            SourceLine(
                index=index,
                text=content.strip(),
                start=offset,
                end=offset + len(content),
            )
        )
        offset += len(raw)
    return lines


def slice_source(text: str, lines: Sequence[SourceLine]) -> str:
    """Fatia literal do texto entre a primeira e a última linha informadas."""
    if not lines:
        return ""
    return text[lines[0].start:lines[-1].end].strip()


class Segmenter(ABC):
    """Estratégia de segmentação (uma por implementação)."""

    strategy: ClassVar[SegmenterStrategy]

    @abstractmethod
    def segment(self, text: str) -> list[Chunk]:
        """Divide o texto bruto em chunks candidatos.

        Args:
            text: Texto colado pelo usuário.

        Returns:
            Chunks na ordem em que aparecem no texto.
        """
