"""Testes das estratégias de segmentação."""

from __future__ import annotations

import pytest

from config.settings.extraction import SegmenterStrategy
from extraction.segmenters import (
    HeaderSegmenter,
    ParagraphSegmenter,
    WindowSegmenter,
    create_segmenter,
    slice_source,
    split_source_lines,
)


class TestSourceLines:
    """Testes para split_source_lines e slice_source."""

    def test_offsets_cover_original_text(self) -> None:
        text = "  Ana Souza \r\nana@acme.com\n\nfim"
        lines = split_source_lines(text)

        assert [line.text for line in lines] == ["Ana Souza", "ana@acme.com", "", "fim"]
        assert text[lines[1].start:lines[1].end] == "ana@acme.com"
        assert text[lines[3].start:lines[3].end] == "fim"

    def test_slice_source_is_literal(self) -> None:
        text = "a\n  b  \nc"
        lines = split_source_lines(text)
        assert slice_source(text, lines[0:2]) == "a\n  b"
        assert slice_source(text, []) == ""


class TestParagraphSegmenter:
    """Testes para ParagraphSegmenter."""

    def test_blank_line_separates_blocks(self) -> None:
        text = "Ana Souza\nGerente\nana@acme.com\n\n  \nBruno Lima\nbruno@beta.com\n"
        chunks = ParagraphSegmenter().segment(text)

        assert len(chunks) == 2
        assert chunks[0].lines == ("Ana Souza", "Gerente", "ana@acme.com")
        assert chunks[0].source_text == "Ana Souza\nGerente\nana@acme.com"
        assert chunks[0].fallback_name == "Ana Souza"
        assert chunks[1].fallback_name == "Bruno Lima"

    def test_multiple_tabs_separate_blocks(self) -> None:
        chunks = ParagraphSegmenter().segment("Ana Souza\t\tBruno Lima")
        assert [chunk.lines for chunk in chunks] == [("Ana Souza",), ("Bruno Lima",)]

    def test_whitespace_only(self) -> None:
        assert ParagraphSegmenter().segment(" \n\n\t ") == []


class TestHeaderSegmenter:
    """Testes para HeaderSegmenter."""

    TEXT = (
        "Resultado da busca\n"
        "ACME COMERCIO LTDA - CNPJ 12.345.678/0001-90\n"
        "contato@acme.com.br\n"
        "BETA SERVICOS EIRELI\n"
        "São Paulo - SP\n"
    )

    def test_each_company_line_opens_chunk(self) -> None:
        chunks = HeaderSegmenter().segment(self.TEXT)

        assert len(chunks) == 2
        assert chunks[0].lines == (
            "ACME COMERCIO LTDA - CNPJ 12.345.678/0001-90",
            "contato@acme.com.br",
        )
        assert chunks[1].lines == ("BETA SERVICOS EIRELI", "São Paulo - SP")

    def test_lines_before_first_header_are_discarded(self) -> None:
        chunks = HeaderSegmenter().segment(self.TEXT)
        assert all("Resultado" not in chunk.source_text for chunk in chunks)

    def test_fallback_name_without_cnpj(self) -> None:
        chunks = HeaderSegmenter().segment(self.TEXT)
        assert chunks[0].fallback_name == "ACME COMERCIO LTDA"

    def test_excluded_company_line_does_not_open_chunk(self) -> None:
        text = "ACME LTDA\nFonte: Casa dos Dados LTDA\nacme@acme.com"
        chunks = HeaderSegmenter().segment(text)

        assert len(chunks) == 1
        assert chunks[0].source_text == text

    def test_no_header(self) -> None:
        assert HeaderSegmenter().segment("Ana Souza\nana@acme.com") == []


class TestWindowSegmenter:
    """Testes para WindowSegmenter."""

    TEXT = "Ana Souza\nana@acme.com\nGerente\n\nBruno Lima\nbruno@beta.com"

    def test_one_chunk_per_email(self) -> None:
        chunks = WindowSegmenter(radius=1).segment(self.TEXT)

        assert len(chunks) == 2
        assert chunks[0].anchor_line == "ana@acme.com"
        assert chunks[1].anchor_line == "bruno@beta.com"

    def test_scan_order_is_anchor_then_distance(self) -> None:
        chunks = WindowSegmenter(radius=1).segment(self.TEXT)
        assert chunks[0].lines == ("ana@acme.com", "Ana Souza", "Gerente")
        assert chunks[1].lines == ("bruno@beta.com", "Bruno Lima")

    def test_source_text_is_window_slice(self) -> None:
        chunks = WindowSegmenter(radius=1).segment(self.TEXT)
        assert chunks[0].source_text == "Ana Souza\nana@acme.com\nGerente"
        assert chunks[1].source_text == "Bruno Lima\nbruno@beta.com"

    def test_no_fallback_name(self) -> None:
        chunks = WindowSegmenter().segment(self.TEXT)
        assert all(chunk.fallback_name is None for chunk in chunks)

    def test_email_on_excluded_line_is_not_anchor(self) -> None:
        text = "Perfil no LinkedIn: ana@acme.com"
        assert WindowSegmenter().segment(text) == []

    def test_no_email_no_chunks(self) -> None:
        assert WindowSegmenter().segment("Bruno Lima\nWhatsApp: (11) 98888-7777") == []

    def test_negative_radius(self) -> None:
        with pytest.raises(ValueError):
            WindowSegmenter(radius=-1)


class TestCreateSegmenter:
    """Testes para a factory create_segmenter."""

    @pytest.mark.parametrize(
        ("strategy", "expected"),
        [
            (SegmenterStrategy.PARAGRAPH, ParagraphSegmenter),
            ("header", HeaderSegmenter),
            (SegmenterStrategy.WINDOW, WindowSegmenter),
        ],
    )
    def test_selects_strategy(self, strategy: SegmenterStrategy | str, expected: type) -> None:
        assert isinstance(create_segmenter(strategy), expected)

    def test_window_radius_forwarded(self) -> None:
        segmenter = create_segmenter(SegmenterStrategy.WINDOW, window_radius=2)
        assert isinstance(segmenter, WindowSegmenter)
        assert segmenter.radius == 2

    def test_unknown_strategy(self) -> None:
        with pytest.raises(ValueError):
            create_segmenter("fuzzy")
