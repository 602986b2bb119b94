"""Testes do matcher e da normalização de telefone."""

from __future__ import annotations

from extraction.rules.phone import (
    DEFAULT_DDI,
    PhoneNumber,
    digits_only,
    match_phone,
    normalize_phone,
)


class TestMatchPhone:
    """Testes para match_phone."""

    def test_keyword_prefixed(self) -> None:
        assert match_phone("WhatsApp: (11) 98888-7777") == "11988887777"

    def test_bare_with_country_code(self) -> None:
        assert match_phone("+55 (11) 98888-7777") == "5511988887777"

    def test_keyword_takes_precedence_over_bare_digits(self) -> None:
        line = "Protocolo 1234567890123 - Tel: (21) 3333-4444"
        assert match_phone(line) == "2133334444"

    def test_bare_disabled(self) -> None:
        assert match_phone("(11) 98888-7777", allow_bare=False) is None

    def test_keyword_allowed_when_bare_disabled(self) -> None:
        line = "Cel 11 98888 7777 ana@acme.com"
        assert match_phone(line, allow_bare=False) == "11988887777"

    def test_short_sequences_ignored(self) -> None:
        assert match_phone("Desde 2023") is None


class TestNormalizePhone:
    """Testes para normalize_phone."""

    def test_removes_country_code(self) -> None:
        phone = normalize_phone("+55 (11) 98888-7777")
        assert phone == PhoneNumber(ddi="55", local="11988887777")
        assert phone.full == "5511988887777"

    def test_keeps_ddd_55(self) -> None:
        assert normalize_phone("(55) 99999-8888").local == "55999998888"

    def test_country_code_and_ddd_55(self) -> None:
        assert normalize_phone("+55 55 99999-8888").local == "55999998888"

    def test_empty(self) -> None:
        phone = normalize_phone(None)
        assert phone.ddi == DEFAULT_DDI
        assert phone.local == ""
        assert phone.full == ""

    def test_digits_only(self) -> None:
        assert digits_only("(11) 9.8888-7777") == "11988887777"
