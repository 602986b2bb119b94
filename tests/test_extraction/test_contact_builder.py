"""Testes do ContactBuilder (precedência, fallbacks, políticas, heurísticas)."""

from __future__ import annotations

import pytest

from app.domain.contact import Contact
from config.settings.extraction import AcceptancePolicy, CompanyHeuristic
from extraction.segmenters.base import Chunk
from extraction.services.contact_builder import (
    ContactBuilder,
    email_domain_label,
    is_accepted,
)


def _chunk(*lines: str, fallback_name: str | None = None) -> Chunk:
    return Chunk(lines=lines, source_text="\n".join(lines), fallback_name=fallback_name)


class TestEmailDomainLabel:
    def test_label_before_first_dot(self) -> None:
        assert email_domain_label("ana@acme.com.br") == "acme"

    def test_no_domain(self) -> None:
        assert email_domain_label("ana@") is None


class TestContactBuilderFields:
    """Preenchimento de campos a partir das linhas do chunk."""

    def test_builds_full_contact(self) -> None:
        chunk = _chunk(
            "Ana Souza",
            "Gerente Comercial",
            "ana@acme.com.br",
            "WhatsApp: (11) 98888-7777",
            "Curitiba, PR",
            "Acme Tecnologia LTDA",
        )
        contact = ContactBuilder().build(chunk)

        assert contact == Contact(
            source_text=chunk.source_text,
            name="Ana Souza",
            job_title="Gerente Comercial",
            email="ana@acme.com.br",
            company="Acme Tecnologia",
            phone="11988887777",
            city="Curitiba",
        )

    def test_field_label_line_is_not_the_name(self) -> None:
        contact = ContactBuilder().build(_chunk("Email", "ana@acme.com", "Ana Souza"))

        assert contact is not None
        assert contact.name == "Ana Souza"
        assert contact.email == "ana@acme.com"

    def test_first_match_wins(self) -> None:
        contact = ContactBuilder().build(_chunk("primeiro@acme.com", "segundo@beta.com"))
        assert contact is not None
        assert contact.email == "primeiro@acme.com"

    def test_company_derived_from_email_domain(self) -> None:
        contact = ContactBuilder().build(_chunk("Ana Souza", "ana@acme.com.br"))
        assert contact is not None
        assert contact.company == "acme"

    def test_excluded_lines_never_populate_fields(self) -> None:
        chunk = _chunk(
            "Perfil no LinkedIn",
            "https://linkedin.com/in/ana-souza",
            "Fonte: Casa dos Dados - contato@casadosdados.com.br",
            "ana@acme.com",
        )
        contact = ContactBuilder().build(chunk)

        assert contact is not None
        assert contact.email == "ana@acme.com"
        assert contact.name is None

    def test_cnpj_is_not_phone(self) -> None:
        chunk = _chunk("ACME LTDA - CNPJ 12.345.678/0001-90", fallback_name="ACME LTDA")
        contact = ContactBuilder().build(chunk)

        assert contact is not None
        assert contact.phone is None
        assert contact.company == "ACME"

    def test_fallback_name_used_when_no_name_line(self) -> None:
        chunk = _chunk("ACME LTDA", "acme@acme.com", fallback_name="ACME LTDA")
        contact = ContactBuilder().build(chunk)

        assert contact is not None
        assert contact.name == "ACME LTDA"

    def test_name_line_beats_fallback(self) -> None:
        chunk = _chunk("ACME LTDA", "Ana Souza", fallback_name="ACME LTDA")
        contact = ContactBuilder().build(chunk)

        assert contact is not None
        assert contact.name == "Ana Souza"

    def test_source_text_preserved(self) -> None:
        chunk = Chunk(lines=("ana@acme.com",), source_text="  texto original  ")
        contact = ContactBuilder().build(chunk)
        assert contact is not None
        assert contact.source_text == "  texto original  "


class TestCompanyHeuristic:
    """SUFFIX exige sufixo societário; PROXIMITY aceita linha não classificada."""

    CHUNK = _chunk("Ana Souza", "Acme Tecnologia", "ana@gmail.com")

    def test_suffix_falls_back_to_email_domain(self) -> None:
        contact = ContactBuilder(company_heuristic=CompanyHeuristic.SUFFIX).build(self.CHUNK)
        assert contact is not None
        assert contact.company == "gmail"

    def test_proximity_uses_unclassified_line(self) -> None:
        contact = ContactBuilder(company_heuristic=CompanyHeuristic.PROXIMITY).build(self.CHUNK)
        assert contact is not None
        assert contact.company == "Acme Tecnologia"
        assert contact.name == "Ana Souza"


class TestAcceptancePolicy:
    """Os três limites da política mínima de campos."""

    @pytest.mark.parametrize(
        ("policy", "lines", "accepted"),
        [
            (AcceptancePolicy.NAME_ONLY, ("Ana Souza",), True),
            (AcceptancePolicy.NAME_ONLY, ("ana@acme.com",), False),
            (AcceptancePolicy.NAME_PLUS_ONE, ("Ana Souza",), False),
            (AcceptancePolicy.NAME_PLUS_ONE, ("Ana Souza", "Gerente"), True),
            (AcceptancePolicy.ANY_IDENTITY, ("ana@acme.com",), True),
            (AcceptancePolicy.ANY_IDENTITY, ("Tel: (11) 98888-7777",), True),
            (AcceptancePolicy.ANY_IDENTITY, ("Gerente Comercial",), False),
        ],
    )
    def test_policy_boundaries(
        self,
        policy: AcceptancePolicy,
        lines: tuple[str, ...],
        accepted: bool,
    ) -> None:
        contact = ContactBuilder(acceptance_policy=policy).build(_chunk(*lines))
        assert (contact is not None) is accepted

    def test_placeholder_name_is_empty(self) -> None:
        contact = Contact(source_text="", name="Nome não informado", job_title="Gerente")
        assert is_accepted(contact, AcceptancePolicy.NAME_PLUS_ONE) is False
        assert is_accepted(contact, AcceptancePolicy.ANY_IDENTITY) is False


class TestBuildAll:
    def test_keeps_order_and_drops_rejected(self) -> None:
        chunks = [
            _chunk("bruno@beta.com"),
            _chunk("Gerente"),
            _chunk("ana@acme.com"),
        ]
        contacts = ContactBuilder().build_all(chunks)
        assert [c.email for c in contacts] == ["bruno@beta.com", "ana@acme.com"]
