"""Testes da exportação de contatos em CSV."""

from __future__ import annotations

import csv
import io
from datetime import UTC, datetime

from app.domain.contact import Contact
from app.domain.persisted_contact import ContactSource, PersistedContact
from app.services.contact_export import (
    CONTACTS_HEADER,
    PERSISTED_CONTACTS_HEADER,
    SPOTTER_TEMPLATE_HEADER,
    export_contacts_csv,
    export_persisted_contacts_csv,
    export_spotter_template_csv,
)


def _rows(content: str) -> list[list[str]]:
    return list(csv.reader(io.StringIO(content)))


def _persisted(**overrides: object) -> PersistedContact:
    data: dict[str, object] = {
        "id": "c-1",
        "user_id": "u-1",
        "name": "Ana Souza",
        "job_title": "Gerente Comercial",
        "email": "ana@acme.com",
        "company": "Acme",
        "phone": "+55 (11) 98888-7777",
        "city": "Curitiba",
        "source": ContactSource.CASA_DOS_DADOS,
        "origin": "Feira 2024",
        "niche_name": "Tecnologia",
        "created_at": datetime(2024, 3, 5, 12, 0, tzinfo=UTC),
    }
    data.update(overrides)
    return PersistedContact(**data)  # type: ignore[arg-type]


class TestExportContacts:
    """Testes para export_contacts_csv."""

    def test_header_and_rows(self) -> None:
        contacts = [
            Contact(source_text="x", name="Ana Souza", email="ana@acme.com"),
            Contact(source_text="y", name='Bruno "Bebeto" Lima', company="Beta, Ltda"),
        ]

        content = export_contacts_csv(contacts)
        rows = _rows(content)

        assert tuple(rows[0]) == CONTACTS_HEADER
        assert rows[1] == ["1", "Ana Souza", "", "ana@acme.com", "", "", ""]
        assert rows[2][0] == "2"
        assert rows[2][1] == 'Bruno "Bebeto" Lima'
        assert rows[2][4] == "Beta, Ltda"

    def test_all_fields_quoted(self) -> None:
        content = export_contacts_csv([Contact(source_text="x", name="Ana")])

        lines = content.splitlines()
        assert lines[0].startswith('"#","Nome"')
        assert lines[1] == '"1","Ana","","","","",""'
        assert content.endswith("\n")

    def test_inner_quotes_doubled(self) -> None:
        content = export_contacts_csv([Contact(source_text="x", name='Ana "A"')])
        assert '"Ana ""A"""' in content

    def test_empty_list_has_only_header(self) -> None:
        assert len(_rows(export_contacts_csv([]))) == 1


class TestExportPersistedContacts:
    def test_columns(self) -> None:
        rows = _rows(
            export_persisted_contacts_csv(
                [_persisted(), _persisted(id="c-2", synced_to_crm=True, niche_name=None)]
            )
        )

        assert tuple(rows[0]) == PERSISTED_CONTACTS_HEADER
        assert rows[1][7:] == ["Casa dos Dados", "Tecnologia", "Não", "05/03/2024"]
        assert rows[2][8:10] == ["", "Sim"]


class TestSpotterTemplate:
    """Testes para o modelo de importação do Spotter."""

    def test_header_has_33_columns(self) -> None:
        assert len(SPOTTER_TEMPLATE_HEADER) == 33

    def test_row_mapping(self) -> None:
        rows = _rows(export_spotter_template_csv([_persisted()], pre_seller_email="sdr@empresa.com"))
        row = dict(zip(rows[0], rows[1], strict=True))

        assert row["Nome do Lead"] == "Ana Souza"
        assert row["Origem"] == "Feira 2024"
        assert row["Sub-Origem"] == "Casa dos Dados"
        assert row["Mercado"] == "Tecnologia"
        assert row["País"] == "Brasil"
        assert row["DDI"] == "55"
        assert row["Telefones"] == "11988887777"
        assert row["Telefones Contato"] == "11988887777"
        assert row["Email Pré-vendedor"] == "sdr@empresa.com"
        assert row["E-mail Contato"] == "ana@acme.com"
        assert row["Nome da Empresa"] == "Acme"
        assert row["Funil"] == ""

    def test_missing_phone(self) -> None:
        rows = _rows(export_spotter_template_csv([_persisted(phone=None)]))
        assert len(rows[1]) == 33
        assert rows[1][15] == ""
