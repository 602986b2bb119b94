"""Exportação de contatos em CSV.

Formato: UTF-8, separado por vírgula, todos os campos entre aspas
(aspas internas duplicadas), cabeçalho na primeira linha e uma linha
por contato na ordem recebida.
"""

from __future__ import annotations

import csv
import io
from typing import TYPE_CHECKING

from extraction.rules.phone import DEFAULT_DDI, normalize_phone

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from app.domain.contact import Contact
    from app.domain.persisted_contact import PersistedContact

CONTACTS_HEADER = ("#", "Nome", "Cargo", "Email", "Empresa", "WhatsApp", "Cidade")

PERSISTED_CONTACTS_HEADER = (
    *CONTACTS_HEADER,
    "Fonte",
    "Nicho",
    "Enviado Spotter",
    "Data de Criação",
)

# Modelo de importação em massa do Spotter (ordem das colunas importa)
SPOTTER_TEMPLATE_HEADER = (
    "Nome do Lead",
    "Origem",
    "Sub-Origem",
    "Mercado",
    "Produto",
    "Site",
    "País",
    "Estado",
    "Cidade",
    "Logradouro",
    "Número",
    "Bairro",
    "Complemento",
    "CEP",
    "DDI",
    "Telefones",
    "Observação",
    "CPF/CNPJ",
    "Email Pré-vendedor",
    "Nome Contato",
    "E-mail Contato",
    "Cargo Contato",
    "DDI Contato",
    "Telefones Contato",
    "Tipo do Serv. Comunicação",
    "ID do Serv. Comunicação",
    "Faturamento",
    "Contato Anterior com IA",
    "Avaliacao Google",
    "Total Reviews Google",
    "Nome da Empresa",
    "Etapa",
    "Funil",
)

TEMPLATE_COUNTRY = "Brasil"


def _write_csv(header: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(header)
    writer.writerows(rows)
    return buffer.getvalue()


def export_contacts_csv(contacts: Sequence[Contact]) -> str:
    """CSV dos contatos extraídos (`#, Nome, Cargo, Email, Empresa, WhatsApp, Cidade`)."""
    rows = (
        (
            str(index),
            contact.name or "",
            contact.job_title or "",
            contact.email or "",
            contact.company or "",
            contact.phone or "",
            contact.city or "",
        )
        for index, contact in enumerate(contacts, start=1)
    )
    return _write_csv(CONTACTS_HEADER, rows)


def export_persisted_contacts_csv(contacts: Sequence[PersistedContact]) -> str:
    """CSV da listagem de contatos salvos, com fonte, nicho e status no CRM."""
    rows = (
        (
            str(index),
            contact.name or "",
            contact.job_title or "",
            contact.email or "",
            contact.company or "",
            contact.phone or "",
            contact.city or "",
            contact.source.label,
            contact.niche_name or "",
            "Sim" if contact.synced_to_crm else "Não",
            contact.created_at.strftime("%d/%m/%Y"),
        )
        for index, contact in enumerate(contacts, start=1)
    )
    return _write_csv(PERSISTED_CONTACTS_HEADER, rows)


def _spotter_template_row(contact: PersistedContact, pre_seller_email: str) -> tuple[str, ...]:
    phone = normalize_phone(contact.phone).local
    name = contact.name or ""
    return (
        name,                         # Nome do Lead
        contact.origin or "",         # Origem
        contact.source.label,         # Sub-Origem
        contact.niche_name or "",     # Mercado
        "",                           # Produto
        "",                           # Site
        TEMPLATE_COUNTRY,             # País
        "",                           # Estado
        contact.city or "",           # Cidade
        "",                           # Logradouro
        "",                           # Número
        "",                           # Bairro
        "",                           # Complemento
        "",                           # CEP
        DEFAULT_DDI,                  # DDI
        phone,                        # Telefones
        "",                           # Observação
        "",                           # CPF/CNPJ
        pre_seller_email,             # Email Pré-vendedor
        name,                         # Nome Contato
        contact.email or "",          # E-mail Contato
        contact.job_title or "",      # Cargo Contato
        DEFAULT_DDI,                  # DDI Contato
        phone,                        # Telefones Contato
        "",                           # Tipo do Serv. Comunicação
        "",                           # ID do Serv. Comunicação
        "",                           # Faturamento
        "",                           # Contato Anterior com IA
        "",                           # Avaliacao Google
        "",                           # Total Reviews Google
        contact.company or "",        # Nome da Empresa
        "",                           # Etapa
        "",                           # Funil
    )


def export_spotter_template_csv(
    contacts: Sequence[PersistedContact],
    pre_seller_email: str = "",
) -> str:
    """CSV no modelo de importação do Spotter (33 colunas)."""
    rows = (_spotter_template_row(contact, pre_seller_email) for contact in contacts)
    return _write_csv(SPOTTER_TEMPLATE_HEADER, rows)
