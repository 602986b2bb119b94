"""ContactBuilder — aplica os matchers a um chunk e monta o Contact.

Ordem por linha: email → telefone → cargo → cidade → empresa → nome.
Cada campo é preenchido uma única vez (primeiro match vence); o matcher
de nome próprio só roda em linhas que nenhum matcher anterior classificou.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.domain.contact import Contact, is_placeholder
from config.logging import log_fallback
from config.settings.extraction import AcceptancePolicy, CompanyHeuristic
from extraction.rules.matchers import (
    is_excluded_line,
    match_city,
    match_company,
    match_email,
    match_job_title,
    match_proper_name,
    strip_document_fragment,
)
from extraction.rules.phone import match_phone

if TYPE_CHECKING:
    from extraction.segmenters.base import Chunk

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _FieldSlots:
    """Campos em preenchimento durante a varredura de um chunk."""

    name: str | None = None
    job_title: str | None = None
    email: str | None = None
    company: str | None = None
    phone: str | None = None
    city: str | None = None


def email_domain_label(email: str) -> str | None:
    """Rótulo do domínio antes do primeiro ponto.

    Exemplo:
        email_domain_label("ana@acme.com.br") -> "acme"
    """
    _, _, domain = email.partition("@")
    label = domain.split(".", 1)[0].strip()
    return label or None


def is_accepted(contact: Contact, policy: AcceptancePolicy) -> bool:
    """Verifica a política mínima de campos para emitir o contato."""
    has_name = not is_placeholder(contact.name)
    if policy is AcceptancePolicy.NAME_ONLY:
        return has_name
    if policy is AcceptancePolicy.NAME_PLUS_ONE:
        others = [field for field in contact.filled_fields() if field != "name"]
        return has_name and bool(others)
    return contact.has_any_identity()


class ContactBuilder:
    """Constrói no máximo um Contact por chunk."""

    def __init__(
        self,
        acceptance_policy: AcceptancePolicy = AcceptancePolicy.ANY_IDENTITY,
        company_heuristic: CompanyHeuristic = CompanyHeuristic.SUFFIX,
    ) -> None:
        self._acceptance_policy = AcceptancePolicy(acceptance_policy)
        self._company_heuristic = CompanyHeuristic(company_heuristic)

    def build(self, chunk: Chunk) -> Contact | None:
        """Aplica os matchers às linhas do chunk.

        Returns:
            Contact aceito pela política configurada, ou None.
        """
        slots = _FieldSlots()
        for line in chunk.lines:
            if is_excluded_line(line):
                continue
            self._scan_line(line, slots)

        if slots.company is None and slots.email:
            slots.company = email_domain_label(slots.email)
            if slots.company:
                log_fallback(logger, "contact_builder.company", reason="email_domain")

        if slots.name is None and chunk.fallback_name:
            slots.name = chunk.fallback_name
            log_fallback(logger, "contact_builder.name", reason="chunk_fallback_name")

        contact = Contact(
            source_text=chunk.source_text,
            name=slots.name,
            job_title=slots.job_title,
            email=slots.email,
            company=slots.company,
            phone=slots.phone,
            city=slots.city,
        )
        if not is_accepted(contact, self._acceptance_policy):
            logger.debug(
                "contact_rejected_by_policy",
                extra={"policy": self._acceptance_policy.value},
            )
            return None
        return contact

    def build_all(self, chunks: list[Chunk]) -> list[Contact]:
        """Constrói contatos para todos os chunks, mantendo a ordem."""
        contacts: list[Contact] = []
        for chunk in chunks:
            contact = self.build(chunk)
            if contact is not None:
                contacts.append(contact)
        return contacts

    def _scan_line(self, line: str, slots: _FieldSlots) -> None:
        classified = False

        email = match_email(line)
        if email:
            classified = True
            slots.email = slots.email or email

        # CNPJ/CPF não pode ser confundido com telefone
        phone = match_phone(strip_document_fragment(line), allow_bare=email is None)
        if phone:
            classified = True
            slots.phone = slots.phone or phone

        job_title = match_job_title(line)
        if job_title:
            classified = True
            slots.job_title = slots.job_title or job_title

        city = match_city(line)
        if city:
            classified = True
            slots.city = slots.city or city

        company = match_company(line)
        if company:
            classified = True
            slots.company = slots.company or company

        if classified:
            return

        if slots.name is None:
            name = match_proper_name(line)
            if name:
                slots.name = name
                return

        if self._company_heuristic is CompanyHeuristic.PROXIMITY and slots.company is None:
            slots.company = line.strip()
