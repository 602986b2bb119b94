"""Deduplicator — separa contatos únicos de duplicados.

Duplicado é o contato cuja chave de identidade já apareceu no mesmo
lote ou já existe no armazenamento do usuário. Contatos sem chave
(nem email nem telefone) são sempre mantidos como únicos.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from config.settings.extraction import DedupeKeyMode

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.domain.contact import Contact


@dataclass(frozen=True, slots=True)
class ExistingIdentityKeys:
    """Chaves já persistidas para o usuário (normalizadas)."""

    emails: frozenset[str] = field(default_factory=frozenset)
    phones: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def empty(cls) -> ExistingIdentityKeys:
        return cls()

    def contains(self, email_key: str | None, phone_key: str | None) -> bool:
        """True se o email ou o telefone já existe."""
        return (email_key is not None and email_key in self.emails) or (
            phone_key is not None and phone_key in self.phones
        )


@dataclass(frozen=True, slots=True)
class DeduplicationResult:
    """Resultado da deduplicação, preservando a ordem de entrada."""

    unique: tuple[Contact, ...]
    duplicated: tuple[Contact, ...]

    @property
    def total(self) -> int:
        return len(self.unique) + len(self.duplicated)


def identity_key(
    contact: Contact,
    key_mode: DedupeKeyMode = DedupeKeyMode.EMAIL_OR_PHONE,
) -> str | None:
    """Chave primária do contato segundo o modo configurado.

    - EMAIL_OR_PHONE: email normalizado, senão telefone normalizado
    - EMAIL_AND_PHONE: par "email|telefone" (ao menos um presente)
    """
    email_key, phone_key = contact.identity_keys()
    if key_mode is DedupeKeyMode.EMAIL_AND_PHONE:
        if email_key is None and phone_key is None:
            return None
        return f"{email_key or ''}|{phone_key or ''}"
    return email_key or phone_key


def deduplicate(
    contacts: Iterable[Contact],
    existing: ExistingIdentityKeys | None = None,
    key_mode: DedupeKeyMode = DedupeKeyMode.EMAIL_OR_PHONE,
) -> DeduplicationResult:
    """Particiona contatos em únicos e duplicados.

    Args:
        contacts: Contatos na ordem de extração.
        existing: Chaves já persistidas (opcional).
        key_mode: Modo da chave de identidade.

    Returns:
        DeduplicationResult com `unique` + `duplicated` cobrindo toda a entrada.
    """
    known = existing or ExistingIdentityKeys.empty()
    mode = DedupeKeyMode(key_mode)
    # Emails têm "@" e telefones só dígitos: um único conjunto basta
    seen: set[str] = set()
    unique: list[Contact] = []
    duplicated: list[Contact] = []

    for contact in contacts:
        key = identity_key(contact, mode)
        if key is None:
            unique.append(contact)
            continue

        email_key, phone_key = contact.identity_keys()
        if key in seen or _exists(known, mode, email_key, phone_key):
            duplicated.append(contact)
            continue

        seen.add(key)
        seen.update(k for k in (email_key, phone_key) if k)
        unique.append(contact)

    return DeduplicationResult(unique=tuple(unique), duplicated=tuple(duplicated))


def _exists(
    known: ExistingIdentityKeys,
    mode: DedupeKeyMode,
    email_key: str | None,
    phone_key: str | None,
) -> bool:
    if mode is DedupeKeyMode.EMAIL_OR_PHONE:
        return known.contains(email_key, phone_key)
    # Modo par: só é duplicado se todos os componentes presentes já existem
    if email_key is not None and email_key not in known.emails:
        return False
    if phone_key is not None and phone_key not in known.phones:
        return False
    return True
