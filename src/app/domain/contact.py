"""Contact — registro extraído do texto bruto (ainda não persistido).

Existe apenas em memória durante uma execução da extração. Imutável:
depois do Deduplicator nunca é alterado; edições acontecem na forma
persistida (PersistedContact).
"""

from __future__ import annotations

from dataclasses import dataclass

# Valores que contam como "vazio" na política de aceitação
PLACEHOLDER_VALUES = frozenset({"", "-", "--", "n/a", "na", "null", "none", "nome não informado"})


def is_placeholder(value: str | None) -> bool:
    """Retorna True se o valor é vazio ou um placeholder conhecido."""
    if value is None:
        return True
    return value.strip().lower() in PLACEHOLDER_VALUES


def normalize_email_key(email: str | None) -> str | None:
    """Chave de identidade por email (trim + lowercase)."""
    if is_placeholder(email):
        return None
    return email.strip().lower()  # type: ignore[union-attr]


def normalize_phone_key(phone: str | None) -> str | None:
    """Chave de identidade por telefone (apenas dígitos, sem DDI 55)."""
    # Import local para evitar dependência circular com extraction
    from extraction.rules.phone import normalize_phone

    if is_placeholder(phone):
        return None
    return normalize_phone(phone).local or None


@dataclass(frozen=True, slots=True)
class Contact:
    """Contato candidato extraído de um chunk.

    Cada campo é None quando não encontrado. `source_text` é sempre a
    fatia literal do texto de entrada que originou o registro.
    """

    source_text: str
    name: str | None = None
    job_title: str | None = None
    email: str | None = None
    company: str | None = None
    phone: str | None = None
    city: str | None = None

    @property
    def email_key(self) -> str | None:
        return normalize_email_key(self.email)

    @property
    def phone_key(self) -> str | None:
        return normalize_phone_key(self.phone)

    def identity_keys(self) -> tuple[str | None, str | None]:
        """Par (chave de email, chave de telefone) normalizadas."""
        return self.email_key, self.phone_key

    def has_any_identity(self) -> bool:
        """True se email, telefone ou nome estão preenchidos."""
        return not (
            is_placeholder(self.email)
            and is_placeholder(self.phone)
            and is_placeholder(self.name)
        )

    def filled_fields(self) -> list[str]:
        """Nomes dos campos preenchidos (sem placeholders)."""
        values = {
            "name": self.name,
            "job_title": self.job_title,
            "email": self.email,
            "company": self.company,
            "phone": self.phone,
            "city": self.city,
        }
        return [field for field, value in values.items() if not is_placeholder(value)]

    def to_row(self) -> dict[str, str]:
        """Linha plana (strings) para exportação e busca."""
        return {
            "name": self.name or "",
            "job_title": self.job_title or "",
            "email": self.email or "",
            "company": self.company or "",
            "phone": self.phone or "",
            "city": self.city or "",
            "source_text": self.source_text,
        }
