"""Matcher e normalização de telefone/WhatsApp.

Telefones brasileiros raspados aparecem em formatos variados:
"+55 (11) 98888-7777", "WhatsApp: 11 98888 7777", "(21) 3333-4444".
"""

from __future__ import annotations

import re
from dataclasses import dataclass

DEFAULT_DDI = "55"

MIN_PHONE_DIGITS = 8
MAX_PHONE_DIGITS = 20

# Prefixo explícito tem precedência sobre sequência numérica solta
_KEYWORD_PHONE_PATTERN = re.compile(
    r"\b(?:whats\s?app|telefone|celular|fone|cel|tel)\.?[\s:]*(\+?[\d\s().-]{8,25})",
    re.IGNORECASE,
)
_BARE_PHONE_PATTERN = re.compile(r"\+?\(?\d[\d\s()-]{9,24}")
_NON_DIGITS = re.compile(r"\D")


@dataclass(frozen=True, slots=True)
class PhoneNumber:
    """Telefone normalizado: DDI separado do número local."""

    ddi: str
    local: str

    @property
    def full(self) -> str:
        """Número completo com DDI (ex.: 5511988887777)."""
        return f"{self.ddi}{self.local}" if self.local else ""


def digits_only(text: str) -> str:
    """Remove tudo que não for dígito."""
    return _NON_DIGITS.sub("", text)


def _valid_length(digits: str) -> bool:
    return MIN_PHONE_DIGITS <= len(digits) <= MAX_PHONE_DIGITS


def match_phone(line: str, *, allow_bare: bool = True) -> str | None:
    """Extrai o primeiro telefone da linha (apenas dígitos).

    Args:
        line: Linha de texto.
        allow_bare: Se False, só aceita telefone precedido de palavra-chave
            (usado em linhas que contêm email).

    Returns:
        Dígitos do telefone ou None.
    """
    for match in _KEYWORD_PHONE_PATTERN.finditer(line):
        digits = digits_only(match.group(1))
        if _valid_length(digits):
            return digits

    if not allow_bare:
        return None

    for match in _BARE_PHONE_PATTERN.finditer(line):
        digits = digits_only(match.group(0))
        if _valid_length(digits):
            return digits
    return None


def normalize_phone(raw: str | None) -> PhoneNumber:
    """Separa DDI e número local.

    Remove o código do país "55" do início só quando o número tem 12+
    dígitos (DDI + DDD + número). Intencionalmente não remove todo "55"
    inicial: números de 10-11 dígitos começando com 55 são DDD 55 (RS) e
    ficam intactos, ex.: "(55) 99999-8888" -> "55999998888".

    Exemplo:
        normalize_phone("+55 (11) 98888-7777") -> PhoneNumber("55", "11988887777")
    """
    if not raw:
        return PhoneNumber(ddi=DEFAULT_DDI, local="")

    digits = digits_only(raw)
    if len(digits) >= 12 and digits.startswith(DEFAULT_DDI):
        digits = digits[len(DEFAULT_DDI):]
    return PhoneNumber(ddi=DEFAULT_DDI, local=digits)
