"""Filters de logging: contexto do serviço e mascaramento de PII.

O texto colado pelo usuário é inteiro PII (nomes, emails, telefones).
Os módulos logam só contagens e códigos; o PiiMaskingFilter cobre o que
escapar disso em mensagens (ex.: str() de exceção de terceiros).
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Callable
    from re import Pattern

# Ordem importa: email antes de telefone, CNPJ antes de CPF
_PII_PATTERNS: Final[tuple[tuple[Pattern[str], str], ...]] = (
    (re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"), "[EMAIL]"),
    (re.compile(r"\b\d{2}\.?\d{3}\.?\d{3}/?\d{4}-?\d{2}\b"), "[CNPJ]"),
    (re.compile(r"\b\d{3}\.?\d{3}\.?\d{3}-?\d{2}\b"), "[CPF]"),
    (re.compile(r"(?:\+?55\s*)?\(?\b\d{2}\)?\s*9?\d{4}[\s-]?\d{4}\b"), "[PHONE]"),
)


def mask_pii(text: str) -> str:
    """Substitui emails, CNPJ, CPF e telefones BR por máscaras fixas.

    Determinístico: mesma entrada, mesma saída.

    Exemplo:
        mask_pii("ana@acme.com / (11) 98888-7777") -> "[EMAIL] / [PHONE]"
    """
    if not text:
        return text
    for pattern, mask in _PII_PATTERNS:
        text = pattern.sub(mask, text)
    return text


class CorrelationIdFilter(logging.Filter):
    """Grava `service` e `correlation_id` em todo record.

    Um correlation_id já presente (via `extra`) não é sobrescrito.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._get_correlation_id()
        record.service = self._service_name
        return True


class PiiMaskingFilter(logging.Filter):
    """Mascara PII na mensagem renderizada do record.

    Campos de `extra` não são tocados: quem loga garante que não têm PII.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = mask_pii(message)
        if masked != message:
            record.msg = masked
            record.args = None
        return True
