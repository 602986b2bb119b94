"""correlation_id por request HTTP e por envio ao CRM.

Guardado num ContextVar: cada task asyncio enxerga o seu, então os envios
paralelos de um bulk não se misturam nos logs.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

_current: ContextVar[str] = ContextVar("correlation_id", default="")


def new_correlation_id() -> str:
    return uuid.uuid4().hex


def get_correlation_id() -> str:
    """correlation_id ativo; vazio fora de qualquer escopo."""
    return _current.get()


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Roda o bloco sob `correlation_id` (ou um novo) e restaura o anterior.

    Valores vazios ou só com espaços são tratados como ausentes.
    """
    value = (correlation_id or "").strip() or new_correlation_id()
    token = _current.set(value)
    try:
        yield value
    finally:
        _current.reset(token)
