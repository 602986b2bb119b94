"""Protocolo de acesso à credencial do CRM por usuário."""

from __future__ import annotations

from typing import Protocol


class CredentialStoreProtocol(Protocol):
    """Contrato para obter o token do Spotter de um usuário."""

    async def get_crm_token(self, user_id: str) -> str | None:
        """Token configurado pelo usuário, ou None se ausente."""
        ...
