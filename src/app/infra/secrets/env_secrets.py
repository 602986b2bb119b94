"""Token do Spotter lido de variáveis de ambiente.

Backend `env` do CREDENTIAL_STORE_BACKEND: serve a CLI e instalações de um
usuário só. O token é relido a cada chamada, então rotacionar a variável
não exige reiniciar o processo.
"""

from __future__ import annotations

import logging
import os
import re

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_VAR = "SPOTTER_TOKEN"

_NOT_ENV_SAFE = re.compile(r"[^A-Z0-9]+")


def token_var_for(user_id: str, base: str = DEFAULT_TOKEN_VAR) -> str:
    """Nome da variável do usuário: "user-1" → SPOTTER_TOKEN_USER_1."""
    suffix = _NOT_ENV_SAFE.sub("_", user_id.upper()).strip("_")
    return f"{base}_{suffix}" if suffix else base


class EnvCredentialStore:
    """SPOTTER_TOKEN_<USER_ID> com SPOTTER_TOKEN como padrão comum."""

    def __init__(self, base_var: str = DEFAULT_TOKEN_VAR) -> None:
        self._base_var = base_var

    async def get_crm_token(self, user_id: str) -> str | None:
        for var in (token_var_for(user_id, self._base_var), self._base_var):
            value = os.environ.get(var, "").strip()
            if value:
                return value
        logger.debug("crm_token_not_in_env", extra={"user_id": user_id})
        return None
