"""Settings do processo: ambiente, logging e escolha de backends.

Variáveis:
    ENVIRONMENT              development | test | staging | production
    SERVICE_NAME             campo `service` dos logs
    LOG_LEVEL                DEBUG..CRITICAL
    CONTACT_STORE_BACKEND    memory
    CREDENTIAL_STORE_BACKEND env | memory
    CORS_ALLOW_ORIGINS       lista separada por vírgula
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "test", "staging", "production"]

CONTACT_STORE_BACKENDS = frozenset({"memory"})
CREDENTIAL_STORE_BACKENDS = frozenset({"env", "memory"})
LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Ambientes em que configuração inválida impede o boot
STRICT_ENVIRONMENTS = frozenset({"staging", "production"})


@dataclass(frozen=True)
class BaseSettings:
    """Configurações comuns à API e à CLI."""

    environment: Environment = "development"
    service_name: str = "extrator_leads"
    log_level: str = "INFO"
    contact_store_backend: str = "memory"
    credential_store_backend: str = "env"
    cors_allow_origins: tuple[str, ...] = ("*",)

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment in ("development", "test")

    @property
    def is_strict(self) -> bool:
        """True se erros de configuração devem abortar o startup."""
        return self.environment in STRICT_ENVIRONMENTS

    def validate(self) -> list[str]:
        """Lista de erros de configuração (vazia = OK)."""
        errors: list[str] = []

        if not self.service_name.strip():
            errors.append("SERVICE_NAME não pode ser vazio")

        if self.log_level not in LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")

        if self.contact_store_backend not in CONTACT_STORE_BACKENDS:
            errors.append(f"CONTACT_STORE_BACKEND inválido: {self.contact_store_backend}")

        if self.credential_store_backend not in CREDENTIAL_STORE_BACKENDS:
            errors.append(
                f"CREDENTIAL_STORE_BACKEND inválido: {self.credential_store_backend}"
            )

        # Store em memória perde os contatos a cada deploy
        if self.is_production and self.contact_store_backend == "memory":
            errors.append("CONTACT_STORE_BACKEND=memory não é permitido em production")

        return errors


def _parse_environment(raw: str) -> Environment:
    value = raw.strip().lower()
    if value in ("production", "prod"):
        return "production"
    if value in ("staging", "stage"):
        return "staging"
    if value == "test":
        return "test"
    return "development"


def _parse_origins(raw: str) -> tuple[str, ...]:
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


def _load_base_from_env() -> BaseSettings:
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "extrator_leads"),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        contact_store_backend=os.getenv("CONTACT_STORE_BACKEND", "memory").strip().lower(),
        credential_store_backend=os.getenv("CREDENTIAL_STORE_BACKEND", "env").strip().lower(),
        cors_allow_origins=_parse_origins(os.getenv("CORS_ALLOW_ORIGINS", "*")),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
