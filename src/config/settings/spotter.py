"""Settings da integração com o CRM Exact Spotter.

Cada integração externa tem seu próprio arquivo de settings.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

SPOTTER_API_BASE_URL: str = "https://api.exactspotter.com/v3"

LeadIdResolution = Literal["auto", "response", "search"]


@dataclass(frozen=True)
class SpotterSettings:
    """Configurações do Spotter.

    Attributes:
        api_base_url: URL base da API v3
        request_timeout_seconds: Timeout por requisição HTTP
        max_retries: Tentativas extras em 429/5xx (0 = nunca repetir criação)
        duplicity_validation: Pede ao CRM que valide duplicidade do lead
        lead_id_resolution: Como resolver o id do lead recém-criado
            (auto = corpo da resposta, depois busca por nome)
        pre_seller_email: Email do pré-vendedor no modelo CSV de importação
        token: Token padrão (usado apenas pelo store de credencial via env)
    """

    api_base_url: str = SPOTTER_API_BASE_URL
    request_timeout_seconds: float = 30.0
    max_retries: int = 0
    duplicity_validation: bool = True
    lead_id_resolution: LeadIdResolution = "auto"
    pre_seller_email: str = ""
    token: str = ""

    @property
    def leads_endpoint(self) -> str:
        """URL de listagem/filtro de leads."""
        return f"{self.api_base_url}/Leads"

    @property
    def leads_add_endpoint(self) -> str:
        """URL de criação de lead."""
        return f"{self.api_base_url}/LeadsAdd"

    @property
    def persons_add_endpoint(self) -> str:
        """URL de criação de pessoa (contato do lead)."""
        return f"{self.api_base_url}/personsAdd"

    def validate(self) -> list[str]:
        """Valida configurações do Spotter.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_base_url.startswith(("http://", "https://")):
            errors.append("SPOTTER_API_BASE_URL deve ser uma URL http(s)")

        if self.request_timeout_seconds <= 0:
            errors.append("SPOTTER_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("SPOTTER_MAX_RETRIES deve ser >= 0")

        if self.lead_id_resolution not in ("auto", "response", "search"):
            errors.append(
                "SPOTTER_LEAD_ID_RESOLUTION deve ser 'auto', 'response' ou 'search'"
            )

        return errors


def _load_from_env() -> SpotterSettings:
    """Carrega SpotterSettings a partir de variáveis de ambiente."""
    resolution = os.getenv("SPOTTER_LEAD_ID_RESOLUTION", "auto").lower()
    lead_id_resolution: LeadIdResolution = (
        resolution if resolution in ("auto", "response", "search") else "auto"  # type: ignore[assignment]
    )
    return SpotterSettings(
        api_base_url=os.getenv("SPOTTER_API_BASE_URL", SPOTTER_API_BASE_URL).rstrip("/"),
        request_timeout_seconds=float(os.getenv("SPOTTER_REQUEST_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("SPOTTER_MAX_RETRIES", "0")),
        duplicity_validation=os.getenv("SPOTTER_DUPLICITY_VALIDATION", "true").lower()
        in ("true", "1", "yes"),
        lead_id_resolution=lead_id_resolution,
        pre_seller_email=os.getenv("SPOTTER_PRE_SELLER_EMAIL", ""),
        token=os.getenv("SPOTTER_TOKEN", ""),
    )


@lru_cache(maxsize=1)
def get_spotter_settings() -> SpotterSettings:
    """Retorna instância cacheada de SpotterSettings."""
    return _load_from_env()
