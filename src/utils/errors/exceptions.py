"""Exceções de domínio do extrator de leads e da integração com o Spotter."""

from __future__ import annotations


class LeadsError(Exception):
    """Base para todos os erros do serviço."""


# ──────────────────────────────────────────────────────────────────────────────
# Extração
# ──────────────────────────────────────────────────────────────────────────────


class ExtractionError(LeadsError):
    """Base para falhas locais da extração (retornadas ao chamador)."""


class InputTooLargeError(ExtractionError):
    """Texto de entrada excede o limite configurado (nunca truncamos)."""

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(
            f"Texto muito longo: {length} caracteres (máximo {limit})."
        )
        self.length = length
        self.limit = limit


class NoContactsFoundError(ExtractionError):
    """Nenhum contato encontrado no texto (resultado vazio, não falha)."""

    def __init__(self, strategy: str = "") -> None:
        super().__init__("Nenhum lead encontrado no texto")
        self.strategy = strategy


# ──────────────────────────────────────────────────────────────────────────────
# Integração Spotter
# ──────────────────────────────────────────────────────────────────────────────


class SpotterSyncError(LeadsError):
    """Base para falhas no envio de um contato ao CRM.

    Attributes:
        code: Código estável para relatórios (sem PII).
        partial: True quando o lead já foi criado no CRM.
    """

    code = "SPOTTER_ERROR"
    partial = False

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class LeadCreateError(SpotterSyncError):
    """Falha HTTP/rede ao criar o lead."""

    code = "LEAD_CREATE_ERROR"


class LeadIdNotFoundError(SpotterSyncError):
    """Lead criado, mas o id não pôde ser resolvido (etapa de pessoa pulada)."""

    code = "LEAD_ID_NOT_FOUND"
    partial = True


class PersonCreateError(SpotterSyncError):
    """Lead criado, mas a pessoa associada falhou."""

    code = "PERSON_CREATE_ERROR"
    partial = True


class CredentialMissingError(SpotterSyncError):
    """Token do CRM não configurado para o usuário."""

    code = "CREDENTIAL_MISSING"

    def __init__(self, message: str = "Configure seu token do Spotter") -> None:
        super().__init__(message)


class SendInFlightError(SpotterSyncError):
    """Já existe envio em andamento para o mesmo contato."""

    code = "SEND_IN_FLIGHT"


# ──────────────────────────────────────────────────────────────────────────────
# Infraestrutura
# ──────────────────────────────────────────────────────────────────────────────


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class ContactStoreError(InfrastructureError):
    """Falha ao ler/gravar no store de contatos."""
