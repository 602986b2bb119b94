"""Credenciais do CRM vindas do ambiente."""

from app.infra.secrets.env_secrets import DEFAULT_TOKEN_VAR, EnvCredentialStore, token_var_for

__all__ = ["DEFAULT_TOKEN_VAR", "EnvCredentialStore", "token_var_for"]
