"""Ambiente, logging, backends de store e CORS."""

from config.settings.base.core import (
    CONTACT_STORE_BACKENDS,
    CREDENTIAL_STORE_BACKENDS,
    LOG_LEVELS,
    BaseSettings,
    Environment,
    get_base_settings,
)

__all__ = [
    "CONTACT_STORE_BACKENDS",
    "CREDENTIAL_STORE_BACKENDS",
    "LOG_LEVELS",
    "BaseSettings",
    "Environment",
    "get_base_settings",
]
