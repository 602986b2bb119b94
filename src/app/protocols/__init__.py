"""Protocolos e contratos do core da aplicação."""

from .contact_store import ContactStoreProtocol, InsertResult
from .credential_store import CredentialStoreProtocol
from .http_client import SpotterHttpClientProtocol

__all__ = [
    "ContactStoreProtocol",
    "CredentialStoreProtocol",
    "InsertResult",
    "SpotterHttpClientProtocol",
]
