"""Stores em memória (backend `memory`): contatos salvos e tokens do CRM."""

from app.infra.stores.memory_stores import MemoryContactStore, MemoryCredentialStore

__all__ = ["MemoryContactStore", "MemoryCredentialStore"]
