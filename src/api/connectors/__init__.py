"""Connectors — adapters de borda para APIs externas.

Estrutura:
- spotter/: Exact Spotter API v3 (LeadsAdd, Leads, personsAdd)
"""

__all__: list[str] = []
