"""Payload builders — construção de payloads para APIs externas.

Estrutura:
- spotter/: lead (LeadsAdd) e pessoa (personsAdd)
"""

__all__: list[str] = []
