"""Connectors — adapters de borda para APIs externas.

Estrutura:
- keplars/: API de email transacional Keplars
"""

__all__: list[str] = []
