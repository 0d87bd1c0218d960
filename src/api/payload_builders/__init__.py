"""Payload builders — construção de payloads para APIs externas.

Estrutura:
- email/: provedor Keplars (instant, queue, schedule)
"""

__all__: list[str] = []
