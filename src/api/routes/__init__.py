"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (envio de email, health)
- Gating de método, headers CORS, decodificação do corpo
- Delegação para use_cases e mapeamento de erros em respostas JSON

Estrutura:
- routes/email/: endpoint de envio (proxy Keplars)
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
