"""Agregador de rotas.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.email.router import router as email_router
from api.routes.health.router import router as health_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (/health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    # Envio de email (endpoint único na raiz)
    api_router.include_router(email_router, tags=["email"])

    return api_router
