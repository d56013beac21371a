"""Agregador de rotas — registra os routers do serviço.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.relay.webhook import router as relay_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Status (sem prefixo para / e /health na raiz)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(relay_router, tags=["relay"])

    return api_router
