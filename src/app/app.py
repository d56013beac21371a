"""Entrypoint da aplicação hook2telegram.

Este módulo é o ponto de entrada principal do serviço.
Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 3000

Uso (desenvolvimento):
    hook2telegram  # lê PORT e demais variáveis do ambiente / .env
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import create_api_router
from app.bootstrap import SERVICE_NAME, initialize_app, validate_runtime_settings
from app.bootstrap.relay_factory import create_relay_use_case
from app.use_cases.relay import drain_dispatch_tasks
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = get_logger(__name__)

SHUTDOWN_DRAIN_SECONDS = 30.0


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Carrega `.env`, configura logging e valida settings (falha rápido)
    - Monta o use case do relay (registro de tenants, ledger, cliente Telegram)

    Shutdown:
    - Aguarda entregas em andamento
    """
    initialize_app()
    validate_runtime_settings()

    use_case = create_relay_use_case()
    app.state.relay_use_case = use_case

    registry = use_case.registry
    logger.info(
        "app_starting",
        extra={
            "service": SERVICE_NAME,
            "api_key_protection": registry.protected,
            "tenant_count": len(registry),
        },
    )

    yield

    logger.info("app_shutting_down", extra={"service": SERVICE_NAME})
    await drain_dispatch_tasks(timeout_seconds=SHUTDOWN_DRAIN_SECONDS)


async def _http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    # Rota inexistente e método não suportado respondem igual
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse({"error": "Not found"}, status_code=status.HTTP_404_NOT_FOUND)
    return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code)


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled_exception",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return JSONResponse(
        {"error": "Internal server error"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="hook2telegram",
        description="Relay de webhooks HTTP para o Telegram",
        version="1.0.0",
        lifespan=lifespan,
        # `/webhook/` tem rota própria; nenhum POST recebe 307
        redirect_slashes=False,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    fastapi_app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    fastapi_app.add_exception_handler(Exception, _unhandled_exception_handler)

    # Registra todas as rotas
    fastapi_app.include_router(create_api_router())

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    initialize_app()
    settings = get_base_settings()
    logger.info("server_starting", extra={"host": settings.host, "port": settings.port})
    uvicorn.run(
        "app.app:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
