"""Entrypoint da aplicação yt-comment-harvester.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from starlette.responses import Response

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)

CORRELATION_HEADER = "x-correlation-id"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Valida settings no startup; nenhuma conexão fica aberta entre requests."""
    logger.info("app_starting", extra={"component": "app"})
    validate_runtime_settings()
    yield
    logger.info("app_shutting_down", extra={"component": "app"})


async def correlation_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Propaga (ou gera) o correlation_id da requisição para logs e resposta."""
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = get_correlation_id()
        return response
    finally:
        reset_correlation_id(token)


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI."""
    fastapi_app = FastAPI(
        title="yt-comment-harvester",
        description="Coleta paginada de comentários de vídeos do YouTube",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(get_base_settings().cors_allow_origins),
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    fastapi_app.middleware("http")(correlation_middleware)

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"component": "app"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint do console script `yt-comment-harvester`."""
    import uvicorn

    settings = get_base_settings()
    logger.info(
        "app_serving",
        extra={"host": settings.host, "port": settings.port, "reload": settings.debug},
    )
    uvicorn.run(
        "app.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
