"""Aplicação ASGI (FastAPI) do extrator de leads.

Execução:
    uvicorn app.app:app --host 0.0.0.0 --port 8080
    extrator-leads-api            # dev, com reload
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.observability import correlation_scope
from config.logging import get_logger
from config.settings import get_base_settings
from extraction.rules import load_gazetteers

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from fastapi import Response

CORRELATION_HEADER = "X-Correlation-ID"

# Logging configurado antes do primeiro logger do processo
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: valida settings e pré-carrega os gazetteers (asset quebrado falha cedo)."""
    logger.info("app_starting")
    validate_runtime_settings()
    gazetteers = load_gazetteers()
    logger.info("gazetteers_loaded", extra={"city_count": len(gazetteers.cities)})

    yield

    logger.info("app_shutting_down")


async def correlation_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Roda cada request sob o correlation_id recebido (ou um novo)."""
    with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
        response = await call_next(request)
    response.headers[CORRELATION_HEADER] = correlation_id
    return response


def create_app() -> FastAPI:
    settings = get_base_settings()
    fastapi_app = FastAPI(
        title="Extrator de Leads",
        description="Extração de contatos de texto colado e envio ao Exact Spotter",
        version="1.0.0",
        lifespan=lifespan,
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[CORRELATION_HEADER],
    )
    fastapi_app.middleware("http")(correlation_middleware)
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"environment": settings.environment})
    return fastapi_app


app = create_app()


def main() -> None:
    """Servidor de desenvolvimento (uvicorn com reload)."""
    import uvicorn

    uvicorn.run("app.app:app", host="0.0.0.0", port=8080, reload=True)


if __name__ == "__main__":
    main()
