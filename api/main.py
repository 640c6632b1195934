"""
api/main.py — punkt wejścia FastAPI.

Lifespan:
  - Tworzy EntityStore (PostgreSQL przez asyncpg albo in-memory)
  - Inicjalizuje bezstanowe adaptery (RegexReferenceDetector, SpanLinkRewriter)
  - Przy zamknięciu zamyka połączenia do bazy

DSN: config.db_url może mieć prefiks 'postgresql+asyncpg://' (SQLAlchemy-style);
asyncpg oczekuje 'postgresql://'. Prefiks jest tu konwertowany.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.cross_reference import RegexReferenceDetector, SpanLinkRewriter
from adapters.entity_store import InMemoryEntityStore, PostgresEntityStore
from api.routers import entities, gazetteer, references
from api.schemas import HealthResponse
from config import Settings

logger = logging.getLogger("kb_crossref")


def _asyncpg_dsn(url: str) -> str:
    """Konwertuje 'postgresql+asyncpg://...' → 'postgresql://...'."""
    return url.replace("postgresql+asyncpg://", "postgresql://", 1)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    if settings.entity_backend == "postgres":
        logger.info("Connecting to PostgreSQL...")
        app.state.entity_store = await PostgresEntityStore.create(_asyncpg_dsn(settings.db_url))
    else:
        logger.info("Using in-memory entity store.")
        app.state.entity_store = InMemoryEntityStore()

    # Adaptery bezstanowe, tworzone raz
    app.state.detector = RegexReferenceDetector()
    app.state.rewriter = SpanLinkRewriter(
        routes=settings.routes,
        skip_existing_links=settings.skip_existing_links,
        detector=app.state.detector,
    )

    logger.info("kb-crossref API ready.")
    yield

    logger.info("Shutting down, closing entity store.")
    await app.state.entity_store.close()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(references.router)
    app.include_router(gazetteer.router)
    app.include_router(entities.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health(request: Request):
        store = request.app.state.entity_store
        store_status = "ok"
        if isinstance(store, PostgresEntityStore):
            try:
                await store.ping()
            except Exception as e:
                store_status = f"error: {e}"

        return HealthResponse(
            status="ok" if store_status == "ok" else "degraded",
            store=store_status,
            version=settings.app_version,
        )

    # Brak encji w store → 404
    @app.exception_handler(KeyError)
    async def key_error_handler(request: Request, exc: KeyError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    # Globalny handler błędów konfiguracji (np. powtórzony wariant w kolejności pul)
    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    return app


app = create_app()
