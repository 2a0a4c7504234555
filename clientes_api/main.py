"""Clientes API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ClientesAPIError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager
    - A schema preparation failure is logged and does not abort startup

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Schema creation/reset only when enabled in settings; Alembic owns
      migrations otherwise
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import clientes_api.models  # noqa: F401  (registers tables on Base.metadata)
from clientes_api.api.error_handlers import register_error_handlers
from clientes_api.api.routes import clientes, health
from clientes_api.config import Settings, get_settings
from clientes_api.infrastructure.database import DatabaseSessionManager, init_db
from clientes_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


async def prepare_database(manager: DatabaseSessionManager, settings: Settings) -> None:
    """Create (and optionally reset) the schema according to settings."""
    if not (settings.database_create_schema or settings.database_reset_on_startup):
        return
    try:
        await manager.prepare_schema(reset=settings.database_reset_on_startup)
        logger.info("Database schema ready")
    except Exception:
        logger.error("An error occurred while migrating the database", exc_info=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await prepare_database(manager, settings)
    logger.info("Clientes API started")
    yield
    logger.info("Clientes API shutting down")
    await manager.dispose()


app = FastAPI(
    title="Clientes API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(clientes.router)

register_error_handlers(app)
