"""Application Entry Point - composition root for the FastAPI backend.

Invariants:
    - create_app() only registers: settings provider, connection factory (lifespan),
      controller/service, health probes, CORS, error handlers. It raises nothing.
    - Settings load before the connection factory runs (lifespan order)
    - Missing DB_* settings fail the lifespan, so startup is fatal
    - Engine disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Routes registered explicitly (no auto-discovery)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import health, root
from app.config import get_settings
from app.infrastructure.connection import build_connection_descriptor
from app.infrastructure.database import init_db, close_db
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    descriptor = build_connection_descriptor(settings)
    manager = init_db(
        descriptor,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if descriptor.synchronize:
        await manager.synchronize_schema()
    logger.info("API started")
    yield
    logger.info("API shutting down")
    await close_db()


def create_app() -> FastAPI:
    """Assemble the application object graph."""
    settings = get_settings()
    app = FastAPI(title="App Backend", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(root.router)

    register_error_handlers(app)
    return app


app = create_app()
