"""Item Store API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ItemStoreError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Store and session manager built in the lifespan and held on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - The memory backend opens no database at all
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from itemstore.api.error_handlers import register_error_handlers
from itemstore.api.routes import health, items
from itemstore.config import get_settings
from itemstore.core.domain_types import StoreBackend
from itemstore.infrastructure.database import DatabaseSessionManager
from itemstore.infrastructure.observability import setup_logging
from itemstore.services.store_factory import build_item_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = None
    if settings.store_backend == StoreBackend.SQL:
        db_manager = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.database_create_schema:
            await db_manager.create_schema()
    app.state.db_manager = db_manager
    app.state.item_store = build_item_store(settings, db_manager)
    logger.info("Item Store API started", extra={"backend": settings.store_backend.value})
    yield
    logger.info("Item Store API shutting down")
    if db_manager is not None:
        await db_manager.dispose()


app = FastAPI(
    title="Item Store API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(items.router)

register_error_handlers(app)
