"""Freelance Ledger API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LedgerError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The store handle is opened in the lifespan, kept on app.state, closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py to keep this module's imports small
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ledger.api.error_handlers import register_error_handlers
from ledger.api.routes import admin, balances, contracts, health, jobs
from ledger.config import get_settings
from ledger.infrastructure.database import DatabaseSessionManager
from ledger.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Freelance Ledger API started")
    yield
    logger.info("Freelance Ledger API shutting down")
    await app.state.db_manager.dispose()
    app.state.db_manager = None


app = FastAPI(
    title="Freelance Ledger API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(contracts.router)
app.include_router(jobs.router)
app.include_router(balances.router)
app.include_router(admin.router)

register_error_handlers(app)
