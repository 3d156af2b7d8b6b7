"""taskdesk API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TaskDeskError → structured JSON responses
    - CORS configured from settings (not hardcoded); credentials allowed for the session cookie
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: cleaner startup/shutdown pairing
    - Static frontend build (if present) mounted after API routes so /api/v1/* wins
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

import taskdesk.infrastructure.database as db_module
from taskdesk.api.error_handlers import register_error_handlers
from taskdesk.api.routes import auth, health, tasks
from taskdesk.config import get_settings
from taskdesk.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_module.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("taskdesk API started")
    yield
    if db_module.db_manager:
        await db_module.db_manager.dispose()
    logger.info("taskdesk API shutting down")


app = FastAPI(title="taskdesk API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(tasks.router)

register_error_handlers(app)

if os.path.isdir("static"):
    app.mount("/", StaticFiles(directory="static", html=True), name="static")
