"""Matchbook API — production composition and process entry point.

Invariants:
    - Controllers registered explicitly (no auto-discovery)
    - Error chain registered last: domain, validation, catch-all — never leaks internals
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Module-level `app` kept so `uvicorn app.main:app` works alongside `matchbook`
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware import Middleware

from app.api.composer import Application, ApplicationConfig, ControllerRegistration
from app.api.controllers.match_logs import MatchLogController
from app.api.controllers.teams import TeamController
from app.api.controllers.users import UserController
from app.api.error_handlers import DEFAULT_ERROR_UNITS
from app.api.middleware import RequestLoggingMiddleware
from app.api.routes import health
from app.config import get_settings
from app.infrastructure.database import close_db, init_db
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Matchbook API started")
    yield
    await close_db()
    logger.info("Matchbook API shutting down")


def get_default_app(app_secret: str, port: int | None = None) -> Application:
    """Users, match logs and teams behind logging + CORS, default error chain."""
    settings = get_settings()
    return Application(ApplicationConfig(
        secret=app_secret,
        port=settings.port if port is None else port,
        host=settings.host,
        controllers=[
            UserController(),
            MatchLogController(),
            TeamController(),
            ControllerRegistration(health.PATH, health.router),
        ],
        middleware=[
            Middleware(
                CORSMiddleware,
                allow_origins=settings.cors_origins,
                allow_methods=["*"],
                allow_headers=["*"],
            ),
            Middleware(RequestLoggingMiddleware),
        ],
        error_handlers=DEFAULT_ERROR_UNITS,
        static_dir=settings.static_dir,
        lifespan=lifespan,
    ))


application = get_default_app(get_settings().app_secret)
app = application.api


def run() -> None:
    """Console entry point: serve the default application."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    application.start()
