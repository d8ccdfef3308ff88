"""Dating API — FastAPI application entry point.

Invariants:
    - Routers registered explicitly (no auto-discovery)
    - Global error handlers map DatingError → structured JSON responses
    - The Pagination header is exposed to browsers through CORS
    - The engine is created on startup and disposed on shutdown (lifespan)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dating_api.api.error_handlers import register_error_handlers
from dating_api.api.routes import health, messages, photos, users
from dating_api.config import get_settings
from dating_api.infrastructure.database import close_db, init_db
from dating_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format, settings.sql_log_level)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    logger.info(f"{settings.app_name} {settings.app_version} started")
    yield
    await close_db()
    logger.info(f"{settings.app_name} stopped")


def create_app() -> FastAPI:
    settings = get_settings()
    application = FastAPI(
        title="Dating API", version=settings.app_version, lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Pagination"],
    )
    for module in (health, users, messages, photos):
        application.include_router(module.router)
    register_error_handlers(application)
    return application


app = create_app()
