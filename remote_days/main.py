from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from remote_days.api.health import router as health_router
from remote_days.api.router import api_router
from remote_days.clock import SystemClock, get_clock, set_clock
from remote_days.config import get_settings
from remote_days.db import dispose_engine, get_store
from remote_days.exceptions import setup_exception_handlers
from remote_days.middleware import configure_logging, setup_middleware
from remote_days.seed import seed_demo_data

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager for startup and shutdown."""
    settings = get_settings()
    logger.info("Starting %s v%s [%s]", settings.app_name, settings.app_version, settings.environment)
    if settings.seed_demo_data:
        store = get_store()
        seed_demo_data(store, get_clock())
        logger.info(
            "Use header X-User-Id with one of: %s",
            ", ".join(f"{u.id}({u.role})" for u in store.list_users()),
        )
    yield
    dispose_engine()
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """Application factory."""
    settings = get_settings()
    configure_logging(settings)
    set_clock(SystemClock(settings.timezone))

    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/docs" if settings.environment != "production" else None,
        redoc_url="/redoc" if settings.environment != "production" else None,
    )

    setup_middleware(application, settings)
    setup_exception_handlers(application)

    application.include_router(health_router)
    application.include_router(api_router)

    return application


app = create_app()
