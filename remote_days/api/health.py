import logging
from typing import Literal

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from remote_days.config import get_settings
from remote_days.db import StoreDep

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["ok", "degraded", "error"]
    version: str
    environment: str
    storage: str


@router.get("/", response_class=PlainTextResponse)
def root() -> str:
    """Plain banner pointing at the main endpoints."""
    return "Remote Days API is running. Try /health, /me, /requests/my, /calendar/my"


@router.get("/health", response_model=HealthResponse)
def health(store: StoreDep) -> HealthResponse:
    """Return the health status of the API service."""
    settings = get_settings()
    status: Literal["ok", "degraded", "error"] = "ok"

    try:
        store.get_user("")
    except Exception:
        logger.exception("Health check: store access failed")
        status = "degraded"

    return HealthResponse(
        status=status,
        version=settings.app_version,
        environment=settings.environment,
        storage=settings.storage_backend,
    )
