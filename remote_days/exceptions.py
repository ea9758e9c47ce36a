# ruff: noqa: TC003
from __future__ import annotations

import datetime as dt
import logging
from typing import TypeVar

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from remote_days.models.enums import ErrorKind
from remote_days.results import Failure, Ok, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")

_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_STATE: status.HTTP_400_BAD_REQUEST,
}


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str
    detail: str | None = None
    status_code: int
    date: dt.date | None = None


class AppError(Exception):
    """Base application exception."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        kind: str | None = None,
        on_date: dt.date | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.kind = kind
        self.on_date = on_date
        super().__init__(self.message)

    @classmethod
    def from_failure(cls, failure: Failure) -> AppError:
        """Translate an engine failure; policy rejections become 400."""
        if failure.kind.is_policy_rejection:
            status_code = status.HTTP_400_BAD_REQUEST
        else:
            status_code = _STATUS_BY_KIND[failure.kind]
        return cls(failure.message, status_code=status_code, kind=failure.kind.value, on_date=failure.date)


def unwrap(result: Result[T]) -> T:
    """Return the payload of a successful result or raise the matching AppError."""
    if isinstance(result, Ok):
        return result.value
    raise AppError.from_failure(result)


async def _app_exception_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=exc.kind or type(exc).__name__,
            detail=exc.message,
            status_code=exc.status_code,
            date=exc.on_date,
        ).model_dump(mode="json"),
    )


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=ErrorResponse(
            error=ErrorKind.INVALID_INPUT.value,
            detail=str(exc.errors()),
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        ).model_dump(mode="json"),
    )


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            error="ServerError",
            detail="Server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        ).model_dump(mode="json"),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application."""
    app.add_exception_handler(AppError, _app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_exception_handler)
