"""Application error types and their FastAPI handlers."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException


logger = logging.getLogger(__name__)


class AppError(Exception):
    code = "app_error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        if status_code:
            self.status_code = status_code


class AuthenticationError(AppError):
    code = "unauthorized"
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(AppError):
    code = "not_found"
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    code = "conflict"
    status_code = status.HTTP_409_CONFLICT


class RateLimitError(AppError):
    code = "rate_limited"
    status_code = status.HTTP_429_TOO_MANY_REQUESTS


class QuotaExceededError(AppError):
    code = "quota_exceeded"
    status_code = status.HTTP_402_PAYMENT_REQUIRED


class FeatureUnavailableError(AppError):
    code = "feature_unavailable"
    status_code = status.HTTP_402_PAYMENT_REQUIRED


class UnknownFeatureError(AppError):
    code = "unknown_feature"
    status_code = status.HTTP_404_NOT_FOUND


class EntitlementLookupError(AppError):
    """Subscription or admin state could not be read from the database."""

    code = "entitlements_unavailable"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


def _error_payload(code: str, message: str) -> dict:
    return {"error": code, "message": message}


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
    logger.log(
        level,
        f"{request.method} {request.url.path} failed: {exc.code} ({exc.message})",
    )
    return JSONResponse(
        status_code=exc.status_code, content=_error_payload(exc.code, exc.message)
    )


async def http_error_handler(request: Request, exc: HTTPException) -> JSONResponse:
    code = "not_found" if exc.status_code == status.HTTP_404_NOT_FOUND else "http_error"
    message = exc.detail if exc.detail else "HTTP error"
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_payload(code, message),
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(HTTPException, http_error_handler)
