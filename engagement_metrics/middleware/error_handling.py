"""
Error handling for the engagement metrics API.

Publish failures map to 502 Bad Gateway; anything unexpected becomes a
500 with a consistent error body.
"""

import logging
import traceback
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from engagement_metrics.domain.exceptions import PublishError
from engagement_metrics.schemas.responses import ErrorResponse

logger = logging.getLogger(__name__)


async def publish_error_handler(request: Request, exc: PublishError) -> JSONResponse:
    """Report a metric the backend did not accept."""
    logger.warning(
        f"🚨 Backend rejected {exc.metric_name} for {request.method} {request.url.path}: {exc.detail}"
    )
    error_response = ErrorResponse(
        error=str(exc),
        error_code="PUBLISH_FAILED",
        details={
            "path": str(request.url.path),
            "method": request.method,
            "metric": exc.metric_name,
            "cause": type(exc.__cause__).__name__ if exc.__cause__ else None,
        },
    )
    return JSONResponse(status_code=502, content=error_response.model_dump(mode="json"))


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for centralized handling of unexpected exceptions.
    """

    def __init__(self, app, enable_error_logging: bool = True):
        super().__init__(app)
        self.enable_error_logging = enable_error_logging

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            return self._handle_unexpected_exception(request, e)

    def _handle_unexpected_exception(self, request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            f"💥 Unexpected error for {request.method} {request.url.path}: {str(exc)}"
        )
        if self.enable_error_logging:
            logger.error(f"📋 Full traceback:\n{traceback.format_exc()}")

        error_response = ErrorResponse(
            error="Internal server error",
            error_code="INTERNAL_ERROR",
            details={
                "path": str(request.url.path),
                "method": request.method,
                "error_type": type(exc).__name__,
            },
        )
        return JSONResponse(status_code=500, content=error_response.model_dump(mode="json"))
