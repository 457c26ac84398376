"""Exception handlers and request logging middleware.

Maps domain exceptions from ``Quant_Trade.utils.exceptions`` to HTTP status
codes and the ``{data, success, message}`` error envelope. Provides request
logging middleware that logs method, path, status code, and duration.
"""

import logging
import time

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from Quant_Trade.utils.exceptions import (
    ERROR_MESSAGES,
    ErrorKind,
    NotFoundError,
    StockDataError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def error_envelope(status_code: int, message: str) -> JSONResponse:
    """Build a ``success: false`` envelope with empty data."""
    return JSONResponse(
        status_code=status_code,
        content={"data": [], "success": False, "message": message},
    )


# ---------------------------------------------------------------------------
# Domain exception -> HTTP status handlers
# ---------------------------------------------------------------------------


async def _not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    """Map NotFoundError to HTTP 404."""
    logger.warning("Not found: %s", exc)
    return error_envelope(404, str(exc))


async def _validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Map ValidationError (malformed criteria) to HTTP 400."""
    logger.warning("Invalid criteria: %s", exc)
    return error_envelope(400, str(exc))


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Map FastAPI query-parameter validation failures to HTTP 400."""
    logger.warning("Invalid request parameters on %s: %s", request.url.path, exc.errors())
    return error_envelope(400, ERROR_MESSAGES[ErrorKind.INVALID_REQUEST])


async def _stock_data_error_handler(request: Request, exc: StockDataError) -> JSONResponse:
    """Map base StockDataError to its carried status, or 500."""
    logger.error("Stock data error: %s", exc)
    return error_envelope(exc.http_status or 500, str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Register all domain exception handlers on the FastAPI application.

    More specific exception types must be registered before their base classes
    so FastAPI matches them correctly.
    """
    app.add_exception_handler(NotFoundError, _not_found_handler)  # type: ignore[arg-type]
    app.add_exception_handler(ValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _request_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StockDataError, _stock_data_error_handler)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Request logging middleware
# ---------------------------------------------------------------------------


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with method, path, status code, and duration."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Process request, log timing information, and return response."""
        start_time = time.monotonic()
        response = await call_next(request)
        duration_ms = (time.monotonic() - start_time) * 1000

        log = logger.debug if request.url.path == "/api/health" else logger.info
        log(
            "%s %s -> %d (%.1fms)",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )

        return response
