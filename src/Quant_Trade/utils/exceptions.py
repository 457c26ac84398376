"""Custom exception hierarchy for the Quant Trade application.

All domain-specific exceptions inherit from StockDataError, which carries
contextual information about where a failure came from. The orchestrator
turns these into user-facing messages via ``user_message()``; nothing in the
query pipeline raises them for well-formed input.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final

import httpx


class StockDataError(Exception):
    """Base exception for all stock-data failures.

    Attributes:
        source: Where the failure originated (e.g. "api", "fallback", "params").
        http_status: The HTTP status code, if the failure was HTTP-related.
    """

    def __init__(
        self,
        message: str,
        *,
        source: str,
        http_status: int | None = None,
    ) -> None:
        self.source = source
        self.http_status = http_status
        super().__init__(message)


class ValidationError(StockDataError):
    """Raised when query criteria are malformed (e.g. ``min > max``)."""


class TransportError(StockDataError):
    """Raised when the remote endpoint is unreachable or times out."""


class ProtocolError(StockDataError):
    """Raised on a non-success envelope or a payload that fails to parse."""


class NotFoundError(StockDataError):
    """Raised when a single-record lookup has no match."""


# ---------------------------------------------------------------------------
# Error kinds and user-facing messages
# ---------------------------------------------------------------------------


class ErrorKind(StrEnum):
    """Transport-independent classification of a failed request."""

    INVALID_REQUEST = "invalid_request"
    AUTHENTICATION_REQUIRED = "authentication_required"
    ACCESS_DENIED = "access_denied"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    SERVER_ERROR = "server_error"
    NETWORK_ERROR = "network_error"


_STATUS_KINDS: Final[dict[int, ErrorKind]] = {
    400: ErrorKind.INVALID_REQUEST,
    401: ErrorKind.AUTHENTICATION_REQUIRED,
    403: ErrorKind.ACCESS_DENIED,
    404: ErrorKind.NOT_FOUND,
    429: ErrorKind.RATE_LIMITED,
    500: ErrorKind.SERVER_ERROR,
}

ERROR_MESSAGES: Final[dict[ErrorKind, str]] = {
    ErrorKind.INVALID_REQUEST: "Invalid request. Please check your input.",
    ErrorKind.AUTHENTICATION_REQUIRED: "Authentication required. Please log in.",
    ErrorKind.ACCESS_DENIED: "Access denied. You don't have permission for this action.",
    ErrorKind.NOT_FOUND: "Data not found. The requested resource doesn't exist.",
    ErrorKind.RATE_LIMITED: "Too many requests. Please try again later.",
    ErrorKind.SERVER_ERROR: "Server error. Please try again later.",
    ErrorKind.NETWORK_ERROR: "Network error. Please check your connection and try again.",
}

if set(ERROR_MESSAGES) != set(ErrorKind):  # pragma: no cover
    raise RuntimeError("ERROR_MESSAGES must cover every ErrorKind")


def kind_for_status(status: int | None) -> ErrorKind:
    """Map an HTTP status code to an ErrorKind; unknown or missing -> network error."""
    if status is None:
        return ErrorKind.NETWORK_ERROR
    return _STATUS_KINDS.get(status, ErrorKind.NETWORK_ERROR)


def error_kind_for(exc: BaseException) -> ErrorKind:
    """Classify any exception raised while fetching into an ErrorKind."""
    if isinstance(exc, NotFoundError):
        return ErrorKind.NOT_FOUND
    if isinstance(exc, StockDataError):
        return kind_for_status(exc.http_status)
    if isinstance(exc, httpx.HTTPStatusError):
        return kind_for_status(exc.response.status_code)
    return ErrorKind.NETWORK_ERROR


def user_message(exc: BaseException) -> str:
    """Return the human-readable banner text for a failed fetch."""
    return ERROR_MESSAGES[error_kind_for(exc)]
