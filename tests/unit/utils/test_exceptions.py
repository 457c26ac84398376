"""Tests for the exception hierarchy and error-kind mapping.

Covers:
- Inheritance: every domain exception is a StockDataError
- Attributes: source and http_status accessible, http_status defaults to None
- Status-code mapping, including unmapped codes -> network error
- user_message() for domain and raw httpx exceptions
"""

import httpx
import pytest

from Quant_Trade.utils.exceptions import (
    ERROR_MESSAGES,
    ErrorKind,
    NotFoundError,
    ProtocolError,
    StockDataError,
    TransportError,
    ValidationError,
    error_kind_for,
    kind_for_status,
    user_message,
)


class TestStockDataErrorBase:
    """Tests for the base StockDataError exception."""

    def test_is_subclass_of_exception(self) -> None:
        assert issubclass(StockDataError, Exception)

    def test_attributes_accessible(self) -> None:
        exc = StockDataError("Request failed", source="api", http_status=503)
        assert exc.source == "api"
        assert exc.http_status == 503
        assert str(exc) == "Request failed"

    def test_http_status_defaults_to_none(self) -> None:
        assert StockDataError("boom", source="api").http_status is None

    @pytest.mark.parametrize(
        "exc_type",
        [ValidationError, TransportError, ProtocolError, NotFoundError],
    )
    def test_subclasses_caught_by_base(self, exc_type: type[StockDataError]) -> None:
        with pytest.raises(StockDataError):
            raise exc_type("failure", source="api")


class TestKindForStatus:
    """Tests for the HTTP status -> ErrorKind table."""

    @pytest.mark.parametrize(
        ("status", "kind"),
        [
            (400, ErrorKind.INVALID_REQUEST),
            (401, ErrorKind.AUTHENTICATION_REQUIRED),
            (403, ErrorKind.ACCESS_DENIED),
            (404, ErrorKind.NOT_FOUND),
            (429, ErrorKind.RATE_LIMITED),
            (500, ErrorKind.SERVER_ERROR),
        ],
    )
    def test_mapped_statuses(self, status: int, kind: ErrorKind) -> None:
        assert kind_for_status(status) == kind

    @pytest.mark.parametrize("status", [None, 200, 418, 502, 503])
    def test_unmapped_is_network_error(self, status: int | None) -> None:
        assert kind_for_status(status) == ErrorKind.NETWORK_ERROR

    def test_every_kind_has_message(self) -> None:
        assert set(ERROR_MESSAGES) == set(ErrorKind)


class TestErrorKindFor:
    """Tests for error_kind_for() and user_message()."""

    def test_not_found_without_status(self) -> None:
        assert error_kind_for(NotFoundError("gone", source="api")) == ErrorKind.NOT_FOUND

    def test_protocol_error_uses_status(self) -> None:
        exc = ProtocolError("HTTP 500", source="api", http_status=500)
        assert error_kind_for(exc) == ErrorKind.SERVER_ERROR
        assert user_message(exc) == "Server error. Please try again later."

    def test_transport_error_is_network(self) -> None:
        exc = TransportError("timed out", source="api")
        assert user_message(exc) == (
            "Network error. Please check your connection and try again."
        )

    def test_httpx_status_error(self) -> None:
        request = httpx.Request("GET", "http://test/api/stocks")
        response = httpx.Response(429, request=request)
        exc = httpx.HTTPStatusError("rate limited", request=request, response=response)
        assert error_kind_for(exc) == ErrorKind.RATE_LIMITED

    def test_httpx_connect_error_is_network(self) -> None:
        exc = httpx.ConnectError("refused")
        assert error_kind_for(exc) == ErrorKind.NETWORK_ERROR

    def test_unrelated_exception_is_network(self) -> None:
        assert error_kind_for(RuntimeError("?")) == ErrorKind.NETWORK_ERROR
