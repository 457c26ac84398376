"""Async HTTP client for the stocks API.

Talks to ``GET {api_base_url}/stocks``, ``/dashboard/stats`` and friends,
validates the response envelope, and converts every failure into a domain
exception from ``Quant_Trade.utils.exceptions``. The base URL and timeout
come from an injected Settings value, never from the process environment.
"""

from __future__ import annotations

import asyncio
import logging
from types import TracebackType
from typing import Any, Final, TypeVar

import httpx
import pydantic

from Quant_Trade.config import Settings
from Quant_Trade.models.api import (
    DashboardStats,
    DashboardStatsResponse,
    SectorListResponse,
    StockListResponse,
    StockResponse,
)
from Quant_Trade.models.criteria import QueryCriteria
from Quant_Trade.models.market_data import Instrument
from Quant_Trade.query.params import to_query_params
from Quant_Trade.utils.exceptions import NotFoundError, ProtocolError, TransportError

M = TypeVar("M", bound=pydantic.BaseModel)

logger = logging.getLogger(__name__)

API_SOURCE: Final[str] = "api"

_JSON_HEADERS: Final[dict[str, str]] = {"Content-Type": "application/json"}


class StockApiClient:
    """Fetch instruments, single records, sectors, and dashboard stats from the API.

    Usage::

        settings = load_settings()
        async with StockApiClient(settings) as client:
            envelope = await client.get_stocks(QueryCriteria())
            print(envelope.pagination.total)
    """

    def __init__(
        self,
        settings: Settings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._client = httpx.AsyncClient(
            base_url=settings.api_base_url,
            headers=_JSON_HEADERS,
            timeout=httpx.Timeout(settings.request_timeout, connect=5.0),
            limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
            transport=transport,
        )

        logger.info(
            "StockApiClient initialized: base_url=%s timeout=%.1fs",
            settings.api_base_url,
            settings.request_timeout,
        )

    async def aclose(self) -> None:
        """Close the shared httpx client."""
        await self._client.aclose()

    async def __aenter__(self) -> StockApiClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    async def get_stocks(self, criteria: QueryCriteria) -> StockListResponse:
        """Fetch one filtered, sorted page of instruments.

        Raises:
            TransportError: Network failure or timeout.
            ProtocolError: Non-2xx status, malformed payload, or ``success: false``.
        """
        params = to_query_params(criteria)
        payload = await self._get_json("/stocks", params=params)
        envelope = self._validate(StockListResponse, payload)
        if not envelope.success:
            raise ProtocolError(
                envelope.message or "Stocks request was not successful.",
                source=API_SOURCE,
            )
        logger.debug(
            "Fetched %d stocks (total=%s)",
            len(envelope.data),
            envelope.pagination.total if envelope.pagination else "?",
        )
        return envelope

    async def get_stock(self, symbol: str) -> Instrument:
        """Fetch a single instrument by symbol.

        Raises:
            NotFoundError: The API has no such symbol.
            TransportError: Network failure or timeout.
            ProtocolError: Malformed payload or ``success: false``.
        """
        payload = await self._get_json(f"/stocks/{symbol}")
        envelope = self._validate(StockResponse, payload)
        if not envelope.success or envelope.data is None:
            raise NotFoundError(
                envelope.message or f"Stock {symbol} not found.",
                source=API_SOURCE,
                http_status=404,
            )
        return envelope.data

    async def get_sectors(self) -> list[str]:
        """Fetch the list of sectors instruments may belong to."""
        payload = await self._get_json("/stocks/sectors")
        envelope = self._validate(SectorListResponse, payload)
        if not envelope.success:
            raise ProtocolError(
                envelope.message or "Sectors request was not successful.",
                source=API_SOURCE,
            )
        return envelope.data

    async def get_dashboard_stats(self) -> DashboardStats:
        """Fetch the Key Metrics figures for the dashboard header.

        Raises:
            TransportError: Network failure or timeout.
            ProtocolError: Malformed payload, missing data, or ``success: false``.
        """
        payload = await self._get_json("/dashboard/stats")
        envelope = self._validate(DashboardStatsResponse, payload)
        if not envelope.success or envelope.data is None:
            raise ProtocolError(
                envelope.message or "Dashboard stats request was not successful.",
                source=API_SOURCE,
            )
        return envelope.data

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _get_json(
        self,
        path: str,
        *,
        params: dict[str, str] | None = None,
    ) -> Any:  # noqa: ANN401
        """GET *path* and return the decoded JSON body of a 2xx response."""
        try:
            response = await asyncio.wait_for(
                self._client.get(path, params=params),
                timeout=self._settings.request_timeout,
            )
        except TimeoutError as exc:
            msg = f"Request to {path} timed out."
            logger.error(msg)
            raise TransportError(msg, source=API_SOURCE) from exc
        except httpx.HTTPError as exc:
            msg = f"Request to {path} failed: {exc}"
            logger.error(msg)
            raise TransportError(msg, source=API_SOURCE) from exc

        if not response.is_success:
            message = _error_detail(response) or f"HTTP {response.status_code}"
            if response.status_code == 404:  # noqa: PLR2004
                raise NotFoundError(message, source=API_SOURCE, http_status=404)
            raise ProtocolError(message, source=API_SOURCE, http_status=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise ProtocolError(
                f"Malformed JSON from {path}.",
                source=API_SOURCE,
                http_status=response.status_code,
            ) from exc

    @staticmethod
    def _validate(model: type[M], payload: Any) -> M:  # noqa: ANN401
        try:
            return model.model_validate(payload)
        except pydantic.ValidationError as exc:
            raise ProtocolError(
                f"Unexpected {model.__name__} payload: {exc.error_count()} errors.",
                source=API_SOURCE,
            ) from exc


def _error_detail(response: httpx.Response) -> str | None:
    """Pull ``message`` (envelope) or ``detail`` (FastAPI) out of an error body."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        detail = body.get("message") or body.get("detail")
        if isinstance(detail, str):
            return detail
    return None
