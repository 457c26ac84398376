"""Fetch orchestrator: drives stock queries and tracks loading/error state.

One orchestrator owns one view's query lifecycle::

    IDLE --trigger--> LOADING --ok--> SUCCESS --trigger--> LOADING ...
                              \\--error--> FAILED --retry--> LOADING ...

A trigger is any change to filters, sort, page, page size, or ``enabled``,
or an explicit ``refetch()``. Each request is tagged with a generation token;
a response whose token is no longer the latest is discarded, so a slow,
superseded response can never overwrite the result of a newer query.

Failures never propagate to the caller. They become a user-facing ``error``
string while the last good ``data`` stays visible. ``resolve_view`` then
composes the remote snapshot with the local fallback dataset.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

import httpx
from pydantic import BaseModel, ConfigDict

from Quant_Trade.models.api import StockListResponse
from Quant_Trade.models.criteria import PaginationState, QueryCriteria, QueryResult
from Quant_Trade.models.enums import DataSource, FetchStatus
from Quant_Trade.models.market_data import Instrument
from Quant_Trade.query.engine import run_criteria
from Quant_Trade.utils.exceptions import StockDataError, user_message

logger = logging.getLogger(__name__)


class StockFetcher(Protocol):
    """Anything that can answer a stocks query (e.g. ``StockApiClient``)."""

    async def get_stocks(self, criteria: QueryCriteria) -> StockListResponse: ...


class FetchSnapshot(BaseModel):
    """Immutable view of the orchestrator's state at one instant."""

    model_config = ConfigDict(frozen=True)

    status: FetchStatus
    data: tuple[Instrument, ...]
    loading: bool
    error: str | None
    pagination: PaginationState
    criteria: QueryCriteria | None
    enabled: bool


class StockQueryOrchestrator:
    """Issue stock queries on parameter change and expose the latest outcome.

    Usage::

        async with StockApiClient(settings) as client:
            orchestrator = StockQueryOrchestrator(client)
            snapshot = await orchestrator.update(QueryCriteria())
            if snapshot.error:
                snapshot = await orchestrator.refetch()
    """

    def __init__(self, fetcher: StockFetcher, *, enabled: bool = True) -> None:
        self._fetcher = fetcher
        self._enabled = enabled
        self._criteria: QueryCriteria | None = None

        self._status = FetchStatus.IDLE
        self._data: tuple[Instrument, ...] = ()
        self._error: str | None = None
        self._pagination = PaginationState()

        self._issued = 0
        self._loading = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def snapshot(self) -> FetchSnapshot:
        return FetchSnapshot(
            status=self._status,
            data=self._data,
            loading=self._loading,
            error=self._error,
            pagination=self._pagination,
            criteria=self._criteria,
            enabled=self._enabled,
        )

    @property
    def generation(self) -> int:
        """Token of the most recently issued request (0 before the first)."""
        return self._issued

    async def update(
        self,
        criteria: QueryCriteria | None = None,
        *,
        enabled: bool | None = None,
    ) -> FetchSnapshot:
        """Apply new parameters and issue a request if anything changed.

        Args:
            criteria: New query criteria, or None to keep the current ones.
            enabled: New enabled flag, or None to keep the current one.

        Returns:
            The snapshot after the triggered request settled (or immediately,
            if nothing triggered).
        """
        changed = False
        if enabled is not None and enabled != self._enabled:
            self._enabled = enabled
            changed = True
        if criteria is not None and criteria != self._criteria:
            if self._criteria is None:
                self._pagination = PaginationState(
                    page=criteria.page, page_size=criteria.page_size
                )
            self._criteria = criteria
            changed = True

        if not changed:
            return self.snapshot()
        return await self._fetch()

    async def refetch(self) -> FetchSnapshot:
        """Re-issue the last request with identical parameters."""
        return await self._fetch()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _fetch(self) -> FetchSnapshot:
        if not self._enabled or self._criteria is None:
            logger.debug("Fetch suppressed (enabled=%s)", self._enabled)
            return self.snapshot()

        self._issued += 1
        token = self._issued
        criteria = self._criteria

        self._loading = True
        self._status = FetchStatus.LOADING
        self._error = None
        logger.debug("Request #%d issued: page=%d", token, criteria.page)

        failure: StockDataError | httpx.HTTPError | None = None
        try:
            response = await self._fetcher.get_stocks(criteria)
        except (StockDataError, httpx.HTTPError) as exc:
            failure = exc
        except Exception as exc:
            # Not a data failure: leave a consistent FAILED state, then let it surface.
            if token == self._issued:
                self._status = FetchStatus.FAILED
                self._error = user_message(exc)
            logger.exception("Unexpected error in request #%d", token)
            raise
        finally:
            # Only the latest request may end the loading state.
            if token == self._issued:
                self._loading = False

        if token != self._issued:
            logger.debug(
                "Discarding stale %s from request #%d (latest is #%d)",
                "failure" if failure is not None else "response",
                token,
                self._issued,
            )
            return self.snapshot()

        if failure is not None:
            self._status = FetchStatus.FAILED
            self._error = user_message(failure)
            logger.warning("Failed to fetch stocks (request #%d): %s", token, failure)
            return self.snapshot()

        self._data = tuple(response.data)
        if response.pagination is not None:
            self._pagination = response.pagination
        self._status = FetchStatus.SUCCESS
        logger.info(
            "Request #%d succeeded: %d rows, total=%d",
            token,
            len(self._data),
            self._pagination.total,
        )
        return self.snapshot()


# ---------------------------------------------------------------------------
# Fallback composition
# ---------------------------------------------------------------------------


class DashboardView(BaseModel):
    """What the table should render, and where it came from."""

    model_config = ConfigDict(frozen=True)

    result: QueryResult
    source: DataSource
    total_available: int
    total_filtered: int
    loading: bool
    error: str | None

    @property
    def is_filtered(self) -> bool:
        """True when filtering hides part of the dataset."""
        return self.total_filtered != self.total_available


def needs_fallback(snapshot: FetchSnapshot) -> bool:
    """Remote data is unusable when it is empty or an error is set."""
    return not snapshot.data or snapshot.error is not None


def resolve_view(
    snapshot: FetchSnapshot,
    local_dataset: Sequence[Instrument],
    criteria: QueryCriteria,
) -> DashboardView:
    """Choose remote rows when usable, otherwise run the query locally.

    The local result is computed with the same engine and the same criteria
    the remote endpoint received, so the user always sees an ordered,
    paginated page.
    """
    if needs_fallback(snapshot):
        result = run_criteria(local_dataset, criteria)
        source = DataSource.LOCAL
    else:
        result = QueryResult(data=snapshot.data, pagination=snapshot.pagination)
        source = DataSource.REMOTE

    return DashboardView(
        result=result,
        source=source,
        total_available=len(local_dataset),
        total_filtered=result.pagination.total,
        loading=snapshot.loading,
        error=snapshot.error,
    )
