"""Stock listing API routes.

GET /api/stocks           — Filtered, sorted, paginated instruments.
GET /api/stocks/sectors   — Sector values instruments may carry.
GET /api/stocks/{symbol}  — A single instrument.

The listing runs the same query engine the client uses for its local
fallback, so a page served here is identical to the page the client would
compute from the same dataset.
"""

import datetime
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from Quant_Trade.data.fallback import SECTORS, find_by_symbol
from Quant_Trade.models.api import SectorListResponse, StockListResponse, StockResponse
from Quant_Trade.models.criteria import DEFAULT_PAGE_SIZE
from Quant_Trade.models.market_data import Instrument
from Quant_Trade.query.engine import run_criteria
from Quant_Trade.query.params import criteria_from_params
from Quant_Trade.utils.exceptions import NotFoundError
from Quant_Trade.web.deps import get_dataset, validate_ticker_symbol
from Quant_Trade.web.middleware import error_envelope

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/stocks", tags=["stocks"])


@router.get(
    "",
    response_model=StockListResponse,
    response_model_exclude_none=True,
)
async def list_stocks(
    dataset: Annotated[tuple[Instrument, ...], Depends(get_dataset)],
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int, Query(alias="pageSize", gt=0)] = DEFAULT_PAGE_SIZE,
    search: str | None = None,
    sector: str | None = None,
    prediction: str | None = None,
    sort_by: Annotated[str, Query(alias="sortBy")] = "symbol",
    sort_order: Annotated[str, Query(alias="sortOrder")] = "asc",
    min_price: Annotated[float | None, Query(alias="minPrice")] = None,
    max_price: Annotated[float | None, Query(alias="maxPrice")] = None,
    min_change: Annotated[float | None, Query(alias="minChange")] = None,
    max_change: Annotated[float | None, Query(alias="maxChange")] = None,
    min_confidence: Annotated[float | None, Query(alias="minConfidence")] = None,
    max_confidence: Annotated[float | None, Query(alias="maxConfidence")] = None,
    from_date: Annotated[datetime.datetime | None, Query(alias="fromDate")] = None,
    to_date: Annotated[datetime.datetime | None, Query(alias="toDate")] = None,
) -> StockListResponse | JSONResponse:
    """Return one page of instruments matching the query-string criteria.

    Malformed parameters (unknown sort field, bad direction) raise
    ValidationError, which the exception handlers turn into a 400 envelope.
    Unexpected failures while querying produce a 500 envelope.
    """
    criteria = criteria_from_params(
        page=page,
        page_size=page_size,
        search=search,
        sector=sector,
        prediction=prediction,
        sort_by=sort_by,
        sort_order=sort_order,
        min_price=min_price,
        max_price=max_price,
        min_change=min_change,
        max_change=max_change,
        min_confidence=min_confidence,
        max_confidence=max_confidence,
        from_date=from_date,
        to_date=to_date,
    )

    try:
        result = run_criteria(dataset, criteria)
    except Exception:
        logger.exception("Stock query failed")
        return error_envelope(500, "Internal server error")

    return StockListResponse(
        data=list(result.data),
        success=True,
        pagination=result.pagination,
    )


@router.get(
    "/sectors",
    response_model=SectorListResponse,
    response_model_exclude_none=True,
)
async def list_sectors() -> SectorListResponse:
    """Return the sector values instruments may carry."""
    return SectorListResponse(data=list(SECTORS), success=True)


@router.get(
    "/{symbol}",
    response_model=StockResponse,
    response_model_exclude_none=True,
)
async def get_stock(
    symbol: Annotated[str, Depends(validate_ticker_symbol)],
    dataset: Annotated[tuple[Instrument, ...], Depends(get_dataset)],
) -> StockResponse:
    """Return one instrument by symbol. Missing symbols map to a 404 envelope."""
    instrument = find_by_symbol(dataset, symbol)
    if instrument is None:
        raise NotFoundError(f"Stock {symbol} not found.", source="dataset", http_status=404)
    return StockResponse(data=instrument, success=True)
