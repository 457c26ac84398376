"""Query-string codec for ``GET /api/stocks``.

``to_query_params`` is used by the HTTP client; ``criteria_from_params`` by the
endpoint. A numeric bound equal to its domain default is left out of the query
string, and an absent bound is read back as the default, so both sides always
evaluate the same criteria.
"""

from __future__ import annotations

import datetime
import logging

import pydantic

from Quant_Trade.models.criteria import (
    ALL_SECTORS,
    DEFAULT_CHANGE_MAX,
    DEFAULT_CHANGE_MIN,
    DEFAULT_CONFIDENCE_MAX,
    DEFAULT_CONFIDENCE_MIN,
    DEFAULT_PAGE_SIZE,
    DEFAULT_PRICE_MAX,
    DEFAULT_PRICE_MIN,
    DateRange,
    FilterCriteria,
    NumericRange,
    QueryCriteria,
    SortCriteria,
)
from Quant_Trade.models.enums import DatePreset, DirectionFilter, SortDirection, SortField
from Quant_Trade.utils.exceptions import ValidationError

logger = logging.getLogger(__name__)

PARAMS_SOURCE = "params"


def _format_number(value: float) -> str:
    """Render 150.0 as '150' and 2.5 as '2.5'."""
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def to_query_params(criteria: QueryCriteria) -> dict[str, str]:
    """Serialize *criteria* into query-string parameters.

    Inactive constraints (empty search, "All Sectors", direction ``all``,
    default numeric bounds, missing date bounds) are omitted.
    """
    filters = criteria.filters
    params: dict[str, str] = {
        "page": str(criteria.page),
        "pageSize": str(criteria.page_size),
        "sortBy": criteria.sort.field.value,
        "sortOrder": criteria.sort.direction.value,
    }

    if filters.search:
        params["search"] = filters.search
    if filters.sector and filters.sector != ALL_SECTORS:
        params["sector"] = filters.sector
    if filters.prediction_direction != DirectionFilter.ALL:
        params["prediction"] = filters.prediction_direction.value

    bounds: list[tuple[str, float, float]] = [
        ("minPrice", filters.price_range.min, DEFAULT_PRICE_MIN),
        ("maxPrice", filters.price_range.max, DEFAULT_PRICE_MAX),
        ("minChange", filters.change_range.min, DEFAULT_CHANGE_MIN),
        ("maxChange", filters.change_range.max, DEFAULT_CHANGE_MAX),
        ("minConfidence", filters.confidence_range.min, DEFAULT_CONFIDENCE_MIN),
        ("maxConfidence", filters.confidence_range.max, DEFAULT_CONFIDENCE_MAX),
    ]
    for name, value, default in bounds:
        if value != default:
            params[name] = _format_number(value)

    if filters.date_range.preset != DatePreset.ALL:
        if filters.date_range.start is not None:
            params["fromDate"] = filters.date_range.start.isoformat()
        if filters.date_range.end is not None:
            params["toDate"] = filters.date_range.end.isoformat()

    return params


def criteria_from_params(
    *,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    search: str | None = None,
    sector: str | None = None,
    prediction: str | None = None,
    sort_by: str = SortField.SYMBOL.value,
    sort_order: str = SortDirection.ASC.value,
    min_price: float | None = None,
    max_price: float | None = None,
    min_change: float | None = None,
    max_change: float | None = None,
    min_confidence: float | None = None,
    max_confidence: float | None = None,
    from_date: datetime.datetime | None = None,
    to_date: datetime.datetime | None = None,
) -> QueryCriteria:
    """Rebuild QueryCriteria from decoded query-string values.

    Absent bounds fall back to the domain defaults, never to zero. Date bounds,
    when present, are already materialized and are applied as a custom range.

    Raises:
        ValidationError: Unknown sort field, sort order, or direction, or a
            page/page size out of range.
    """
    has_dates = from_date is not None or to_date is not None
    try:
        filters = FilterCriteria(
            search=search or "",
            sector=sector or ALL_SECTORS,
            prediction_direction=DirectionFilter(prediction or DirectionFilter.ALL.value),
            price_range=NumericRange(
                min=DEFAULT_PRICE_MIN if min_price is None else min_price,
                max=DEFAULT_PRICE_MAX if max_price is None else max_price,
            ),
            change_range=NumericRange(
                min=DEFAULT_CHANGE_MIN if min_change is None else min_change,
                max=DEFAULT_CHANGE_MAX if max_change is None else max_change,
            ),
            confidence_range=NumericRange(
                min=DEFAULT_CONFIDENCE_MIN if min_confidence is None else min_confidence,
                max=DEFAULT_CONFIDENCE_MAX if max_confidence is None else max_confidence,
            ),
            date_range=DateRange(
                start=from_date,
                end=to_date,
                preset=DatePreset.CUSTOM if has_dates else DatePreset.ALL,
            ),
        )
        return QueryCriteria(
            filters=filters,
            sort=SortCriteria(field=SortField(sort_by), direction=SortDirection(sort_order)),
            page=page,
            page_size=page_size,
        )
    except (ValueError, pydantic.ValidationError) as exc:
        logger.warning("Rejected query parameters: %s", exc)
        raise ValidationError(
            f"Invalid query parameters: {exc}",
            source=PARAMS_SOURCE,
            http_status=400,
        ) from exc
