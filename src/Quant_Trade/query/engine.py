"""Query engine: filter, then sort, then paginate.

The same function serves the ``/api/stocks`` endpoint and the local fallback,
so a server and a client holding the same dataset return identical pages for
identical criteria. The stage order is fixed; reordering it changes results.
"""

import logging
from collections.abc import Sequence

from Quant_Trade.models.criteria import (
    FilterCriteria,
    PaginationState,
    QueryCriteria,
    QueryResult,
    SortCriteria,
)
from Quant_Trade.models.market_data import Instrument
from Quant_Trade.query.comparator import sort_instruments
from Quant_Trade.query.paginator import paginate
from Quant_Trade.query.predicate import filter_instruments

logger = logging.getLogger(__name__)


def run_query(
    dataset: Sequence[Instrument],
    filters: FilterCriteria,
    sort: SortCriteria,
    page: int,
    page_size: int,
) -> QueryResult:
    """Run one query against *dataset* and return a fresh QueryResult.

    Malformed ranges (``min > max``) produce an empty result with ``total=0``
    rather than an exception. *dataset* is read, never reordered.

    Args:
        dataset: Full instrument collection. Treated as read-only.
        filters: Filter criteria applied first.
        sort: Ordering applied to the filtered set.
        page: 1-based page number.
        page_size: Items per page.

    Returns:
        QueryResult with the page slice and pagination filled in.
    """
    if not filters.is_well_formed:
        logger.info("Malformed filter ranges, returning empty result")
        return QueryResult(
            data=(),
            pagination=PaginationState(page=page, page_size=page_size, total=0),
        )

    filtered = filter_instruments(dataset, filters)
    ordered = sort_instruments(filtered, sort)
    sliced = paginate(ordered, page, page_size)

    logger.debug(
        "Query page=%d size=%d matched %d of %d",
        page,
        page_size,
        sliced.total,
        len(dataset),
    )
    return QueryResult(
        data=sliced.items,
        pagination=PaginationState(page=page, page_size=page_size, total=sliced.total),
    )


def run_criteria(dataset: Sequence[Instrument], criteria: QueryCriteria) -> QueryResult:
    """Convenience wrapper taking a bundled QueryCriteria."""
    return run_query(
        dataset,
        criteria.filters,
        criteria.sort,
        criteria.page,
        criteria.page_size,
    )
