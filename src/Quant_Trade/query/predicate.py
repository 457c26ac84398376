"""Record-level filter predicate.

A record is included only if every active constraint passes. Inactive
constraints (empty search, the "All Sectors" sentinel, ``DirectionFilter.ALL``,
the "all time" date preset) are skipped. Numeric ranges are always applied,
even when they equal the domain defaults.
"""

import logging

from Quant_Trade.models.criteria import ALL_SECTORS, DateRange, FilterCriteria
from Quant_Trade.models.enums import DatePreset, DirectionFilter
from Quant_Trade.models.market_data import Instrument

logger = logging.getLogger(__name__)


def _matches_search(record: Instrument, search: str) -> bool:
    if not search:
        return True
    term = search.lower()
    return term in record.symbol.lower() or term in record.name.lower()


def _matches_sector(record: Instrument, sector: str) -> bool:
    if not sector or sector == ALL_SECTORS:
        return True
    return record.sector == sector


def _matches_direction(record: Instrument, direction: DirectionFilter) -> bool:
    if direction == DirectionFilter.ALL:
        return True
    return record.prediction.direction.value == direction.value


def _matches_date_range(record: Instrument, date_range: DateRange) -> bool:
    """Check ``last_updated`` against whichever materialized bounds are present."""
    if date_range.preset == DatePreset.ALL:
        return True
    if date_range.start is not None and record.last_updated < date_range.start:
        return False
    if date_range.end is not None and record.last_updated > date_range.end:
        return False
    return True


def matches(record: Instrument, criteria: FilterCriteria) -> bool:
    """Return True when *record* satisfies every active constraint in *criteria*.

    Pure function: reads the record and criteria, mutates neither.

    Args:
        record: The instrument under test.
        criteria: Filter criteria. Range bounds are inclusive on both ends;
            ``change_range`` applies to ``change_percent``.

    Returns:
        True if the record passes the conjunction of all active constraints.
    """
    return (
        _matches_search(record, criteria.search)
        and _matches_sector(record, criteria.sector)
        and criteria.price_range.contains(record.current_price)
        and criteria.change_range.contains(record.change_percent)
        and _matches_direction(record, criteria.prediction_direction)
        and criteria.confidence_range.contains(record.prediction.confidence)
        and _matches_date_range(record, criteria.date_range)
    )


def filter_instruments(
    records: tuple[Instrument, ...] | list[Instrument],
    criteria: FilterCriteria,
) -> list[Instrument]:
    """Return a new list of the records that match *criteria*, in input order."""
    selected = [record for record in records if matches(record, criteria)]
    logger.debug("Filter kept %d of %d records", len(selected), len(records))
    return selected
