"""Three-way comparator and copying sort over instruments.

Every sortable column is a ``SortField`` member with an explicit accessor in
``FIELD_ACCESSORS``; there is no dynamic attribute or dotted-path lookup.
``desc`` is always the negation of the ``asc`` comparison.
"""

import datetime
import functools
import logging
from collections.abc import Callable, Iterable
from typing import Final, TypeAlias

from Quant_Trade.models.criteria import SortCriteria
from Quant_Trade.models.enums import SortDirection, SortField
from Quant_Trade.models.market_data import Instrument

logger = logging.getLogger(__name__)

SortKey: TypeAlias = str | float | int | datetime.datetime

FIELD_ACCESSORS: Final[dict[SortField, Callable[[Instrument], SortKey]]] = {
    SortField.ID: lambda r: r.id,
    SortField.SYMBOL: lambda r: r.symbol,
    SortField.NAME: lambda r: r.name,
    SortField.CURRENT_PRICE: lambda r: r.current_price,
    SortField.PREVIOUS_CLOSE: lambda r: r.previous_close,
    SortField.CHANGE: lambda r: r.change,
    SortField.CHANGE_PERCENT: lambda r: r.change_percent,
    SortField.VOLUME: lambda r: r.volume,
    SortField.MARKET_CAP: lambda r: r.market_cap,
    SortField.SECTOR: lambda r: r.sector,
    SortField.LAST_UPDATED: lambda r: r.last_updated,
    SortField.PREDICTION_DIRECTION: lambda r: r.prediction.direction.value,
    SortField.PREDICTION_CONFIDENCE: lambda r: r.prediction.confidence,
    SortField.PREDICTION_TARGET_PRICE: lambda r: r.prediction.target_price,
    SortField.PREDICTION_TIMEFRAME: lambda r: r.prediction.timeframe.value,
    SortField.PREDICTION_ACCURACY: lambda r: r.prediction.accuracy,
}

# Fail at import, not at query time, if a SortField is added without an accessor.
_missing = set(SortField) - set(FIELD_ACCESSORS)
if _missing:  # pragma: no cover
    raise RuntimeError(f"SortField members without accessor: {sorted(_missing)}")


def sort_key(record: Instrument, field: SortField) -> SortKey:
    """Resolve *field* on *record*; strings are lower-cased for comparison."""
    value = FIELD_ACCESSORS[field](record)
    if isinstance(value, str):
        return value.lower()
    return value


def _compare_asc(a: Instrument, b: Instrument, field: SortField) -> int:
    key_a = sort_key(a, field)
    key_b = sort_key(b, field)
    if key_a < key_b:  # type: ignore[operator]
        return -1
    if key_a > key_b:  # type: ignore[operator]
        return 1
    return 0


def compare(a: Instrument, b: Instrument, criteria: SortCriteria) -> int:
    """Three-way compare two instruments under *criteria*.

    Returns:
        -1, 0 or 1. For ``desc`` the result is exactly ``-compare(asc)``.
    """
    result = _compare_asc(a, b, criteria.field)
    if criteria.direction == SortDirection.DESC:
        return -result
    return result


def sort_instruments(
    records: Iterable[Instrument],
    criteria: SortCriteria,
) -> list[Instrument]:
    """Return a new sorted list; the input sequence is never reordered in place.

    Ties keep their input order because ``sorted`` is stable, but callers
    needing a secondary key must sort on a composite field themselves.
    """
    ordered = sorted(
        records,
        key=functools.cmp_to_key(lambda a, b: compare(a, b, criteria)),
    )
    logger.debug("Sorted %d records by %s %s", len(ordered), criteria.field, criteria.direction)
    return ordered
