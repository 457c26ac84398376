"""Materialize date-range presets into concrete timestamps.

The pipeline only ever sees resolved bounds: a preset label is turned into
``start``/``end`` here, before a DateRange reaches the predicate or the wire.
"""

import datetime
import logging
from typing import Final

from dateutil.relativedelta import relativedelta

from Quant_Trade.models.criteria import DateRange
from Quant_Trade.models.enums import DatePreset

logger = logging.getLogger(__name__)

PRESET_LABELS: Final[dict[DatePreset, str]] = {
    DatePreset.TODAY: "Today",
    DatePreset.LAST_7_DAYS: "Last 7 days",
    DatePreset.LAST_30_DAYS: "Last 30 days",
    DatePreset.LAST_3_MONTHS: "Last 3 months",
    DatePreset.LAST_6_MONTHS: "Last 6 months",
    DatePreset.LAST_YEAR: "Last year",
    DatePreset.ALL: "All time",
    DatePreset.CUSTOM: "Custom",
}

# How far back each rolling preset reaches from today (inclusive of today).
_LOOKBACK: Final[dict[DatePreset, relativedelta]] = {
    DatePreset.TODAY: relativedelta(),
    DatePreset.LAST_7_DAYS: relativedelta(days=6),
    DatePreset.LAST_30_DAYS: relativedelta(days=29),
    DatePreset.LAST_3_MONTHS: relativedelta(months=3),
    DatePreset.LAST_6_MONTHS: relativedelta(months=6),
    DatePreset.LAST_YEAR: relativedelta(years=1),
}


def start_of_day(moment: datetime.datetime) -> datetime.datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(moment: datetime.datetime) -> datetime.datetime:
    return moment.replace(hour=23, minute=59, second=59, microsecond=999_999)


def resolve_date_preset(
    preset: DatePreset,
    now: datetime.datetime | None = None,
) -> DateRange:
    """Return the DateRange a preset stands for, relative to *now*.

    ``ALL`` resolves to an unbounded range. ``CUSTOM`` has no implied bounds;
    use :func:`custom_range` for user-picked dates.

    Args:
        preset: The preset label.
        now: Reference moment. Defaults to the current UTC time.

    Raises:
        ValueError: If *preset* is ``CUSTOM``.
    """
    if preset == DatePreset.CUSTOM:
        msg = "CUSTOM has no implied bounds; use custom_range()"
        raise ValueError(msg)
    if preset == DatePreset.ALL:
        return DateRange(preset=DatePreset.ALL)

    if now is None:
        now = datetime.datetime.now(datetime.UTC)

    resolved = DateRange(
        start=start_of_day(now - _LOOKBACK[preset]),
        end=end_of_day(now),
        preset=preset,
    )
    logger.debug("Resolved preset %s to %s .. %s", preset, resolved.start, resolved.end)
    return resolved


def custom_range(
    start: datetime.datetime | None,
    end: datetime.datetime | None,
) -> DateRange:
    """DateRange for explicitly picked bounds; either side may be open."""
    return DateRange(start=start, end=end, preset=DatePreset.CUSTOM)
