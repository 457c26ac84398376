"""Query criteria models: filters, sort order, pagination, and query results.

Every model here is frozen. The orchestrator derives a new value with
``model_copy(update=...)`` instead of mutating one in place, and the query
engine never keeps a reference to its inputs after returning.
"""

import datetime
import math
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from Quant_Trade.models.enums import DatePreset, DirectionFilter, SortDirection, SortField
from Quant_Trade.models.market_data import WIRE_CONFIG, Instrument, assume_utc

ALL_SECTORS: Final[str] = "All Sectors"
"""Sector sentinel meaning "no sector constraint"."""

DEFAULT_PAGE_SIZE: Final[int] = 25

# Domain default bounds. The client omits a bound from the query string when it
# equals the default, and the server substitutes the default when it is absent.
DEFAULT_PRICE_MIN: Final[float] = 0.0
DEFAULT_PRICE_MAX: Final[float] = 1000.0
DEFAULT_CHANGE_MIN: Final[float] = -10.0
DEFAULT_CHANGE_MAX: Final[float] = 10.0
DEFAULT_CONFIDENCE_MIN: Final[float] = 0.0
DEFAULT_CONFIDENCE_MAX: Final[float] = 100.0


class NumericRange(BaseModel):
    """Inclusive ``[min, max]`` bound.

    ``min > max`` is representable; such a range matches nothing and makes the
    query engine return an empty result rather than raise.
    """

    model_config = ConfigDict(frozen=True)

    min: float
    max: float

    @property
    def is_valid(self) -> bool:
        return self.min <= self.max

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


class DateRange(BaseModel):
    """Materialized date bounds plus the preset label they were derived from.

    Presets are resolved to concrete timestamps (see ``Quant_Trade.query.presets``)
    before the range reaches the pipeline.
    Naive bounds are read as UTC, matching ``Instrument.last_updated``.
    """

    model_config = ConfigDict(frozen=True)

    start: datetime.datetime | None = None
    end: datetime.datetime | None = None
    preset: DatePreset = DatePreset.ALL

    @field_validator("start", "end")
    @classmethod
    def validate_bound(cls, value: datetime.datetime | None) -> datetime.datetime | None:
        return None if value is None else assume_utc(value)

    @property
    def is_valid(self) -> bool:
        if self.start is None or self.end is None:
            return True
        return self.start <= self.end


class FilterCriteria(BaseModel):
    """Conjunctive filter over instruments. Defaults constrain nothing."""

    model_config = ConfigDict(frozen=True)

    search: str = ""
    sector: str = ALL_SECTORS
    price_range: NumericRange = NumericRange(min=DEFAULT_PRICE_MIN, max=DEFAULT_PRICE_MAX)
    change_range: NumericRange = NumericRange(min=DEFAULT_CHANGE_MIN, max=DEFAULT_CHANGE_MAX)
    prediction_direction: DirectionFilter = DirectionFilter.ALL
    confidence_range: NumericRange = NumericRange(
        min=DEFAULT_CONFIDENCE_MIN, max=DEFAULT_CONFIDENCE_MAX
    )
    date_range: DateRange = DateRange()

    @property
    def is_well_formed(self) -> bool:
        """True when every range has ``min <= max``."""
        return (
            self.price_range.is_valid
            and self.change_range.is_valid
            and self.confidence_range.is_valid
            and self.date_range.is_valid
        )


class SortCriteria(BaseModel):
    """Sort column and direction. Unknown fields fail validation at construction."""

    model_config = ConfigDict(frozen=True)

    field: SortField = SortField.SYMBOL
    direction: SortDirection = SortDirection.ASC


class PaginationState(BaseModel):
    """Page position plus the server-derived item total."""

    model_config = WIRE_CONFIG

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, gt=0)
    total: int = Field(default=0, ge=0)

    @computed_field(alias="totalPages")  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int:
        """``ceil(total / page_size)``; zero when there are no items."""
        return math.ceil(self.total / self.page_size)


class QueryCriteria(BaseModel):
    """Everything one query needs: filters, sort, and the requested page."""

    model_config = ConfigDict(frozen=True)

    filters: FilterCriteria = FilterCriteria()
    sort: SortCriteria = SortCriteria()
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, gt=0)


class QueryResult(BaseModel):
    """One page of filtered, ordered instruments with the filled-in pagination."""

    model_config = ConfigDict(frozen=True)

    data: tuple[Instrument, ...]
    pagination: PaginationState
