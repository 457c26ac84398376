"""Pydantic v2 models, enums, and type definitions.

Re-exports all public models so consumers can import directly:
    from Quant_Trade.models import Instrument, FilterCriteria, SortField
"""

from Quant_Trade.models.api import (
    DashboardStats,
    DashboardStatsResponse,
    SectorListResponse,
    StockListResponse,
    StockResponse,
)
from Quant_Trade.models.criteria import (
    ALL_SECTORS,
    DateRange,
    FilterCriteria,
    NumericRange,
    PaginationState,
    QueryCriteria,
    QueryResult,
    SortCriteria,
)
from Quant_Trade.models.enums import (
    DataSource,
    DatePreset,
    DirectionFilter,
    FetchStatus,
    PredictionDirection,
    SortDirection,
    SortField,
    Timeframe,
)
from Quant_Trade.models.market_data import Instrument, Prediction

__all__ = [
    # Enums
    "DataSource",
    "DatePreset",
    "DirectionFilter",
    "FetchStatus",
    "PredictionDirection",
    "SortDirection",
    "SortField",
    "Timeframe",
    # Market data
    "Instrument",
    "Prediction",
    # Criteria
    "ALL_SECTORS",
    "DateRange",
    "FilterCriteria",
    "NumericRange",
    "PaginationState",
    "QueryCriteria",
    "QueryResult",
    "SortCriteria",
    # Envelopes
    "DashboardStats",
    "DashboardStatsResponse",
    "SectorListResponse",
    "StockListResponse",
    "StockResponse",
]
