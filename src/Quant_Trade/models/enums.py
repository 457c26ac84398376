"""StrEnum types for the stock-prediction domain.

All enums use Python 3.13+ StrEnum. Values match the wire format exactly.
Use enum members in business logic, never raw strings.
"""

from enum import StrEnum


class PredictionDirection(StrEnum):
    """Direction a prediction expects the price to move."""

    UP = "up"
    DOWN = "down"
    NEUTRAL = "neutral"


class DirectionFilter(StrEnum):
    """Prediction-direction filter. ``ALL`` disables the constraint."""

    ALL = "all"
    UP = "up"
    DOWN = "down"
    NEUTRAL = "neutral"


class Timeframe(StrEnum):
    """Horizon a prediction targets."""

    ONE_DAY = "1d"
    ONE_WEEK = "1w"
    ONE_MONTH = "1m"
    THREE_MONTHS = "3m"


class SortDirection(StrEnum):
    """Ascending or descending order."""

    ASC = "asc"
    DESC = "desc"


class SortField(StrEnum):
    """Closed set of sortable columns.

    Nested prediction fields use their dotted wire name. Each member has an
    explicit accessor in ``Quant_Trade.query.comparator``.
    """

    ID = "id"
    SYMBOL = "symbol"
    NAME = "name"
    CURRENT_PRICE = "currentPrice"
    PREVIOUS_CLOSE = "previousClose"
    CHANGE = "change"
    CHANGE_PERCENT = "changePercent"
    VOLUME = "volume"
    MARKET_CAP = "marketCap"
    SECTOR = "sector"
    LAST_UPDATED = "lastUpdated"
    PREDICTION_DIRECTION = "prediction.direction"
    PREDICTION_CONFIDENCE = "prediction.confidence"
    PREDICTION_TARGET_PRICE = "prediction.targetPrice"
    PREDICTION_TIMEFRAME = "prediction.timeframe"
    PREDICTION_ACCURACY = "prediction.accuracy"


class DatePreset(StrEnum):
    """Date-range presets offered by the dashboard. ``ALL`` means all time."""

    TODAY = "1d"
    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"
    LAST_3_MONTHS = "3m"
    LAST_6_MONTHS = "6m"
    LAST_YEAR = "1y"
    ALL = "all"
    CUSTOM = "custom"


class FetchStatus(StrEnum):
    """Lifecycle state of the fetch orchestrator."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


class DataSource(StrEnum):
    """Where the rows on screen came from."""

    REMOTE = "remote"
    LOCAL = "local"
