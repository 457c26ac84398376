"""Market data models: instruments and the predictions attached to them.

Attributes are snake_case in Python and camelCase on the wire. Both names are
accepted on input; ``model_dump(by_alias=True)`` produces the wire form.
"""

import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from Quant_Trade.models.enums import PredictionDirection, Timeframe

WIRE_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


def assume_utc(value: datetime.datetime) -> datetime.datetime:
    """Attach UTC to a naive timestamp; aware timestamps pass through unchanged."""
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.UTC)
    return value


class Prediction(BaseModel):
    """Directional forecast for a single instrument.

    Frozen because a prediction is a published point-in-time forecast.
    """

    model_config = WIRE_CONFIG

    direction: PredictionDirection
    confidence: float = Field(ge=0, le=100)
    target_price: float = Field(gt=0)
    timeframe: Timeframe
    accuracy: float = Field(ge=0, le=100)


class Instrument(BaseModel):
    """One tradable row of the dashboard with its embedded prediction.

    ``change`` and ``change_percent`` are supplied by the producer and must
    equal ``current_price - previous_close`` and ``change / previous_close * 100``.
    The query pipeline reads them as-is and never recomputes them.
    """

    model_config = WIRE_CONFIG

    id: str
    symbol: str
    name: str
    current_price: float
    previous_close: float
    change: float
    change_percent: float
    volume: int
    market_cap: float
    sector: str
    last_updated: datetime.datetime
    prediction: Prediction

    @field_validator("last_updated")
    @classmethod
    def validate_last_updated(cls, value: datetime.datetime) -> datetime.datetime:
        """Naive timestamps are read as UTC so date filters compare like with like."""
        return assume_utc(value)
