"""Shared test fixtures for the Quant Trade test suite.

Provides realistic sample instruments and a fixed-clock copy of the demo
dataset so tests don't need to inline large construction blocks.
"""

import datetime
from collections.abc import Callable
from typing import Any

import pytest

from Quant_Trade.data.fallback import build_fallback_dataset
from Quant_Trade.models import (
    Instrument,
    Prediction,
    PredictionDirection,
    QueryCriteria,
    Timeframe,
)

AS_OF = datetime.datetime(2025, 1, 15, 16, 0, 0, tzinfo=datetime.UTC)


@pytest.fixture()
def as_of() -> datetime.datetime:
    """Fixed 'now' the sample dataset is anchored to."""
    return AS_OF


@pytest.fixture()
def sample_prediction() -> Prediction:
    """A bullish one-month prediction for AAPL."""
    return Prediction(
        direction=PredictionDirection.UP,
        confidence=87.0,
        target_price=205.0,
        timeframe=Timeframe.ONE_MONTH,
        accuracy=82.4,
    )


@pytest.fixture()
def sample_instrument(sample_prediction: Prediction) -> Instrument:
    """A valid AAPL instrument with consistent change fields."""
    return Instrument(
        id="1",
        symbol="AAPL",
        name="Apple Inc.",
        current_price=189.84,
        previous_close=187.15,
        change=2.69,
        change_percent=1.44,
        volume=52_340_000,
        market_cap=2.95e12,
        sector="Technology",
        last_updated=AS_OF - datetime.timedelta(hours=1),
        prediction=sample_prediction,
    )


@pytest.fixture()
def make_instrument(sample_instrument: Instrument) -> Callable[..., Instrument]:
    """Factory: copy of the AAPL sample with top-level and prediction overrides.

    Usage::

        make_instrument(symbol="MSFT", confidence=40.0)
    """
    prediction_fields = set(Prediction.model_fields)

    def _make(**overrides: Any) -> Instrument:  # noqa: ANN401
        prediction_updates = {k: v for k, v in overrides.items() if k in prediction_fields}
        record_updates = {k: v for k, v in overrides.items() if k not in prediction_fields}
        prediction = sample_instrument.prediction.model_copy(update=prediction_updates)
        return sample_instrument.model_copy(update={**record_updates, "prediction": prediction})

    return _make


@pytest.fixture()
def dataset() -> tuple[Instrument, ...]:
    """The 30-instrument demo dataset anchored to a fixed clock."""
    return build_fallback_dataset(AS_OF)


@pytest.fixture()
def default_criteria() -> QueryCriteria:
    """Unfiltered criteria: symbol ascending, page 1 of 25."""
    return QueryCriteria()
