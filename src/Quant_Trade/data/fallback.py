"""Bundled demo dataset used when the remote endpoint is unavailable.

The dataset is built once, as a tuple of frozen Instrument models, and shared
by every consumer. Nothing may reorder or replace its elements; the query
engine always sorts a copy.
"""

from __future__ import annotations

import datetime
import functools
import logging
from typing import Final, NamedTuple

from Quant_Trade.models.criteria import ALL_SECTORS
from Quant_Trade.models.enums import PredictionDirection, Timeframe
from Quant_Trade.models.market_data import Instrument, Prediction

logger = logging.getLogger(__name__)

SECTORS: Final[tuple[str, ...]] = (
    "Technology",
    "Healthcare",
    "Financial Services",
    "Consumer Cyclical",
    "Communication Services",
    "Energy",
    "Industrials",
    "Consumer Defensive",
    "Utilities",
    "Real Estate",
)
"""Sector values an Instrument may carry."""

SECTOR_OPTIONS: Final[tuple[str, ...]] = (ALL_SECTORS, *SECTORS)
"""Sector choices offered to the user, sentinel first."""

_UP = PredictionDirection.UP
_DOWN = PredictionDirection.DOWN
_FLAT = PredictionDirection.NEUTRAL


class _Row(NamedTuple):
    symbol: str
    name: str
    sector: str
    price: float
    previous_close: float
    volume: int
    market_cap: float
    direction: PredictionDirection
    confidence: float
    target: float
    timeframe: str
    accuracy: float
    hours_ago: int


# fmt: off
_ROWS: Final[tuple[_Row, ...]] = (
    _Row("AAPL", "Apple Inc.", "Technology", 189.84, 187.15, 52_340_000, 2.95e12, _UP, 87, 205.0, "1m", 82.4, 1),
    _Row("MSFT", "Microsoft Corporation", "Technology", 415.26, 418.90, 21_870_000, 3.09e12, _UP, 79, 440.0, "3m", 80.1, 2),
    _Row("NVDA", "NVIDIA Corporation", "Technology", 875.28, 851.12, 44_560_000, 2.16e12, _UP, 91, 950.0, "1m", 85.7, 1),
    _Row("GOOGL", "Alphabet Inc.", "Communication Services", 151.77, 153.02, 28_120_000, 1.89e12, _FLAT, 58, 152.0, "1w", 71.3, 3),
    _Row("AMZN", "Amazon.com Inc.", "Consumer Cyclical", 178.22, 175.35, 39_980_000, 1.85e12, _UP, 74, 192.0, "1m", 78.9, 5),
    _Row("META", "Meta Platforms Inc.", "Communication Services", 502.30, 509.58, 17_450_000, 1.28e12, _DOWN, 63, 480.0, "1w", 74.0, 8),
    _Row("TSLA", "Tesla Inc.", "Consumer Cyclical", 175.79, 186.42, 98_230_000, 5.6e11, _DOWN, 82, 160.0, "1w", 69.5, 4),
    _Row("JPM", "JPMorgan Chase & Co.", "Financial Services", 198.48, 196.62, 9_870_000, 5.7e11, _UP, 68, 210.0, "3m", 77.2, 26),
    _Row("V", "Visa Inc.", "Financial Services", 279.65, 281.10, 6_120_000, 5.7e11, _FLAT, 52, 282.0, "1m", 73.8, 30),
    _Row("JNJ", "Johnson & Johnson", "Healthcare", 156.38, 158.04, 7_340_000, 3.77e11, _DOWN, 57, 150.0, "1m", 70.6, 50),
    _Row("UNH", "UnitedHealth Group Inc.", "Healthcare", 492.11, 488.70, 3_210_000, 4.54e11, _UP, 61, 515.0, "3m", 72.9, 72),
    _Row("XOM", "Exxon Mobil Corporation", "Energy", 118.42, 116.95, 18_650_000, 4.7e11, _UP, 66, 125.0, "1m", 75.1, 96),
    _Row("CVX", "Chevron Corporation", "Energy", 155.67, 158.31, 8_970_000, 2.89e11, _DOWN, 59, 148.0, "1m", 68.7, 120),
    _Row("PG", "Procter & Gamble Co.", "Consumer Defensive", 162.15, 161.80, 5_870_000, 3.82e11, _FLAT, 45, 163.0, "3m", 79.4, 150),
    _Row("KO", "Coca-Cola Co.", "Consumer Defensive", 60.12, 59.88, 12_430_000, 2.59e11, _FLAT, 42, 61.0, "3m", 81.0, 200),
    _Row("WMT", "Walmart Inc.", "Consumer Defensive", 60.35, 59.61, 15_980_000, 4.86e11, _UP, 71, 64.0, "1m", 76.3, 240),
    _Row("HD", "Home Depot Inc.", "Consumer Cyclical", 345.67, 351.22, 3_450_000, 3.43e11, _DOWN, 55, 330.0, "1m", 71.8, 300),
    _Row("BA", "Boeing Co.", "Industrials", 182.50, 190.05, 8_760_000, 1.11e11, _DOWN, 77, 165.0, "1w", 66.2, 360),
    _Row("CAT", "Caterpillar Inc.", "Industrials", 358.90, 352.44, 2_980_000, 1.76e11, _UP, 69, 375.0, "3m", 74.5, 420),
    _Row("GE", "GE Aerospace", "Industrials", 159.04, 156.20, 5_430_000, 1.74e11, _UP, 72, 170.0, "1m", 75.9, 500),
    _Row("NEE", "NextEra Energy Inc.", "Utilities", 67.45, 68.12, 10_230_000, 1.38e11, _FLAT, 48, 68.0, "3m", 77.7, 600),
    _Row("DUK", "Duke Energy Corporation", "Utilities", 97.22, 96.85, 3_120_000, 7.5e10, _UP, 53, 100.0, "3m", 78.2, 700),
    _Row("PLD", "Prologis Inc.", "Real Estate", 128.33, 131.40, 3_870_000, 1.19e11, _DOWN, 60, 120.0, "1m", 69.9, 800),
    _Row("AMT", "American Tower Corporation", "Real Estate", 195.48, 193.10, 2_210_000, 9.1e10, _FLAT, 50, 197.0, "1m", 72.4, 1000),
    _Row("PFE", "Pfizer Inc.", "Healthcare", 27.85, 28.42, 38_760_000, 1.58e11, _DOWN, 64, 25.5, "1m", 67.3, 1300),
    _Row("LLY", "Eli Lilly and Co.", "Healthcare", 762.44, 748.90, 2_890_000, 7.24e11, _UP, 84, 820.0, "3m", 83.6, 1700),
    _Row("BAC", "Bank of America Corporation", "Financial Services", 37.21, 36.88, 41_230_000, 2.93e11, _UP, 62, 39.5, "1m", 73.1, 2200),
    _Row("NFLX", "Netflix Inc.", "Communication Services", 615.90, 628.75, 4_120_000, 2.66e11, _DOWN, 70, 580.0, "1w", 70.8, 3000),
    _Row("AMD", "Advanced Micro Devices Inc.", "Technology", 178.60, 170.25, 61_870_000, 2.89e11, _UP, 80, 200.0, "1m", 76.6, 4500),
    _Row("INTC", "Intel Corporation", "Technology", 31.88, 33.40, 52_650_000, 1.36e11, _DOWN, 73, 28.0, "1m", 65.4, 7000),
)
# fmt: on


def _build_instrument(index: int, row: _Row, as_of: datetime.datetime) -> Instrument:
    change = round(row.price - row.previous_close, 2)
    return Instrument(
        id=str(index + 1),
        symbol=row.symbol,
        name=row.name,
        current_price=row.price,
        previous_close=row.previous_close,
        change=change,
        change_percent=round(change / row.previous_close * 100, 2),
        volume=row.volume,
        market_cap=row.market_cap,
        sector=row.sector,
        last_updated=as_of - datetime.timedelta(hours=row.hours_ago),
        prediction=Prediction(
            direction=row.direction,
            confidence=row.confidence,
            target_price=row.target,
            timeframe=Timeframe(row.timeframe),
            accuracy=row.accuracy,
        ),
    )


def build_fallback_dataset(as_of: datetime.datetime) -> tuple[Instrument, ...]:
    """Build the demo dataset with ``last_updated`` offsets relative to *as_of*."""
    return tuple(_build_instrument(i, row, as_of) for i, row in enumerate(_ROWS))


@functools.cache
def load_fallback_dataset() -> tuple[Instrument, ...]:
    """Return the process-wide demo dataset, built on first use.

    Timestamps are anchored to the moment of first load so that rolling date
    presets ("Today", "Last 7 days") select a realistic subset.
    """
    dataset = build_fallback_dataset(datetime.datetime.now(datetime.UTC))
    logger.info("Loaded fallback dataset: %d instruments", len(dataset))
    return dataset


def find_by_symbol(dataset: tuple[Instrument, ...], symbol: str) -> Instrument | None:
    """Case-insensitive single-record lookup by ticker symbol."""
    wanted = symbol.upper()
    for instrument in dataset:
        if instrument.symbol.upper() == wanted:
            return instrument
    return None
