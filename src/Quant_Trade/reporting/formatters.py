"""Shared display formatting for instruments and predictions.

Number formatting (currency, market cap, volume) and the display metadata for
each prediction direction. ``DIRECTION_DISPLAY`` must cover every
``PredictionDirection`` member; this is checked at import time.
"""

from __future__ import annotations

import logging
from typing import Final, NamedTuple

from Quant_Trade.models.enums import PredictionDirection

logger = logging.getLogger(__name__)

_TRILLION: Final[float] = 1e12
_BILLION: Final[float] = 1e9
_MILLION: Final[float] = 1e6
_THOUSAND: Final[float] = 1e3


class DirectionDisplay(NamedTuple):
    """How a prediction direction is shown to the user."""

    label: str
    glyph: str
    style: str


DIRECTION_DISPLAY: Final[dict[PredictionDirection, DirectionDisplay]] = {
    PredictionDirection.UP: DirectionDisplay(label="Bullish", glyph="▲", style="green"),
    PredictionDirection.DOWN: DirectionDisplay(label="Bearish", glyph="▼", style="red"),
    PredictionDirection.NEUTRAL: DirectionDisplay(label="Neutral", glyph="–", style="dim"),
}

_missing = set(PredictionDirection) - set(DIRECTION_DISPLAY)
if _missing:  # pragma: no cover
    raise RuntimeError(f"PredictionDirection members without display: {sorted(_missing)}")


def format_currency(value: float) -> str:
    """185.5 -> '$185.50'; negatives as '-$3.20'."""
    if value < 0:
        return f"-${-value:,.2f}"
    return f"${value:,.2f}"


def format_market_cap(value: float) -> str:
    """2.95e12 -> '$2.95T', 4.7e11 -> '$470.00B', 7.5e7 -> '$75.00M'."""
    if value >= _TRILLION:
        return f"${value / _TRILLION:.2f}T"
    if value >= _BILLION:
        return f"${value / _BILLION:.2f}B"
    if value >= _MILLION:
        return f"${value / _MILLION:.2f}M"
    return format_currency(value)


def format_volume(value: float) -> str:
    """52_340_000 -> '52.34M'; below a thousand as a grouped integer."""
    if value >= _BILLION:
        return f"{value / _BILLION:.2f}B"
    if value >= _MILLION:
        return f"{value / _MILLION:.2f}M"
    if value >= _THOUSAND:
        return f"{value / _THOUSAND:.2f}K"
    return f"{int(value):,}"


def format_change(change: float, change_percent: float) -> str:
    """'+2.69 (+1.44%)' style signed change."""
    return f"{change:+.2f} ({change_percent:+.2f}%)"
