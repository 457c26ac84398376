"""Tests for display formatting helpers.

Covers currency, market cap, volume, and change formatting, and the
prediction-direction display table.
"""

from __future__ import annotations

import pytest

from Quant_Trade.models.enums import PredictionDirection
from Quant_Trade.reporting.formatters import (
    DIRECTION_DISPLAY,
    format_change,
    format_currency,
    format_market_cap,
    format_volume,
)

# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


class TestFormatCurrency:
    """Tests for format_currency()."""

    def test_two_decimals(self) -> None:
        assert format_currency(185.5) == "$185.50"

    def test_thousands_separator(self) -> None:
        assert format_currency(1234.5) == "$1,234.50"

    def test_negative(self) -> None:
        assert format_currency(-3.2) == "-$3.20"


class TestFormatMarketCap:
    """Tests for format_market_cap()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (2.95e12, "$2.95T"),
            (4.7e11, "$470.00B"),
            (7.5e7, "$75.00M"),
            (950_000.0, "$950,000.00"),
        ],
    )
    def test_suffixes(self, value: float, expected: str) -> None:
        assert format_market_cap(value) == expected


class TestFormatVolume:
    """Tests for format_volume()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1_200_000_000, "1.20B"),
            (52_340_000, "52.34M"),
            (12_500, "12.50K"),
            (999, "999"),
        ],
    )
    def test_suffixes(self, value: int, expected: str) -> None:
        assert format_volume(value) == expected


class TestFormatChange:
    """Tests for format_change()."""

    def test_positive_signed(self) -> None:
        assert format_change(2.69, 1.44) == "+2.69 (+1.44%)"

    def test_negative_signed(self) -> None:
        assert format_change(-10.63, -5.7) == "-10.63 (-5.70%)"


# ---------------------------------------------------------------------------
# Direction display
# ---------------------------------------------------------------------------


class TestDirectionDisplay:
    """Tests for the DIRECTION_DISPLAY table."""

    def test_covers_every_direction(self) -> None:
        assert set(DIRECTION_DISPLAY) == set(PredictionDirection)

    def test_labels(self) -> None:
        assert DIRECTION_DISPLAY[PredictionDirection.UP].label == "Bullish"
        assert DIRECTION_DISPLAY[PredictionDirection.DOWN].label == "Bearish"
        assert DIRECTION_DISPLAY[PredictionDirection.NEUTRAL].label == "Neutral"

    def test_styles(self) -> None:
        assert DIRECTION_DISPLAY[PredictionDirection.UP].style == "green"
        assert DIRECTION_DISPLAY[PredictionDirection.DOWN].style == "red"
