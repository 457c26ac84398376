"""Reporting module: display formatting and terminal rendering.

Re-exports all public functions so consumers can import directly:
    from Quant_Trade.reporting import render_dashboard, format_market_cap
"""

from Quant_Trade.reporting.formatters import (
    DIRECTION_DISPLAY,
    DirectionDisplay,
    format_change,
    format_currency,
    format_market_cap,
    format_volume,
)
from Quant_Trade.reporting.terminal import (
    build_stock_table,
    format_page_bar,
    format_results_summary,
    render_dashboard,
)

__all__ = [
    # Formatters
    "DIRECTION_DISPLAY",
    "DirectionDisplay",
    "format_change",
    "format_currency",
    "format_market_cap",
    "format_volume",
    # Terminal
    "build_stock_table",
    "format_page_bar",
    "format_results_summary",
    "render_dashboard",
]
