"""Rich-based terminal output for the stocks dashboard.

Uses ``rich.console.Console`` for all output. Color scheme:
green = bullish / positive change, red = bearish / negative change.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from Quant_Trade.models.api import DashboardStats
from Quant_Trade.models.enums import DataSource
from Quant_Trade.models.market_data import Instrument
from Quant_Trade.query.paginator import item_span, page_window
from Quant_Trade.reporting.formatters import (
    DIRECTION_DISPLAY,
    format_change,
    format_currency,
    format_market_cap,
    format_volume,
)
from Quant_Trade.services.orchestrator import DashboardView

logger = logging.getLogger(__name__)

# Shared console instance for terminal output
console = Console()

COLOR_POSITIVE: str = "green"
COLOR_NEGATIVE: str = "red"
COLOR_HEADER: str = "bold cyan"
COLOR_MUTED: str = "dim"


def _change_style(change: float) -> str:
    if change > 0:
        return COLOR_POSITIVE
    if change < 0:
        return COLOR_NEGATIVE
    return COLOR_MUTED


def build_stock_table(
    rows: tuple[Instrument, ...],
    *,
    title: str = "Stock Data & Predictions",
) -> Table:
    """Build the main instrument table (one row per instrument)."""
    table = Table(title=title, style=COLOR_HEADER)
    table.add_column("Symbol", style="bold", width=7)
    table.add_column("Name", width=28)
    table.add_column("Price", justify="right")
    table.add_column("Change", justify="right")
    table.add_column("Volume", justify="right")
    table.add_column("Market Cap", justify="right")
    table.add_column("Prediction")
    table.add_column("Confidence", justify="right")
    table.add_column("Target", justify="right")
    table.add_column("Sector", width=22)

    for row in rows:
        display = DIRECTION_DISPLAY[row.prediction.direction]
        change_style = _change_style(row.change)
        table.add_row(
            row.symbol,
            row.name,
            format_currency(row.current_price),
            f"[{change_style}]{format_change(row.change, row.change_percent)}[/{change_style}]",
            format_volume(row.volume),
            format_market_cap(row.market_cap),
            f"[{display.style}]{display.glyph} {display.label}[/{display.style}]",
            f"{row.prediction.confidence:.0f}%",
            format_currency(row.prediction.target_price),
            row.sector,
        )
    return table


def format_page_bar(page: int, pages: int) -> str:
    """'1 … 4 [5] 6 … 12' style page navigation line."""
    parts: list[str] = []
    for number in page_window(page, pages):
        if number is None:
            parts.append("…")
        elif number == page:
            parts.append(f"[bold][{number}][/bold]")
        else:
            parts.append(str(number))
    return " ".join(parts)


def format_results_summary(view: DashboardView) -> str:
    """'Showing 1-25 of 28 results (30 total)' with the total only when it differs."""
    pagination = view.result.pagination
    first, last = item_span(pagination.page, pagination.page_size, view.total_filtered)
    summary = f"Showing {first}-{last} of {view.total_filtered} results"
    if view.is_filtered:
        summary += f" ({view.total_available} total)"
    return summary


def render_dashboard(view: DashboardView) -> None:
    """Print the error banner (if any), the table, and pagination info."""
    if view.error:
        console.print(
            Panel(
                f"{view.error}\nShowing demo data. Run the command again to retry.",
                title="Live data unavailable",
                style=COLOR_NEGATIVE,
            )
        )

    if not view.result.data:
        console.print("[yellow]No stocks match the current filters.[/yellow]")
    else:
        console.print(build_stock_table(view.result.data))

    source_note = "live" if view.source == DataSource.REMOTE else "local demo data"
    summary = f"{format_results_summary(view)} · {source_note}"
    console.print(f"\n[{COLOR_MUTED}]{summary}[/{COLOR_MUTED}]")

    pages = view.result.pagination.total_pages
    if pages > 1:
        console.print(format_page_bar(view.result.pagination.page, pages))


def build_stats_table(stats: DashboardStats) -> Table:
    """One-row Key Metrics table: predictions, accuracy, active stocks, trend."""
    table = Table(title="Key Metrics", style=COLOR_HEADER)
    table.add_column("Total Predictions", justify="right")
    table.add_column("Accuracy Rate", justify="right")
    table.add_column("Active Stocks", justify="right")
    table.add_column("Market Trend", justify="right")

    trend_style = _change_style(stats.market_trend)
    table.add_row(
        f"{stats.total_predictions:,}",
        f"[{COLOR_POSITIVE}]{stats.accuracy_rate:.1f}%[/{COLOR_POSITIVE}]",
        f"{stats.active_stocks:,}",
        f"[{trend_style}]{stats.market_trend:+.2f}%[/{trend_style}]",
    )
    return table


def render_stats(stats: DashboardStats, source: DataSource) -> None:
    """Print the Key Metrics table and where the figures came from."""
    console.print(build_stats_table(stats))
    source_note = "live" if source == DataSource.REMOTE else "local demo data"
    console.print(f"[{COLOR_MUTED}]{source_note}[/{COLOR_MUTED}]")
