"""CLI entry point for Quant Trade, a stock prediction dashboard.

Provides the ``quant-trade`` command with subcommands for browsing the stock
list (filter, sort, page), showing one instrument, the Key Metrics summary,
listing sectors, and serving the stocks API.

This is the ONLY module where terminal output is produced directly. All other
modules use ``logging``. Async internals are bridged to typer's synchronous
interface via ``asyncio.run()``.
"""

from __future__ import annotations

import asyncio
import datetime
from typing import Annotated

import typer

from Quant_Trade.config import load_settings
from Quant_Trade.data.fallback import SECTORS, find_by_symbol, load_fallback_dataset
from Quant_Trade.logging_config import configure_logging
from Quant_Trade.models import (
    DashboardStats,
    DataSource,
    DatePreset,
    DirectionFilter,
    FilterCriteria,
    NumericRange,
    QueryCriteria,
    SortCriteria,
    SortDirection,
    SortField,
)
from Quant_Trade.models.criteria import (
    ALL_SECTORS,
    DEFAULT_CHANGE_MAX,
    DEFAULT_CHANGE_MIN,
    DEFAULT_CONFIDENCE_MAX,
    DEFAULT_CONFIDENCE_MIN,
    DEFAULT_PAGE_SIZE,
    DEFAULT_PRICE_MAX,
    DEFAULT_PRICE_MIN,
)
from Quant_Trade.query.presets import custom_range, end_of_day, resolve_date_preset
from Quant_Trade.query.stats import compute_dashboard_stats
from Quant_Trade.reporting.terminal import (
    build_stock_table,
    console,
    render_dashboard,
    render_stats,
)
from Quant_Trade.services import StockApiClient, StockQueryOrchestrator, resolve_view
from Quant_Trade.utils.exceptions import StockDataError, user_message

# ---------------------------------------------------------------------------
# Typer app
# ---------------------------------------------------------------------------

app = typer.Typer(name="quant-trade", help="Stock prediction dashboard")

DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 8000


def _build_criteria(
    *,
    search: str,
    sector: str,
    prediction: DirectionFilter,
    min_price: float,
    max_price: float,
    min_change: float,
    max_change: float,
    min_confidence: float,
    max_confidence: float,
    preset: DatePreset,
    from_date: datetime.datetime | None,
    to_date: datetime.datetime | None,
    sort_by: SortField,
    order: SortDirection,
    page: int,
    page_size: int,
) -> QueryCriteria:
    """Assemble QueryCriteria from command-line options.

    Explicit ``--from``/``--to`` dates win over ``--period`` and make the
    range custom.
    """
    if from_date is not None or to_date is not None:
        date_range = custom_range(
            from_date,
            end_of_day(to_date) if to_date else None,
        )
    elif preset == DatePreset.CUSTOM:
        raise typer.BadParameter("--period custom requires --from and/or --to")
    else:
        date_range = resolve_date_preset(preset)

    return QueryCriteria(
        filters=FilterCriteria(
            search=search,
            sector=sector,
            prediction_direction=prediction,
            price_range=NumericRange(min=min_price, max=max_price),
            change_range=NumericRange(min=min_change, max=max_change),
            confidence_range=NumericRange(min=min_confidence, max=max_confidence),
            date_range=date_range,
        ),
        sort=SortCriteria(field=sort_by, direction=order),
        page=page,
        page_size=page_size,
    )


# ---------------------------------------------------------------------------
# stocks command
# ---------------------------------------------------------------------------


@app.command()
def stocks(
    search: Annotated[str, typer.Option(help="Match symbol or company name")] = "",
    sector: Annotated[str, typer.Option(help="Sector to show")] = ALL_SECTORS,
    prediction: Annotated[
        DirectionFilter, typer.Option(help="Prediction direction")
    ] = DirectionFilter.ALL,
    min_price: Annotated[float, typer.Option(help="Minimum price")] = DEFAULT_PRICE_MIN,
    max_price: Annotated[float, typer.Option(help="Maximum price")] = DEFAULT_PRICE_MAX,
    min_change: Annotated[float, typer.Option(help="Minimum change %")] = DEFAULT_CHANGE_MIN,
    max_change: Annotated[float, typer.Option(help="Maximum change %")] = DEFAULT_CHANGE_MAX,
    min_confidence: Annotated[
        float, typer.Option(help="Minimum prediction confidence")
    ] = DEFAULT_CONFIDENCE_MIN,
    max_confidence: Annotated[
        float, typer.Option(help="Maximum prediction confidence")
    ] = DEFAULT_CONFIDENCE_MAX,
    period: Annotated[
        DatePreset, typer.Option(help="Last-updated window")
    ] = DatePreset.ALL,
    from_date: Annotated[
        datetime.datetime | None,
        typer.Option("--from", help="Last updated on or after (YYYY-MM-DD)"),
    ] = None,
    to_date: Annotated[
        datetime.datetime | None,
        typer.Option("--to", help="Last updated on or before (YYYY-MM-DD)"),
    ] = None,
    sort_by: Annotated[SortField, typer.Option(help="Sort column")] = SortField.SYMBOL,
    order: Annotated[SortDirection, typer.Option(help="Sort direction")] = SortDirection.ASC,
    page: Annotated[int, typer.Option(min=1, help="Page number")] = 1,
    page_size: Annotated[int, typer.Option(min=1, help="Rows per page")] = DEFAULT_PAGE_SIZE,
    api_url: Annotated[str | None, typer.Option(help="Stocks API base URL")] = None,
    offline: Annotated[
        bool, typer.Option("--offline", help="Skip the API and use local demo data")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Suppress info logging")] = False,
) -> None:
    """Show one page of stocks and predictions, falling back to demo data."""
    configure_logging(verbose=verbose, quiet=quiet)

    criteria = _build_criteria(
        search=search,
        sector=sector,
        prediction=prediction,
        min_price=min_price,
        max_price=max_price,
        min_change=min_change,
        max_change=max_change,
        min_confidence=min_confidence,
        max_confidence=max_confidence,
        preset=period,
        from_date=from_date,
        to_date=to_date,
        sort_by=sort_by,
        order=order,
        page=page,
        page_size=page_size,
    )
    asyncio.run(_stocks_async(criteria=criteria, api_url=api_url, offline=offline))


async def _stocks_async(
    *,
    criteria: QueryCriteria,
    api_url: str | None,
    offline: bool,
) -> None:
    """Run one query through the orchestrator and render the resolved view."""
    settings = load_settings(api_base_url=api_url)

    async with StockApiClient(settings) as client:
        orchestrator = StockQueryOrchestrator(client, enabled=not offline)
        snapshot = await orchestrator.update(criteria)

    view = resolve_view(snapshot, load_fallback_dataset(), criteria)
    render_dashboard(view)


# ---------------------------------------------------------------------------
# stock command
# ---------------------------------------------------------------------------


@app.command()
def stock(
    symbol: Annotated[str, typer.Argument(help="Ticker symbol")],
    api_url: Annotated[str | None, typer.Option(help="Stocks API base URL")] = None,
    offline: Annotated[
        bool, typer.Option("--offline", help="Skip the API and use local demo data")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Show a single instrument and its prediction."""
    configure_logging(verbose=verbose)
    asyncio.run(_stock_async(symbol=symbol.upper().strip(), api_url=api_url, offline=offline))


async def _stock_async(*, symbol: str, api_url: str | None, offline: bool) -> None:
    """Fetch one instrument from the API, or look it up in the demo data."""
    instrument = None
    if not offline:
        settings = load_settings(api_base_url=api_url)
        async with StockApiClient(settings) as client:
            try:
                instrument = await client.get_stock(symbol)
            except StockDataError as exc:
                console.print(f"[yellow]{user_message(exc)} Using demo data.[/yellow]")

    if instrument is None:
        instrument = find_by_symbol(load_fallback_dataset(), symbol)

    if instrument is None:
        console.print(f"[red]No stock found for {symbol}.[/red]")
        raise typer.Exit(code=1)

    console.print(build_stock_table((instrument,), title=instrument.name))


# ---------------------------------------------------------------------------
# stats command
# ---------------------------------------------------------------------------


@app.command()
def stats(
    api_url: Annotated[str | None, typer.Option(help="Stocks API base URL")] = None,
    offline: Annotated[
        bool, typer.Option("--offline", help="Skip the API and use local demo data")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Show the Key Metrics summary: predictions, accuracy, active stocks, trend."""
    configure_logging(verbose=verbose)
    asyncio.run(_stats_async(api_url=api_url, offline=offline))


async def _stats_async(*, api_url: str | None, offline: bool) -> None:
    """Fetch dashboard stats from the API, or compute them from the demo data."""
    summary: DashboardStats | None = None
    if not offline:
        settings = load_settings(api_base_url=api_url)
        async with StockApiClient(settings) as client:
            try:
                summary = await client.get_dashboard_stats()
            except StockDataError as exc:
                console.print(f"[yellow]{user_message(exc)} Using demo data.[/yellow]")

    if summary is None:
        render_stats(compute_dashboard_stats(load_fallback_dataset()), DataSource.LOCAL)
    else:
        render_stats(summary, DataSource.REMOTE)


# ---------------------------------------------------------------------------
# sectors command
# ---------------------------------------------------------------------------


@app.command()
def sectors() -> None:
    """List the sectors stocks can be filtered by."""
    console.print(f"[bold]{ALL_SECTORS}[/bold]")
    for name in SECTORS:
        console.print(f"  {name}")


# ---------------------------------------------------------------------------
# serve command
# ---------------------------------------------------------------------------


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Bind address")] = DEFAULT_HOST,
    port: Annotated[int, typer.Option(help="Bind port")] = DEFAULT_PORT,
) -> None:
    """Serve the stocks API over the bundled demo dataset."""
    import uvicorn

    from Quant_Trade.web import create_app

    console.print(f"[bold]Serving stocks API on http://{host}:{port}/api[/bold]")
    uvicorn.run(create_app(), host=host, port=port)
