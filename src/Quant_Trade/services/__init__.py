"""Remote data access and fetch orchestration.

Re-exports all public service classes so consumers can import directly:
    from Quant_Trade.services import StockApiClient, StockQueryOrchestrator
"""

from Quant_Trade.services.orchestrator import (
    DashboardView,
    FetchSnapshot,
    StockFetcher,
    StockQueryOrchestrator,
    needs_fallback,
    resolve_view,
)
from Quant_Trade.services.stock_api import StockApiClient

__all__ = [
    # Client
    "StockApiClient",
    # Orchestration
    "DashboardView",
    "FetchSnapshot",
    "StockFetcher",
    "StockQueryOrchestrator",
    "needs_fallback",
    "resolve_view",
]
