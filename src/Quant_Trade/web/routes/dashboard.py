"""Dashboard summary API routes.

GET /api/dashboard/stats  — Key Metrics figures over the served dataset.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from Quant_Trade.models.api import DashboardStatsResponse
from Quant_Trade.models.market_data import Instrument
from Quant_Trade.query.stats import compute_dashboard_stats
from Quant_Trade.web.deps import get_dataset

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get(
    "/stats",
    response_model=DashboardStatsResponse,
    response_model_exclude_none=True,
)
async def dashboard_stats(
    dataset: Annotated[tuple[Instrument, ...], Depends(get_dataset)],
) -> DashboardStatsResponse:
    """Return prediction count, accuracy rate, active stocks, and market trend."""
    return DashboardStatsResponse(data=compute_dashboard_stats(dataset), success=True)
