"""Dashboard headline figures derived from the instrument dataset.

Every instrument carries exactly one prediction, so the prediction count and
the active-stock count only differ when a symbol appears more than once.
"""

import logging
from collections.abc import Sequence
from statistics import fmean

from Quant_Trade.models.api import DashboardStats
from Quant_Trade.models.market_data import Instrument

logger = logging.getLogger(__name__)


def compute_dashboard_stats(dataset: Sequence[Instrument]) -> DashboardStats:
    """Summarise *dataset* into the four Key Metrics figures.

    An empty dataset yields all zeros rather than an error.

    Returns:
        DashboardStats with accuracy rounded to one decimal and the market
        trend (mean ``change_percent``) rounded to two.
    """
    if not dataset:
        return DashboardStats(
            total_predictions=0, accuracy_rate=0.0, active_stocks=0, market_trend=0.0
        )

    stats = DashboardStats(
        total_predictions=len(dataset),
        accuracy_rate=round(fmean(i.prediction.accuracy for i in dataset), 1),
        active_stocks=len({i.symbol for i in dataset}),
        market_trend=round(fmean(i.change_percent for i in dataset), 2),
    )
    logger.debug("Dashboard stats over %d instruments: %s", len(dataset), stats)
    return stats
