"""Response envelopes shared by the API endpoints and their client.

``success: false`` responses carry an empty ``data`` list and a ``message``;
``pagination`` is only present on success.
"""

from pydantic import BaseModel, ConfigDict, Field

from Quant_Trade.models.criteria import PaginationState
from Quant_Trade.models.market_data import WIRE_CONFIG, Instrument


class StockListResponse(BaseModel):
    """Envelope for ``GET /api/stocks``."""

    model_config = ConfigDict(frozen=True)

    data: list[Instrument]
    success: bool
    message: str | None = None
    pagination: PaginationState | None = None


class StockResponse(BaseModel):
    """Envelope for ``GET /api/stocks/{symbol}``."""

    model_config = ConfigDict(frozen=True)

    data: Instrument | None = None
    success: bool
    message: str | None = None


class SectorListResponse(BaseModel):
    """Envelope for ``GET /api/stocks/sectors``."""

    model_config = ConfigDict(frozen=True)

    data: list[str]
    success: bool
    message: str | None = None


class DashboardStats(BaseModel):
    """Headline figures shown above the stock table.

    ``accuracy_rate`` is the mean historical prediction accuracy and
    ``market_trend`` the mean ``change_percent``, both in percent.
    """

    model_config = WIRE_CONFIG

    total_predictions: int = Field(ge=0)
    accuracy_rate: float = Field(ge=0, le=100)
    active_stocks: int = Field(ge=0)
    market_trend: float


class DashboardStatsResponse(BaseModel):
    """Envelope for ``GET /api/dashboard/stats``."""

    model_config = ConfigDict(frozen=True)

    data: DashboardStats | None = None
    success: bool
    message: str | None = None
