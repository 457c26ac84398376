"""FastAPI app factory: dataset state, routers, handlers, and health check."""

import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from Quant_Trade.data.fallback import load_fallback_dataset
from Quant_Trade.logging_config import configure_logging
from Quant_Trade.models.market_data import Instrument
from Quant_Trade.web.middleware import RequestLoggingMiddleware, register_exception_handlers

logger = logging.getLogger(__name__)


def create_app(dataset: tuple[Instrument, ...] | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        dataset: Instruments to serve. Defaults to the bundled demo dataset.
            Tests pass a fixed dataset so results are deterministic.
    """
    configure_logging()

    app = FastAPI(title="Quant Trade")
    app.state.dataset = dataset if dataset is not None else load_fallback_dataset()

    # Routes
    from Quant_Trade.web.routes import dashboard_router, stocks_router

    app.include_router(stocks_router, prefix="/api")
    app.include_router(dashboard_router, prefix="/api")

    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)

    # Health check
    @app.get("/api/health")
    async def health_check() -> JSONResponse:
        return JSONResponse({"status": "ok"})

    logger.info("Quant Trade web app created (%d instruments)", len(app.state.dataset))
    return app
