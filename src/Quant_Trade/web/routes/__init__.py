"""FastAPI route modules for Quant Trade.

Re-exports all routers so the application factory can import them:
    from Quant_Trade.web.routes import dashboard_router, stocks_router
"""

from Quant_Trade.web.routes.dashboard import router as dashboard_router
from Quant_Trade.web.routes.stocks import router as stocks_router

__all__ = ["dashboard_router", "stocks_router"]
