"""FastAPI web layer for Quant Trade.

Re-exports the application factory so consumers can import directly:
    from Quant_Trade.web import create_app
"""

from Quant_Trade.web.app import create_app

__all__ = ["create_app"]
