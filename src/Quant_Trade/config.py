"""Runtime settings for the API client and web app.

Settings are read from the environment once, at the entry point, and then
passed explicitly to whatever needs them. Library code never reads
``os.environ`` on its own.
"""

from __future__ import annotations

import logging
import os
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL: Final[str] = "http://localhost:8000/api"
DEFAULT_REQUEST_TIMEOUT: Final[float] = 10.0
DEFAULT_PAGE_SIZE_SETTING: Final[int] = 25

ENV_API_URL: Final[str] = "QUANT_TRADE_API_URL"
ENV_REQUEST_TIMEOUT: Final[str] = "QUANT_TRADE_REQUEST_TIMEOUT"


class Settings(BaseModel):
    """Resolved configuration. Frozen so it can be shared safely."""

    model_config = ConfigDict(frozen=True)

    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: float = Field(default=DEFAULT_REQUEST_TIMEOUT, gt=0)
    default_page_size: int = Field(default=DEFAULT_PAGE_SIZE_SETTING, gt=0)


def load_settings(
    *,
    api_base_url: str | None = None,
    request_timeout: float | None = None,
) -> Settings:
    """Build Settings, preferring explicit args > environment > defaults.

    An unparseable ``QUANT_TRADE_REQUEST_TIMEOUT`` is logged and ignored.
    """
    resolved_url = api_base_url or os.environ.get(ENV_API_URL, DEFAULT_API_BASE_URL)

    resolved_timeout = request_timeout
    if resolved_timeout is None:
        raw = os.environ.get(ENV_REQUEST_TIMEOUT)
        if raw:
            try:
                resolved_timeout = float(raw)
            except ValueError:
                logger.warning("Ignoring invalid %s=%r", ENV_REQUEST_TIMEOUT, raw)
    if resolved_timeout is None:
        resolved_timeout = DEFAULT_REQUEST_TIMEOUT

    settings = Settings(api_base_url=resolved_url.rstrip("/"), request_timeout=resolved_timeout)
    logger.debug(
        "Settings loaded: api_base_url=%s timeout=%.1fs",
        settings.api_base_url,
        settings.request_timeout,
    )
    return settings
