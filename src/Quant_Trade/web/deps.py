"""FastAPI dependencies for the stocks routes.

The app factory builds the instrument dataset once and parks it on
``app.state.dataset``; handlers receive it through ``Depends(get_dataset)``
so tests can serve any fixed dataset.
"""

import logging
import re
from typing import Annotated, Final

from fastapi import HTTPException, Path, Request

from Quant_Trade.models.market_data import Instrument

logger = logging.getLogger(__name__)

SYMBOL_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Z0-9]{1,5}")

Dataset = tuple[Instrument, ...]


async def get_dataset(request: Request) -> Dataset:
    """Return the read-only instrument dataset from application state."""
    dataset: Dataset = request.app.state.dataset
    return dataset


async def validate_ticker_symbol(
    symbol: Annotated[str, Path(description="Ticker symbol, 1-5 letters or digits")],
) -> str:
    """Upper-case *symbol* and reject anything that is not a plain ticker.

    Raises:
        HTTPException: 422 for empty, over-long, or punctuated symbols.
    """
    candidate = symbol.strip().upper()
    if SYMBOL_PATTERN.fullmatch(candidate) is None:
        logger.debug("Rejected ticker path parameter %r", symbol)
        raise HTTPException(status_code=422, detail=f"Invalid ticker symbol: {symbol!r}")
    return candidate
