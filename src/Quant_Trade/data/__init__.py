"""Bundled local dataset for the stocks dashboard.

Re-exports the main public API:
    from Quant_Trade.data import load_fallback_dataset, SECTORS
"""

from Quant_Trade.data.fallback import (
    SECTOR_OPTIONS,
    SECTORS,
    build_fallback_dataset,
    find_by_symbol,
    load_fallback_dataset,
)

__all__ = [
    "SECTORS",
    "SECTOR_OPTIONS",
    "build_fallback_dataset",
    "find_by_symbol",
    "load_fallback_dataset",
]
