"""Filter, sort, paginate, and summarise pipeline shared by the API and the local fallback.

Re-exports all public functions so consumers can import directly:
    from Quant_Trade.query import run_query, matches, compare, paginate
"""

from Quant_Trade.query.comparator import FIELD_ACCESSORS, compare, sort_instruments, sort_key
from Quant_Trade.query.engine import run_criteria, run_query
from Quant_Trade.query.paginator import Page, item_span, page_window, paginate, total_pages
from Quant_Trade.query.params import criteria_from_params, to_query_params
from Quant_Trade.query.predicate import filter_instruments, matches
from Quant_Trade.query.presets import PRESET_LABELS, custom_range, resolve_date_preset
from Quant_Trade.query.stats import compute_dashboard_stats
from Quant_Trade.query.transitions import (
    change_filters,
    change_page,
    change_page_size,
    toggle_sort,
)

__all__ = [
    # Predicate
    "filter_instruments",
    "matches",
    # Comparator
    "FIELD_ACCESSORS",
    "compare",
    "sort_instruments",
    "sort_key",
    # Paginator
    "Page",
    "item_span",
    "page_window",
    "paginate",
    "total_pages",
    # Engine
    "run_criteria",
    "run_query",
    # Codec
    "criteria_from_params",
    "to_query_params",
    # Presets
    "PRESET_LABELS",
    "custom_range",
    "resolve_date_preset",
    # Stats
    "compute_dashboard_stats",
    # Transitions
    "change_filters",
    "change_page",
    "change_page_size",
    "toggle_sort",
]
