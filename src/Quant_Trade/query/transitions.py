"""Pure state transitions on QueryCriteria.

Each function returns a new QueryCriteria; the input is left untouched.
"""

from Quant_Trade.models.criteria import FilterCriteria, QueryCriteria, SortCriteria
from Quant_Trade.models.enums import SortDirection, SortField


def toggle_sort(criteria: QueryCriteria, field: SortField) -> QueryCriteria:
    """Sort by *field*, flipping direction if it is already the ascending key.

    Any other click starts ascending. Always returns to page 1.
    """
    current = criteria.sort
    if current.field == field and current.direction == SortDirection.ASC:
        direction = SortDirection.DESC
    else:
        direction = SortDirection.ASC
    return criteria.model_copy(
        update={"sort": SortCriteria(field=field, direction=direction), "page": 1}
    )


def change_filters(criteria: QueryCriteria, filters: FilterCriteria) -> QueryCriteria:
    """Apply new filters and return to page 1."""
    return criteria.model_copy(update={"filters": filters, "page": 1})


def change_page(criteria: QueryCriteria, page: int) -> QueryCriteria:
    if page < 1:
        msg = f"page must be >= 1, got {page}"
        raise ValueError(msg)
    return criteria.model_copy(update={"page": page})


def change_page_size(criteria: QueryCriteria, page_size: int) -> QueryCriteria:
    """Change the page size and return to page 1."""
    if page_size < 1:
        msg = f"page_size must be > 0, got {page_size}"
        raise ValueError(msg)
    return criteria.model_copy(update={"page_size": page_size, "page": 1})
