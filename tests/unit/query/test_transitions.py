"""Tests for QueryCriteria state transitions.

Covers:
- Sort toggling: same ascending field flips to descending, anything else
  starts ascending
- Sort, filter, and page-size changes return to page 1
- Inputs are never modified
"""

import pytest

from Quant_Trade.models import (
    FilterCriteria,
    QueryCriteria,
    SortCriteria,
    SortDirection,
    SortField,
)
from Quant_Trade.query.transitions import (
    change_filters,
    change_page,
    change_page_size,
    toggle_sort,
)


class TestToggleSort:
    """Tests for toggle_sort()."""

    def test_same_field_ascending_flips_to_descending(self) -> None:
        criteria = QueryCriteria(sort=SortCriteria(field=SortField.VOLUME), page=3)
        toggled = toggle_sort(criteria, SortField.VOLUME)
        assert toggled.sort == SortCriteria(field=SortField.VOLUME, direction=SortDirection.DESC)
        assert toggled.page == 1

    def test_same_field_descending_returns_to_ascending(self) -> None:
        criteria = QueryCriteria(
            sort=SortCriteria(field=SortField.VOLUME, direction=SortDirection.DESC)
        )
        toggled = toggle_sort(criteria, SortField.VOLUME)
        assert toggled.sort.direction == SortDirection.ASC

    def test_new_field_starts_ascending(self) -> None:
        criteria = QueryCriteria(
            sort=SortCriteria(field=SortField.VOLUME, direction=SortDirection.DESC)
        )
        toggled = toggle_sort(criteria, SortField.MARKET_CAP)
        assert toggled.sort == SortCriteria(field=SortField.MARKET_CAP)

    def test_input_unchanged(self, default_criteria: QueryCriteria) -> None:
        toggle_sort(default_criteria, SortField.SYMBOL)
        assert default_criteria.sort.direction == SortDirection.ASC


class TestPageChanges:
    """Tests for filter, page, and page-size transitions."""

    def test_change_filters_resets_page(self) -> None:
        criteria = QueryCriteria(page=4)
        updated = change_filters(criteria, FilterCriteria(search="tsla"))
        assert updated.filters.search == "tsla"
        assert updated.page == 1

    def test_change_page(self, default_criteria: QueryCriteria) -> None:
        assert change_page(default_criteria, 5).page == 5

    def test_change_page_rejects_zero(self, default_criteria: QueryCriteria) -> None:
        with pytest.raises(ValueError, match="page must be >= 1"):
            change_page(default_criteria, 0)

    def test_change_page_size_resets_page(self) -> None:
        updated = change_page_size(QueryCriteria(page=3), 50)
        assert updated.page_size == 50
        assert updated.page == 1

    def test_change_page_size_rejects_zero(self, default_criteria: QueryCriteria) -> None:
        with pytest.raises(ValueError, match="page_size"):
            change_page_size(default_criteria, 0)
