"""Tests for pagination: slicing, page counts, item spans, and page windows.

Covers:
- 30 items, page size 10: pages 1-3 full, page 4 empty with total 30
- Out-of-range pages never raise
- item_span for the "Showing X-Y of N" line
- page_window ellipsis placement
"""

import pytest

from Quant_Trade.query.paginator import Page, item_span, page_window, paginate, total_pages

_ITEMS = tuple(range(1, 31))


class TestPaginate:
    """Tests for paginate()."""

    def test_first_page(self) -> None:
        page = paginate(_ITEMS, 1, 10)
        assert page == Page(items=tuple(range(1, 11)), total=30)

    def test_last_full_page(self) -> None:
        page = paginate(_ITEMS, 3, 10)
        assert page.items == tuple(range(21, 31))

    def test_page_past_end_is_empty(self) -> None:
        """Page 4 of 3 returns no items but keeps the true total."""
        page = paginate(_ITEMS, 4, 10)
        assert page.items == ()
        assert page.total == 30
        assert total_pages(page.total, 10) == 3

    def test_partial_last_page(self) -> None:
        page = paginate(_ITEMS, 2, 25)
        assert page.items == tuple(range(26, 31))

    def test_empty_input(self) -> None:
        page = paginate((), 1, 10)
        assert page.items == ()
        assert page.total == 0

    def test_accepts_list(self) -> None:
        page = paginate(list(_ITEMS), 2, 10)
        assert isinstance(page.items, tuple)
        assert page.items[0] == 11

    def test_page_sizes_concatenate_to_whole(self) -> None:
        pages = [paginate(_ITEMS, n, 7).items for n in range(1, 6)]
        assert sum(pages, ()) == _ITEMS


class TestTotalPages:
    """Tests for total_pages()."""

    @pytest.mark.parametrize(
        ("total", "size", "expected"),
        [(0, 25, 0), (1, 25, 1), (25, 25, 1), (26, 25, 2), (30, 10, 3)],
    )
    def test_ceiling(self, total: int, size: int, expected: int) -> None:
        assert total_pages(total, size) == expected


class TestItemSpan:
    """Tests for item_span()."""

    def test_first_page(self) -> None:
        assert item_span(1, 25, 30) == (1, 25)

    def test_partial_last_page(self) -> None:
        assert item_span(2, 25, 30) == (26, 30)

    def test_empty_result(self) -> None:
        assert item_span(1, 25, 0) == (0, 0)

    def test_page_past_end(self) -> None:
        assert item_span(4, 10, 30) == (0, 0)


class TestPageWindow:
    """Tests for page_window()."""

    def test_all_pages_when_few(self) -> None:
        assert page_window(1, 5) == [1, 2, 3, 4, 5]

    def test_exactly_max_visible(self) -> None:
        assert page_window(4, 7) == [1, 2, 3, 4, 5, 6, 7]

    def test_zero_pages(self) -> None:
        assert page_window(1, 0) == []

    def test_first_page_of_many(self) -> None:
        assert page_window(1, 20) == [1, 2, None, 20]

    def test_middle_page(self) -> None:
        assert page_window(10, 20) == [1, None, 9, 10, 11, None, 20]

    def test_last_page(self) -> None:
        assert page_window(20, 20) == [1, None, 19, 20]

    def test_near_start_has_no_gap(self) -> None:
        """Page 3 shows 1 2 3 4 with no leading ellipsis."""
        assert page_window(3, 20) == [1, 2, 3, 4, None, 20]

    def test_leading_ellipsis_only_when_pages_hidden(self) -> None:
        assert page_window(4, 20) == [1, None, 3, 4, 5, None, 20]

    def test_near_end_has_no_gap(self) -> None:
        assert page_window(18, 20) == [1, None, 17, 18, 19, 20]
