"""Slice an ordered sequence into pages and compute page-navigation helpers."""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page slice plus the length of the full sequence it was cut from."""

    items: tuple[T, ...]
    total: int


def total_pages(total: int, page_size: int) -> int:
    """Number of pages needed for *total* items; zero when there are none."""
    return math.ceil(total / page_size)


def paginate(records: Sequence[T], page: int, page_size: int) -> Page[T]:
    """Cut page *page* (1-based) of size *page_size* out of *records*.

    A page beyond the last one yields an empty slice. The page number is not
    corrected and no error is raised.

    Args:
        records: The full, already-ordered sequence.
        page: 1-based page number.
        page_size: Items per page, > 0.

    Returns:
        Page with the slice and ``total == len(records)``.
    """
    start = max(0, (page - 1) * page_size)
    end = min(start + page_size, len(records))
    return Page(items=tuple(records[start:end]), total=len(records))


def item_span(page: int, page_size: int, total: int) -> tuple[int, int]:
    """1-based ``(first, last)`` item numbers shown on *page*, e.g. (26, 50).

    Returns ``(0, 0)`` when the page holds no items.
    """
    first = (page - 1) * page_size + 1
    last = min(page * page_size, total)
    if total == 0 or first > total:
        return 0, 0
    return first, last


def page_window(page: int, pages: int, max_visible: int = 7) -> list[int | None]:
    """Page numbers for a pagination bar; ``None`` marks an ellipsis.

    All pages are listed when they fit in *max_visible*. Otherwise the first
    and last pages are always shown, with the current page and its neighbours
    in between, e.g. ``[1, None, 9, 10, 11, None, 20]``.
    """
    if pages <= max_visible:
        return list(range(1, pages + 1))

    start = max(2, page - 1)
    end = min(pages - 1, page + 1)

    window: list[int | None] = [1]
    if start > 2:  # noqa: PLR2004
        window.append(None)
    window.extend(range(start, end + 1))
    if end < pages - 1:
        window.append(None)
    window.append(pages)
    return window
