"""Page slicing for filtered result lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .schemas import CatalogItem, PageSummary


@dataclass(frozen=True)
class PageSlice:
    page_items: List[CatalogItem]
    total: int
    total_pages: int
    clamped_page: int
    page_size: int

    @property
    def range_start(self) -> int:
        """1-based position of the first item shown, 0 when nothing is shown."""
        if not self.page_items:
            return 0
        return (self.clamped_page - 1) * self.page_size + 1

    @property
    def range_end(self) -> int:
        if not self.page_items:
            return 0
        return (self.clamped_page - 1) * self.page_size + len(self.page_items)

    @property
    def has_prev(self) -> bool:
        return self.clamped_page > 1

    @property
    def has_next(self) -> bool:
        return self.clamped_page < self.total_pages

    def summary(self) -> PageSummary:
        return PageSummary(
            total=self.total,
            range_start=self.range_start,
            range_end=self.range_end,
            page=self.clamped_page,
            total_pages=self.total_pages,
            has_prev=self.has_prev,
            has_next=self.has_next,
        )


def total_pages_for(total: int, page_size: int) -> int:
    """Number of pages for ``total`` results; never less than 1."""
    return max(1, (total + page_size - 1) // page_size)


def paginate(items: Sequence[CatalogItem], page: int, page_size: int) -> PageSlice:
    """Slice ``items`` down to the requested page.

    Parameters
    ----------
    items : Sequence[CatalogItem]
        The filtered, sorted result list.
    page : int
        Requested 1-indexed page. Values past the last page are clamped
        to it and values below 1 are clamped to 1; the clamp depends only
        on ``len(items)``.
    page_size : int
        Number of items per page.

    Returns
    -------
    PageSlice
        The items of the clamped page and the page metadata. An empty
        result list still has one (empty) page.

    Raises
    ------
    ValueError
        If ``page_size`` is less than 1.
    """
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    total = len(items)
    total_pages = total_pages_for(total, page_size)
    clamped = min(max(1, page), total_pages)
    start = (clamped - 1) * page_size
    return PageSlice(
        page_items=list(items[start:start + page_size]),
        total=total,
        total_pages=total_pages,
        clamped_page=clamped,
        page_size=page_size,
    )
