"""
Search controller: owns the state of one search widget.

Every event handler mutates ``state`` and then recomputes everything
synchronously: filter and sort, paginate, render, write the URL. Changing
what is being searched for always resets the page to 1; moving between
pages keeps the filters.
"""

from __future__ import annotations

from typing import Callable, Optional

from .. import config
from . import engine, url_state
from .paginator import PageSlice, paginate, total_pages_for
from .profiles import SearchProfile
from .render import Renderer
from .schemas import DEFAULT_SORT, SORT_KEYS, EngineState, FacetOptions
from .store import CatalogIndex


UrlWriter = Callable[[str], None]


class SearchController:
    def __init__(
        self,
        profile: SearchProfile,
        renderer: Renderer,
        url_writer: Optional[UrlWriter] = None,
        page_size: int = config.PAGE_SIZE,
        path: str = "/",
    ) -> None:
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        self.profile = profile
        self.renderer = renderer
        self.url_writer = url_writer
        self.page_size = page_size
        self.path = path
        self.state = EngineState()
        # Until an index is loaded there is nothing to search.
        self.index = CatalogIndex(profile=profile, available=False)
        self.filtered = []

    @property
    def facets(self) -> FacetOptions:
        return self.index.facets

    @property
    def url(self) -> str:
        return url_state.replace_url(self.path, self.state, self.profile)

    def start(self, query_string: str = "") -> EngineState:
        """Seed the state from the query string the page was opened with."""
        self.state = url_state.decode(query_string, self.profile)
        return self.state

    def load(self, index: CatalogIndex) -> Optional[PageSlice]:
        """Install a loaded catalog and draw the first page.

        Returns None when the index is unavailable; the renderer is then
        told to show the index's message instead of results.
        """
        self.index = index
        if not index.available:
            self.filtered = []
            self.renderer.render_unavailable(index.message)
            return None
        return self.apply_filters()

    def apply_filters(self) -> PageSlice:
        self.filtered = engine.run(self.index.items, self.state, self.profile)
        return self.refresh()

    def refresh(self) -> PageSlice:
        """Paginate the current results, render them and write the URL."""
        page = paginate(self.filtered, self.state.page, self.page_size)
        self.state.page = page.clamped_page
        self.renderer.render_page(page.page_items, page.summary())
        if self.url_writer is not None:
            self.url_writer(self.url)
        return page

    # Filter events: a new filter is a new result set, so back to page 1.

    def set_query(self, query: str) -> PageSlice:
        self.state.query = (query or "").strip()
        return self._filters_changed()

    def set_facet_a(self, value: str) -> PageSlice:
        self.state.facet_a = value or ""
        return self._filters_changed()

    def set_facet_b(self, value: str) -> PageSlice:
        self.state.facet_b = value or ""
        return self._filters_changed()

    def set_sort(self, sort: str) -> PageSlice:
        if sort not in SORT_KEYS:
            raise ValueError(f"unknown sort key: {sort!r}")
        self.state.sort = sort
        return self._filters_changed()

    def set_filters(
        self, query: str = "", facet_a: str = "", facet_b: str = "", sort: str = DEFAULT_SORT
    ) -> PageSlice:
        """Replace every filter at once with a single recompute."""
        if sort not in SORT_KEYS:
            raise ValueError(f"unknown sort key: {sort!r}")
        self.state.query = (query or "").strip()
        self.state.facet_a = facet_a or ""
        self.state.facet_b = facet_b or ""
        self.state.sort = sort
        return self._filters_changed()

    def clear_filters(self) -> PageSlice:
        return self.set_filters()

    def _filters_changed(self) -> PageSlice:
        self.state.page = 1
        return self.apply_filters()

    # Paging events

    @property
    def total_pages(self) -> int:
        return total_pages_for(len(self.filtered), self.page_size)

    def next_page(self) -> PageSlice:
        if self.state.page < self.total_pages:
            self.state.page += 1
        return self.refresh()

    def prev_page(self) -> PageSlice:
        if self.state.page > 1:
            self.state.page -= 1
        return self.refresh()

    def go_to_page(self, page: int) -> PageSlice:
        self.state.page = max(1, page)
        return self.refresh()
