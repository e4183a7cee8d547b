"""
Pydantic schema definitions for the catalog module.

``CatalogItem`` is the canonical shape every raw index record is
normalized into before the engine sees it. Every field carries a
default so downstream code never has to deal with a missing value.
``EngineState`` holds the search state a controller mutates on each
interaction, and ``SearchPage`` bundles one rendered page of results
with its pagination metadata and the facet options of the whole
catalog.
"""

from typing import List, Optional

from pydantic import BaseModel, Field
from typing_extensions import Literal

SortKey = Literal["newest", "time_asc", "time_desc", "title_asc"]

SORT_KEYS = ("newest", "time_asc", "time_desc", "title_asc")
DEFAULT_SORT = "newest"


class CatalogItem(BaseModel):
    """A single normalized catalog entry.

    Blog posts fill ``tags`` and ``category``; recipes fill ``diets``,
    ``method``, ``serves`` and ``difficulty``. Fields that do not apply
    to a content type simply keep their empty default. ``time_min`` is
    ``None`` when the source value was missing or not a number, which
    is not the same as zero when sorting by time.
    """

    kind: str = ""
    slug: str = ""
    url: str = ""
    title: str = ""
    summary: str = ""
    image: str = ""
    tags: List[str] = Field(default_factory=list)
    category: str = ""
    diets: List[str] = Field(default_factory=list)
    method: str = ""
    serves: str = ""
    difficulty: str = ""
    time_min: Optional[int] = None
    # ISO-like date string; string order approximates chronological order.
    published: str = ""


class EngineState(BaseModel):
    """Search state owned by one controller.

    ``facet_a`` and ``facet_b`` use the empty string for "no selection",
    matching how the selections travel through the query string.
    """

    query: str = ""
    facet_a: str = ""
    facet_b: str = ""
    sort: SortKey = DEFAULT_SORT
    page: int = Field(default=1, ge=1)


class FacetOptions(BaseModel):
    """Distinct values available for each facet across the full catalog."""

    facet_a: List[str] = Field(default_factory=list)
    facet_b: List[str] = Field(default_factory=list)


class PageSummary(BaseModel):
    """Numbers a renderer needs to describe the current page.

    ``range_start`` and ``range_end`` are 1-based and inclusive; both are
    zero when there are no results.
    """

    total: int
    range_start: int
    range_end: int
    page: int
    total_pages: int
    has_prev: bool
    has_next: bool


class SearchPage(BaseModel):
    """A wrapper for one page of results returned from ``/search``."""

    profile: str
    available: bool = True
    message: str = ""
    state: EngineState
    url: str
    summary: PageSummary
    summary_text: str = ""
    facets: FacetOptions
    items: List[CatalogItem]
