"""
Search profiles: one configuration per content type.

The blog and recipe search pages run the same engine. They only differ
in which fields back the two facets, the query-string keys those facets
use, whether records must carry a particular ``kind``, and how the raw
index records are shaped. Everything engine-side reads these settings
from a ``SearchProfile`` instead of hard-coding field names.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .. import config


@dataclass(frozen=True)
class FacetSpec:
    """A categorical field usable as a filter.

    ``key`` is the query-string parameter, ``field`` the ``CatalogItem``
    attribute and ``raw_key`` the name of the field in the raw record.
    List-valued facets match on membership, scalar ones on equality.
    """

    key: str
    field: str
    raw_key: str
    is_list: bool = False


@dataclass(frozen=True)
class SearchProfile:
    name: str
    noun: str
    facet_a: FacetSpec
    facet_b: FacetSpec
    index_source: str
    unavailable_message: str
    default_sort_field: str = "published"
    # Only records with this kind are kept; None keeps everything.
    kind: Optional[str] = None
    # Blog records nest their fields under ``meta``; recipe records are flat.
    nested_meta: bool = True
    time_raw_key: str = "time-min"

    @property
    def facets(self):
        return (self.facet_a, self.facet_b)

    @property
    def url_keys(self):
        return ("q", self.facet_a.key, self.facet_b.key, "sort", "page")


BLOG = SearchProfile(
    name="blog",
    noun="post",
    facet_a=FacetSpec(key="tag", field="tags", raw_key="tags", is_list=True),
    facet_b=FacetSpec(key="category", field="category", raw_key="category"),
    index_source=config.BLOG_INDEX_SOURCE,
    unavailable_message=(
        "Post index is unavailable. Run the build step to regenerate search-index.json."
    ),
    kind="post",
)

RECIPES = SearchProfile(
    name="recipes",
    noun="recipe",
    facet_a=FacetSpec(key="diet", field="diets", raw_key="diets", is_list=True),
    facet_b=FacetSpec(key="method", field="method", raw_key="method"),
    index_source=config.RECIPES_INDEX_SOURCE,
    unavailable_message=(
        "Recipe index is unavailable. Run the build step to regenerate search-index.json."
    ),
    nested_meta=False,
    time_raw_key="time_min",
)

PROFILES: Dict[str, SearchProfile] = {p.name: p for p in (BLOG, RECIPES)}
