"""
Filtering and sorting of normalized catalog items.

``run()`` is a pure function of the item list and the current state: it
scans every item once, keeps those matching the facet selections and the
free-text query, then sorts them. Python's sort is stable, so items that
compare equal keep their order from the index.
"""

from __future__ import annotations

from typing import List, Sequence

from .normalizer import normalize
from .profiles import FacetSpec, SearchProfile
from .schemas import CatalogItem, EngineState


def _facet_matches(item: CatalogItem, facet: FacetSpec, selected: str) -> bool:
    value = getattr(item, facet.field)
    if facet.is_list:
        return selected in [normalize(v) for v in value]
    return normalize(value) == selected


def haystack(item: CatalogItem, profile: SearchProfile) -> str:
    """Build the lowercased text a free-text query is matched against.

    Title, summary, scalar facet fields and the space-joined values of
    list facets are joined into one string, so a query can span fields.
    """
    parts = [item.title, item.summary]
    parts.extend(getattr(item, f.field) for f in profile.facets if not f.is_list)
    parts.extend(" ".join(getattr(item, f.field)) for f in profile.facets if f.is_list)
    return " ".join(parts).lower()


def matches(item: CatalogItem, state: EngineState, profile: SearchProfile) -> bool:
    """Return True when ``item`` satisfies every active filter in ``state``."""
    facet_a = normalize(state.facet_a)
    if facet_a and not _facet_matches(item, profile.facet_a, facet_a):
        return False
    facet_b = normalize(state.facet_b)
    if facet_b and not _facet_matches(item, profile.facet_b, facet_b):
        return False
    query = normalize(state.query)
    if not query:
        return True
    return query in haystack(item, profile)


def sort_items(items: List[CatalogItem], sort: str, profile: SearchProfile) -> List[CatalogItem]:
    """Return ``items`` ordered by ``sort``.

    Items without a ``time_min`` come last for both time orderings.
    Unknown sort keys fall back to newest first.
    """
    if sort == "time_asc":
        return sorted(items, key=lambda i: (i.time_min is None, i.time_min or 0))
    if sort == "time_desc":
        return sorted(items, key=lambda i: (i.time_min is None, -(i.time_min or 0)))
    if sort == "title_asc":
        return sorted(items, key=lambda i: (i.title.lower(), i.title))
    # reverse=True keeps equal items in their original order
    field = profile.default_sort_field
    return sorted(items, key=lambda i: getattr(i, field) or "", reverse=True)


def run(
    items: Sequence[CatalogItem], state: EngineState, profile: SearchProfile
) -> List[CatalogItem]:
    """Filter and sort ``items`` for ``state``.

    Parameters
    ----------
    items : Sequence[CatalogItem]
        The full normalized catalog. It is not modified.
    state : EngineState
        Current query, facet selections and sort key.
    profile : SearchProfile
        Describes which fields back the facets.

    Returns
    -------
    List[CatalogItem]
        A new list with the matching items in display order.
    """
    filtered = [item for item in items if matches(item, state, profile)]
    return sort_items(filtered, state.sort, profile)
