"""Facet option extraction from the full catalog."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .profiles import FacetSpec, SearchProfile
from .schemas import CatalogItem, FacetOptions


def unique_sorted(values: Iterable[str]) -> List[str]:
    """Return the distinct non-empty values in lexicographic order."""
    return sorted({v for v in values if v})


def _values_for(items: Sequence[CatalogItem], facet: FacetSpec) -> List[str]:
    if facet.is_list:
        return [v for item in items for v in getattr(item, facet.field)]
    return [getattr(item, facet.field) for item in items]


def extract_facets(items: Sequence[CatalogItem], profile: SearchProfile) -> FacetOptions:
    """Compute the options offered for each facet.

    Options always come from the whole catalog, never from the currently
    filtered subset, so a user can switch from one selection to another
    without clearing the first.
    """
    return FacetOptions(
        facet_a=unique_sorted(_values_for(items, profile.facet_a)),
        facet_b=unique_sorted(_values_for(items, profile.facet_b)),
    )
