"""
In-memory catalog indexes, one per search profile.

Each index is read once from its configured source, normalized, filtered
by kind when the profile requires it, and kept for the lifetime of the
process. A failed load is not fatal: the index is marked unavailable and
holds no items, and no retry happens until ``reset_indexes()`` is called.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from ..storage import CatalogLoadError, read_index_document
from .facets import extract_facets
from .normalizer import normalize_record
from .profiles import SearchProfile
from .schemas import CatalogItem, FacetOptions


logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


@dataclass(frozen=True)
class CatalogIndex:
    """The loaded catalog of one profile.

    ``items`` and ``facets`` never change once built. When
    ``available`` is False, ``message`` holds the text to show instead
    of results.
    """

    profile: SearchProfile
    items: Tuple[CatalogItem, ...] = ()
    facets: FacetOptions = field(default_factory=FacetOptions)
    available: bool = True
    message: str = ""

    @classmethod
    def from_records(cls, records, profile: SearchProfile) -> "CatalogIndex":
        items = [normalize_record(r, profile) for r in records]
        if profile.kind is not None:
            items = [i for i in items if i.kind == profile.kind]
        return cls(profile=profile, items=tuple(items), facets=extract_facets(items, profile))

    @classmethod
    def unavailable(cls, profile: SearchProfile) -> "CatalogIndex":
        return cls(profile=profile, available=False, message=profile.unavailable_message)


def load_index(profile: SearchProfile, source: Optional[str] = None) -> CatalogIndex:
    """Read and normalize the index of ``profile``.

    Parameters
    ----------
    profile : SearchProfile
        The content type being loaded.
    source : Optional[str]
        Path or URL to read from. Defaults to ``profile.index_source``.

    Returns
    -------
    CatalogIndex
        The loaded index, or an unavailable one when the source could
        not be fetched.
    """
    src = source or profile.index_source
    try:
        records = read_index_document(src)
    except CatalogLoadError as exc:
        logger.error("Failed to load %s index from %s: %s", profile.name, src, exc)
        return CatalogIndex.unavailable(profile)
    index = CatalogIndex.from_records(records, profile)
    logger.info(
        "Loaded %s index from %s: %d of %d records kept",
        profile.name,
        src,
        len(index.items),
        len(records),
    )
    return index


_indexes: Dict[str, CatalogIndex] = {}
# One load lock per profile, so a slow fetch only blocks its own profile
_load_locks: Dict[str, threading.Lock] = {}
_locks_guard = threading.Lock()


def _load_lock(name: str) -> threading.Lock:
    with _locks_guard:
        return _load_locks.setdefault(name, threading.Lock())


def get_index(profile: SearchProfile) -> CatalogIndex:
    """Return the cached index of ``profile``, loading it on first use."""
    with _load_lock(profile.name):
        index = _indexes.get(profile.name)
        if index is None:
            index = load_index(profile)
            _indexes[profile.name] = index
        return index


def reset_indexes() -> None:
    """Forget every cached index so the next access reloads it."""
    with _locks_guard:
        _indexes.clear()
