"""
Normalization of raw index records into ``CatalogItem`` instances.

Index files are produced by a separate build step and are only loosely
typed: fields can be missing, hold the wrong type, or carry numbers as
strings. Nothing in here raises; anything unusable becomes the empty
default for its field.
"""

from __future__ import annotations

import math
import re
from typing import Any, Dict, List, Optional

from .profiles import SearchProfile
from .schemas import CatalogItem

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
# Longer digit runs are treated as unparsable
_MAX_DIGITS = 18


def normalize(value: Any) -> str:
    """Normalize a value for case-insensitive comparison.

    Returns the stripped, lowercased string, or an empty string when the
    value is ``None`` or not a string.
    """
    return _as_str(value).strip().lower()


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def csv_to_list(value: Any) -> List[str]:
    """Split a comma-separated field into a list of trimmed values.

    Empty parts are dropped and order is preserved. A list is accepted
    too (recipe indexes store diets that way); non-string elements are
    skipped.
    """
    if isinstance(value, str):
        parts = value.split(",")
    elif isinstance(value, (list, tuple)):
        parts = [v for v in value if isinstance(v, str)]
    else:
        return []
    return [p.strip() for p in parts if p.strip()]


def parse_int_or_none(value: Any) -> Optional[int]:
    """Parse an integer-like value leniently.

    Parameters
    ----------
    value : Any
        Raw field value. Digit strings may carry surrounding whitespace,
        a sign and trailing text (``"15 min"`` parses as 15).

    Returns
    -------
    Optional[int]
        The parsed integer, or ``None`` when the value is empty or does
        not start with a number, or when the number has more than 18
        digits. ``None`` is deliberately distinct from zero.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if not isinstance(value, str):
        return None
    m = _INT_PREFIX.match(value)
    if not m or len(m.group(1).lstrip("+-")) > _MAX_DIGITS:
        return None
    return int(m.group(1))


def _fields_of(record: Any, profile: SearchProfile) -> Dict[str, Any]:
    if not isinstance(record, dict):
        return {}
    if not profile.nested_meta:
        return record
    meta = record.get("meta")
    return meta if isinstance(meta, dict) else {}


def normalize_record(record: Any, profile: SearchProfile) -> CatalogItem:
    """Map one raw index record to a ``CatalogItem``.

    Parameters
    ----------
    record : Any
        A decoded JSON value from the index array. Blog records look like
        ``{"url": ..., "meta": {...}}``; recipe records are flat.
    profile : SearchProfile
        Selects the record shape and the raw keys of the facet fields.

    Returns
    -------
    CatalogItem
        Always returns an item, even for ``None`` or a scalar.
    """
    fields = _fields_of(record, profile)
    url = record.get("url") if isinstance(record, dict) else None

    values: Dict[str, Any] = {
        "kind": normalize(fields.get("kind")),
        "slug": _as_str(fields.get("slug")),
        "url": _as_str(url),
        "title": _as_str(fields.get("title")),
        "summary": _as_str(fields.get("summary")),
        "image": _as_str(fields.get("image")),
        "serves": _as_str(fields.get("serves")),
        "difficulty": _as_str(fields.get("difficulty")),
        "time_min": parse_int_or_none(fields.get(profile.time_raw_key)),
        "published": _as_str(fields.get("published")),
    }
    for facet in profile.facets:
        raw = fields.get(facet.raw_key)
        values[facet.field] = csv_to_list(raw) if facet.is_list else _as_str(raw)
    return CatalogItem(**values)
