"""
Mapping between ``EngineState`` and a URL query string.

Only values that differ from their default are written, so the default
state has no query string at all. Reading is forgiving: missing keys
take their default, and tampered values (a negative page, an unknown
sort key) are defaulted instead of rejected.
"""

from __future__ import annotations

import urllib.parse
from typing import Dict, List, Tuple

from .normalizer import parse_int_or_none
from .profiles import SearchProfile
from .schemas import DEFAULT_SORT, SORT_KEYS, EngineState


def _first(params: Dict[str, List[str]], key: str) -> str:
    values = params.get(key)
    return values[0] if values else ""


def decode(query_string: str, profile: SearchProfile) -> EngineState:
    """Read an ``EngineState`` from a query string.

    Parameters
    ----------
    query_string : str
        The raw query string, with or without a leading ``?``. Unknown
        keys are ignored and repeated keys keep their first value.
    profile : SearchProfile
        Supplies the query-string keys of the two facets.

    Returns
    -------
    EngineState
        A valid state; ``page`` is always at least 1 and ``sort`` is
        always one of the known keys.
    """
    q_key, a_key, b_key, sort_key, page_key = profile.url_keys
    params = urllib.parse.parse_qs((query_string or "").lstrip("?"), keep_blank_values=True)

    sort = _first(params, sort_key) or DEFAULT_SORT
    if sort not in SORT_KEYS:
        sort = DEFAULT_SORT

    page = parse_int_or_none(_first(params, page_key))
    if page is None or page < 1:
        page = 1

    return EngineState(
        query=_first(params, q_key),
        facet_a=_first(params, a_key),
        facet_b=_first(params, b_key),
        sort=sort,
        page=page,
    )


def encode(state: EngineState, profile: SearchProfile) -> str:
    """Write ``state`` as a query string without the leading ``?``.

    Keys appear in a fixed order (query, facets, sort, page) and are
    omitted when they hold their default value.
    """
    values = (
        state.query,
        state.facet_a,
        state.facet_b,
        "" if state.sort == DEFAULT_SORT else state.sort,
        str(state.page) if state.page > 1 else "",
    )
    pairs: List[Tuple[str, str]] = [
        (key, value) for key, value in zip(profile.url_keys, values) if value
    ]
    return urllib.parse.urlencode(pairs)


def replace_url(path: str, state: EngineState, profile: SearchProfile) -> str:
    """Return the URL the current page should be replaced with."""
    query = encode(state, profile)
    return f"{path}?{query}" if query else path
