# facetsearch/storage.py
import json
import logging
import urllib.error
import urllib.request
from pathlib import Path
from typing import Any, List

from . import config


logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class CatalogLoadError(Exception):
    """The index could not be fetched at all (missing file, network error, bad status)."""


def _is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _decode(data: bytes) -> str:
    # Invalid UTF-8 is dropped, the same for files and remote indexes
    return data.decode("utf-8", errors="ignore")


def _fetch_text(source: str) -> str:
    request = urllib.request.Request(
        source,
        headers={
            "User-Agent": config.USER_AGENT,
            "Accept": "application/json",
            "Cache-Control": "no-store",
        },
    )
    try:
        with urllib.request.urlopen(request, timeout=config.HTTP_TIMEOUT) as response:
            if response.status != 200:
                raise CatalogLoadError(f"HTTP {response.status}")
            return _decode(response.read())
    except urllib.error.HTTPError as exc:
        raise CatalogLoadError(f"HTTP {exc.code}") from exc
    except (urllib.error.URLError, OSError) as exc:
        raise CatalogLoadError(str(exc)) from exc


def _read_text(source: str) -> str:
    try:
        return _decode(Path(source).read_bytes())
    except OSError as exc:
        raise CatalogLoadError(str(exc)) from exc


def read_index_document(source: str) -> List[Any]:
    """Return the raw records of the index at ``source``.

    ``source`` is a file path or an http(s) URL. Failing to fetch it
    raises ``CatalogLoadError``. A document that was fetched but is not
    a JSON array (an object, a scalar, or not JSON at all) yields no
    records.
    """
    text = _fetch_text(source) if _is_remote(source) else _read_text(source)
    try:
        payload = json.loads(text)
    except ValueError:
        logger.warning("Index %s is not valid JSON; treating it as empty", source)
        return []
    if not isinstance(payload, list):
        logger.warning(
            "Index %s holds a %s instead of an array; treating it as empty",
            source,
            type(payload).__name__,
        )
        return []
    return payload
