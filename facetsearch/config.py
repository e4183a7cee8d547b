# facetsearch/config.py
"""Runtime settings for the search service.

Index sources can be a local path or an ``http(s)://`` URL. Each one can
be overridden through the environment so a deployment can point the
service at a freshly built ``search-index.json`` without code changes.
"""

import os
from pathlib import Path

# Default location of the bundled sample indexes
DATA_DIR = Path(__file__).resolve().parents[1] / "data"

PAGE_SIZE = 6

BLOG_INDEX_SOURCE = os.environ.get(
    "FACETSEARCH_BLOG_INDEX", str(DATA_DIR / "blog" / "search-index.json")
)
RECIPES_INDEX_SOURCE = os.environ.get(
    "FACETSEARCH_RECIPES_INDEX", str(DATA_DIR / "recipes" / "search-index.json")
)

# Remote index fetches
HTTP_TIMEOUT = float(os.environ.get("FACETSEARCH_HTTP_TIMEOUT", "10"))
USER_AGENT = "facetsearch/1.0"
