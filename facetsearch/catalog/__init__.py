"""
Catalog package for the faceted search API.

This package holds the search engine shared by the blog and recipe
search pages: record normalization, the URL state codec, facet
extraction, filtering and sorting, pagination and the controller that
runs them in sequence. Each content type is described by a
``SearchProfile``; the routers below expose one search API per profile
so a front-end can drive its search page from the URL alone.
"""

from .profiles import PROFILES
from .router import build_router

routers = [build_router(profile) for profile in PROFILES.values()]
