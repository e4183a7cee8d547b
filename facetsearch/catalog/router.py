"""
Route definitions for the search API.

One router is built per search profile and mounted under
/api/{profile}:
- GET  /search       : one page of results for the state in the query string
- GET  /facets       : facet options of the whole catalog
- GET  /debug/index  : check that the index is loaded
"""

from __future__ import annotations

from fastapi import APIRouter, Request

from .controller import SearchController
from .profiles import SearchProfile
from .render import PageCollector, summary_line
from .schemas import FacetOptions, SearchPage
from .store import get_index


def build_router(profile: SearchProfile) -> APIRouter:
    router = APIRouter(prefix=f"/api/{profile.name}", tags=[profile.name])

    @router.get("/search", response_model=SearchPage)
    def search(request: Request) -> SearchPage:
        """
        Returns one page of results.

        The query string is the search state (q, the two facet keys,
        sort, page) exactly as the search page keeps it in its URL.
        Tampered values are defaulted and the page number is clamped to
        the results, so this route never rejects a query string. The
        ``url`` field of the response is the canonical URL for the
        resulting state.
        """
        collector = PageCollector()
        controller = SearchController(profile, collector, path=request.url.path)
        controller.start(request.url.query)
        index = get_index(profile)
        page = controller.load(index)
        if page is None:
            summary = controller.refresh().summary()
            text = index.message
        else:
            summary = page.summary()
            text = summary_line(summary, profile.noun)
        return SearchPage(
            profile=profile.name,
            available=index.available,
            message=index.message,
            state=controller.state,
            url=controller.url,
            summary=summary,
            summary_text=text,
            facets=controller.facets,
            items=collector.items,
        )

    @router.get("/facets", response_model=FacetOptions)
    def facets() -> FacetOptions:
        return get_index(profile).facets

    @router.get("/debug/index")
    def debug_index():
        """
        Debug endpoint to verify the index is loaded.
        Visit: http://127.0.0.1:8000/api/blog/debug/index
        """
        index = get_index(profile)
        return {
            "available": index.available,
            "source": profile.index_source,
            "count": len(index.items),
            "sample": [
                {"url": i.url, "title": i.title, "published": i.published}
                for i in index.items[:5]
            ],
        }

    return router
