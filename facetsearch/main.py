# facetsearch/main.py
from fastapi import FastAPI

from .catalog import routers
from .catalog.profiles import PROFILES


app = FastAPI(
    title="Faceted catalog search",
    description=(
        "Search API for the blog and recipe pages: free-text query, "
        "two facets, a fixed set of sort orders and pagination, all "
        "driven by the page's URL query string."
    ),
    version="1.0.0",
)

for router in routers:
    app.include_router(router)


# Quick liveness check
@app.get("/")
def health_check():
    return {"status": "ok", "profiles": list(PROFILES)}
