from __future__ import annotations

import pytest

from facetsearch.catalog import store
from facetsearch.catalog.profiles import BLOG
from facetsearch.catalog.schemas import CatalogItem

from tests._factories import make_post


@pytest.fixture
def monthly_posts() -> list:
    """Eight posts published on the first of each month, oldest first."""
    return [make_post(f"Post {m}", f"2024-0{m}-01") for m in range(1, 9)]


@pytest.fixture
def items() -> list:
    return [
        CatalogItem(
            kind="post",
            title="Tomato Soup",
            summary="Roasted and blended",
            tags=["Vegetarian", "soup"],
            category="Dinner",
            time_min=40,
            published="2024-03-01",
        ),
        CatalogItem(
            kind="post",
            title="Apple Pie",
            summary="A classic dessert",
            tags=["baking"],
            category="Dessert",
            time_min=None,
            published="2024-05-01",
        ),
        CatalogItem(
            kind="post",
            title="Quick Salad",
            summary="Greens with a lemon dressing",
            tags=["vegetarian", "raw"],
            category="Lunch",
            time_min=10,
            published="2024-01-01",
        ),
        CatalogItem(
            kind="post",
            title="Bread",
            summary="Slow dough",
            tags=[],
            category="",
            time_min=240,
            published="2024-04-01",
        ),
    ]


@pytest.fixture
def blog_index():
    """Install a blog index directly in the store cache."""

    def install(index):
        store._indexes[BLOG.name] = index
        return index

    yield install
    store.reset_indexes()
