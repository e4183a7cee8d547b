from __future__ import annotations

from facetsearch.catalog.facets import extract_facets, unique_sorted
from facetsearch.catalog.profiles import BLOG, RECIPES
from facetsearch.catalog.schemas import CatalogItem


def test_unique_sorted_drops_empty_values():
    assert unique_sorted(["b", "", "a", "b"]) == ["a", "b"]


def test_blog_facets_come_from_tags_and_categories(items):
    facets = extract_facets(items, BLOG)
    assert facets.facet_a == ["Vegetarian", "baking", "raw", "soup", "vegetarian"]
    assert facets.facet_b == ["Dessert", "Dinner", "Lunch"]


def test_recipe_facets_come_from_diets_and_methods():
    items = [
        CatalogItem(diets=["vegan", "gluten-free"], method="Simmer"),
        CatalogItem(diets=["vegan"], method="Bake"),
        CatalogItem(diets=[], method=""),
    ]
    facets = extract_facets(items, RECIPES)
    assert facets.facet_a == ["gluten-free", "vegan"]
    assert facets.facet_b == ["Bake", "Simmer"]


def test_empty_catalog_has_no_options():
    facets = extract_facets([], BLOG)
    assert facets.facet_a == []
    assert facets.facet_b == []
