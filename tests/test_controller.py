from __future__ import annotations

import pytest

from facetsearch.catalog.controller import SearchController
from facetsearch.catalog.profiles import BLOG
from facetsearch.catalog.render import PageCollector, summary_line
from facetsearch.catalog.store import CatalogIndex

from tests._factories import make_post


def make_controller(records, query_string="", page_size=6):
    renderer = PageCollector()
    urls = []
    controller = SearchController(BLOG, renderer, url_writer=urls.append, page_size=page_size, path="/blog/")
    controller.start(query_string)
    controller.load(CatalogIndex.from_records(records, BLOG))
    return controller, renderer, urls


def titles(items):
    return [i.title for i in items]


def test_first_page_shows_six_newest(monthly_posts):
    controller, renderer, urls = make_controller(monthly_posts)
    assert titles(renderer.items) == [f"Post {m}" for m in range(8, 2, -1)]
    assert renderer.summary.total_pages == 2
    assert renderer.summary.has_next
    assert not renderer.summary.has_prev
    assert urls[-1] == "/blog/"


def test_next_page_shows_remainder_and_disables_next(monthly_posts):
    controller, renderer, urls = make_controller(monthly_posts)
    controller.next_page()
    assert titles(renderer.items) == ["Post 2", "Post 1"]
    assert controller.state.page == 2
    assert not renderer.summary.has_next
    assert urls[-1] == "/blog/?page=2"
    # Already on the last page
    controller.next_page()
    assert controller.state.page == 2


def test_prev_page_stops_at_first_page(monthly_posts):
    controller, renderer, urls = make_controller(monthly_posts, "page=2")
    controller.prev_page()
    assert controller.state.page == 1
    controller.prev_page()
    assert controller.state.page == 1
    assert urls[-1] == "/blog/"


def test_filter_changes_reset_page(monthly_posts):
    controller, renderer, urls = make_controller(monthly_posts, "page=2")
    assert controller.state.page == 2
    controller.set_sort("title_asc")
    assert controller.state.page == 1
    assert urls[-1] == "/blog/?sort=title_asc"


def test_narrowing_clamps_page_to_new_result_set():
    records = [make_post(f"Soup {i}", f"2024-01-{i:02d}") for i in range(1, 21)]
    records += [make_post(f"Salad {i}", f"2023-01-{i:02d}") for i in range(1, 4)]
    controller, renderer, urls = make_controller(records, "page=4")
    assert controller.state.page == 4

    # Narrow the query without going through a handler that resets the page
    controller.state.query = "salad"
    controller.apply_filters()
    assert controller.state.page == 1
    assert len(renderer.items) == 3

    controller.state.page = 9
    controller.state.query = "nothing matches"
    controller.apply_filters()
    assert controller.state.page == 1
    assert renderer.items == []


def test_page_from_url_is_clamped_on_load(monthly_posts):
    controller, renderer, urls = make_controller(monthly_posts, "q=post&page=9")
    assert controller.state.page == 2
    assert urls[-1] == "/blog/?q=post&page=2"


def test_facet_options_do_not_follow_filters(monthly_posts):
    monthly_posts[0]["meta"].update(tags="a,b", category="Life")
    monthly_posts[1]["meta"].update(tags="c", category="Work")
    controller, renderer, urls = make_controller(monthly_posts)
    before = controller.facets
    controller.set_query("Post 1")
    controller.set_facet_a("a")
    controller.set_sort("time_desc")
    controller.next_page()
    assert controller.facets == before
    assert before.facet_a == ["a", "b", "c"]
    assert before.facet_b == ["Life", "Work"]


def test_set_query_trims_input(monthly_posts):
    controller, renderer, urls = make_controller(monthly_posts)
    controller.set_query("  Post 3  ")
    assert controller.state.query == "Post 3"
    assert titles(renderer.items) == ["Post 3"]


def test_clear_filters_restores_default_url(monthly_posts):
    controller, renderer, urls = make_controller(monthly_posts, "q=post&tag=x&sort=time_asc&page=2")
    controller.clear_filters()
    assert urls[-1] == "/blog/"
    assert len(renderer.items) == 6


def test_set_sort_rejects_unknown_keys(monthly_posts):
    controller, renderer, urls = make_controller(monthly_posts)
    with pytest.raises(ValueError):
        controller.set_sort("popular")


def test_unavailable_index_renders_message():
    renderer = PageCollector()
    controller = SearchController(BLOG, renderer)
    assert controller.load(CatalogIndex.unavailable(BLOG)) is None
    assert renderer.message == BLOG.unavailable_message
    assert renderer.renders == 0
    assert controller.filtered == []


def test_kind_filter_drops_non_posts(monthly_posts):
    records = monthly_posts + [{"url": "/about.html", "meta": {"kind": "page", "title": "About"}}]
    controller, renderer, urls = make_controller(records, page_size=20)
    assert "About" not in titles(renderer.items)
    assert renderer.summary.total == 8


def test_summary_line(monthly_posts):
    controller, renderer, urls = make_controller(monthly_posts)
    assert summary_line(renderer.summary, "post") == "Showing 1-6 of 8 posts"
    controller.set_query("Post 4")
    assert summary_line(renderer.summary, "post") == "Showing 1-1 of 1 post"
    controller.set_query("missing")
    assert summary_line(renderer.summary, "post") == "Showing 0-0 of 0 posts"
