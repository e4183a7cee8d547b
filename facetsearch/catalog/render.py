"""
Renderer boundary.

The controller hands each computed page to a ``Renderer``; it never
builds markup itself. Renderers own all escaping of item fields.
``PageCollector`` is the renderer used by the HTTP API: it just keeps
what it was given so the route can serialize it.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from typing_extensions import Protocol

from .schemas import CatalogItem, PageSummary


class Renderer(Protocol):
    def render_page(self, items: Sequence[CatalogItem], summary: PageSummary) -> None:
        ...

    def render_unavailable(self, message: str) -> None:
        ...


class PageCollector:
    """Renderer that records the last page instead of drawing it."""

    def __init__(self) -> None:
        self.items: List[CatalogItem] = []
        self.summary: Optional[PageSummary] = None
        self.message = ""
        self.renders = 0

    def render_page(self, items: Sequence[CatalogItem], summary: PageSummary) -> None:
        self.items = list(items)
        self.summary = summary
        self.renders += 1

    def render_unavailable(self, message: str) -> None:
        self.items = []
        self.message = message


def summary_line(summary: PageSummary, noun: str) -> str:
    """Human-readable results line, e.g. ``Showing 1-6 of 8 posts``."""
    plural = "" if summary.total == 1 else "s"
    return f"Showing {summary.range_start}-{summary.range_end} of {summary.total} {noun}{plural}"
