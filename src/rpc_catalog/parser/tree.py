"""Read-only document tree used by the extractors.

The extractors only need three capabilities from a parsed page: find
descendants matching a marker, take the first descendant matching a
marker, and read text content. ``DocumentNode`` captures exactly that;
``SoupNode`` provides it on top of BeautifulSoup with CSS selectors as
markers.
"""

from __future__ import annotations

from typing import Protocol

from bs4 import BeautifulSoup, Tag


class DocumentNode(Protocol):
    """Minimal view of an element in a parsed document."""

    def find_all(self, marker: str) -> list[DocumentNode]:
        """Return all descendants matching *marker*, in document order."""
        ...

    def find(self, marker: str) -> DocumentNode | None:
        """Return the first descendant matching *marker*, or None."""
        ...

    @property
    def text(self) -> str:
        """Concatenated text content of the element and its descendants."""
        ...


class SoupNode:
    """``DocumentNode`` backed by a BeautifulSoup tag."""

    def __init__(self, tag: Tag):
        self._tag = tag

    def find_all(self, marker: str) -> list[SoupNode]:
        return [SoupNode(t) for t in self._tag.select(marker)]

    def find(self, marker: str) -> SoupNode | None:
        found = self._tag.select_one(marker)
        return SoupNode(found) if found is not None else None

    @property
    def text(self) -> str:
        return self._tag.get_text()

    def __repr__(self) -> str:
        return f"SoupNode(<{self._tag.name}>)"


def parse_html(html: str | bytes) -> SoupNode:
    """Parse raw HTML into a document root node."""
    return SoupNode(BeautifulSoup(html, "html.parser"))
