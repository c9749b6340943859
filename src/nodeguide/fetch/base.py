"""Shared fetcher contract consumed by the catalog cache."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from nodeguide.catalog.models import ContentTree
from nodeguide.config import GuideSettings


@runtime_checkable
class DocumentFetcher(Protocol):
    """Protocol that every document source must implement."""

    def fetch(self, document_id: str) -> ContentTree:
        """Fetch a document and return its content tree.

        Raises ``DocumentUnavailableError`` on network, timeout or parse failure.
        """


@runtime_checkable
class PageSource(DocumentFetcher, Protocol):
    """Fetcher that also exposes raw page HTML for navigation and guide pages."""

    settings: GuideSettings

    def page_url(self, document_id: str) -> str: ...

    def fetch_html(self, document_id: str, *, wait_for: str | None = None) -> str | bytes:
        """Return the page HTML, optionally once ``wait_for`` matches an element.

        A source that cannot observe rendering ignores ``wait_for``.
        """

    def close(self) -> None: ...
