"""HTTP document source for tutorial pages."""

from __future__ import annotations

import logging
from typing import Any

import requests

from nodeguide.catalog.errors import DocumentUnavailableError
from nodeguide.catalog.models import ContentTree
from nodeguide.catalog.tree import build_content_tree
from nodeguide.config import GuideSettings

logger = logging.getLogger(__name__)


class HttpDocumentFetcher:
    """Fetch tutorial pages over HTTP and parse them into content trees."""

    def __init__(self, settings: GuideSettings, *, session: Any | None = None) -> None:
        self._settings = settings
        self._session = session or requests.Session()

    @property
    def settings(self) -> GuideSettings:
        return self._settings

    def page_url(self, document_id: str) -> str:
        return f"{self._settings.base_url}/{document_id}"

    def fetch_html(self, document_id: str, *, wait_for: str | None = None) -> bytes:
        """Download the page as served; ``wait_for`` has no effect without rendering."""
        if not document_id.strip():
            raise ValueError("document_id cannot be empty")

        url = self.page_url(document_id)
        logger.debug("Fetching %s", url)
        try:
            response = self._session.get(
                url,
                headers={"User-Agent": self._settings.user_agent},
                timeout=self._settings.fetch_timeout_seconds,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.error("Failed to fetch %s: %s", url, exc)
            raise DocumentUnavailableError(document_id=document_id, message=f"Failed to fetch page: {exc}") from exc

        return response.content

    def fetch(self, document_id: str) -> ContentTree:
        html = self.fetch_html(document_id)
        tree = build_content_tree(
            html,
            document_id=document_id,
            content_selector=self._settings.content_selector,
        )
        logger.debug("Parsed document %s (title=%s)", document_id, tree.title)
        return tree

    def close(self) -> None:
        self._session.close()
