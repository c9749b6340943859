"""Headless-browser document source for script-rendered tutorial pages."""

from __future__ import annotations

import logging
from typing import Any, Callable

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import sync_playwright

from nodeguide.catalog.errors import DocumentUnavailableError
from nodeguide.catalog.models import ContentTree
from nodeguide.catalog.tree import build_content_tree
from nodeguide.config import GuideSettings

logger = logging.getLogger(__name__)


class BrowserDocumentFetcher:
    """Render tutorial pages in headless Chromium before parsing them.

    The browser is launched on first use and reused until :meth:`close`. Like
    every Playwright sync object, an instance must stay on the thread that
    first used it.
    """

    def __init__(
        self,
        settings: GuideSettings,
        *,
        playwright_factory: Callable[[], Any] = sync_playwright,
    ) -> None:
        self._settings = settings
        self._playwright_factory = playwright_factory
        self._playwright: Any | None = None
        self._browser: Any | None = None

    @property
    def settings(self) -> GuideSettings:
        return self._settings

    def page_url(self, document_id: str) -> str:
        return f"{self._settings.base_url}/{document_id}"

    def _ensure_browser(self) -> Any:
        if self._browser is None:
            self._playwright = self._playwright_factory().start()
            self._browser = self._playwright.chromium.launch(headless=True)
            logger.info("Launched headless browser")
        return self._browser

    def fetch_html(self, document_id: str, *, wait_for: str | None = None) -> str:
        """Load the page, wait for network idle and for its content element.

        A missing ``content_selector`` only logs a warning and the page is
        parsed as rendered; an explicit ``wait_for`` selector is required.
        """
        if not document_id.strip():
            raise ValueError("document_id cannot be empty")

        url = self.page_url(document_id)
        timeout_ms = self._settings.fetch_timeout_seconds * 1000
        try:
            page = self._ensure_browser().new_page(user_agent=self._settings.user_agent)
        except PlaywrightError as exc:
            logger.error("Failed to start browser page for %s: %s", url, exc)
            raise DocumentUnavailableError(document_id=document_id, message=f"Failed to open browser page: {exc}") from exc

        logger.debug("Rendering %s", url)
        try:
            page.goto(url, timeout=timeout_ms, wait_until="networkidle")
            self._wait_for_content(page, document_id, wait_for, timeout_ms)
            return page.content()
        except PlaywrightError as exc:
            logger.error("Failed to render %s: %s", url, exc)
            raise DocumentUnavailableError(document_id=document_id, message=f"Failed to render page: {exc}") from exc
        finally:
            page.close()

    def _wait_for_content(self, page: Any, document_id: str, wait_for: str | None, timeout_ms: float) -> None:
        selector = wait_for or self._settings.content_selector
        try:
            page.wait_for_selector(selector, timeout=timeout_ms)
        except PlaywrightTimeoutError as exc:
            if wait_for is not None:
                raise DocumentUnavailableError(
                    document_id=document_id,
                    message=f"Timed out waiting for {selector!r}",
                ) from exc
            logger.warning("Content %r did not appear in %s, parsing the page as rendered", selector, document_id)

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
        if self._browser is not None:
            self._browser.close()
            self._browser = None
        if self._playwright is not None:
            self._playwright.stop()
            self._playwright = None
