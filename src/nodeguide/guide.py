"""Navigation listing and full-text guide pages from the tutorial site."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from bs4 import BeautifulSoup

from nodeguide.catalog.errors import DocumentUnavailableError
from nodeguide.fetch.base import PageSource

logger = logging.getLogger(__name__)

DEFAULT_NAVIGATION_SELECTOR = ".tw-scrollbar"
DEFAULT_LINK_MARKER = "/ys/ugc/tutorial/detail/"


@dataclass(frozen=True, slots=True)
class NavigationItem:
    title: str
    document_id: str

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "id": self.document_id}


@dataclass(frozen=True, slots=True)
class GuidePage:
    document_id: str
    title: str
    content: str
    url: str

    def to_dict(self) -> dict[str, str]:
        return {"id": self.document_id, "title": self.title, "content": self.content, "url": self.url}


class GuideBrowser:
    """Read the tutorial navigation menu and plain-text guide pages."""

    def __init__(
        self,
        fetcher: PageSource,
        *,
        navigation_selector: str = DEFAULT_NAVIGATION_SELECTOR,
        link_marker: str = DEFAULT_LINK_MARKER,
    ) -> None:
        self._fetcher = fetcher
        self._navigation_selector = navigation_selector
        self._link_marker = link_marker

    def navigation(self) -> list[NavigationItem]:
        navigation_id = self._fetcher.settings.navigation_id
        soup = BeautifulSoup(self._fetcher.fetch_html(navigation_id, wait_for=self._navigation_selector), "lxml")

        container = soup.select_one(self._navigation_selector)
        if container is None:
            raise DocumentUnavailableError(
                document_id=navigation_id,
                message=f"Navigation container {self._navigation_selector!r} not found",
            )

        items: list[NavigationItem] = []
        for index, link in enumerate(container.find_all("a")):
            title = link.get_text().strip()
            if not title:
                logger.debug("Empty navigation title, skipping index %s", index)
                continue

            href = link.get("href")
            if not href or self._link_marker not in href:
                logger.debug("Navigation link outside tutorial path, skipping index %s", index)
                continue

            document_id = href.rstrip("/").rsplit("/", 1)[-1]
            if not document_id:
                continue
            items.append(NavigationItem(title=title, document_id=document_id))

        logger.debug("Navigation completed with %s item(s)", len(items))
        return items

    def guide(self, document_id: str) -> GuidePage:
        soup = BeautifulSoup(self._fetcher.fetch_html(document_id), "lxml")

        title_element = soup.find("h1")
        if title_element is None:
            raise DocumentUnavailableError(document_id=document_id, message="Guide title not found")

        selector = self._fetcher.settings.content_selector
        content_element = soup.select_one(selector)
        if content_element is None:
            raise DocumentUnavailableError(document_id=document_id, message=f"Guide content {selector!r} not found")

        page = GuidePage(
            document_id=document_id,
            title=title_element.get_text().strip(),
            content=content_element.get_text().strip(),
            url=self._fetcher.page_url(document_id),
        )
        logger.debug("Guide %s retrieved (content_length=%s)", document_id, len(page.content))
        return page
