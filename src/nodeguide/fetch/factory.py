"""Select the document source named by the settings."""

from __future__ import annotations

from nodeguide.config import GuideSettings
from nodeguide.fetch.base import PageSource
from nodeguide.fetch.browser_fetcher import BrowserDocumentFetcher
from nodeguide.fetch.http_fetcher import HttpDocumentFetcher


def create_fetcher(settings: GuideSettings) -> PageSource:
    if settings.fetcher == "http":
        return HttpDocumentFetcher(settings)
    return BrowserDocumentFetcher(settings)
