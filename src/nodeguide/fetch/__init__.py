"""Document sources that turn tutorial ids into content trees."""

from .base import DocumentFetcher, PageSource
from .browser_fetcher import BrowserDocumentFetcher
from .factory import create_fetcher
from .http_fetcher import HttpDocumentFetcher

__all__ = ["BrowserDocumentFetcher", "DocumentFetcher", "HttpDocumentFetcher", "PageSource", "create_fetcher"]
