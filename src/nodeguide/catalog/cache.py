"""Process-wide memoization of extracted catalogs keyed by query."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Protocol

from nodeguide.catalog.errors import NodeNotFoundError
from nodeguide.catalog.models import CacheKey, ContentTree, NodeRecord, PageResult
from nodeguide.catalog.pipeline import CatalogPipeline
from nodeguide.catalog.router import QueryRouter

logger = logging.getLogger(__name__)


class _TreeFetcher(Protocol):
    def fetch(self, document_id: str) -> ContentTree:
        ...


class PageCache:
    """Cache of fully extracted pages.

    Entries never expire; ``extracted_at`` is informational. Empty results are
    returned but not stored so the next query fetches again. Two concurrent
    misses for the same key both fetch, and the later store wins.
    """

    def __init__(
        self,
        router: QueryRouter,
        fetcher: _TreeFetcher,
        pipeline: CatalogPipeline | None = None,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._router = router
        self._fetcher = fetcher
        self._pipeline = pipeline or CatalogPipeline()
        self._clock = clock
        self._pages: dict[CacheKey, PageResult] = {}
        self._lock = threading.Lock()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._pages

    def __len__(self) -> int:
        with self._lock:
            return len(self._pages)

    def get_or_fetch(self, key: CacheKey) -> PageResult:
        with self._lock:
            cached = self._pages.get(key)
        if cached is not None:
            logger.debug("Using cached page %s (%s records)", key, len(cached.records))
            return cached

        logger.debug("Cache miss for %s, fetching fresh data", key)
        document_id = self._router.resolve(key.client_type, key.node_type)
        tree = self._fetcher.fetch(document_id)

        extracted_at = self._clock()
        records = self._pipeline.build_records(tree, extracted_at=extracted_at)
        page = PageResult(key=key, records=tuple(records), extracted_at=extracted_at)

        if page.records:
            with self._lock:
                self._pages[key] = page
            logger.info("Cached page %s with %s records", key, len(page.records))
        else:
            logger.info("No nodes found in document %s, skipping cache for %s", document_id, key)

        return page

    def find_by_name(self, key: CacheKey, name: str) -> NodeRecord:
        page = self.get_or_fetch(key)
        for record in page.records:
            if record.name == name:
                return record
        raise NodeNotFoundError(client_type=key.client_type, node_type=key.node_type, name=name)
