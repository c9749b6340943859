"""Catalog queries exposed to the command-line and tool layers."""

from __future__ import annotations

import logging
import time
from typing import Callable

from nodeguide.catalog.cache import PageCache
from nodeguide.catalog.extractor import ExtractionMarkers, RecordExtractor
from nodeguide.catalog.models import CacheKey, NodeRecord, NodeSummary
from nodeguide.catalog.pipeline import CatalogPipeline
from nodeguide.catalog.router import DEFAULT_ROUTES, QueryRouter, RouteTable
from nodeguide.config import GuideSettings
from nodeguide.fetch import DocumentFetcher, create_fetcher

logger = logging.getLogger(__name__)


class CatalogService:
    """List node catalogs and look up node details through a shared page cache."""

    def __init__(self, cache: PageCache) -> None:
        self._cache = cache

    def list_catalog(self, client_type: str, node_type: str) -> list[NodeSummary]:
        page = self._cache.get_or_fetch(CacheKey(client_type=client_type, node_type=node_type))
        summaries = [
            NodeSummary(name=record.name, description=record.description, category=record.category)
            for record in page.records
        ]
        logger.info("Listed %s node(s) for %s / %s", len(summaries), client_type, node_type)
        return summaries

    def get_record(self, client_type: str, node_type: str, name: str) -> NodeRecord:
        key = CacheKey(client_type=client_type, node_type=node_type)
        record = self._cache.find_by_name(key, name)
        logger.info("Found node %s in %s", name, key)
        return record


def build_catalog_service(
    settings: GuideSettings,
    *,
    fetcher: DocumentFetcher | None = None,
    routes: RouteTable = DEFAULT_ROUTES,
    markers: ExtractionMarkers | None = None,
    clock: Callable[[], float] = time.time,
) -> CatalogService:
    """Wire the router, extractor, configured fetcher and cache."""
    cache = PageCache(
        QueryRouter(routes),
        fetcher or create_fetcher(settings),
        CatalogPipeline(RecordExtractor(markers)),
        clock=clock,
    )
    return CatalogService(cache)
