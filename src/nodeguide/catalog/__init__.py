"""Segmentation and extraction engine for tutorial node catalogs."""

from .cache import PageCache
from .errors import CatalogError, DocumentUnavailableError, NodeNotFoundError, UnsupportedQueryError
from .models import CacheKey, NodeRecord, NodeSummary, PageResult, ParamRecord, ParamRole

__all__ = [
    "CacheKey",
    "CatalogError",
    "DocumentUnavailableError",
    "NodeNotFoundError",
    "NodeRecord",
    "NodeSummary",
    "PageCache",
    "PageResult",
    "ParamRecord",
    "ParamRole",
    "UnsupportedQueryError",
]
