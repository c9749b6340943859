"""Shared setup and error reporting for catalog command-line tools."""

from __future__ import annotations

import json
import sys

from dotenv import load_dotenv

from nodeguide.catalog.errors import (
    CatalogError,
    DocumentUnavailableError,
    NodeNotFoundError,
    UnsupportedQueryError,
)
from nodeguide.config import GuideSettings, configure_logging

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_UNSUPPORTED_QUERY = 2
EXIT_DOCUMENT_UNAVAILABLE = 3
EXIT_NOT_FOUND = 4


def load_settings() -> GuideSettings:
    """Load .env, validate settings and configure logging."""
    load_dotenv()
    settings = GuideSettings.from_env()
    configure_logging(settings)
    return settings


def exit_code_for(exc: CatalogError) -> int:
    if isinstance(exc, UnsupportedQueryError):
        return EXIT_UNSUPPORTED_QUERY
    if isinstance(exc, DocumentUnavailableError):
        return EXIT_DOCUMENT_UNAVAILABLE
    if isinstance(exc, NodeNotFoundError):
        return EXIT_NOT_FOUND
    return EXIT_CONFIG_ERROR


def report_error(exc: Exception) -> None:
    print(f"error: {exc}", file=sys.stderr)


def print_json(payload: object) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))
