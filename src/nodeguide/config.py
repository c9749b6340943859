"""Runtime configuration and logging setup for catalog tools."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path
from typing import Mapping


DEFAULT_BASE_URL = "https://act.mihoyo.com/ys/ugc/tutorial/detail"
DEFAULT_FETCH_TIMEOUT_SECONDS = 30.0
DEFAULT_CONTENT_SELECTOR = "div.doc-view"
DEFAULT_NAVIGATION_ID = "mh29wpicgvh0"
DEFAULT_USER_AGENT = "nodeguide/0.1"
DEFAULT_FETCHER = "browser"
FETCHER_KINDS = frozenset({"browser", "http"})
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _parse_positive_float(*, name: str, raw_value: str, minimum: float = 0.001) -> float:
    try:
        value = float(raw_value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number") from exc
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return value


@dataclass(frozen=True, slots=True)
class GuideSettings:
    """Validated settings for fetching and parsing tutorial pages."""

    base_url: str = DEFAULT_BASE_URL
    fetch_timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS
    content_selector: str = DEFAULT_CONTENT_SELECTOR
    navigation_id: str = DEFAULT_NAVIGATION_ID
    user_agent: str = DEFAULT_USER_AGENT
    fetcher: str = DEFAULT_FETCHER
    log_file: Path | None = None
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GuideSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        base_url = source.get("NODEGUIDE_BASE_URL", DEFAULT_BASE_URL).strip()
        timeout_raw = source.get("NODEGUIDE_FETCH_TIMEOUT_SECONDS", str(DEFAULT_FETCH_TIMEOUT_SECONDS)).strip()
        content_selector = source.get("NODEGUIDE_CONTENT_SELECTOR", DEFAULT_CONTENT_SELECTOR).strip()
        navigation_id = source.get("NODEGUIDE_NAVIGATION_ID", DEFAULT_NAVIGATION_ID).strip()
        user_agent = source.get("NODEGUIDE_USER_AGENT", DEFAULT_USER_AGENT).strip()
        fetcher = source.get("NODEGUIDE_FETCHER", DEFAULT_FETCHER).strip().lower()
        log_file_raw = source.get("NODEGUIDE_LOG_FILE", "").strip()

        if not base_url:
            raise ValueError("NODEGUIDE_BASE_URL cannot be empty")
        if not (base_url.startswith("http://") or base_url.startswith("https://")):
            raise ValueError("NODEGUIDE_BASE_URL must start with http:// or https://")
        if not timeout_raw:
            raise ValueError("NODEGUIDE_FETCH_TIMEOUT_SECONDS cannot be empty")
        if not content_selector:
            raise ValueError("NODEGUIDE_CONTENT_SELECTOR cannot be empty")
        if not navigation_id:
            raise ValueError("NODEGUIDE_NAVIGATION_ID cannot be empty")
        if not user_agent:
            raise ValueError("NODEGUIDE_USER_AGENT cannot be empty")
        if fetcher not in FETCHER_KINDS:
            raise ValueError(f"NODEGUIDE_FETCHER must be one of: {', '.join(sorted(FETCHER_KINDS))}")

        fetch_timeout_seconds = _parse_positive_float(
            name="NODEGUIDE_FETCH_TIMEOUT_SECONDS",
            raw_value=timeout_raw,
            minimum=0.1,
        )

        return cls(
            base_url=base_url.rstrip("/"),
            fetch_timeout_seconds=fetch_timeout_seconds,
            content_selector=content_selector,
            navigation_id=navigation_id,
            user_agent=user_agent,
            fetcher=fetcher,
            log_file=Path(log_file_raw) if log_file_raw else None,
            debug=source.get("DEBUG", "").strip().lower() == "true",
        )


def configure_logging(settings: GuideSettings) -> None:
    """Route logs to the configured file (or stderr) at INFO, DEBUG when enabled."""
    level = logging.DEBUG if settings.debug else logging.INFO
    if settings.log_file is not None:
        logging.basicConfig(format=LOG_FORMAT, level=level, filename=str(settings.log_file), encoding="utf-8")
    else:
        logging.basicConfig(format=LOG_FORMAT, level=level)
