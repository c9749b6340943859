from __future__ import annotations

import pytest
import requests

from nodeguide.catalog.errors import DocumentUnavailableError
from nodeguide.catalog.models import NodeKind
from nodeguide.catalog.tree import flatten
from nodeguide.config import GuideSettings
from nodeguide.fetch import DocumentFetcher, HttpDocumentFetcher

_PAGE = """<html><head><meta charset="utf-8"><title>页面</title></head><body>
<nav>menu</nav>
<div class="doc-view"><h1>查询节点</h1><h2>1. 获取局部变量</h2><p>读取变量</p></div>
</body></html>"""


class _FakeResponse:
    def __init__(self, content: bytes, status_code: int = 200) -> None:
        self.content = content
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")


class _FakeSession:
    def __init__(self, outcome: object) -> None:
        self._outcome = outcome
        self.calls: list[tuple[str, dict[str, str], float]] = []
        self.closed = False

    def get(self, url: str, *, headers: dict[str, str], timeout: float) -> _FakeResponse:
        self.calls.append((url, headers, timeout))
        if isinstance(self._outcome, Exception):
            raise self._outcome
        assert isinstance(self._outcome, _FakeResponse)
        return self._outcome

    def close(self) -> None:
        self.closed = True


def _settings() -> GuideSettings:
    return GuideSettings(base_url="https://example.test/detail", fetch_timeout_seconds=5.0, user_agent="test-agent")


def test_fetch_builds_tree_from_content_selector() -> None:
    session = _FakeSession(_FakeResponse(_PAGE.encode("utf-8")))
    fetcher = HttpDocumentFetcher(_settings(), session=session)

    tree = fetcher.fetch("mhwbqlrw655q")

    assert isinstance(fetcher, DocumentFetcher)
    assert session.calls == [("https://example.test/detail/mhwbqlrw655q", {"User-Agent": "test-agent"}, 5.0)]
    assert tree.document_id == "mhwbqlrw655q"
    assert tree.title == "查询节点"
    headings = [node for node in flatten(tree.root) if node.kind is NodeKind.HEADING]
    assert [(node.level, node.text) for node in headings] == [(1, "查询节点"), (2, "1. 获取局部变量")]
    assert all("menu" not in node.text for node in flatten(tree.root))


def test_http_error_status_maps_to_document_unavailable() -> None:
    fetcher = HttpDocumentFetcher(_settings(), session=_FakeSession(_FakeResponse(b"", status_code=503)))

    with pytest.raises(DocumentUnavailableError, match="503") as exc_info:
        fetcher.fetch("doc")

    assert exc_info.value.document_id == "doc"
    assert isinstance(exc_info.value.__cause__, requests.HTTPError)


def test_timeout_maps_to_document_unavailable() -> None:
    fetcher = HttpDocumentFetcher(_settings(), session=_FakeSession(requests.Timeout("read timed out")))

    with pytest.raises(DocumentUnavailableError, match="timed out"):
        fetcher.fetch_html("doc")


def test_empty_document_id_is_rejected() -> None:
    fetcher = HttpDocumentFetcher(_settings(), session=_FakeSession(_FakeResponse(b"")))

    with pytest.raises(ValueError):
        fetcher.fetch_html("  ")


def test_close_releases_session() -> None:
    session = _FakeSession(_FakeResponse(b""))
    fetcher = HttpDocumentFetcher(_settings(), session=session)

    fetcher.close()

    assert session.closed
