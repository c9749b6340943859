from __future__ import annotations

import io
import json

import pytest

import nodeguide.cli.serve as serve_cli
from nodeguide.catalog.models import ContentTree
from nodeguide.catalog.tree import build_content_tree
from nodeguide.config import GuideSettings

_PAGE = """<div class="doc-view">
  <h1>通用</h1>
  <h2>1. 查询对局时长</h2>
  <p>返回对局已进行的时间</p>
  <table><tr><td>参数类型</td><td>参数名</td><td>类型</td><td>说明</td></tr></table>
</div>"""


class _RecordingSource:
    def __init__(self, settings: GuideSettings) -> None:
        self.settings = settings
        self.fetches: list[str] = []
        self.closed = False

    def page_url(self, document_id: str) -> str:
        return f"{self.settings.base_url}/{document_id}"

    def fetch(self, document_id: str) -> ContentTree:
        self.fetches.append(document_id)
        return build_content_tree(_PAGE, document_id=document_id, content_selector="div.doc-view")

    def fetch_html(self, document_id: str, *, wait_for: str | None = None) -> str:
        return _PAGE

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def source(monkeypatch: pytest.MonkeyPatch) -> _RecordingSource:
    recording = _RecordingSource(GuideSettings())
    monkeypatch.setattr(serve_cli, "load_settings", GuideSettings)
    monkeypatch.setattr(serve_cli, "create_fetcher", lambda settings: recording)
    return recording


def _request(tool: str, **arguments: str) -> str:
    return json.dumps({"tool": tool, "arguments": arguments}, ensure_ascii=False)


def test_serve_answers_each_line_from_one_cache(source: _RecordingSource) -> None:
    query = {"client_type": "服务器节点", "node_type": "查询节点"}
    stdin = io.StringIO(
        "\n".join(
            [
                _request("list_nodes", **query),
                "",
                _request("node_details", name="查询对局时长", **query),
                _request("list_nodes", **query),
            ]
        )
        + "\n"
    )
    stdout = io.StringIO()

    exit_code = serve_cli.main([], stdin=stdin, stdout=stdout)

    responses = [json.loads(line) for line in stdout.getvalue().splitlines()]
    assert exit_code == 0
    assert len(responses) == 3
    assert all(response["ok"] for response in responses)
    assert responses[1]["result"]["name"] == "查询对局时长"
    assert source.fetches == ["mhwbqlrw655q"]
    assert source.closed


def test_serve_keeps_running_after_a_failed_request(source: _RecordingSource) -> None:
    stdin = io.StringIO(
        "{broken\n" + _request("list_nodes", client_type="服务器节点", node_type="查询节点") + "\n"
    )
    stdout = io.StringIO()

    serve_cli.main([], stdin=stdin, stdout=stdout)

    first, second = (json.loads(line) for line in stdout.getvalue().splitlines())
    assert first["ok"] is False
    assert second["ok"] is True
