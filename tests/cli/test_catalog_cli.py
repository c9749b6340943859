from __future__ import annotations

import json

import pytest

import nodeguide.cli.list_nodes as list_nodes_cli
import nodeguide.cli.node_details as node_details_cli
from nodeguide.catalog.models import ContentTree
from nodeguide.catalog.router import RouteTable
from nodeguide.catalog.service import build_catalog_service
from nodeguide.catalog.tree import build_content_tree
from nodeguide.config import GuideSettings

_PAGE = """
<div class="doc-view">
  <h1>通用</h1>
  <h2>1. 查询对局时长</h2>
  <p>返回对局已进行的时间</p>
  <table>
    <tr><td>参数类型</td><td>参数名</td><td>类型</td><td>说明</td></tr>
    <tr><td>出参</td><td>时长</td><td>浮点数</td><td>单位为秒</td></tr>
  </table>
</div>
"""


class _StaticFetcher:
    def __init__(self) -> None:
        self.closed = False

    def fetch(self, document_id: str) -> ContentTree:
        return build_content_tree(_PAGE, document_id=document_id, content_selector="div.doc-view")

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def _offline_service(monkeypatch: pytest.MonkeyPatch) -> _StaticFetcher:
    fetcher = _StaticFetcher()

    def _build(settings: GuideSettings, *, fetcher: _StaticFetcher):
        return build_catalog_service(
            settings,
            fetcher=fetcher,
            routes=RouteTable.from_mapping({"服务器节点": {"查询节点": "doc", "运算节点": "doc2"}}),
        )

    for module in (list_nodes_cli, node_details_cli):
        monkeypatch.setattr(module, "load_settings", GuideSettings)
        monkeypatch.setattr(module, "build_catalog_service", _build)
        monkeypatch.setattr(module, "create_fetcher", lambda settings: fetcher)
    return fetcher


def test_list_nodes_renders_markdown(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = list_nodes_cli.main(["--client-type", "服务器节点", "--node-type", "查询节点"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "- **通用**" in out
    assert "  - **查询对局时长**" in out


def test_list_nodes_json(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = list_nodes_cli.main(["--client-type", "服务器节点", "--node-type", "查询节点", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["nodes"] == [{"name": "查询对局时长", "description": "返回对局已进行的时间", "category": "通用"}]


def test_list_nodes_unsupported_query_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = list_nodes_cli.main(["--client-type", "服务器节点", "--node-type", "事件节点"])

    err = capsys.readouterr().err
    assert exit_code == 2
    assert "查询节点" in err and "运算节点" in err


def test_node_details_json(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = node_details_cli.main(
        ["--client-type", "服务器节点", "--node-type", "查询节点", "--name", " 查询对局时长 ", "--json"]
    )

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["outputs"] == [
        {"name": "时长", "type": "浮点数", "description": "单位为秒", "role": "output", "required": True}
    ]


def test_node_details_not_found_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = node_details_cli.main(["--client-type", "服务器节点", "--node-type", "查询节点", "--name", "不存在"])

    assert exit_code == 4
    assert "不存在" in capsys.readouterr().err


def test_configuration_error_exit_code(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    def _broken() -> GuideSettings:
        raise ValueError("NODEGUIDE_BASE_URL must start with http:// or https://")

    monkeypatch.setattr(list_nodes_cli, "load_settings", _broken)

    exit_code = list_nodes_cli.main(["--client-type", "服务器节点", "--node-type", "查询节点"])

    assert exit_code == 1
    assert "NODEGUIDE_BASE_URL" in capsys.readouterr().err


def test_fetcher_is_closed_after_a_failed_query(_offline_service: _StaticFetcher) -> None:
    exit_code = node_details_cli.main(["--client-type", "服务器节点", "--node-type", "查询节点", "--name", "不存在"])

    assert exit_code == 4
    assert _offline_service.closed is True
