from __future__ import annotations

import pytest

from nodeguide.catalog.errors import UnsupportedQueryError
from nodeguide.catalog.router import CLIENT_NODES, DEFAULT_ROUTES, SERVER_NODES, QueryRouter, RouteTable


def _router() -> QueryRouter:
    return QueryRouter(RouteTable.from_mapping({"A": {"p": "doc-p", "q": "doc-q", "r": "doc-r"}, "B": {"p": "doc-bp"}}))


def test_resolve_returns_document_id() -> None:
    router = _router()

    assert router.resolve("A", "q") == "doc-q"
    assert router.resolve("B", "p") == "doc-bp"


def test_unknown_node_type_enumerates_valid_values() -> None:
    with pytest.raises(UnsupportedQueryError) as exc_info:
        _router().resolve("A", "bogus")

    assert exc_info.value.valid_node_types == {"p", "q", "r"}
    assert "bogus" in str(exc_info.value)


def test_unknown_client_type_has_no_valid_values() -> None:
    with pytest.raises(UnsupportedQueryError) as exc_info:
        _router().resolve("Z", "p")

    assert exc_info.value.valid_node_types == frozenset()


def test_no_fuzzy_matching() -> None:
    with pytest.raises(UnsupportedQueryError):
        _router().resolve("A ", "p")


def test_route_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        DEFAULT_ROUTES.routes[SERVER_NODES] = {}  # type: ignore[index]
    with pytest.raises(TypeError):
        DEFAULT_ROUTES.routes[SERVER_NODES]["查询节点"] = "other"  # type: ignore[index]


def test_route_table_rejects_empty_entries() -> None:
    with pytest.raises(ValueError):
        RouteTable.from_mapping({"A": {"p": ""}})


def test_default_routes_cover_server_and_client_nodes() -> None:
    router = QueryRouter()

    assert list(DEFAULT_ROUTES.routes) == [SERVER_NODES, CLIENT_NODES]
    assert router.node_types(SERVER_NODES) == {"执行节点", "事件节点", "流程控制节点", "查询节点", "运算节点"}
    assert router.node_types(CLIENT_NODES) == {"查询节点", "运算节点", "执行节点", "流程控制节点", "其它节点"}
    assert router.resolve(CLIENT_NODES, "其它节点") == "mhor3u09y7u0"
