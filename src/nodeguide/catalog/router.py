"""Static routing from (client type, node type) queries to tutorial document ids."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from nodeguide.catalog.errors import UnsupportedQueryError

SERVER_NODES = "服务器节点"
CLIENT_NODES = "客户端节点"


@dataclass(frozen=True, slots=True)
class RouteTable:
    """Immutable two-level lookup: client type -> node type -> document id."""

    routes: Mapping[str, Mapping[str, str]]

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Mapping[str, str]]) -> "RouteTable":
        frozen: dict[str, Mapping[str, str]] = {}
        for client_type, node_types in raw.items():
            if not client_type:
                raise ValueError("client type cannot be empty")
            for node_type, document_id in node_types.items():
                if not node_type or not document_id:
                    raise ValueError(f"Empty route entry under client type {client_type!r}")
            frozen[client_type] = MappingProxyType(dict(node_types))
        return cls(routes=MappingProxyType(frozen))


DEFAULT_ROUTES = RouteTable.from_mapping(
    {
        SERVER_NODES: {
            "执行节点": "mhw66orrrfkm",
            "事件节点": "mhn7ko01v3yw",
            "流程控制节点": "mhe8yn9bysd6",
            "查询节点": "mhwbqlrw655q",
            "运算节点": "mhnd4l069tk0",
        },
        CLIENT_NODES: {
            "查询节点": "mholjx05ji8w",
            "运算节点": "mhfmxw9fn6n6",
            "执行节点": "mh6obvipqv1g",
            "流程控制节点": "mhxppurzujfq",
            "其它节点": "mhor3u09y7u0",
        },
    }
)


class QueryRouter:
    """Resolve catalog queries against a route table without fuzzy matching."""

    def __init__(self, routes: RouteTable = DEFAULT_ROUTES) -> None:
        self._routes = routes

    def resolve(self, client_type: str, node_type: str) -> str:
        node_types = self._routes.routes.get(client_type)
        if node_types is not None:
            document_id = node_types.get(node_type)
            if document_id is not None:
                return document_id

        raise UnsupportedQueryError(
            client_type=client_type,
            node_type=node_type,
            valid_node_types=self.node_types(client_type),
        )

    def node_types(self, client_type: str) -> frozenset[str]:
        return frozenset(self._routes.routes.get(client_type, {}))
