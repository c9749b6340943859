"""Tool-style request dispatch over one long-lived catalog service.

Requests are JSON objects such as::

    {"tool": "node_details", "arguments": {"client_type": "...", "node_type": "...", "name": "..."}}

with an optional ``"format": "markdown"`` to receive the rendered text instead
of structured data. Every request gets exactly one response object.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Mapping

from nodeguide.catalog.errors import CatalogError
from nodeguide.catalog.service import CatalogService
from nodeguide.guide import GuideBrowser
from nodeguide.renderers import render_catalog, render_guide, render_navigation, render_node_details

logger = logging.getLogger(__name__)

_FORMATS = frozenset({"json", "markdown"})


class ToolRequestError(ValueError):
    """Malformed request: unknown tool, bad format or missing argument."""


def _required(arguments: Mapping[str, Any], name: str) -> str:
    value = arguments.get(name)
    if not isinstance(value, str) or not value.strip():
        raise ToolRequestError(f"Argument {name!r} is required")
    return value.strip()


def _error(exc: Exception) -> dict[str, Any]:
    return {"ok": False, "error": {"type": type(exc).__name__, "message": str(exc)}}


class ToolDispatcher:
    """Route tool requests to the catalog service and guide browser."""

    def __init__(self, service: CatalogService, guide: GuideBrowser) -> None:
        self._service = service
        self._guide = guide
        self._handlers: dict[str, Callable[[Mapping[str, Any], bool], Any]] = {
            "list_nodes": self._list_nodes,
            "node_details": self._node_details,
            "navigation": self._navigation,
            "get_guide": self._get_guide,
        }

    @property
    def tool_names(self) -> list[str]:
        return sorted(self._handlers)

    def handle_line(self, line: str) -> dict[str, Any]:
        try:
            request = json.loads(line)
        except json.JSONDecodeError as exc:
            return _error(ToolRequestError(f"Invalid JSON: {exc.msg}"))
        if not isinstance(request, dict):
            return _error(ToolRequestError("Request must be a JSON object"))
        return self.handle(request)

    def handle(self, request: Mapping[str, Any]) -> dict[str, Any]:
        tool = request.get("tool")
        arguments = request.get("arguments") or {}
        output_format = request.get("format", "json")
        try:
            handler = self._handlers.get(tool) if isinstance(tool, str) else None
            if handler is None:
                raise ToolRequestError(f"Unknown tool {tool!r}. Valid tools: {', '.join(self.tool_names)}")
            if output_format not in _FORMATS:
                raise ToolRequestError(f"Unknown format {output_format!r}")
            if not isinstance(arguments, Mapping):
                raise ToolRequestError("Arguments must be a JSON object")
            result = handler(arguments, output_format == "markdown")
        except (CatalogError, ToolRequestError) as exc:
            logger.info("Tool %s failed: %s", tool, exc)
            return _error(exc)
        return {"ok": True, "result": result}

    def _list_nodes(self, arguments: Mapping[str, Any], markdown: bool) -> Any:
        client_type = _required(arguments, "client_type")
        node_type = _required(arguments, "node_type")
        summaries = self._service.list_catalog(client_type, node_type)
        if markdown:
            return render_catalog(summaries=summaries, client_type=client_type, node_type=node_type)
        return {
            "client_type": client_type,
            "node_type": node_type,
            "nodes": [summary.to_dict() for summary in summaries],
        }

    def _node_details(self, arguments: Mapping[str, Any], markdown: bool) -> Any:
        record = self._service.get_record(
            _required(arguments, "client_type"),
            _required(arguments, "node_type"),
            _required(arguments, "name"),
        )
        return render_node_details(record) if markdown else record.to_dict()

    def _navigation(self, arguments: Mapping[str, Any], markdown: bool) -> Any:
        items = self._guide.navigation()
        return render_navigation(items) if markdown else [item.to_dict() for item in items]

    def _get_guide(self, arguments: Mapping[str, Any], markdown: bool) -> Any:
        page = self._guide.guide(_required(arguments, "id"))
        return render_guide(page) if markdown else page.to_dict()
