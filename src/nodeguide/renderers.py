"""Markdown rendering for catalog listings, node details and guide pages."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from nodeguide.catalog.models import NodeRecord, ParamRecord


class _SummaryLike(Protocol):
    name: str
    category: str


class _NavigationLike(Protocol):
    title: str
    document_id: str


class _GuideLike(Protocol):
    title: str
    content: str
    url: str


def render_catalog(*, summaries: Sequence[_SummaryLike], client_type: str, node_type: str) -> str:
    """Render node names grouped by category in first-seen order."""
    text = f"# 节点图列表 ({client_type} - {node_type})\n\n"
    if not summaries:
        return text + "未找到相关节点图\n"

    groups: dict[str, list[str]] = {}
    for summary in summaries:
        groups.setdefault(summary.category, []).append(summary.name)

    for category, names in groups.items():
        text += f"- **{category}**\n"
        for name in names:
            text += f"  - **{name}**\n"
        text += "\n"
    return text


def _param_row(label: str, param: ParamRecord) -> str:
    return f"| {label} | **{param.name}** | {param.type} | {param.description} |\n"


def render_node_details(record: NodeRecord) -> str:
    """Render one node with its parameter table and usage example."""
    text = f"# {record.name}\n\n**描述**: {record.description}\n\n"

    if record.inputs or record.outputs or record.other:
        text += "**参数表格**:\n\n"
        text += "| 参数类型 | 参数名 | 类型 | 说明 |\n"
        text += "|---------|--------|------|------|\n"
        for param in record.inputs:
            text += _param_row("入参", param)
        for param in record.outputs:
            text += _param_row("出参", param)
        for param in record.other:
            text += _param_row("其他", param)
        text += "\n"

    if record.example:
        text += f"**使用示例**:\n```\n{record.example}\n```\n\n"
    return text


def render_navigation(items: Sequence[_NavigationLike]) -> str:
    if not items:
        return "没有找到导航目录\n"

    text = "导航目录:\n\n"
    for index, item in enumerate(items, 1):
        text += f"{index}. [{item.title}]({item.document_id})\n"
    return text


def render_guide(page: _GuideLike) -> str:
    return f"# {page.title}\n\n{page.content}\n\n[原文链接]({page.url})\n"
