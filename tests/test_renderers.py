from __future__ import annotations

from nodeguide.catalog.models import NodeRecord, NodeSummary, ParamRecord, ParamRole
from nodeguide.guide import GuidePage, NavigationItem
from nodeguide.renderers import render_catalog, render_guide, render_navigation, render_node_details


def test_render_catalog_groups_by_first_seen_category() -> None:
    summaries = [
        NodeSummary(name="A1", description="", category="通用"),
        NodeSummary(name="B1", description="", category="实体"),
        NodeSummary(name="A2", description="", category="通用"),
    ]

    text = render_catalog(summaries=summaries, client_type="服务器节点", node_type="查询节点")

    assert text.startswith("# 节点图列表 (服务器节点 - 查询节点)\n\n")
    assert text.index("**通用**") < text.index("**实体**")
    assert text.index("**A2**") < text.index("**实体**")
    assert "  - **B1**\n" in text


def test_render_catalog_empty() -> None:
    text = render_catalog(summaries=[], client_type="c", node_type="n")

    assert text.endswith("未找到相关节点图\n")


def test_render_node_details_orders_inputs_outputs_other() -> None:
    record = NodeRecord(
        name="获取局部变量",
        description="读取变量值",
        category="通用",
        inputs=(ParamRecord(name="名称", type="字符串", description="变量名", role=ParamRole.INPUT),),
        outputs=(ParamRecord(name="值", type="泛型", description="变量值", role=ParamRole.OUTPUT),),
        other=(ParamRecord(name="备注", type="-", description="无", role=ParamRole.OTHER),),
        example="使用示例：读取计数器",
    )

    text = render_node_details(record)

    assert text.startswith("# 获取局部变量\n\n**描述**: 读取变量值\n\n")
    assert text.index("| 入参 | **名称**") < text.index("| 出参 | **值**") < text.index("| 其他 | **备注**")
    assert "```\n使用示例：读取计数器\n```" in text


def test_render_node_details_without_params_or_example() -> None:
    text = render_node_details(NodeRecord(name="空", description="", category="c"))

    assert "参数表格" not in text
    assert "使用示例" not in text


def test_render_navigation_and_guide() -> None:
    assert render_navigation([]) == "没有找到导航目录\n"
    assert "1. [指南](mh29wpicgvh0)" in render_navigation([NavigationItem(title="指南", document_id="mh29wpicgvh0")])

    page = GuidePage(document_id="x", title="标题", content="正文", url="https://example.test/detail/x")
    assert render_guide(page) == "# 标题\n\n正文\n\n[原文链接](https://example.test/detail/x)\n"
