"""Extract descriptions, typed parameters and usage examples from node segments.

The tutorial pages follow one recurring shape: a level-2 heading, a description
paragraph, a four-column parameter table (role, name, type, description) and
optionally a usage example after the table. Anything outside that shape is
skipped rather than treated as an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging

from nodeguide.catalog.models import ContentNode, NodeKind, ParamRecord, ParamRole
from nodeguide.catalog.segmenter import Segment
from nodeguide.catalog.tree import flatten

logger = logging.getLogger(__name__)

_MIN_ROW_CELLS = 4


@dataclass(frozen=True, slots=True)
class ExtractionMarkers:
    """Document phrases that drive description, role and example detection."""

    boilerplate: frozenset[str] = frozenset({"节点功能", "节点参数", "参数类型"})
    input_token: str = "入参"
    output_token: str = "出参"
    example: frozenset[str] = frozenset({"示例", "用法"})
    header_role: frozenset[str] = frozenset({"参数类型"})
    header_name: frozenset[str] = frozenset({"参数名"})


@dataclass(slots=True)
class ExtractedParts:
    """Per-segment extraction output before it becomes a NodeRecord."""

    description: str = ""
    inputs: list[ParamRecord] = field(default_factory=list)
    outputs: list[ParamRecord] = field(default_factory=list)
    other: list[ParamRecord] = field(default_factory=list)
    example: str = ""
    malformed_rows: int = 0


def _contains_any(text: str, markers: frozenset[str]) -> bool:
    return any(marker in text for marker in markers)


def _spans_subtree(node: ContentNode) -> bool:
    # A wrapper holding the next entity heading would swallow the following segment.
    return bool(node.children) and not any(descendant.is_entity_heading for descendant in flatten(node))


class RecordExtractor:
    """Turn one segment into description, role-partitioned params and example."""

    def __init__(self, markers: ExtractionMarkers | None = None) -> None:
        self._markers = markers or ExtractionMarkers()

    def extract(self, segment: Segment) -> ExtractedParts:
        parts = ExtractedParts(description=self._description(segment.nodes))

        table_index = next(
            (index for index, node in enumerate(segment.nodes) if node.kind is NodeKind.TABLE),
            None,
        )
        if table_index is None:
            return parts

        self._parse_table(segment.nodes[table_index], parts)
        parts.example = self._example(segment.nodes[table_index + 1 :])

        if parts.malformed_rows:
            logger.debug("Skipped %s malformed row(s) in segment %s", parts.malformed_rows, segment.name)
        return parts

    def _description(self, nodes: tuple[ContentNode, ...]) -> str:
        for node in nodes:
            if node.kind is not NodeKind.PARAGRAPH:
                continue
            text = node.text.strip()
            if text and not _contains_any(text, self._markers.boilerplate):
                return text
        return ""

    def _parse_table(self, table: ContentNode, parts: ExtractedParts) -> None:
        for raw_cells in table.rows[1:]:
            if len(raw_cells) < _MIN_ROW_CELLS:
                parts.malformed_rows += 1
                continue

            role_label, name, type_name, description = (cell.strip() for cell in raw_cells[:_MIN_ROW_CELLS])
            if not (role_label or name or type_name or description):
                continue
            if self._looks_like_header(role_label, name):
                parts.malformed_rows += 1
                continue

            role = self._role_for(role_label)
            param = ParamRecord(name=name, type=type_name, description=description, role=role)
            if role is ParamRole.INPUT:
                parts.inputs.append(param)
            elif role is ParamRole.OUTPUT:
                parts.outputs.append(param)
            else:
                parts.other.append(param)

    def _looks_like_header(self, role_label: str, name: str) -> bool:
        return _contains_any(role_label, self._markers.header_role) or _contains_any(
            name, self._markers.header_name
        )

    def _role_for(self, role_label: str) -> ParamRole:
        if role_label == self._markers.input_token:
            return ParamRole.INPUT
        if role_label == self._markers.output_token:
            return ParamRole.OUTPUT
        return ParamRole.OTHER

    def _example(self, nodes: tuple[ContentNode, ...]) -> str:
        pieces: list[str] = []
        covered: set[int] = set()
        for node in nodes:
            if node.order in covered:
                continue
            whole = _spans_subtree(node)
            text = node.full_text if whole else node.text
            if not _contains_any(text, self._markers.example):
                continue
            pieces.append(text.strip())
            if whole:
                covered.update(descendant.order for descendant in flatten(node))
        return "\n".join(pieces).strip()
