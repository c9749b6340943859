"""Split a flattened content sequence into heading-delimited node segments."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import logging

from nodeguide.catalog.models import ContentNode
from nodeguide.catalog.normalization import clean_node_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Segment:
    """Nodes following one level-2 heading up to the next one."""

    heading: ContentNode
    name: str
    nodes: tuple[ContentNode, ...]


def segment_nodes(nodes: Iterable[ContentNode]) -> list[Segment]:
    """Segment document-ordered nodes in a single linear pass.

    Every level-2 heading closes the open segment and opens the next one.
    Nodes before the first level-2 heading belong to no segment. Headings whose
    cleaned name is empty still close the previous segment, but their own
    segment is dropped.
    """
    segments: list[Segment] = []
    heading: ContentNode | None = None
    name = ""
    members: list[ContentNode] = []

    def close() -> None:
        if heading is None:
            return
        if name:
            segments.append(Segment(heading=heading, name=name, nodes=tuple(members)))
        else:
            logger.debug("Dropping segment with empty heading at order %s", heading.order)

    for node in nodes:
        if node.is_entity_heading:
            close()
            heading = node
            name = clean_node_name(node.text)
            members = []
        elif heading is not None:
            members.append(node)

    close()
    logger.debug("Segmented content into %s segment(s)", len(segments))
    return segments
