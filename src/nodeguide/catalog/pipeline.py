"""Segment, categorize and extract a fetched tutorial page into node records."""

from __future__ import annotations

import logging

from nodeguide.catalog.categories import UNCATEGORIZED, map_categories
from nodeguide.catalog.extractor import RecordExtractor
from nodeguide.catalog.models import ContentTree, NodeRecord
from nodeguide.catalog.segmenter import segment_nodes
from nodeguide.catalog.tree import flatten

logger = logging.getLogger(__name__)


class CatalogPipeline:
    """Run the segment, category and extraction passes over one content tree."""

    def __init__(self, extractor: RecordExtractor | None = None) -> None:
        self._extractor = extractor or RecordExtractor()

    def build_records(self, tree: ContentTree, *, extracted_at: float) -> list[NodeRecord]:
        nodes = flatten(tree.root)
        categories = map_categories(nodes)
        segments = segment_nodes(nodes)

        records: list[NodeRecord] = []
        for segment in segments:
            parts = self._extractor.extract(segment)
            records.append(
                NodeRecord(
                    name=segment.name,
                    description=parts.description,
                    category=categories.get(segment.heading.order, UNCATEGORIZED),
                    inputs=tuple(parts.inputs),
                    outputs=tuple(parts.outputs),
                    other=tuple(parts.other),
                    example=parts.example,
                    extracted_at=extracted_at,
                )
            )
            logger.debug(
                "Extracted node %s (inputs=%s, outputs=%s, other=%s)",
                segment.name,
                len(parts.inputs),
                len(parts.outputs),
                len(parts.other),
            )

        logger.debug("Built %s record(s) from document %s", len(records), tree.document_id)
        return records
