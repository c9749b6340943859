"""Assign level-2 headings the category of their enclosing level-1 heading."""

from __future__ import annotations

from collections.abc import Iterable

from nodeguide.catalog.models import ContentNode

UNCATEGORIZED = "uncategorized"


def map_categories(nodes: Iterable[ContentNode]) -> dict[int, str]:
    """Map each level-2 heading's document order to its category text."""

    current = UNCATEGORIZED
    categories: dict[int, str] = {}
    for node in nodes:
        if node.is_primary_heading:
            current = node.text.strip()
        elif node.is_entity_heading:
            categories[node.order] = current
    return categories
