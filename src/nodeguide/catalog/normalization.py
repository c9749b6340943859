"""Heading name normalization used while segmenting pages."""

from __future__ import annotations


def clean_node_name(text: str) -> str:
    """Strip a leading ordinal such as ``"12. "`` from a heading, then trim.

    The prefix is one or more ASCII digits followed by a period and any run of
    whitespace. Text without that exact prefix is only trimmed, so ``"12 x"``
    and ``"v1.2"`` are left intact.
    """
    stripped = text.lstrip()
    index = 0
    while index < len(stripped) and stripped[index] in "0123456789":
        index += 1

    if index > 0 and index < len(stripped) and stripped[index] == ".":
        return stripped[index + 1 :].strip()
    return stripped.strip()
