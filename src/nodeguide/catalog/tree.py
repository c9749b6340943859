"""Build navigable content trees from rendered HTML.

Node kinds are decided here, once, so the segmentation and extraction passes
only switch over :class:`NodeKind`. Headings, paragraphs and tables are leaves
carrying their full text; container elements keep only their own direct text
and expose their block children, with the whole subtree text kept alongside.
"""

from __future__ import annotations

from collections.abc import Iterator

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from nodeguide.catalog.models import ContentNode, ContentTree, NodeKind

_HEADING_LEVELS = {"h1": 1, "h2": 2, "h3": 3, "h4": 4, "h5": 5, "h6": 6}
_BLOCK_TAGS = frozenset(
    {
        "address", "article", "aside", "blockquote", "details", "div", "dl", "figure",
        "footer", "header", "li", "main", "nav", "ol", "p", "pre", "section", "table",
        "ul", *_HEADING_LEVELS,
    }
)
_SKIPPED_TAGS = frozenset({"script", "style", "noscript", "template"})
_ROW_GROUPS = frozenset({"thead", "tbody", "tfoot"})


class _TreeBuilder:
    """Assign pre-order indices and convert elements into content nodes."""

    def __init__(self, root: Tag) -> None:
        self._next_order = 0
        self._containers: set[int] = set()
        self._mark_containers(root)

    def _mark_containers(self, element: Tag) -> bool:
        # Post-order: an element is a container when any child is, or holds, a block.
        has_block = False
        for child in element.children:
            if isinstance(child, Tag) and child.name not in _SKIPPED_TAGS and self._mark_containers(child):
                has_block = True
        if has_block:
            self._containers.add(id(element))
        return has_block or element.name in _BLOCK_TAGS

    def _order(self) -> int:
        order = self._next_order
        self._next_order += 1
        return order

    def build(self, element: Tag) -> ContentNode:
        order = self._order()
        name = element.name

        if name in _HEADING_LEVELS:
            return ContentNode(kind=NodeKind.HEADING, level=_HEADING_LEVELS[name], text=element.get_text(), order=order)
        if name == "p":
            return ContentNode(kind=NodeKind.PARAGRAPH, text=element.get_text(), order=order)
        if name == "table":
            return ContentNode(kind=NodeKind.TABLE, text=element.get_text(), order=order, rows=_table_rows(element))

        if id(element) not in self._containers:
            return ContentNode(kind=NodeKind.OTHER, text=element.get_text(), order=order)

        children = tuple(
            self.build(child)
            for child in element.children
            if isinstance(child, Tag) and child.name not in _SKIPPED_TAGS
        )
        return ContentNode(
            kind=NodeKind.OTHER,
            text=_direct_text(element),
            order=order,
            children=children,
            subtree_text=_visible_text(element),
        )


def _own_rows(table: Tag) -> Iterator[Tag]:
    for child in table.children:
        if not isinstance(child, Tag):
            continue
        if child.name == "tr":
            yield child
        elif child.name in _ROW_GROUPS:
            yield from child.find_all("tr", recursive=False)


def _table_rows(table: Tag) -> tuple[tuple[str, ...], ...]:
    rows: list[tuple[str, ...]] = []
    for row in _own_rows(table):
        cells = row.find_all(["td", "th"], recursive=False)
        rows.append(tuple(cell.get_text() for cell in cells))
    return tuple(rows)


def _direct_text(element: Tag) -> str:
    return "".join(
        str(child) for child in element.children if isinstance(child, NavigableString) and not isinstance(child, Comment)
    )


def _visible_text(element: Tag) -> str:
    pieces: list[str] = []
    for child in element.children:
        if isinstance(child, Tag):
            if child.name not in _SKIPPED_TAGS:
                pieces.append(_visible_text(child))
        elif isinstance(child, NavigableString) and not isinstance(child, Comment):
            pieces.append(str(child))
    return "".join(pieces)


def build_content_node(element: Tag) -> ContentNode:
    """Convert a parsed element into a :class:`ContentNode` subtree."""

    return _TreeBuilder(element).build(element)


def build_content_tree(
    html: str | bytes,
    *,
    document_id: str = "",
    content_selector: str | None = None,
) -> ContentTree:
    """Parse HTML and build the content tree rooted at ``content_selector``.

    Falls back to ``<body>`` (or the whole document) when the selector does not
    match, mirroring how a partially rendered page is still parsed.
    """
    soup = BeautifulSoup(html, "lxml")
    root_element: Tag | None = soup.select_one(content_selector) if content_selector else None
    if root_element is None:
        root_element = soup.body or soup

    title = ""
    title_element = soup.find("h1") or soup.find("title")
    if title_element is not None:
        title = title_element.get_text().strip()

    return ContentTree(document_id=document_id, title=title, root=build_content_node(root_element))


def flatten(root: ContentNode) -> list[ContentNode]:
    """Return every node of the tree in document order (pre-order, depth-first)."""

    return list(_iter_preorder(root))


def _iter_preorder(root: ContentNode) -> Iterator[ContentNode]:
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))
