"""Canonical data structures shared by the catalog engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class NodeKind(str, Enum):
    """Structural kind of a rendered content node, decided once at build time."""

    HEADING = "heading"
    PARAGRAPH = "paragraph"
    TABLE = "table"
    OTHER = "other"


class ParamRole(str, Enum):
    INPUT = "input"
    OUTPUT = "output"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class ContentNode:
    """A node of the rendered document tree."""

    kind: NodeKind
    text: str
    order: int
    level: int | None = None
    children: tuple[ContentNode, ...] = ()
    rows: tuple[tuple[str, ...], ...] = ()
    subtree_text: str = ""

    @property
    def full_text(self) -> str:
        """Text of the node and all of its descendants, in document order."""
        return self.subtree_text or self.text

    @property
    def is_primary_heading(self) -> bool:
        return self.kind is NodeKind.HEADING and self.level == 1

    @property
    def is_entity_heading(self) -> bool:
        return self.kind is NodeKind.HEADING and self.level == 2


@dataclass(frozen=True, slots=True)
class ContentTree:
    """Fetched document: identifier, page title and content root."""

    document_id: str
    title: str
    root: ContentNode


@dataclass(frozen=True, slots=True)
class ParamRecord:
    name: str
    type: str
    description: str
    role: ParamRole
    required: bool = True

    def to_dict(self) -> dict[str, str | bool]:
        return {
            "name": self.name,
            "type": self.type,
            "description": self.description,
            "role": self.role.value,
            "required": self.required,
        }


@dataclass(frozen=True, slots=True)
class NodeRecord:
    """Structured description of one node extracted from a page segment."""

    name: str
    description: str
    category: str
    inputs: tuple[ParamRecord, ...] = ()
    outputs: tuple[ParamRecord, ...] = ()
    other: tuple[ParamRecord, ...] = ()
    example: str = ""
    extracted_at: float = 0.0

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "inputs": [param.to_dict() for param in self.inputs],
            "outputs": [param.to_dict() for param in self.outputs],
            "other": [param.to_dict() for param in self.other],
            "example": self.example,
            "extracted_at": self.extracted_at,
        }


@dataclass(frozen=True, slots=True)
class NodeSummary:
    """List view of a node record without parameter detail."""

    name: str
    description: str
    category: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "description": self.description, "category": self.category}


@dataclass(frozen=True, slots=True)
class CacheKey:
    """Logical catalog query: client type plus node type."""

    client_type: str
    node_type: str

    def __str__(self) -> str:
        return f"{self.client_type}_{self.node_type}"


@dataclass(frozen=True, slots=True)
class PageResult:
    """Fully extracted catalog for one query key; the unit of caching."""

    key: CacheKey
    records: tuple[NodeRecord, ...] = field(default_factory=tuple)
    extracted_at: float = 0.0
