"""Domain errors raised by catalog queries."""

from __future__ import annotations

from dataclasses import dataclass


class CatalogError(Exception):
    """Base class for catalog query failures."""


@dataclass(slots=True)
class UnsupportedQueryError(CatalogError):
    """The client/node type pair is not registered in the route table."""

    client_type: str
    node_type: str
    valid_node_types: frozenset[str]

    def __str__(self) -> str:
        options = ", ".join(sorted(self.valid_node_types)) or "none"
        return (
            f"Unsupported query (client_type={self.client_type}, node_type={self.node_type}); "
            f"valid node types: {options}"
        )


@dataclass(slots=True)
class DocumentUnavailableError(CatalogError):
    """Fetching or parsing a document failed."""

    document_id: str
    message: str

    def __str__(self) -> str:
        return f"{self.message} (document_id={self.document_id})"


@dataclass(slots=True)
class NodeNotFoundError(CatalogError):
    """A name lookup missed inside an otherwise valid catalog."""

    client_type: str
    node_type: str
    name: str

    def __str__(self) -> str:
        return f"Node not found: {self.name} (client_type={self.client_type}, node_type={self.node_type})"
