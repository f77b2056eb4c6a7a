"""Keyed undirected graph wrapper around networkx."""

from typing import Any, Iterator

import networkx as nx

from .element import ElementKind, ElementRef
from .errors import (
    AttributeTypeError,
    DuplicateElementError,
    ElementNotFoundError,
    InvalidEdgeError,
)
from .schema import AttributeValue, ElementSchema, value_type_name


class Graph:
    """An undirected graph with keyed nodes and edges.

    Wraps a networkx Graph and keeps an edge key index next to it, so that
    edges can be addressed by key the same way nodes are. Every node and
    edge owns a mapping of attribute name to value.
    """

    def __init__(self, schema: ElementSchema | None = None):
        """Initialize an empty graph.

        Args:
            schema: Optional property declarations checked on assignment.
        """
        self._graph = nx.Graph()
        self._edges: dict[str, tuple[str, str]] = {}
        self._next_edge_id = 0
        self.schema = schema

    @classmethod
    def complete(cls, node_count: int, schema: ElementSchema | None = None) -> "Graph":
        """Build the complete graph with node keys "0" .. "node_count - 1"."""
        graph = cls(schema=schema)
        for i in range(node_count):
            graph.add_node(str(i))
        for u, v in nx.complete_graph(node_count).edges():
            graph.add_edge(str(u), str(v))
        return graph

    @property
    def graph(self) -> nx.Graph:
        """Get the underlying networkx graph."""
        return self._graph

    # -------------------------------------------------------------------------
    # Structure
    # -------------------------------------------------------------------------

    def add_node(self, key: str, **attrs: AttributeValue) -> str:
        """Add a node to the graph.

        Args:
            key: The node key.
            **attrs: Initial attributes for the node.

        Returns:
            The node key.

        Raises:
            DuplicateElementError: If the key is already used.
        """
        if self._graph.has_node(key):
            raise DuplicateElementError(f"Node '{key}' already exists", key)
        for name, value in attrs.items():
            self._check_value(ElementKind.NODE, name, value)
        self._graph.add_node(key, **attrs)
        return key

    def add_edge(
        self, source: str, target: str, key: str | None = None, **attrs: AttributeValue
    ) -> str:
        """Add an undirected edge between two existing nodes.

        Args:
            source: One endpoint.
            target: The other endpoint.
            key: Edge key; generated when omitted.
            **attrs: Initial attributes for the edge.

        Returns:
            The edge key.

        Raises:
            InvalidEdgeError: If an endpoint is missing, the edge is a self
                loop, the nodes are already connected or the key is taken.
        """
        for endpoint in (source, target):
            if not self._graph.has_node(endpoint):
                raise InvalidEdgeError(
                    f"Cannot connect missing node '{endpoint}'", source, target
                )
        if source == target:
            raise InvalidEdgeError(f"Self loop on node '{source}'", source, target)
        if self._graph.has_edge(source, target):
            raise InvalidEdgeError(
                f"Nodes '{source}' and '{target}' are already connected", source, target
            )
        if key is None:
            key = self._generate_edge_key()
        elif key in self._edges:
            raise InvalidEdgeError(f"Edge key '{key}' already exists", source, target)
        for name, value in attrs.items():
            self._check_value(ElementKind.EDGE, name, value)

        self._graph.add_edge(source, target, **attrs)
        self._graph.edges[source, target]["_key"] = key
        self._edges[key] = (source, target)
        return key

    def remove_node(self, key: str, missing_ok: bool = True) -> None:
        """Remove a node together with its incident edges."""
        if not self._graph.has_node(key):
            if missing_ok:
                return
            raise ElementNotFoundError(f"Node '{key}' not found", key)
        for edge_key in self.incident_edges(key):
            del self._edges[edge_key]
        self._graph.remove_node(key)

    def remove_edge(self, key: str, missing_ok: bool = True) -> None:
        """Remove an edge by key."""
        if key not in self._edges:
            if missing_ok:
                return
            raise ElementNotFoundError(f"Edge '{key}' not found", key)
        source, target = self._edges.pop(key)
        self._graph.remove_edge(source, target)

    def _generate_edge_key(self) -> str:
        while f"e{self._next_edge_id}" in self._edges:
            self._next_edge_id += 1
        key = f"e{self._next_edge_id}"
        self._next_edge_id += 1
        return key

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def has_node(self, key: str) -> bool:
        return self._graph.has_node(key)

    def has_edge(self, source: str, target: str) -> bool:
        """Check whether two nodes are connected (in either direction)."""
        return self._graph.has_edge(source, target)

    def has_edge_key(self, key: str) -> bool:
        return key in self._edges

    def has_element(self, ref: ElementRef) -> bool:
        """Check whether a reference still resolves."""
        if ref.kind == ElementKind.NODE:
            return self.has_node(ref.key)
        return self.has_edge_key(ref.key)

    def nodes(self) -> list[str]:
        """Get all node keys in insertion order."""
        return list(self._graph.nodes)

    def edges(self) -> list[str]:
        """Get all edge keys in insertion order."""
        return list(self._edges)

    @property
    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def neighbors(self, key: str) -> list[str]:
        """Get the neighbors of a node in enumeration order."""
        self._require_node(key)
        return list(self._graph.neighbors(key))

    def incident_edges(self, key: str) -> list[str]:
        """Get the keys of all edges touching a node."""
        self._require_node(key)
        return [data["_key"] for _, _, data in self._graph.edges(key, data=True)]

    def edge_key(self, source: str, target: str) -> str | None:
        """Get the key of the edge between two nodes, if present."""
        if not self._graph.has_edge(source, target):
            return None
        return self._graph.edges[source, target]["_key"]

    def extremities(self, key: str) -> tuple[str, str]:
        """Get the two endpoints of an edge."""
        if key not in self._edges:
            raise ElementNotFoundError(f"Edge '{key}' not found", key)
        return self._edges[key]

    def iter_edges(self) -> Iterator[tuple[str, str, str]]:
        """Iterate over edges.

        Yields:
            Tuples of (edge_key, source, target).
        """
        for key, (source, target) in self._edges.items():
            yield key, source, target

    def count_connected_components(self) -> int:
        return nx.number_connected_components(self._graph)

    # -------------------------------------------------------------------------
    # Attributes
    # -------------------------------------------------------------------------

    def attributes(self, ref: ElementRef) -> dict[str, AttributeValue]:
        """Get a copy of all attributes of an element."""
        return {
            name: value
            for name, value in self._data(ref).items()
            if not name.startswith("_")
        }

    def has_attribute(self, ref: ElementRef, name: str) -> bool:
        return name in self._data(ref)

    def get_attribute(self, ref: ElementRef, name: str, default: Any = None) -> Any:
        """Get one attribute of an element, or a default when it is absent."""
        return self._data(ref).get(name, default)

    def set_attribute(self, ref: ElementRef, name: str, value: AttributeValue) -> None:
        """Set one attribute of an element.

        Raises:
            ElementNotFoundError: If the element does not exist.
            AttributeTypeError: If the value does not fit the attribute.
        """
        data = self._data(ref)
        self._check_value(ref.kind, name, value)
        data[name] = value

    def remove_attribute(self, ref: ElementRef, name: str) -> None:
        """Remove one attribute of an element, if present."""
        self._data(ref).pop(name, None)

    def node_attribute(self, key: str, name: str, default: Any = None) -> Any:
        return self.get_attribute(ElementRef.node(key), name, default)

    def edge_attribute(self, key: str, name: str, default: Any = None) -> Any:
        return self.get_attribute(ElementRef.edge(key), name, default)

    def _data(self, ref: ElementRef) -> dict[str, Any]:
        if ref.kind == ElementKind.NODE:
            self._require_node(ref.key)
            return self._graph.nodes[ref.key]
        if ref.key not in self._edges:
            raise ElementNotFoundError(f"Edge '{ref.key}' not found", ref.key)
        source, target = self._edges[ref.key]
        return self._graph.edges[source, target]

    def _require_node(self, key: str) -> None:
        if not self._graph.has_node(key):
            raise ElementNotFoundError(f"Node '{key}' not found", key)

    def _check_value(self, kind: ElementKind, name: str, value: object) -> None:
        if name.startswith("_"):
            raise AttributeTypeError(f"Attribute name '{name}' is reserved", name)
        if value_type_name(value) is None:
            raise AttributeTypeError(
                f"Unsupported value for '{name}': {type(value).__name__}", name
            )
        if self.schema is None:
            return
        spec = self.schema.find(kind.value, name)
        if spec is not None and not spec.accepts(value):
            raise AttributeTypeError(
                f"Attribute '{name}' expects a {spec.value_type}, "
                f"got {type(value).__name__}",
                name,
            )
