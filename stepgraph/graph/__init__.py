"""Graph layer: keyed undirected graphs and element references."""

from .element import ElementKind, ElementRef
from .errors import (
    AttributeTypeError,
    DuplicateElementError,
    ElementNotFoundError,
    GraphError,
    InvalidEdgeError,
)
from .model_graph import Graph
from .schema import AttributeValue, ElementSchema, PropertySpec

__all__ = [
    "ElementKind",
    "ElementRef",
    "AttributeTypeError",
    "DuplicateElementError",
    "ElementNotFoundError",
    "GraphError",
    "InvalidEdgeError",
    "Graph",
    "AttributeValue",
    "ElementSchema",
    "PropertySpec",
]
