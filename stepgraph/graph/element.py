"""Element references used to address nodes and edges by key."""

from dataclasses import dataclass
from enum import Enum


class ElementKind(str, Enum):
    """Kinds of graph elements."""

    NODE = "node"
    EDGE = "edge"


@dataclass(frozen=True)
class ElementRef:
    """Immutable (key, kind) pair resolved against a graph at use time.

    A reference does not keep the element alive; it dangles once the
    element is removed.
    """

    key: str
    kind: ElementKind

    @classmethod
    def node(cls, key: str) -> "ElementRef":
        return cls(key, ElementKind.NODE)

    @classmethod
    def edge(cls, key: str) -> "ElementRef":
        return cls(key, ElementKind.EDGE)

    def __str__(self) -> str:
        return f"{self.kind.value} {self.key}"
