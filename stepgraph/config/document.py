"""Pydantic models for graph description files."""

from pydantic import BaseModel, Field, model_validator

from ..algorithms.registry import NO_ALGORITHM


class NodeSpec(BaseModel):
    """A node of a graph file."""

    key: str
    x: float = 0.0
    y: float = 0.0


class EdgeSpec(BaseModel):
    """An edge of a graph file."""

    source: str = Field(alias="from")
    target: str = Field(alias="to")
    cost: float | None = None

    @model_validator(mode="before")
    @classmethod
    def normalize_shorthand(cls, data: object) -> object:
        """Accept "A-B" and "A-B:3" strings."""
        if not isinstance(data, str):
            return data
        ends, _, cost = data.partition(":")
        source, sep, target = ends.partition("-")
        if not sep:
            raise ValueError(f"Edge shorthand must look like 'A-B' or 'A-B:3', got '{data}'")
        result: dict = {"from": source.strip(), "to": target.strip()}
        if cost.strip():
            result["cost"] = cost.strip()
        return result


class GraphDocument(BaseModel):
    """Root model for a graph YAML file."""

    algorithm: str = NO_ALGORITHM
    nodes: list[NodeSpec] = Field(default_factory=list)
    edges: list[EdgeSpec] = Field(default_factory=list)
    start: str | None = None
    end: str | None = None

    @model_validator(mode="before")
    @classmethod
    def normalize_nodes(cls, data: object) -> object:
        """Normalize nodes given as plain strings or numbers."""
        if not isinstance(data, dict):
            return data
        nodes = data.get("nodes") or []
        data["nodes"] = [
            {"key": str(node)} if isinstance(node, (str, int)) else node
            for node in nodes
        ]
        return data

    @model_validator(mode="after")
    def check_references(self) -> "GraphDocument":
        """Node keys must be unique; edges and path ends must name declared nodes."""
        keys: set[str] = set()
        for node in self.nodes:
            if node.key in keys:
                raise ValueError(f"Node '{node.key}' is declared more than once")
            keys.add(node.key)
        for edge in self.edges:
            for end in (edge.source, edge.target):
                if end not in keys:
                    raise ValueError(f"Edge references undeclared node '{end}'")
        for end in (self.start, self.end):
            if end is not None and end not in keys:
                raise ValueError(f"Path end references undeclared node '{end}'")
        return self
