"""Graph model exceptions."""


class GraphError(Exception):
    """Base exception for graph model errors."""

    pass


class ElementNotFoundError(GraphError, KeyError):
    """Raised when a node or edge key cannot be resolved."""

    def __init__(self, message: str, key: str | None = None):
        self.key = key
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError quotes its message otherwise
        return str(self.args[0])


class DuplicateElementError(GraphError):
    """Raised when adding a node or edge key that already exists."""

    def __init__(self, message: str, key: str | None = None):
        self.key = key
        super().__init__(message)


class InvalidEdgeError(GraphError):
    """Raised when an edge cannot be added between two nodes."""

    def __init__(self, message: str, source: str | None = None, target: str | None = None):
        self.source = source
        self.target = target
        super().__init__(message)


class AttributeTypeError(GraphError, TypeError):
    """Raised when an attribute value has an unsupported or undeclared type."""

    def __init__(self, message: str, name: str | None = None):
        self.name = name
        super().__init__(message)
