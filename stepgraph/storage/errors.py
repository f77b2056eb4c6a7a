"""Storage and session exceptions."""


class StorageError(Exception):
    """Base exception for graph storage errors."""

    pass


class EdgeCountError(StorageError, ValueError):
    """Raised when a random graph cannot have the requested edge count."""

    def __init__(self, message: str, nodes: int, edges: int):
        self.nodes = nodes
        self.edges = edges
        super().__init__(message)


class PathEndpointError(StorageError):
    """Raised when a run lacks a start or end node."""

    pass


class DisconnectedGraphError(StorageError):
    """Raised when an algorithm is run on a graph that is not connected."""

    def __init__(self, components: int):
        self.components = components
        super().__init__(
            f"Graph must be a single connected component, found {components}"
        )
