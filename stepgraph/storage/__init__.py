"""Storage layer: the live graph, its session and rendering hooks."""

from .builder import build_session
from .errors import (
    DisconnectedGraphError,
    EdgeCountError,
    PathEndpointError,
    StorageError,
)
from .graph_storage import (
    GraphStorage,
    clamp_edge_count,
    max_edges_for_connected_graph,
    min_edges_for_connected_graph,
)
from .refresh import RefreshChannel
from .selection import ElementSelector
from .session import Session

__all__ = [
    "build_session",
    "DisconnectedGraphError",
    "EdgeCountError",
    "PathEndpointError",
    "StorageError",
    "GraphStorage",
    "clamp_edge_count",
    "max_edges_for_connected_graph",
    "min_edges_for_connected_graph",
    "RefreshChannel",
    "ElementSelector",
    "Session",
]
