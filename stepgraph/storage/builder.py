"""Builder for turning a GraphDocument into a ready Session."""

from ..config.document import GraphDocument
from ..config.settings import Settings
from .session import Session


def build_session(document: GraphDocument, settings: Settings | None = None) -> Session:
    """Build a Session whose storage holds the described graph.

    Args:
        document: The parsed graph file.
        settings: Session settings.

    Returns:
        A Session with the document's algorithm active and path ends set.
    """
    session = Session(settings=settings)
    storage = session.storage
    storage.change_algorithm(document.algorithm)

    for node in document.nodes:
        storage.add_node({"x": node.x, "y": node.y}, key=node.key)

    for edge in document.edges:
        extra = {"cost": edge.cost} if edge.cost is not None else {}
        storage.add_edge(edge.source, edge.target, **extra)

    if document.start is not None:
        storage.set_path_end(document.start, "start")
    if document.end is not None:
        storage.set_path_end(document.end, "end")

    return session
