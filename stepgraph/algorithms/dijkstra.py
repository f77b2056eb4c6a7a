"""Dijkstra's shortest path, emitted as reversible execution stages."""

import math
from typing import Callable, Iterator

from ..execution.change import GraphChange, Marking, MarkingPalette
from ..execution.stage import ExecutionStage
from ..graph.element import ElementRef
from ..graph.errors import ElementNotFoundError
from ..graph.model_graph import Graph
from .errors import UnreachableDestinationError

DISTANCE = "distance"
COST = "cost"
INFINITY = math.inf

START_DESCRIPTION = (
    "Starting node is set as current node and its distance from the start is "
    "set to 0. All nodes are considered to be unvisited."
)
INSPECT_EDGE_DESCRIPTION = (
    "Edge connecting current node with one of its unvisited neighbors is "
    "inspected. If sum of distance of current node and length of the edge is "
    "lower than current distance of neighbor node, distance of neighbor node "
    "is set to sum."
)
REJECT_EDGE_DESCRIPTION = (
    "Edge has been inspected and is dismissed. The next unvisited neighbor of "
    "current node will be considered."
)
NEXT_NODE_DESCRIPTION = (
    "All of edges leading to unvisited neighbours have been inspected and "
    "current node is considered as visited. Unvisited node with lowest "
    "distance from start is chosen as new current node."
)
PATH_DESCRIPTION = (
    "Destination node has been chosen as current, which means that shortest "
    "path to it from start has been found. All uninspected edges leaving "
    "destination node lead to nodes that are farther from the start than it "
    "is. If algorithm were to continue beyond this point, shortest paths from "
    "start to all still unvisited nodes would be found."
)


def _distance(graph: Graph, node: str) -> float:
    return graph.node_attribute(node, DISTANCE, INFINITY)


def _cost(graph: Graph, edge: str) -> float:
    return graph.edge_attribute(edge, COST)


def iter_dijkstra_stages(
    graph: Graph,
    source: str,
    destination: str,
    palette: MarkingPalette | None = None,
) -> Iterator[ExecutionStage]:
    """Run Dijkstra's algorithm, yielding one stage per logical step.

    Every change is applied to the graph as it is recorded, so the graph
    always reflects the stages handed out so far. The generator is lazy:
    nothing after a yielded stage happens until the consumer resumes it.

    The next current node is the unvisited one with the lowest distance;
    ties go to the node that comes first in graph enumeration order. The
    backtrack follows the first neighbor, in enumeration order, that lies
    on a shortest path.

    Args:
        graph: The graph to run on. Edges need a numeric "cost".
        source: Key of the start node.
        destination: Key of the destination node.
        palette: Colors for highlight states.

    Yields:
        ExecutionStage objects in algorithm order.

    Raises:
        ElementNotFoundError: If source or destination is missing.
        UnreachableDestinationError: If destination cannot be reached.
    """
    for key in (source, destination):
        if not graph.has_node(key):
            raise ElementNotFoundError(f"Node '{key}' not found", key)

    def mark(stage: ExecutionStage, ref: ElementRef, marking: Marking) -> None:
        stage.add_change(GraphChange.mark_element(graph, ref, marking, palette))

    def set_distance(stage: ExecutionStage, node: str, value: float) -> None:
        stage.add_change(
            GraphChange.set_property(graph, ElementRef.node(node), DISTANCE, value)
        )

    stage = ExecutionStage(START_DESCRIPTION)
    mark(stage, ElementRef.node(source), Marking.INSPECT)
    set_distance(stage, source, 0)
    # Leftovers from an earlier run would corrupt the relaxation checks
    for node in graph.nodes():
        if node != source and _distance(graph, node) != INFINITY:
            set_distance(stage, node, INFINITY)
    yield stage

    order = {node: index for index, node in enumerate(graph.nodes())}
    unvisited = set(order)
    current = source
    while current != destination:
        for neighbor in graph.neighbors(current):
            if neighbor not in unvisited:
                continue
            edge = ElementRef.edge(graph.edge_key(current, neighbor))

            stage = ExecutionStage(INSPECT_EDGE_DESCRIPTION)
            mark(stage, edge, Marking.INSPECT)
            distance = _distance(graph, current) + _cost(graph, edge.key)
            if distance < _distance(graph, neighbor):
                set_distance(stage, neighbor, distance)
            yield stage

            stage = ExecutionStage(REJECT_EDGE_DESCRIPTION)
            mark(stage, edge, Marking.REJECT)
            yield stage

        unvisited.remove(current)
        candidate = min(unvisited, key=lambda node: (_distance(graph, node), order[node]))
        if _distance(graph, candidate) == INFINITY:
            raise UnreachableDestinationError(source, destination)

        stage = ExecutionStage(NEXT_NODE_DESCRIPTION)
        mark(stage, ElementRef.node(current), Marking.REJECT)
        current = candidate
        mark(stage, ElementRef.node(current), Marking.INSPECT)
        yield stage

    stage = ExecutionStage(PATH_DESCRIPTION)
    on_path = {current}
    while current != source:
        mark(stage, ElementRef.node(current), Marking.APPROVE)
        previous = _previous_on_path(graph, current, on_path)
        on_path.add(previous)
        mark(stage, ElementRef.edge(graph.edge_key(current, previous)), Marking.APPROVE)
        current = previous
    mark(stage, ElementRef.node(source), Marking.APPROVE)
    yield stage


def _previous_on_path(graph: Graph, node: str, on_path: set[str]) -> str:
    """Find the first neighbor through which ``node`` reaches its distance."""
    target = _distance(graph, node)
    for neighbor in graph.neighbors(node):
        if neighbor in on_path:
            continue
        edge = graph.edge_key(node, neighbor)
        if math.isclose(_distance(graph, neighbor) + _cost(graph, edge), target):
            return neighbor
    raise ValueError(f"No shortest path predecessor for node '{node}'")


def dijkstra_algorithm(
    graph: Graph,
    source: str,
    destination: str,
    submit_stage: Callable[[ExecutionStage], None],
    palette: MarkingPalette | None = None,
) -> None:
    """Run Dijkstra's algorithm, handing each stage to ``submit_stage``.

    The callback runs synchronously before the next stage is computed.
    """
    for stage in iter_dijkstra_stages(graph, source, destination, palette):
        submit_stage(stage)
