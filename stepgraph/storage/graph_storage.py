"""Owner of the live graph and every structural edit made to it."""

import logging
import random
from typing import Literal, Mapping

from ..algorithms.errors import UnknownAlgorithmError
from ..algorithms.registry import (
    ALGORITHMS,
    NO_ALGORITHM,
    AlgorithmDescriptor,
    analyze_algorithm_change,
    get_descriptor,
)
from ..config.settings import Settings
from ..execution.change import MARKING_ATTRIBUTE
from ..graph.element import ElementRef
from ..graph.errors import DuplicateElementError
from ..graph.model_graph import Graph
from ..graph.schema import AttributeValue, ElementSchema
from .errors import EdgeCountError
from .refresh import RefreshChannel

logger = logging.getLogger(__name__)

PathEnd = Literal["start", "end"]
Coordinates = Mapping[str, float]


def min_edges_for_connected_graph(nodes: int) -> int:
    """Edges of a spanning tree on ``nodes`` nodes."""
    return max(nodes - 1, 0)


def max_edges_for_connected_graph(nodes: int) -> int:
    """Edges of the complete graph on ``nodes`` nodes."""
    return nodes * (nodes - 1) // 2


def clamp_edge_count(nodes: int, edges: int) -> int:
    """Clamp an edge count into the range a connected graph allows."""
    return min(
        max(edges, min_edges_for_connected_graph(nodes)),
        max_edges_for_connected_graph(nodes),
    )


class GraphStorage:
    """Holds the live graph, the active algorithm and the path ends.

    Every element carries the properties the active algorithm declares.
    Structural conflicts (duplicate edges, self loops, missing endpoints)
    are ignored; callers wanting feedback check the graph first.
    """

    def __init__(
        self,
        registry: Mapping[str, AlgorithmDescriptor] | None = None,
        settings: Settings | None = None,
        refresh: RefreshChannel | None = None,
    ):
        self.registry = ALGORITHMS if registry is None else registry
        self.settings = settings or Settings()
        self.refresh = refresh or RefreshChannel(self.settings.refresh_text)
        self.graph = Graph()
        self.algorithm = NO_ALGORITHM
        self.next_node_key = 0
        self.start_node: str | None = None
        self.end_node: str | None = None

    @property
    def descriptor(self) -> AlgorithmDescriptor | None:
        """Descriptor of the active algorithm."""
        return get_descriptor(self.algorithm, self.registry)

    def _schema(self) -> ElementSchema | None:
        descriptor = self.descriptor
        return descriptor.schema if descriptor is not None else None

    def _node_defaults(self) -> dict[str, AttributeValue]:
        descriptor = self.descriptor
        if descriptor is None:
            return {}
        return {spec.name: spec.default for spec in descriptor.node_properties}

    def _edge_defaults(self) -> dict[str, AttributeValue]:
        descriptor = self.descriptor
        if descriptor is None:
            return {}
        return {spec.name: spec.default for spec in descriptor.edge_properties}

    def is_valid(self) -> bool:
        """Check that the graph is a single connected component.

        An empty graph has no component and is not valid; a lone node is.
        """
        return self.graph.count_connected_components() == 1

    # -------------------------------------------------------------------------
    # Structural edits
    # -------------------------------------------------------------------------

    def add_node(self, coords: Coordinates | None = None, key: str | None = None) -> str:
        """Add a node seeded with position, size and algorithm properties.

        Args:
            coords: Mapping with "x" and "y".
            key: Explicit key; the next integer key is allocated when omitted.

        Returns:
            The new node key.

        Raises:
            DuplicateElementError: If an explicit key is already used.
        """
        coords = coords or {}
        if key is None:
            key = str(self.next_node_key)
            while self.graph.has_node(key):
                self.next_node_key += 1
                key = str(self.next_node_key)
        elif self.graph.has_node(key):
            raise DuplicateElementError(f"Node '{key}' already exists", key)
        if key.isdigit():
            self.next_node_key = max(self.next_node_key, int(key) + 1)

        self.graph.add_node(
            key,
            x=float(coords.get("x", 0.0)),
            y=float(coords.get("y", 0.0)),
            size=self.settings.element_size,
            **self._node_defaults(),
        )
        logger.debug("Added node %s", key)
        self.refresh.emit()
        return key

    def add_edge(self, node_key1: str, node_key2: str, **attrs: AttributeValue) -> str | None:
        """Connect two nodes with an edge seeded with size and algorithm properties.

        Returns:
            The new edge key, or None if the edge was rejected.
        """
        if (
            not self.graph.has_node(node_key1)
            or not self.graph.has_node(node_key2)
            or node_key1 == node_key2
            or self.graph.has_edge(node_key1, node_key2)
        ):
            logger.debug("Rejected edge %s-%s", node_key1, node_key2)
            return None

        attributes = {"size": self.settings.element_size, **self._edge_defaults(), **attrs}
        key = self.graph.add_edge(node_key1, node_key2, **attributes)
        logger.debug("Added edge %s between %s and %s", key, node_key1, node_key2)
        self.refresh.emit()
        return key

    def remove_node(self, node_key: str) -> None:
        self.graph.remove_node(node_key)
        if node_key == self.start_node:
            self.start_node = None
        if node_key == self.end_node:
            self.end_node = None
        self.refresh.emit()

    def remove_edge(self, edge_key: str) -> None:
        self.graph.remove_edge(edge_key)
        self.refresh.emit()

    # -------------------------------------------------------------------------
    # Algorithm selection
    # -------------------------------------------------------------------------

    def change_algorithm(self, algorithm: str) -> None:
        """Switch the active algorithm and migrate element properties.

        Properties the new algorithm drops are removed; properties it adds or
        shares with the old one are reset to their defaults.

        Raises:
            UnknownAlgorithmError: If the name is not registered.
        """
        if algorithm != NO_ALGORITHM and algorithm not in self.registry:
            raise UnknownAlgorithmError(algorithm)

        changes = analyze_algorithm_change(self.algorithm, algorithm, self.registry)
        new_descriptor = get_descriptor(algorithm, self.registry)
        # Old values may not fit the new declarations until migrated
        self.graph.schema = None

        for edge_key in self.graph.edges():
            ref = ElementRef.edge(edge_key)
            for spec in changes.edges.remove:
                self.graph.remove_attribute(ref, spec.name)
            for spec in changes.edges.to_set:
                self.graph.set_attribute(ref, spec.name, spec.default)

        for node_key in self.graph.nodes():
            ref = ElementRef.node(node_key)
            for spec in changes.nodes.remove:
                self.graph.remove_attribute(ref, spec.name)
            for spec in changes.nodes.to_set:
                self.graph.set_attribute(ref, spec.name, spec.default)

        logger.info("Algorithm changed from %s to %s", self.algorithm, algorithm)
        self.algorithm = algorithm
        self.graph.schema = new_descriptor.schema if new_descriptor else None
        self.refresh.emit()

    # -------------------------------------------------------------------------
    # Random generation
    # -------------------------------------------------------------------------

    def random_graph(self, nodes: int, edges: int, rng: random.Random | None = None) -> None:
        """Replace the graph with a random connected graph.

        Starts from the complete graph and deletes random edges, putting an
        edge back whenever its removal disconnects the graph. Each edge is
        tried at most once.

        Args:
            nodes: Number of nodes.
            edges: Number of edges the result must have.
            rng: Random source; seeded from settings when omitted.

        Raises:
            EdgeCountError: If ``edges`` is outside the connected range.
        """
        if edges > max_edges_for_connected_graph(nodes):
            raise EdgeCountError(
                "Given number of edges is higher than maximum number of edges "
                "for graph with given number of nodes",
                nodes,
                edges,
            )
        if edges < min_edges_for_connected_graph(nodes):
            raise EdgeCountError(
                "Given number of edges is lower than minimum number of edges "
                "for graph with given number of nodes",
                nodes,
                edges,
            )
        rng = rng or random.Random(self.settings.seed)

        graph = Graph.complete(nodes)
        candidates = graph.edges()
        edge_count = len(candidates)
        while edge_count > edges:
            edge_key = candidates.pop(rng.randrange(len(candidates)))
            source, target = graph.extremities(edge_key)
            graph.remove_edge(edge_key)
            if graph.count_connected_components() == 1:
                edge_count -= 1
            else:
                graph.add_edge(source, target, key=edge_key)

        node_defaults = self._node_defaults()
        for node_key in graph.nodes():
            ref = ElementRef.node(node_key)
            attributes = {
                "x": rng.random(),
                "y": rng.random(),
                "size": self.settings.element_size,
                **node_defaults,
            }
            for name, value in attributes.items():
                graph.set_attribute(ref, name, value)
        edge_defaults = self._edge_defaults()
        for edge_key in graph.edges():
            ref = ElementRef.edge(edge_key)
            for name, value in {"size": self.settings.element_size, **edge_defaults}.items():
                graph.set_attribute(ref, name, value)

        graph.schema = self._schema()
        self.graph = graph
        self.next_node_key = nodes
        self.start_node = None
        self.end_node = None
        logger.info("Generated random graph with %d nodes and %d edges", nodes, edges)
        self.refresh.emit()

    # -------------------------------------------------------------------------
    # Path ends
    # -------------------------------------------------------------------------

    def set_path_end(self, node_key: str, which: PathEnd) -> None:
        """Designate a node as the start or the end of the searched path.

        The previous holder of the designation loses its color. A missing
        node is reported and ignored.
        """
        if not self.graph.has_node(node_key):
            logger.error(
                "There is no node associated with key %r passed "
                "while trying to mark the %s of the path",
                node_key,
                which,
            )
            return

        if which == "start":
            self._clear_path_end(self.start_node)
            if node_key == self.end_node:
                self.end_node = None
            self.graph.set_attribute(
                ElementRef.node(node_key), MARKING_ATTRIBUTE, self.settings.start_color
            )
            self.start_node = node_key
        else:
            self._clear_path_end(self.end_node)
            if node_key == self.start_node:
                self.start_node = None
            self.graph.set_attribute(
                ElementRef.node(node_key), MARKING_ATTRIBUTE, self.settings.end_color
            )
            self.end_node = node_key
        self.refresh.emit()

    def _clear_path_end(self, node_key: str | None) -> None:
        if node_key is not None and self.graph.has_node(node_key):
            self.graph.remove_attribute(ElementRef.node(node_key), MARKING_ATTRIBUTE)
