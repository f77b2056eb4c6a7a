"""Session context tying storage, selection and algorithm runs together."""

import logging
from typing import Callable, Mapping

from ..algorithms.errors import UnknownAlgorithmError
from ..algorithms.registry import ALGORITHMS, AlgorithmDescriptor, get_driver
from ..config.settings import Settings
from ..execution.player import StagePlayer
from ..execution.stage import ExecutionStage
from ..graph.model_graph import Graph
from .errors import DisconnectedGraphError, PathEndpointError
from .graph_storage import GraphStorage
from .refresh import RefreshChannel
from .selection import ElementSelector

logger = logging.getLogger(__name__)


class Session:
    """Everything one user works with, passed around explicitly."""

    def __init__(
        self,
        registry: Mapping[str, AlgorithmDescriptor] | None = None,
        settings: Settings | None = None,
    ):
        self.registry = ALGORITHMS if registry is None else registry
        self.settings = settings or Settings()
        self.refresh = RefreshChannel(self.settings.refresh_text)
        self.storage = GraphStorage(self.registry, self.settings, self.refresh)
        self.selector = ElementSelector(lambda: self.storage.graph, self.settings.palette)

    @property
    def graph(self) -> Graph:
        """The live graph owned by storage."""
        return self.storage.graph

    def run(
        self,
        source: str | None = None,
        destination: str | None = None,
        submit_stage: Callable[[ExecutionStage], None] | None = None,
    ) -> StagePlayer:
        """Run the active algorithm and record every stage it emits.

        Args:
            source: Start node; defaults to the storage's start node.
            destination: End node; defaults to the storage's end node.
            submit_stage: Extra consumer called after each stage is recorded.

        Returns:
            A StagePlayer positioned after the last stage.

        Raises:
            PathEndpointError: If a path end is missing.
            DisconnectedGraphError: If the graph is not connected.
            UnknownAlgorithmError: If the active algorithm cannot be run.
        """
        source = source if source is not None else self.storage.start_node
        destination = destination if destination is not None else self.storage.end_node
        if source is None or destination is None:
            raise PathEndpointError("Both start and end of the path must be set")
        for key in (source, destination):
            if not self.graph.has_node(key):
                raise PathEndpointError(f"Path end '{key}' is not a node of the graph")
        if not self.storage.is_valid():
            raise DisconnectedGraphError(self.graph.count_connected_components())

        driver = get_driver(self.storage.algorithm)
        if driver is None:
            raise UnknownAlgorithmError(self.storage.algorithm)

        # A leftover choice highlight would be captured by the stages
        self.selector.clear()
        player = StagePlayer(self.graph)
        logger.info(
            "Running %s from %s to %s", self.storage.algorithm, source, destination
        )
        for stage in driver(self.graph, source, destination, self.settings.palette):
            player.record(stage)
            if submit_stage is not None:
                submit_stage(stage)
            self.refresh.emit(stage.description)
        logger.info("Run finished after %d stage(s)", len(player))
        return player
