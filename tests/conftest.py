"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from stepgraph.algorithms.registry import ALGORITHMS, AlgorithmDescriptor
from stepgraph.graph.model_graph import Graph
from stepgraph.graph.schema import PropertySpec
from stepgraph.storage.graph_storage import GraphStorage
from stepgraph.storage.session import Session


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def four_node_graph() -> Graph:
    """A-B(1), B-C(2), A-C(4), C-D(1): the shortest A to D path is A-B-C-D."""
    graph = Graph()
    for key in "ABCD":
        graph.add_node(key)
    graph.add_edge("A", "B", key="AB", cost=1)
    graph.add_edge("B", "C", key="BC", cost=2)
    graph.add_edge("A", "C", key="AC", cost=4)
    graph.add_edge("C", "D", key="CD", cost=1)
    return graph


@pytest.fixture
def schema_registry() -> dict[str, AlgorithmDescriptor]:
    """A registry with two algorithms sharing no node properties."""
    return {
        "none": AlgorithmDescriptor(name="none"),
        "distances": AlgorithmDescriptor(
            name="distances",
            node_properties=(PropertySpec(name="distance", default=0),),
            edge_properties=(PropertySpec(name="cost", default=1),),
        ),
        "search": AlgorithmDescriptor(
            name="search",
            node_properties=(PropertySpec(name="visited", default=False),),
            edge_properties=(PropertySpec(name="cost", default=1),),
        ),
    }


@pytest.fixture
def storage() -> GraphStorage:
    """Storage with Dijkstra active."""
    storage = GraphStorage(ALGORITHMS)
    storage.change_algorithm("dijkstra")
    return storage


@pytest.fixture
def session() -> Session:
    """Session holding the four node graph with A and D as path ends."""
    session = Session()
    storage = session.storage
    storage.change_algorithm("dijkstra")
    for key in "ABCD":
        storage.add_node({"x": 0.0, "y": 0.0}, key=key)
    storage.add_edge("A", "B", cost=1)
    storage.add_edge("B", "C", cost=2)
    storage.add_edge("A", "C", cost=4)
    storage.add_edge("C", "D", cost=1)
    storage.set_path_end("A", "start")
    storage.set_path_end("D", "end")
    return session
