"""Tests for Graph."""

import math

import pytest

from stepgraph.graph.element import ElementRef
from stepgraph.graph.errors import (
    AttributeTypeError,
    DuplicateElementError,
    ElementNotFoundError,
    InvalidEdgeError,
)
from stepgraph.graph.model_graph import Graph
from stepgraph.graph.schema import ElementSchema, PropertySpec


class TestGraphStructure:
    def test_add_node(self):
        graph = Graph()
        key = graph.add_node("A", size=5)

        assert key == "A"
        assert graph.has_node("A")
        assert graph.node_attribute("A", "size") == 5

    def test_duplicate_node_rejected(self):
        graph = Graph()
        graph.add_node("A")

        with pytest.raises(DuplicateElementError):
            graph.add_node("A")

    def test_add_edge_generates_keys(self):
        graph = Graph()
        for key in "ABC":
            graph.add_node(key)

        first = graph.add_edge("A", "B")
        second = graph.add_edge("B", "C")

        assert first != second
        assert graph.edges() == [first, second]
        assert graph.extremities(first) == ("A", "B")

    def test_edge_is_undirected(self):
        graph = Graph()
        graph.add_node("A")
        graph.add_node("B")
        key = graph.add_edge("A", "B")

        assert graph.has_edge("B", "A")
        assert graph.edge_key("B", "A") == key

    @pytest.mark.parametrize(
        "source,target",
        [("A", "Z"), ("A", "A")],
    )
    def test_invalid_edges_rejected(self, source, target):
        graph = Graph()
        graph.add_node("A")

        with pytest.raises(InvalidEdgeError):
            graph.add_edge(source, target)

    def test_parallel_edge_rejected_in_either_direction(self):
        graph = Graph()
        graph.add_node("A")
        graph.add_node("B")
        graph.add_edge("A", "B")

        with pytest.raises(InvalidEdgeError):
            graph.add_edge("B", "A")
        assert graph.edge_count == 1

    def test_remove_node_drops_incident_edges(self, four_node_graph):
        four_node_graph.remove_node("C")

        assert not four_node_graph.has_node("C")
        assert four_node_graph.edges() == ["AB"]
        assert not four_node_graph.has_edge_key("CD")

    def test_remove_missing_is_noop_by_default(self, four_node_graph):
        four_node_graph.remove_node("Z")
        four_node_graph.remove_edge("nope")

        assert four_node_graph.node_count == 4
        assert four_node_graph.edge_count == 4

    def test_remove_missing_can_raise(self, four_node_graph):
        with pytest.raises(ElementNotFoundError):
            four_node_graph.remove_node("Z", missing_ok=False)
        with pytest.raises(ElementNotFoundError):
            four_node_graph.remove_edge("nope", missing_ok=False)

    def test_readding_edge_with_same_key(self, four_node_graph):
        four_node_graph.remove_edge("BC")
        four_node_graph.add_edge("B", "C", key="BC")

        assert four_node_graph.edge_key("C", "B") == "BC"

    def test_complete_graph(self):
        graph = Graph.complete(4)

        assert graph.nodes() == ["0", "1", "2", "3"]
        assert graph.edge_count == 6
        assert graph.count_connected_components() == 1


class TestGraphQueries:
    def test_neighbors_in_insertion_order(self, four_node_graph):
        assert four_node_graph.neighbors("C") == ["B", "A", "D"]

    def test_incident_edges(self, four_node_graph):
        assert set(four_node_graph.incident_edges("A")) == {"AB", "AC"}

    def test_edge_key_missing(self, four_node_graph):
        assert four_node_graph.edge_key("A", "D") is None

    def test_has_element(self, four_node_graph):
        assert four_node_graph.has_element(ElementRef.node("A"))
        assert four_node_graph.has_element(ElementRef.edge("AB"))
        assert not four_node_graph.has_element(ElementRef.edge("A"))

    def test_connected_components(self, four_node_graph):
        four_node_graph.remove_edge("BC")
        four_node_graph.remove_edge("AC")

        assert four_node_graph.count_connected_components() == 2

    def test_empty_graph_has_no_components(self):
        assert Graph().count_connected_components() == 0


class TestGraphAttributes:
    def test_set_and_get_attribute(self, four_node_graph):
        ref = ElementRef.edge("AB")
        four_node_graph.set_attribute(ref, "color", "red")

        assert four_node_graph.get_attribute(ref, "color") == "red"
        assert four_node_graph.attributes(ref) == {"cost": 1, "color": "red"}

    def test_remove_attribute(self, four_node_graph):
        ref = ElementRef.edge("AB")
        four_node_graph.remove_attribute(ref, "cost")

        assert not four_node_graph.has_attribute(ref, "cost")
        assert four_node_graph.get_attribute(ref, "cost", "gone") == "gone"

    def test_missing_element_raises(self, four_node_graph):
        with pytest.raises(ElementNotFoundError):
            four_node_graph.get_attribute(ElementRef.node("Z"), "color")
        with pytest.raises(KeyError):
            four_node_graph.set_attribute(ElementRef.edge("nope"), "color", "red")

    def test_unsupported_value_rejected(self, four_node_graph):
        with pytest.raises(AttributeTypeError):
            four_node_graph.set_attribute(ElementRef.node("A"), "tags", ["x"])

    def test_schema_checked_on_assignment(self):
        schema = ElementSchema(
            node_properties=(PropertySpec(name="distance", default=math.inf),),
            edge_properties=(PropertySpec(name="cost", default=1),),
        )
        graph = Graph(schema=schema)
        graph.add_node("A", distance=0)
        ref = ElementRef.node("A")

        graph.set_attribute(ref, "distance", 2.5)
        graph.set_attribute(ref, "label", "anything")
        with pytest.raises(AttributeTypeError):
            graph.set_attribute(ref, "distance", "far")
        with pytest.raises(AttributeTypeError):
            graph.set_attribute(ref, "distance", True)
