"""Tests for the Dijkstra stage driver."""

import math

import pytest

from stepgraph.algorithms.dijkstra import (
    INSPECT_EDGE_DESCRIPTION,
    PATH_DESCRIPTION,
    REJECT_EDGE_DESCRIPTION,
    START_DESCRIPTION,
    dijkstra_algorithm,
    iter_dijkstra_stages,
)
from stepgraph.algorithms.errors import UnreachableDestinationError
from stepgraph.execution.change import DEFAULT_PALETTE, MARKING_ATTRIBUTE, ChangeKind
from stepgraph.graph.element import ElementKind, ElementRef
from stepgraph.graph.errors import ElementNotFoundError
from stepgraph.graph.model_graph import Graph


def _run(graph, source, destination):
    stages = []
    dijkstra_algorithm(graph, source, destination, stages.append)
    return stages


def _edge_markings(stages):
    """Map each edge key to the markings it received, in stage order."""
    markings: dict[str, list[str]] = {}
    for stage in stages:
        for change in stage.highlights:
            if change.element.kind == ElementKind.EDGE:
                markings.setdefault(change.element.key, []).append(change.new_value)
    return markings


class TestDijkstraResult:
    def test_final_distance(self, four_node_graph):
        _run(four_node_graph, "A", "D")

        assert four_node_graph.node_attribute("D", "distance") == 4
        assert four_node_graph.node_attribute("C", "distance") == 3
        assert four_node_graph.node_attribute("B", "distance") == 1

    def test_approved_path(self, four_node_graph):
        stages = _run(four_node_graph, "A", "D")
        final = stages[-1]

        assert final.description == PATH_DESCRIPTION
        approved = [change.element for change in final.highlights]
        assert approved == [
            ElementRef.node("D"),
            ElementRef.edge("CD"),
            ElementRef.node("C"),
            ElementRef.edge("BC"),
            ElementRef.node("B"),
            ElementRef.edge("AB"),
            ElementRef.node("A"),
        ]
        assert all(c.new_value == DEFAULT_PALETTE.approve for c in final.highlights)

    def test_first_stage_marks_source(self, four_node_graph):
        first = _run(four_node_graph, "A", "D")[0]

        assert first.description == START_DESCRIPTION
        assert first.changes[0].element == ElementRef.node("A")
        assert first.changes[0].new_value == DEFAULT_PALETTE.inspect
        assert first.changes[1].attribute == "distance"
        assert first.changes[1].new_value == 0

    def test_source_equals_destination(self, four_node_graph):
        stages = _run(four_node_graph, "B", "B")

        assert len(stages) == 2
        assert [c.element for c in stages[-1].highlights] == [ElementRef.node("B")]


class TestDijkstraStages:
    def test_each_edge_inspected_then_rejected(self, four_node_graph):
        stages = _run(four_node_graph, "A", "D")
        markings = _edge_markings(stages)
        inspect, reject, approve = (
            DEFAULT_PALETTE.inspect,
            DEFAULT_PALETTE.reject,
            DEFAULT_PALETTE.approve,
        )

        assert markings["AC"] == [inspect, reject]
        for edge in ("AB", "BC", "CD"):
            assert markings[edge] == [inspect, reject, approve]

    def test_inspect_and_reject_stages_are_dedicated(self, four_node_graph):
        stages = _run(four_node_graph, "A", "D")

        for stage in stages:
            if stage.description == INSPECT_EDGE_DESCRIPTION:
                assert len(stage.highlights) == 1
                assert stage.highlights[0].new_value == DEFAULT_PALETTE.inspect
            if stage.description == REJECT_EDGE_DESCRIPTION:
                assert len(stage) == 1
                assert stage.changes[0].new_value == DEFAULT_PALETTE.reject

    def test_relaxation_recorded_in_inspect_stage(self, four_node_graph):
        stages = _run(four_node_graph, "A", "D")
        relaxations = [
            (change.element.key, change.old_value, change.new_value)
            for stage in stages
            if stage.description == INSPECT_EDGE_DESCRIPTION
            for change in stage.property_changes
        ]

        assert relaxations[0][0] == "B" and relaxations[0][2] == 1
        assert relaxations[1][0] == "C" and relaxations[1][2] == 4
        assert relaxations[2] == ("C", 4, 3)
        assert relaxations[3][0] == "D" and relaxations[3][2] == 4

    def test_stage_count(self, four_node_graph):
        stages = _run(four_node_graph, "A", "D")

        # start + 4 edges x (inspect, reject) + 3 node switches + path
        assert len(stages) == 1 + 8 + 3 + 1

    def test_stages_are_lazy(self, four_node_graph):
        stages = iter_dijkstra_stages(four_node_graph, "A", "D")

        next(stages)

        assert four_node_graph.node_attribute("A", "distance") == 0
        assert not four_node_graph.has_attribute(ElementRef.node("B"), "distance")

    def test_callback_sees_applied_stage(self, four_node_graph):
        seen = []

        def submit(stage):
            seen.append(all(change.is_current(four_node_graph) for change in stage))

        dijkstra_algorithm(four_node_graph, "A", "D", submit)

        assert all(seen)

    def test_ties_pick_first_node_in_enumeration_order(self):
        graph = Graph()
        for key in ("S", "X", "Y", "T"):
            graph.add_node(key)
        graph.add_edge("S", "X", key="SX", cost=1)
        graph.add_edge("S", "Y", key="SY", cost=1)
        graph.add_edge("Y", "T", key="YT", cost=5)

        stages = _run(graph, "S", "T")
        inspected_nodes = [
            change.element.key
            for stage in stages[1:]
            for change in stage.highlights
            if change.element.kind == ElementKind.NODE
            and change.new_value == DEFAULT_PALETTE.inspect
        ]

        assert inspected_nodes == ["X", "Y", "T"]

    def test_later_ties_follow_insertion_order(self):
        # X and Z tie at 5 only after W relaxes X
        graph = Graph()
        for key in ("S", "X", "W", "Z", "T"):
            graph.add_node(key)
        graph.add_edge("S", "X", key="SX", cost=10)
        graph.add_edge("S", "W", key="SW", cost=3)
        graph.add_edge("S", "Z", key="SZ", cost=5)
        graph.add_edge("W", "X", key="WX", cost=2)
        graph.add_edge("X", "T", key="XT", cost=100)

        stages = _run(graph, "S", "T")
        inspected_nodes = [
            change.element.key
            for stage in stages[1:]
            for change in stage.highlights
            if change.element.kind == ElementKind.NODE
            and change.new_value == DEFAULT_PALETTE.inspect
        ]

        assert inspected_nodes == ["W", "X", "Z", "T"]


class TestDijkstraRerun:
    def test_rerun_resets_stale_distances(self, four_node_graph):
        _run(four_node_graph, "A", "D")
        stages = _run(four_node_graph, "D", "A")

        assert four_node_graph.node_attribute("A", "distance") == 4
        resets = [c for c in stages[0].property_changes if c.new_value == math.inf]
        assert {c.element.key for c in resets} == {"A", "B", "C"}

    def test_rerun_is_fully_reversible(self, four_node_graph):
        _run(four_node_graph, "A", "D")
        before = {k: four_node_graph.attributes(ElementRef.node(k)) for k in "ABCD"}

        stages = _run(four_node_graph, "D", "A")
        for stage in reversed(stages):
            stage.reverse(four_node_graph)

        assert {k: four_node_graph.attributes(ElementRef.node(k)) for k in "ABCD"} == before


class TestDijkstraErrors:
    def test_missing_source(self, four_node_graph):
        with pytest.raises(ElementNotFoundError):
            _run(four_node_graph, "Z", "D")

    def test_unreachable_destination(self, four_node_graph):
        four_node_graph.add_node("E")
        stages = []

        with pytest.raises(UnreachableDestinationError):
            dijkstra_algorithm(four_node_graph, "A", "E", stages.append)

        # Every stage handed out before the failure is complete
        assert stages
        assert MARKING_ATTRIBUTE not in four_node_graph.attributes(ElementRef.node("E"))

    def test_changes_target_graph_elements(self, four_node_graph):
        for stage in _run(four_node_graph, "A", "D"):
            for change in stage:
                assert change.kind in (ChangeKind.HIGHLIGHT, ChangeKind.PROPERTY)
                assert four_node_graph.has_element(change.element)
