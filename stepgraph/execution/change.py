"""Reversible attribute changes applied to a graph."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from ..graph.element import ElementRef
from ..graph.model_graph import Graph
from ..graph.schema import AttributeValue

logger = logging.getLogger(__name__)

MARKING_ATTRIBUTE = "color"


class Marking(str, Enum):
    """Highlight states used to visualize algorithm progress."""

    INSPECT = "inspect"
    REJECT = "reject"
    APPROVE = "approve"
    CHOOSE = "choose"


class MarkingPalette(BaseModel):
    """Colors written to the marking attribute for each highlight state."""

    model_config = ConfigDict(frozen=True)

    inspect: str = "#f0ad4e"
    reject: str = "#9e9e9e"
    approve: str = "#4caf50"
    choose: str = "#9c27b0"

    def color(self, marking: Marking) -> str:
        return getattr(self, marking.value)


DEFAULT_PALETTE = MarkingPalette()


class _Absent:
    """Marker for an attribute that was not set."""

    def __repr__(self) -> str:
        return "<absent>"


ABSENT: Any = _Absent()


class ChangeKind(str, Enum):
    """Kinds of reversible changes."""

    HIGHLIGHT = "highlight"
    PROPERTY = "property"


@dataclass(frozen=True)
class GraphChange:
    """A single attribute mutation that remembers how to undo itself.

    The factories snapshot the previous value (or its absence) and apply
    the new value to the graph straight away.
    """

    kind: ChangeKind
    element: ElementRef
    attribute: str
    new_value: AttributeValue
    old_value: Any = ABSENT

    @classmethod
    def mark_element(
        cls,
        graph: Graph,
        element: ElementRef,
        marking: Marking,
        palette: MarkingPalette | None = None,
    ) -> "GraphChange":
        """Highlight an element and return the change that did it.

        Args:
            graph: The graph holding the element.
            element: The element to highlight.
            marking: The highlight state.
            palette: Colors for highlight states.

        Returns:
            The applied change.
        """
        palette = palette or DEFAULT_PALETTE
        return cls._snapshot_and_apply(
            graph, ChangeKind.HIGHLIGHT, element, MARKING_ATTRIBUTE, palette.color(marking)
        )

    @classmethod
    def set_property(
        cls, graph: Graph, element: ElementRef, attribute: str, value: AttributeValue
    ) -> "GraphChange":
        """Set an arbitrary attribute and return the change that did it."""
        return cls._snapshot_and_apply(graph, ChangeKind.PROPERTY, element, attribute, value)

    @classmethod
    def _snapshot_and_apply(
        cls,
        graph: Graph,
        kind: ChangeKind,
        element: ElementRef,
        attribute: str,
        value: AttributeValue,
    ) -> "GraphChange":
        old_value = graph.get_attribute(element, attribute, ABSENT)
        change = cls(kind, element, attribute, value, old_value)
        change.apply(graph)
        return change

    @property
    def had_value(self) -> bool:
        """Whether the attribute existed before the change."""
        return self.old_value is not ABSENT

    def apply(self, graph: Graph) -> None:
        """Write the new value. A vanished element is skipped."""
        if not graph.has_element(self.element):
            logger.warning("Cannot apply change to missing %s", self.element)
            return
        graph.set_attribute(self.element, self.attribute, self.new_value)

    def reverse(self, graph: Graph) -> None:
        """Restore the value seen before the change. A vanished element is skipped."""
        if not graph.has_element(self.element):
            logger.debug("Skipping reversal on removed %s", self.element)
            return
        if self.had_value:
            graph.set_attribute(self.element, self.attribute, self.old_value)
        else:
            graph.remove_attribute(self.element, self.attribute)

    def is_current(self, graph: Graph) -> bool:
        """Check whether the element still shows the value this change wrote."""
        if not graph.has_element(self.element):
            return False
        return graph.get_attribute(self.element, self.attribute, ABSENT) == self.new_value
