"""Tracking of the element currently chosen by the user."""

import logging
from typing import Callable

from ..execution.change import GraphChange, Marking, MarkingPalette
from ..graph.element import ElementRef
from ..graph.model_graph import Graph

logger = logging.getLogger(__name__)


class ElementSelector:
    """Keeps at most one element highlighted as chosen.

    The graph is looked up on every call since storage may replace it.
    """

    def __init__(self, get_graph: Callable[[], Graph], palette: MarkingPalette | None = None):
        self._get_graph = get_graph
        self.palette = palette
        self._marking: GraphChange | None = None

    @property
    def chosen(self) -> ElementRef | None:
        """The chosen element, if it still exists and still shows the highlight."""
        if self._marking is None or not self._marking.is_current(self._get_graph()):
            return None
        return self._marking.element

    def choose(self, element: ElementRef) -> GraphChange | None:
        """Highlight an element as chosen, reverting the previous choice.

        Returns:
            The applied marking, or None if the element does not exist.
        """
        graph = self._get_graph()
        self.clear()
        if not graph.has_element(element):
            logger.error("Cannot choose missing %s", element)
            return None
        self._marking = GraphChange.mark_element(graph, element, Marking.CHOOSE, self.palette)
        return self._marking

    def clear(self) -> None:
        """Revert the current choice if its highlight is still showing."""
        if self._marking is not None and self._marking.is_current(self._get_graph()):
            self._marking.reverse(self._get_graph())
        self._marking = None
