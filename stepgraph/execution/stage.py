"""Execution stages: ordered batches of reversible changes."""

from dataclasses import dataclass, field
from typing import Iterator

from ..graph.model_graph import Graph
from .change import ChangeKind, GraphChange


@dataclass
class ExecutionStage:
    """One describable step of algorithm progress."""

    description: str = ""
    changes: list[GraphChange] = field(default_factory=list)

    def add_change(self, change: GraphChange) -> None:
        """Append a change to the stage."""
        self.changes.append(change)

    def apply(self, graph: Graph) -> None:
        """Apply every change in order."""
        for change in self.changes:
            change.apply(graph)

    def reverse(self, graph: Graph) -> None:
        """Undo every change in reverse order."""
        for change in reversed(self.changes):
            change.reverse(graph)

    @property
    def highlights(self) -> list[GraphChange]:
        return [c for c in self.changes if c.kind == ChangeKind.HIGHLIGHT]

    @property
    def property_changes(self) -> list[GraphChange]:
        return [c for c in self.changes if c.kind == ChangeKind.PROPERTY]

    def __iter__(self) -> Iterator[GraphChange]:
        return iter(self.changes)

    def __len__(self) -> int:
        return len(self.changes)
