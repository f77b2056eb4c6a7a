"""Forward and backward replay of recorded execution stages."""

from ..graph.model_graph import Graph
from .stage import ExecutionStage


class StagePlayer:
    """Records emitted stages and steps through them on a graph.

    ``record`` is meant to be passed as the ``submit_stage`` callback of an
    algorithm driver. Stages arrive already applied, so the cursor follows
    the last recorded stage until the player is stepped back.
    """

    def __init__(self, graph: Graph):
        self.graph = graph
        self._stages: list[ExecutionStage] = []
        self._position = 0

    def record(self, stage: ExecutionStage) -> None:
        """Append a stage whose changes are already applied to the graph."""
        if self._position != len(self._stages):
            # Recording while rewound would desync graph and cursor
            self.fast_forward()
        self._stages.append(stage)
        self._position = len(self._stages)

    @property
    def stages(self) -> list[ExecutionStage]:
        return list(self._stages)

    @property
    def position(self) -> int:
        """Number of stages currently applied."""
        return self._position

    @property
    def current_stage(self) -> ExecutionStage | None:
        """The most recently applied stage."""
        if self._position == 0:
            return None
        return self._stages[self._position - 1]

    @property
    def at_start(self) -> bool:
        return self._position == 0

    @property
    def at_end(self) -> bool:
        return self._position == len(self._stages)

    def step_forward(self) -> ExecutionStage | None:
        """Re-apply the next stage.

        Returns:
            The applied stage, or None when already at the end.
        """
        if self.at_end:
            return None
        stage = self._stages[self._position]
        stage.apply(self.graph)
        self._position += 1
        return stage

    def step_backward(self) -> ExecutionStage | None:
        """Undo the most recently applied stage.

        Returns:
            The reversed stage, or None when already at the start.
        """
        if self.at_start:
            return None
        self._position -= 1
        stage = self._stages[self._position]
        stage.reverse(self.graph)
        return stage

    def seek(self, position: int) -> None:
        """Move to the state after ``position`` stages."""
        if not 0 <= position <= len(self._stages):
            raise IndexError(
                f"Position {position} outside of 0..{len(self._stages)}"
            )
        while self._position > position:
            self.step_backward()
        while self._position < position:
            self.step_forward()

    def rewind(self) -> None:
        self.seek(0)

    def fast_forward(self) -> None:
        self.seek(len(self._stages))

    def __len__(self) -> int:
        return len(self._stages)
