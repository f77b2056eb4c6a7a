"""Reversible changes, execution stages and their replay."""

from .change import (
    ABSENT,
    DEFAULT_PALETTE,
    MARKING_ATTRIBUTE,
    ChangeKind,
    GraphChange,
    Marking,
    MarkingPalette,
)
from .player import StagePlayer
from .stage import ExecutionStage

__all__ = [
    "ABSENT",
    "DEFAULT_PALETTE",
    "MARKING_ATTRIBUTE",
    "ChangeKind",
    "GraphChange",
    "Marking",
    "MarkingPalette",
    "StagePlayer",
    "ExecutionStage",
]
