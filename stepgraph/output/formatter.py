"""Output formatting for stages and graphs."""

import json
import math
from typing import Literal

from ..execution.change import ABSENT, ChangeKind, GraphChange
from ..execution.stage import ExecutionStage
from ..graph.element import ElementRef
from ..graph.model_graph import Graph


def format_stages(
    stages: list[ExecutionStage],
    format: Literal["text", "json"] = "text",
) -> str:
    """Format recorded stages for output.

    Args:
        stages: The stages in emission order.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return json.dumps([_stage_data(stage) for stage in stages], indent=2)
    return _format_stages_text(stages)


def format_graph(graph: Graph, format: Literal["text", "json"] = "text") -> str:
    """Format nodes and edges with their attributes."""
    if format == "json":
        data = {
            "nodes": [
                {"key": key, **_json_attrs(graph.attributes(ElementRef.node(key)))}
                for key in graph.nodes()
            ],
            "edges": [
                {
                    "key": key,
                    "from": source,
                    "to": target,
                    **_json_attrs(graph.attributes(ElementRef.edge(key))),
                }
                for key, source, target in graph.iter_edges()
            ],
        }
        return json.dumps(data, indent=2)

    lines = [f"NODES ({graph.node_count}):"]
    for key in graph.nodes():
        lines.append(f"  {key}")
    lines.append("")
    lines.append(f"EDGES ({graph.edge_count}):")
    for key, source, target in graph.iter_edges():
        cost = graph.edge_attribute(key, "cost")
        suffix = f" (cost {_value_text(cost)})" if cost is not None else ""
        lines.append(f"  {key}: {source} - {target}{suffix}")
    return "\n".join(lines)


def _format_stages_text(stages: list[ExecutionStage]) -> str:
    lines: list[str] = []
    for number, stage in enumerate(stages, start=1):
        lines.append(f"Stage {number}: {stage.description}")
        for change in stage:
            lines.append(f"  {_format_change_text(change)}")
        lines.append("")
    lines.append(f"{len(stages)} stage(s)")
    return "\n".join(lines)


def _format_change_text(change: GraphChange) -> str:
    symbol = "●" if change.kind == ChangeKind.HIGHLIGHT else "✎"
    old = "(unset)" if change.old_value is ABSENT else _value_text(change.old_value)
    return (
        f"{symbol} {change.element}: {change.attribute} "
        f"{old} -> {_value_text(change.new_value)}"
    )


def _value_text(value: object) -> str:
    if isinstance(value, float):
        if math.isinf(value):
            return "∞"
        if value.is_integer():
            return str(int(value))
    return str(value)


def _json_value(value: object) -> object:
    if isinstance(value, float) and math.isinf(value):
        return None
    return value


def _json_attrs(attrs: dict) -> dict:
    return {name: _json_value(value) for name, value in attrs.items()}


def _stage_data(stage: ExecutionStage) -> dict:
    return {
        "description": stage.description,
        "changes": [
            {
                "kind": change.kind.value,
                "element": change.element.key,
                "element_kind": change.element.kind.value,
                "attribute": change.attribute,
                "old_value": None if change.old_value is ABSENT else _json_value(change.old_value),
                "had_value": change.had_value,
                "new_value": _json_value(change.new_value),
            }
            for change in stage
        ],
    }
