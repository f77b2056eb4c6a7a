"""Catalog of algorithms and the element properties they require."""

from dataclasses import dataclass, field
from typing import Callable, Iterator, Mapping

from pydantic import BaseModel, ConfigDict, Field

from ..execution.stage import ExecutionStage
from ..graph.schema import ElementSchema, PropertySpec
from .dijkstra import COST, DISTANCE, INFINITY, iter_dijkstra_stages

NO_ALGORITHM = "none"

StageDriver = Callable[..., Iterator[ExecutionStage]]


class AlgorithmDescriptor(BaseModel):
    """Name and property schema of an algorithm."""

    model_config = ConfigDict(frozen=True)

    name: str
    label: str = ""
    node_properties: tuple[PropertySpec, ...] = Field(default_factory=tuple)
    edge_properties: tuple[PropertySpec, ...] = Field(default_factory=tuple)

    @property
    def schema(self) -> ElementSchema:
        return ElementSchema(
            node_properties=self.node_properties,
            edge_properties=self.edge_properties,
        )


ALGORITHMS: dict[str, AlgorithmDescriptor] = {
    NO_ALGORITHM: AlgorithmDescriptor(name=NO_ALGORITHM, label="No algorithm"),
    "dijkstra": AlgorithmDescriptor(
        name="dijkstra",
        label="Dijkstra's shortest path",
        node_properties=(PropertySpec(name=DISTANCE, default=INFINITY),),
        edge_properties=(PropertySpec(name=COST, default=1),),
    ),
}

DRIVERS: dict[str, StageDriver] = {
    "dijkstra": iter_dijkstra_stages,
}


def get_descriptor(
    name: str, registry: Mapping[str, AlgorithmDescriptor] | None = None
) -> AlgorithmDescriptor | None:
    """Look up an algorithm descriptor by name."""
    registry = ALGORITHMS if registry is None else registry
    return registry.get(name)


def get_driver(name: str) -> StageDriver | None:
    """Look up the stage generator of a runnable algorithm."""
    return DRIVERS.get(name)


@dataclass
class PropertyDiff:
    """Property changes for one element kind."""

    add: list[PropertySpec] = field(default_factory=list)
    remove: list[PropertySpec] = field(default_factory=list)
    replace: list[PropertySpec] = field(default_factory=list)

    @property
    def to_set(self) -> list[PropertySpec]:
        """Properties that get (re)set to their defaults."""
        return self.add + self.replace


@dataclass
class AlgorithmChange:
    """Property changes needed to switch from one algorithm to another."""

    nodes: PropertyDiff
    edges: PropertyDiff


def _diff(
    old: tuple[PropertySpec, ...], new: tuple[PropertySpec, ...]
) -> PropertyDiff:
    old_names = {spec.name for spec in old}
    new_names = {spec.name for spec in new}
    return PropertyDiff(
        add=[spec for spec in new if spec.name not in old_names],
        remove=[spec for spec in old if spec.name not in new_names],
        replace=[spec for spec in new if spec.name in old_names],
    )


def analyze_algorithm_change(
    old_name: str,
    new_name: str,
    registry: Mapping[str, AlgorithmDescriptor] | None = None,
) -> AlgorithmChange:
    """Compute which properties to add, remove and reset when switching.

    Unregistered names count as algorithms without properties.

    Args:
        old_name: The algorithm being left.
        new_name: The algorithm being selected.
        registry: Descriptor lookup; defaults to ALGORITHMS.

    Returns:
        AlgorithmChange with per-kind property diffs.
    """
    old = get_descriptor(old_name, registry) or AlgorithmDescriptor(name=old_name)
    new = get_descriptor(new_name, registry) or AlgorithmDescriptor(name=new_name)
    return AlgorithmChange(
        nodes=_diff(old.node_properties, new.node_properties),
        edges=_diff(old.edge_properties, new.edge_properties),
    )
