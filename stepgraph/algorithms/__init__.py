"""Algorithm drivers and the registry describing them."""

from .dijkstra import dijkstra_algorithm, iter_dijkstra_stages
from .errors import AlgorithmError, UnknownAlgorithmError, UnreachableDestinationError
from .registry import (
    ALGORITHMS,
    NO_ALGORITHM,
    AlgorithmChange,
    AlgorithmDescriptor,
    PropertyDiff,
    analyze_algorithm_change,
    get_descriptor,
    get_driver,
)

__all__ = [
    "dijkstra_algorithm",
    "iter_dijkstra_stages",
    "AlgorithmError",
    "UnknownAlgorithmError",
    "UnreachableDestinationError",
    "ALGORITHMS",
    "NO_ALGORITHM",
    "AlgorithmChange",
    "AlgorithmDescriptor",
    "PropertyDiff",
    "analyze_algorithm_change",
    "get_descriptor",
    "get_driver",
]
