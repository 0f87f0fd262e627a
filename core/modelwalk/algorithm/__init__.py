"""Graph algorithms cached per execution context."""

from modelwalk.algorithm.registry import (
    Algorithm,
    AlgorithmFactory,
    AlgorithmRegistry,
    default_registry,
    register_algorithm,
)
from modelwalk.algorithm.shortest_path import ShortestPath

__all__ = [
    "Algorithm",
    "AlgorithmFactory",
    "AlgorithmRegistry",
    "default_registry",
    "register_algorithm",
    "ShortestPath",
]
