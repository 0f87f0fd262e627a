"""Algorithm base class and factory registry.

Each algorithm type is registered with a factory taking the owning
execution context. The context builds at most one instance per type, on
first request, and keeps it for the rest of the walk.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from modelwalk.machine.context import ExecutionContext

logger = logging.getLogger(__name__)

A = TypeVar("A", bound="Algorithm")

AlgorithmFactory = Callable[["ExecutionContext"], Any]


class Algorithm:
    """A unit of graph computation bound to one execution context."""

    def __init__(self, context: ExecutionContext) -> None:
        self.context = context


class AlgorithmRegistry:
    """Mapping of algorithm type to the factory that builds it."""

    def __init__(self) -> None:
        self._factories: dict[type, AlgorithmFactory] = {}

    def register(self, algorithm_type: type[A], factory: AlgorithmFactory | None = None) -> type[A]:
        """Register ``factory`` for ``algorithm_type``.

        Without a factory the type's own constructor is used. Returns the
        type so the method also works as a class decorator.
        """
        self._factories[algorithm_type] = factory if factory is not None else algorithm_type
        logger.debug("Registered algorithm %s", algorithm_type.__name__)
        return algorithm_type

    def get_factory(self, algorithm_type: type) -> AlgorithmFactory | None:
        return self._factories.get(algorithm_type)

    def __contains__(self, algorithm_type: object) -> bool:
        return algorithm_type in self._factories

    def __len__(self) -> int:
        return len(self._factories)


default_registry = AlgorithmRegistry()


def register_algorithm(algorithm_type: type[A]) -> type[A]:
    """Class decorator registering an algorithm in the default registry."""
    return default_registry.register(algorithm_type)
