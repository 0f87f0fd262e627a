"""ExecutionContext: traversal state for a single walk.

The context is the meeting point of the runtime model, the path generator
and the script evaluator. It tracks where the walker is, decides which edges
are currently available, runs actions and exposes its own ``@capability``
methods to guard and action scripts through the binding table.

Usage::

    context = ExecutionContext(model, RandomPath(max_steps=50))
    context.set_next_element(model.start_element)

    candidates = context.filter(context.get_model().get_out_edges(vertex))
    for action in edge.actions:
        context.execute(action)

One context drives one walk on one thread; it is not safe to share.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeVar

from modelwalk.algorithm import AlgorithmRegistry, default_registry
from modelwalk.evaluator import Evaluator, create_evaluator
from modelwalk.machine.bindings import BindingTable, capability
from modelwalk.machine.config import ContextConfig
from modelwalk.machine.exceptions import (
    ActionExecutionError,
    AlgorithmConstructionError,
    DynamicDispatchError,
    GuardEvaluationError,
)
from modelwalk.machine.requirements import Requirement, RequirementStatus
from modelwalk.machine.status import ExecutionStatus
from modelwalk.model import Action, Edge, Element, Model, RuntimeModel

if TYPE_CHECKING:
    from modelwalk.generator import PathGenerator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ExecutionContext:
    def __init__(
        self,
        model: Model | None = None,
        path_generator: PathGenerator | None = None,
        *,
        evaluator: Evaluator | None = None,
        algorithms: AlgorithmRegistry | None = None,
        config: ContextConfig | None = None,
    ) -> None:
        self._config = config or ContextConfig()
        self._evaluator = evaluator or create_evaluator(self._config.script_language)
        self._algorithm_registry = algorithms or default_registry
        self._algorithms: dict[type, Any] = {}
        self._variables: dict[str, Any] = {}

        self._model: RuntimeModel | None = None
        self._path_generator: PathGenerator | None = None
        self._execution_status = ExecutionStatus.NOT_EXECUTED
        self._current_element: Element | None = None
        self._next_element: Element | None = None

        self._bindings = BindingTable.from_owner(self)
        self._register_bindings(self._bindings)
        self._bindings.freeze()

        if model is not None:
            self.set_model(model)
        if path_generator is not None:
            self.set_path_generator(path_generator)

    def _register_bindings(self, table: BindingTable) -> None:
        """Hook for subclasses adding capabilities that are not methods."""

    # ------------------------------------------------------------------
    # Model and collaborators
    # ------------------------------------------------------------------

    def set_model(self, model: Model) -> ExecutionContext:
        """Build ``model`` into its runtime form and store it.

        Raises:
            ModelBuildError: If the model cannot be resolved.
        """
        self._model = model.build()
        if self._config.check_self_loops:
            for edge in self._model.edges:
                if edge.name is None and edge.is_self_loop:
                    logger.warning("Vertex %s has an unnamed loop edge", edge.source)
        return self

    @capability
    def get_model(self) -> RuntimeModel | None:
        return self._model

    def set_path_generator(self, path_generator: PathGenerator) -> ExecutionContext:
        self._path_generator = path_generator
        return self

    @capability
    def get_path_generator(self) -> PathGenerator | None:
        return self._path_generator

    def get_evaluator(self) -> Evaluator:
        return self._evaluator

    def get_config(self) -> ContextConfig:
        return self._config

    def get_bindings(self) -> BindingTable:
        return self._bindings

    def get_variables(self) -> MappingProxyType[str, Any]:
        """Read-only view of variables assigned by action scripts."""
        return MappingProxyType(self._variables)

    # ------------------------------------------------------------------
    # Position and status
    # ------------------------------------------------------------------

    @capability
    def get_execution_status(self) -> ExecutionStatus:
        return self._execution_status

    def set_execution_status(self, status: ExecutionStatus) -> ExecutionContext:
        self._execution_status = status
        return self

    @capability
    def get_current_element(self) -> Element | None:
        return self._current_element

    def set_current_element(self, element: Element | None) -> ExecutionContext:
        self._current_element = element
        return self

    @capability
    def get_next_element(self) -> Element | None:
        return self._next_element

    def set_next_element(self, element: Element | None) -> ExecutionContext:
        """Make ``element`` the pending next element and clear the current one."""
        self._next_element = element
        self._current_element = None
        return self

    @capability
    def get_requirements(self, status: RequirementStatus | None = None) -> list[Requirement]:
        raise NotImplementedError("Requirement tracking is not implemented")

    # ------------------------------------------------------------------
    # Algorithms
    # ------------------------------------------------------------------

    def get_algorithm(self, algorithm_type: type[T]) -> T:
        """Return the instance of ``algorithm_type`` owned by this context.

        The instance is built on first request and reused afterwards.

        Raises:
            AlgorithmConstructionError: If no factory is registered for the
                type or the factory fails.
        """
        if algorithm_type in self._algorithms:
            return self._algorithms[algorithm_type]

        factory = self._algorithm_registry.get_factory(algorithm_type)
        if factory is None:
            raise AlgorithmConstructionError(algorithm_type, "no factory registered", self)
        try:
            algorithm = factory(self)
        except Exception as e:
            raise AlgorithmConstructionError(algorithm_type, str(e) or type(e).__name__, self) from e

        logger.debug("Created algorithm %s", algorithm_type.__name__)
        self._algorithms[algorithm_type] = algorithm
        return algorithm

    # ------------------------------------------------------------------
    # Guards, actions and hooks
    # ------------------------------------------------------------------

    def filter(self, elements: Iterable[T] | None) -> list[T]:
        """Drop the edges that are not available, keeping order and vertices."""
        if elements is None:
            return []
        return [e for e in elements if not isinstance(e, Edge) or self.is_available(e)]

    def is_available(self, edge: Edge) -> bool:
        """Evaluate the edge guard; an edge without a guard is always available.

        Raises:
            GuardEvaluationError: If the guard fails or is not boolean.
        """
        if edge.guard is None:
            return True
        script = edge.guard.script
        logger.debug("Execute %s %s", edge.guard, script)
        try:
            result = self._evaluator.eval_boolean(script, self._bindings, self._variables)
        except Exception as e:
            raise GuardEvaluationError(script, e, self) from e
        if not isinstance(result, bool):
            raise GuardEvaluationError(
                script, TypeError(f"Guard evaluated to {type(result).__name__}, expected bool"), self
            )
        return result

    def execute(self, target: Action | str) -> None:
        """Run an action, or dispatch a named hook when given a string.

        A hook name with no matching capability is ignored.

        Raises:
            ActionExecutionError: If the action script fails.
            DynamicDispatchError: If the named hook fails.
        """
        if isinstance(target, str):
            self._dispatch(target)
            return

        logger.debug("Execute %s", target.script)
        try:
            self._evaluator.execute(target.script, self._bindings, self._variables)
        except Exception as e:
            raise ActionExecutionError(target.script, e, self) from e

    def _dispatch(self, name: str) -> None:
        logger.debug("Execute %s", name)
        if name not in self._bindings:
            return
        try:
            self._evaluator.execute(f"{name}()", self._bindings, self._variables)
        except Exception as e:
            raise DynamicDispatchError(name, e, self) from e

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(status={self._execution_status}, "
            f"current={self._current_element}, next={self._next_element})"
        )
