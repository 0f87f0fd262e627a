"""Errors raised by the execution context.

Every wrapping error is raised ``from`` the underlying failure, so
``error.__cause__`` always holds the original exception.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from modelwalk.machine.context import ExecutionContext


class MachineError(RuntimeError):
    """Fatal error for the current step of a walk."""

    def __init__(self, message: str, context: ExecutionContext | None = None) -> None:
        super().__init__(message)
        self.context = context


class GuardEvaluationError(MachineError):
    def __init__(self, script: str, cause: BaseException, context: ExecutionContext | None = None) -> None:
        super().__init__(f"Guard '{script}' failed: {cause}", context)
        self.script = script


class ActionExecutionError(MachineError):
    def __init__(self, script: str, cause: BaseException, context: ExecutionContext | None = None) -> None:
        super().__init__(f"Action '{script}' failed: {cause}", context)
        self.script = script


class DynamicDispatchError(MachineError):
    def __init__(self, name: str, cause: BaseException, context: ExecutionContext | None = None) -> None:
        super().__init__(f"Hook '{name}' failed: {cause}", context)
        self.name = name


class AlgorithmConstructionError(MachineError):
    def __init__(self, algorithm_type: type[Any], reason: str, context: ExecutionContext | None = None) -> None:
        super().__init__(f"Cannot construct algorithm {algorithm_type.__name__}: {reason}", context)
        self.algorithm_type = algorithm_type


class BindingConflictError(MachineError):
    """Two capabilities were registered under the same script name."""

    def __init__(self, name: str, existing: str, duplicate: str) -> None:
        super().__init__(f"Capability '{name}' is provided by both '{existing}' and '{duplicate}'")
        self.name = name
