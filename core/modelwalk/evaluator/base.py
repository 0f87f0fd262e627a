"""Evaluator protocol, script errors and the language registry.

An evaluator runs guard and action scripts against a scope made of two parts:

- ``bindings``: read-only mapping of capability name to zero-argument callable
- ``variables``: mutable mapping holding script-level variables for one walk

The execution context owns both and passes them on every call, so an
evaluator itself keeps no walk state and one instance may serve one context.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, MutableMapping
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class ScriptError(Exception):
    """Base class for failures raised by an evaluator itself."""

    def __init__(self, message: str, script: str = "") -> None:
        super().__init__(message)
        self.script = script


class ScriptSyntaxError(ScriptError):
    """The script cannot be parsed."""


class ScriptValidationError(ScriptError):
    """The script uses a construct the evaluator does not allow."""


class ScriptTypeError(ScriptError):
    """A guard script produced something other than a boolean."""


class Evaluator(Protocol):
    """Pluggable script language used for guards and actions."""

    language: str

    def eval_boolean(
        self,
        script: str,
        bindings: Mapping[str, Callable[[], Any]],
        variables: MutableMapping[str, Any],
    ) -> bool:
        """Evaluate a boolean expression.

        Raises:
            ScriptTypeError: If the result is not a ``bool``.
        """
        ...

    def execute(
        self,
        script: str,
        bindings: Mapping[str, Callable[[], Any]],
        variables: MutableMapping[str, Any],
    ) -> None:
        """Run a statement script for its side effects."""
        ...


EvaluatorFactory = Callable[[], Evaluator]

_EVALUATORS: dict[str, EvaluatorFactory] = {}


def register_evaluator(language: str, factory: EvaluatorFactory) -> None:
    """Register a factory for a script language, replacing any previous one."""
    if language in _EVALUATORS:
        logger.info("Replacing evaluator for language '%s'", language)
    _EVALUATORS[language] = factory


def create_evaluator(language: str) -> Evaluator:
    """Create a new evaluator for ``language``.

    Raises:
        ValueError: If no evaluator is registered for the language.
    """
    factory = _EVALUATORS.get(language)
    if factory is None:
        known = ", ".join(sorted(_EVALUATORS)) or "none"
        raise ValueError(f"No evaluator registered for language '{language}' (available: {known})")
    return factory()


def available_languages() -> list[str]:
    return sorted(_EVALUATORS)
