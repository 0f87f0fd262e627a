"""Pluggable script evaluators for guards and actions.

Usage:
    from modelwalk.evaluator import create_evaluator

    evaluator = create_evaluator("python")
    evaluator.eval_boolean("visits() < 3", bindings, variables)
"""

from modelwalk.evaluator.base import (
    Evaluator,
    EvaluatorFactory,
    ScriptError,
    ScriptSyntaxError,
    ScriptTypeError,
    ScriptValidationError,
    available_languages,
    create_evaluator,
    register_evaluator,
)
from modelwalk.evaluator.python_evaluator import SAFE_BUILTINS, PythonEvaluator

register_evaluator(PythonEvaluator.language, PythonEvaluator)

__all__ = [
    "Evaluator",
    "EvaluatorFactory",
    "ScriptError",
    "ScriptSyntaxError",
    "ScriptTypeError",
    "ScriptValidationError",
    "available_languages",
    "create_evaluator",
    "register_evaluator",
    "PythonEvaluator",
    "SAFE_BUILTINS",
]
