"""Restricted Python evaluator.

Scripts are parsed with ``ast`` and checked against an allow-list before being
compiled. Guards are single expressions::

    visits() < 3 and not logged_in

Actions are small statement blocks::

    attempts += 1
    if attempts > 2:
        locked = True
    reset()

Names resolve first to script variables, then to bound capabilities, then to
a handful of safe builtins. Attribute access, imports, function definitions,
lambdas and comprehensions are rejected.
"""

from __future__ import annotations

import ast
import builtins
import textwrap
from collections.abc import Callable, Mapping, MutableMapping
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from modelwalk.evaluator.base import (
    ScriptSyntaxError,
    ScriptTypeError,
    ScriptValidationError,
)

SAFE_BUILTINS: dict[str, Any] = {
    name: getattr(builtins, name)
    for name in ("abs", "bool", "float", "int", "len", "max", "min", "round", "str")
}

_EXPRESSION_NODES: tuple[type[ast.AST], ...] = (
    ast.Expression,
    ast.BoolOp,
    ast.And,
    ast.Or,
    ast.BinOp,
    ast.Add,
    ast.Sub,
    ast.Mult,
    ast.Div,
    ast.FloorDiv,
    ast.Mod,
    ast.Pow,
    ast.UnaryOp,
    ast.Not,
    ast.USub,
    ast.UAdd,
    ast.Compare,
    ast.Eq,
    ast.NotEq,
    ast.Lt,
    ast.LtE,
    ast.Gt,
    ast.GtE,
    ast.In,
    ast.NotIn,
    ast.Is,
    ast.IsNot,
    ast.IfExp,
    ast.Call,
    ast.Name,
    ast.Load,
    ast.Constant,
    ast.Tuple,
    ast.List,
    ast.Subscript,
    ast.Slice,
)

_STATEMENT_NODES: tuple[type[ast.AST], ...] = (
    ast.Module,
    ast.Expr,
    ast.Assign,
    ast.AugAssign,
    ast.If,
    ast.Pass,
    ast.Store,
)


@dataclass(frozen=True)
class _CompiledScript:
    code: Any
    assigned_names: frozenset[str]


def _validate(tree: ast.AST, script: str, allowed: tuple[type[ast.AST], ...]) -> frozenset[str]:
    """Check every node against ``allowed`` and collect assigned names."""
    assigned: set[str] = set()
    for node in ast.walk(tree):
        if not isinstance(node, allowed):
            raise ScriptValidationError(f"'{type(node).__name__}' is not allowed in scripts", script)
        if isinstance(node, ast.Name) and node.id.startswith("__"):
            raise ScriptValidationError(f"Name '{node.id}' is not allowed in scripts", script)
        if isinstance(node, ast.Call):
            if not isinstance(node.func, ast.Name):
                raise ScriptValidationError("Only named functions may be called", script)
            if node.keywords:
                raise ScriptValidationError("Keyword arguments are not allowed in scripts", script)
        if isinstance(node, ast.Assign):
            for target in node.targets:
                if not isinstance(target, ast.Name):
                    raise ScriptValidationError("Only plain names may be assigned", script)
                assigned.add(target.id)
        if isinstance(node, ast.AugAssign):
            if not isinstance(node.target, ast.Name):
                raise ScriptValidationError("Only plain names may be assigned", script)
            assigned.add(node.target.id)
    return frozenset(assigned)


@lru_cache(maxsize=1024)
def _compile(script: str, mode: str) -> _CompiledScript:
    try:
        tree = ast.parse(script, mode=mode)
    except SyntaxError as e:
        raise ScriptSyntaxError(f"Invalid script syntax: {e.msg}", script) from e

    allowed = _EXPRESSION_NODES if mode == "eval" else _EXPRESSION_NODES + _STATEMENT_NODES
    assigned = _validate(tree, script, allowed)
    return _CompiledScript(code=compile(tree, "<script>", mode), assigned_names=assigned)


class PythonEvaluator:
    """Evaluator for the ``python`` script language."""

    language = "python"

    def eval_boolean(
        self,
        script: str,
        bindings: Mapping[str, Callable[[], Any]],
        variables: MutableMapping[str, Any],
    ) -> bool:
        compiled = _compile(textwrap.dedent(script).strip(), "eval")
        result = eval(compiled.code, self._globals(bindings, script), variables)
        if not isinstance(result, bool):
            raise ScriptTypeError(
                f"Guard evaluated to {type(result).__name__}, expected bool",
                script,
            )
        return result

    def execute(
        self,
        script: str,
        bindings: Mapping[str, Callable[[], Any]],
        variables: MutableMapping[str, Any],
    ) -> None:
        compiled = _compile(textwrap.dedent(script).strip(), "exec")
        shadowed = sorted(n for n in compiled.assigned_names if n in bindings or n in SAFE_BUILTINS)
        if shadowed:
            raise ScriptValidationError(f"Cannot assign to reserved name(s): {', '.join(shadowed)}", script)
        exec(compiled.code, self._globals(bindings, script), variables)

    @staticmethod
    def _globals(bindings: Mapping[str, Callable[[], Any]], script: str) -> dict[str, Any]:
        clashes = sorted(n for n in bindings if n in SAFE_BUILTINS)
        if clashes:
            raise ScriptValidationError(f"Capability name(s) shadow builtins: {', '.join(clashes)}", script)
        namespace: dict[str, Any] = {"__builtins__": SAFE_BUILTINS}
        namespace.update(bindings)
        return namespace
