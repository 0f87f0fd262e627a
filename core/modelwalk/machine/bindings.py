"""Binding table: the names guard and action scripts can call.

Methods opt in with ``@capability``; the table is collected once per context
instance and frozen before the first script runs::

    class LoginContext(ExecutionContext):
        def __init__(self, *args, **kwargs):
            self.attempts = 0
            super().__init__(*args, **kwargs)

        @capability
        def attempt_count(self) -> int:
            return self.attempts

        @capability("fail")
        def register_failure(self) -> None:
            self.attempts += 1

A guard may then read ``attempt_count() < 3`` and an action may call
``fail()``.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterator, Mapping
from typing import Any, TypeVar, overload

from modelwalk.machine.exceptions import BindingConflictError

F = TypeVar("F", bound=Callable[..., Any])

_CAPABILITY_ATTR = "__modelwalk_capability__"


def _mark(fn: F, name: str) -> F:
    if not name.isidentifier():
        raise ValueError(f"Capability name '{name}' is not a valid identifier")
    params = list(inspect.signature(fn).parameters.values())[1:]
    required = [
        p.name
        for p in params
        if p.default is inspect.Parameter.empty
        and p.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
    ]
    if required:
        raise TypeError(f"Capability '{name}' must be callable without arguments (requires {', '.join(required)})")
    setattr(fn, _CAPABILITY_ATTR, name)
    return fn


@overload
def capability(arg: F) -> F: ...


@overload
def capability(arg: str | None = None) -> Callable[[F], F]: ...


def capability(arg: Any = None) -> Any:
    """Mark a zero-argument method as callable from scripts.

    Use bare (``@capability``) to expose the method under its own name, or
    with a name (``@capability("visits")``) to expose it under an alias.
    """
    if callable(arg):
        return _mark(arg, arg.__name__)

    def decorator(fn: F) -> F:
        return _mark(fn, arg or fn.__name__)

    return decorator


def capability_name(obj: Any) -> str | None:
    """Return the script name ``obj`` is marked with, if any."""
    return getattr(obj, _CAPABILITY_ATTR, None)


class BindingTable(Mapping[str, Callable[[], Any]]):
    """Read-only (once frozen) mapping of capability name to bound callable."""

    def __init__(self) -> None:
        self._bindings: dict[str, Callable[[], Any]] = {}
        self._sources: dict[str, str] = {}
        self._frozen = False

    @classmethod
    def from_owner(cls, owner: object) -> BindingTable:
        """Collect every ``@capability`` method of ``owner``'s class hierarchy.

        An override keeps the capability of the method it overrides, and the
        bound callable always resolves to the most-derived implementation.

        Raises:
            BindingConflictError: If two different methods claim one name.
        """
        names: dict[str, str] = {}
        for klass in type(owner).__mro__:
            for attr, value in vars(klass).items():
                name = capability_name(value)
                if name is not None:
                    names.setdefault(attr, name)

        table = cls()
        for attr, name in names.items():
            table.add(name, getattr(owner, attr), source=f"{type(owner).__name__}.{attr}")
        return table

    @property
    def frozen(self) -> bool:
        return self._frozen

    def add(self, name: str, fn: Callable[[], Any], source: str | None = None) -> None:
        """Register an extra capability while the table is still open.

        Raises:
            BindingConflictError: If ``name`` is already bound.
            RuntimeError: If the table has been frozen.
        """
        if self._frozen:
            raise RuntimeError(f"Cannot add capability '{name}': binding table is frozen")
        if not name.isidentifier():
            raise ValueError(f"Capability name '{name}' is not a valid identifier")
        label = source or getattr(fn, "__qualname__", repr(fn))
        if name in self._bindings:
            raise BindingConflictError(name, self._sources[name], label)
        self._bindings[name] = fn
        self._sources[name] = label

    def freeze(self) -> None:
        self._frozen = True

    def __getitem__(self, name: str) -> Callable[[], Any]:
        return self._bindings[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self) -> str:
        return f"BindingTable({sorted(self._bindings)}, frozen={self._frozen})"
