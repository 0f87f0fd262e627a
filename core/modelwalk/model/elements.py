"""Graph elements: vertices, edges, guards and actions.

Elements are frozen and compared by identity, so two vertices with the same
name are still two distinct vertices.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import uuid4


def _new_id() -> str:
    return uuid4().hex[:12]


@dataclass(frozen=True)
class Guard:
    """Boolean script gating the availability of an edge."""

    script: str

    def __str__(self) -> str:
        return f"Guard({self.script!r})"


@dataclass(frozen=True)
class Action:
    """Statement script run for its side effects when an edge is traversed."""

    script: str

    def __str__(self) -> str:
        return f"Action({self.script!r})"


@dataclass(frozen=True, eq=False)
class Vertex:
    name: str | None = None
    id: str = field(default_factory=_new_id)

    def __str__(self) -> str:
        return self.name or self.id


@dataclass(frozen=True, eq=False)
class Edge:
    """Directed connection between two vertices.

    ``source`` and ``target`` may be left empty while a model is being
    described; ``Model.build()`` rejects such edges.
    """

    source: Vertex | None = None
    target: Vertex | None = None
    guard: Guard | None = None
    actions: tuple[Action, ...] = ()
    name: str | None = None
    id: str = field(default_factory=_new_id)

    def __post_init__(self) -> None:
        # Accept any iterable of actions but store an immutable tuple
        if not isinstance(self.actions, tuple):
            object.__setattr__(self, "actions", tuple(self.actions))

    @property
    def is_self_loop(self) -> bool:
        return self.source is not None and self.source is self.target

    def __str__(self) -> str:
        return self.name or f"{self.source} -> {self.target}"


Element = Vertex | Edge
