"""Path generator protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from modelwalk.model import Element

if TYPE_CHECKING:
    from modelwalk.machine.context import ExecutionContext


class NoPathFoundError(Exception):
    """The generator has no available element to move to."""

    def __init__(self, element: Element | None) -> None:
        super().__init__(f"No available path from {element}")
        self.element = element


class PathGenerator(Protocol):
    """Strategy choosing the next element of a walk.

    ``get_next_step`` commits its choice through
    ``context.set_next_element`` and returns it.
    """

    def has_next_step(self, context: ExecutionContext) -> bool:
        ...

    def get_next_step(self, context: ExecutionContext) -> Element:
        ...
