"""Random walk bounded by a step count."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from modelwalk.generator.base import NoPathFoundError
from modelwalk.model import Edge, Element

if TYPE_CHECKING:
    from modelwalk.machine.context import ExecutionContext

logger = logging.getLogger(__name__)


class RandomPath:
    """Pick uniformly among the available out-edges of the current vertex.

    From an edge the next step is always its target vertex. The walk stops
    once ``max_steps`` elements have been chosen.
    """

    def __init__(self, max_steps: int, seed: int | None = None) -> None:
        if max_steps < 0:
            raise ValueError("max_steps must be >= 0")
        self.max_steps = max_steps
        self.steps_taken = 0
        self._random = random.Random(seed)

    def has_next_step(self, context: ExecutionContext) -> bool:
        if self.steps_taken >= self.max_steps:
            return False
        current = context.get_current_element()
        if isinstance(current, Edge):
            return True
        return bool(context.filter(context.get_model().get_out_edges(current)))

    def get_next_step(self, context: ExecutionContext) -> Element:
        current = context.get_current_element()
        if isinstance(current, Edge):
            chosen: Element = current.target
        else:
            candidates = context.filter(context.get_model().get_out_edges(current))
            if not candidates:
                raise NoPathFoundError(current)
            chosen = self._random.choice(candidates)

        self.steps_taken += 1
        logger.debug("Step %d: %s -> %s", self.steps_taken, current, chosen)
        context.set_next_element(chosen)
        return chosen
