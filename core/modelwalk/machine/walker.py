"""Walker: drives an execution context with its path generator.

Each step commits the pending next element as current, runs the edge
actions, dispatches the element name as a hook and asks the generator for
the next element::

    context = ExecutionContext(model, RandomPath(max_steps=100, seed=7))
    result = Walker(context).run()
    print(result.model_dump_json(indent=2))

The returned ``WalkResult`` lives in memory only.
"""

from __future__ import annotations

import logging
import time
from datetime import UTC, datetime

from pydantic import BaseModel, Field

from modelwalk.generator import NoPathFoundError
from modelwalk.machine.context import ExecutionContext
from modelwalk.machine.exceptions import MachineError
from modelwalk.machine.status import ExecutionStatus
from modelwalk.model import Edge, Element

logger = logging.getLogger(__name__)


class StepRecord(BaseModel):
    """One element visited during a walk."""

    order: int
    element_id: str
    element_name: str | None = None
    kind: str = ""  # "vertex" | "edge"


class WalkResult(BaseModel):
    model_name: str = ""
    status: ExecutionStatus = ExecutionStatus.NOT_EXECUTED
    steps: list[StepRecord] = Field(default_factory=list)
    started_at: str = ""
    completed_at: str = ""
    duration_ms: int = 0

    @property
    def path(self) -> list[str]:
        return [s.element_name or s.element_id for s in self.steps]


class Walker:
    def __init__(self, context: ExecutionContext) -> None:
        self.context = context
        self._steps: list[StepRecord] = []

    def step(self) -> StepRecord:
        """Visit the pending next element."""
        element = self.context.get_next_element()
        if element is None:
            raise ValueError("No next element to visit")
        self.context.set_current_element(element)

        if isinstance(element, Edge):
            for action in element.actions:
                self.context.execute(action)
        if element.name:
            self.context.execute(element.name)

        record = StepRecord(
            order=len(self._steps),
            element_id=element.id,
            element_name=element.name,
            kind="edge" if isinstance(element, Edge) else "vertex",
        )
        self._steps.append(record)
        return record

    def run(self, start: Element | None = None) -> WalkResult:
        """Walk from ``start`` (or the model start element) until the generator stops.

        Raises:
            ValueError: If the context has no model, generator or start element.
            MachineError: If a guard, action or hook fails.
            NoPathFoundError: If the generator runs out of available elements.
        """
        context = self.context
        model = context.get_model()
        generator = context.get_path_generator()
        if model is None or generator is None:
            raise ValueError("Context needs a model and a path generator before walking")
        start = start or model.start_element
        if start is None:
            raise ValueError(f"Model '{model.name}' has no start element")

        result = WalkResult(model_name=model.name, started_at=datetime.now(UTC).isoformat())
        started = time.monotonic()
        self._steps = []

        logger.info("Starting walk of model '%s' at %s", model.name, start)
        context.set_execution_status(ExecutionStatus.EXECUTING)
        context.set_next_element(start)
        try:
            while True:
                self.step()
                if not generator.has_next_step(context):
                    break
                generator.get_next_step(context)
        except (MachineError, NoPathFoundError) as e:
            context.set_execution_status(ExecutionStatus.FAILED)
            logger.error("Walk of model '%s' failed after %d steps: %s", model.name, len(self._steps), e)
            raise

        context.set_execution_status(ExecutionStatus.COMPLETED)
        result.status = ExecutionStatus.COMPLETED
        result.steps = list(self._steps)
        result.completed_at = datetime.now(UTC).isoformat()
        result.duration_ms = int((time.monotonic() - started) * 1000)
        logger.info("Completed walk of model '%s' in %d steps", model.name, len(result.steps))
        return result
