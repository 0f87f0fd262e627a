"""Walk progress states."""

from enum import StrEnum


class ExecutionStatus(StrEnum):
    """Status of a walk. Transitions are decided by the driver."""

    NOT_EXECUTED = "not_executed"
    EXECUTING = "executing"
    COMPLETED = "completed"
    FAILED = "failed"
