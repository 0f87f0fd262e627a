"""
Execution machinery for model walks.

Components:
- ExecutionContext: traversal position, guard filtering, action execution
- BindingTable / capability: names exposed to guard and action scripts
- ContextConfig: evaluator language and model checks
- Walker: step loop driving a context with its path generator
"""

from modelwalk.machine.bindings import BindingTable, capability
from modelwalk.machine.config import ContextConfig
from modelwalk.machine.context import ExecutionContext
from modelwalk.machine.exceptions import (
    ActionExecutionError,
    AlgorithmConstructionError,
    BindingConflictError,
    DynamicDispatchError,
    GuardEvaluationError,
    MachineError,
)
from modelwalk.machine.requirements import Requirement, RequirementStatus
from modelwalk.machine.status import ExecutionStatus
from modelwalk.machine.walker import StepRecord, WalkResult, Walker

__all__ = [
    "BindingTable",
    "capability",
    "ContextConfig",
    "ExecutionContext",
    "ActionExecutionError",
    "AlgorithmConstructionError",
    "BindingConflictError",
    "DynamicDispatchError",
    "GuardEvaluationError",
    "MachineError",
    "Requirement",
    "RequirementStatus",
    "ExecutionStatus",
    "StepRecord",
    "WalkResult",
    "Walker",
]
