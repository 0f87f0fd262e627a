"""modelwalk: execution engine for model-based path generation."""

from modelwalk.machine import ContextConfig, ExecutionContext, ExecutionStatus, Walker, capability
from modelwalk.model import Action, Edge, Guard, Model, Vertex, load_model

__version__ = "0.1.0"

__all__ = [
    "Action",
    "ContextConfig",
    "Edge",
    "ExecutionContext",
    "ExecutionStatus",
    "Guard",
    "Model",
    "Vertex",
    "Walker",
    "capability",
    "load_model",
]
