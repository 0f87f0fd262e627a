"""Graph model: elements, the mutable model description and its runtime form."""

from modelwalk.model.elements import Action, Edge, Element, Guard, Vertex
from modelwalk.model.model import Model, ModelBuildError, RuntimeModel
from modelwalk.model.schema import EdgeDocument, ModelDocument, VertexDocument, load_model

__all__ = [
    "Action",
    "Edge",
    "Element",
    "Guard",
    "Vertex",
    "Model",
    "ModelBuildError",
    "RuntimeModel",
    "EdgeDocument",
    "ModelDocument",
    "VertexDocument",
    "load_model",
]
