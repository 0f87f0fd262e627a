"""Pydantic schemas for JSON model documents.

Document format::

    {
        "name": "login",
        "startElementId": "v0",
        "vertices": [{"id": "v0", "name": "v_Start"}, {"id": "v1", "name": "v_Home"}],
        "edges": [
            {
                "id": "e0",
                "name": "e_Open",
                "sourceVertexId": "v0",
                "targetVertexId": "v1",
                "guard": "attempts() < 3",
                "actions": ["opened = True"]
            }
        ]
    }
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from modelwalk.model.elements import Action, Edge, Guard, Vertex
from modelwalk.model.model import Model, ModelBuildError


class VertexDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str | None = None


class EdgeDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str | None = None
    source_vertex_id: str = Field(alias="sourceVertexId")
    target_vertex_id: str = Field(alias="targetVertexId")
    guard: str | None = None
    actions: list[str] = Field(default_factory=list)


class ModelDocument(BaseModel):
    """A whole model as stored on disk."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    start_element_id: str | None = Field(default=None, alias="startElementId")
    vertices: list[VertexDocument] = Field(default_factory=list)
    edges: list[EdgeDocument] = Field(default_factory=list)

    def to_model(self) -> Model:
        """Convert the document into a mutable ``Model``.

        Raises:
            ModelBuildError: If an edge or the start element references an
                unknown id.
        """
        model = Model(name=self.name)
        vertices: dict[str, Vertex] = {}
        for doc in self.vertices:
            vertex = Vertex(name=doc.name, id=doc.id)
            vertices[doc.id] = vertex
            model.add_vertex(vertex)

        edges: dict[str, Edge] = {}
        for doc in self.edges:
            try:
                source = vertices[doc.source_vertex_id]
                target = vertices[doc.target_vertex_id]
            except KeyError as e:
                raise ModelBuildError(f"Edge '{doc.id}' references unknown vertex {e.args[0]!r}") from e
            edge = Edge(
                source=source,
                target=target,
                guard=Guard(doc.guard) if doc.guard else None,
                actions=tuple(Action(script) for script in doc.actions),
                name=doc.name,
                id=doc.id,
            )
            edges[doc.id] = edge
            model.add_edge(edge)

        if self.start_element_id is not None:
            start = vertices.get(self.start_element_id) or edges.get(self.start_element_id)
            if start is None:
                raise ModelBuildError(f"Unknown start element '{self.start_element_id}'")
            model.start_element = start

        return model


def load_model(path: Path | str) -> Model:
    """Read a JSON model document from ``path``."""
    text = Path(path).read_text(encoding="utf-8")
    try:
        document = ModelDocument.model_validate_json(text)
    except ValidationError as e:
        raise ModelBuildError(f"Invalid model document {path}: {e}") from e
    return document.to_model()
