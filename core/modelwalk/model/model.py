"""Mutable model description and its resolved, immutable runtime form."""

from __future__ import annotations

import logging
from types import MappingProxyType

from modelwalk.model.elements import Edge, Element, Vertex

logger = logging.getLogger(__name__)


class ModelBuildError(Exception):
    """Raised when a model cannot be resolved into its runtime form."""


class Model:
    """Mutable graph description.

    Example::

        start = Vertex(name="v_Start")
        home = Vertex(name="v_Home")
        model = (
            Model(name="login")
            .add_vertex(start)
            .add_vertex(home)
            .add_edge(Edge(start, home, name="e_Open"))
        )
        model.start_element = start
        runtime = model.build()
    """

    def __init__(self, name: str = "", start_element: Element | None = None) -> None:
        self.name = name
        self.start_element = start_element
        self._vertices: list[Vertex] = []
        self._edges: list[Edge] = []

    @property
    def vertices(self) -> list[Vertex]:
        return list(self._vertices)

    @property
    def edges(self) -> list[Edge]:
        return list(self._edges)

    def add_vertex(self, vertex: Vertex) -> Model:
        self._vertices.append(vertex)
        return self

    def add_edge(self, edge: Edge) -> Model:
        self._edges.append(edge)
        return self

    def build(self) -> RuntimeModel:
        """Resolve this description into an immutable ``RuntimeModel``.

        Raises:
            ModelBuildError: If an edge lacks an endpoint, references a vertex
                that is not part of the model, an element id is used twice,
                or the start element is not part of the model.
        """
        seen_ids: set[str] = set()
        for element in [*self._vertices, *self._edges]:
            if element.id in seen_ids:
                raise ModelBuildError(f"Duplicate element id '{element.id}' in model '{self.name}'")
            seen_ids.add(element.id)

        known = {id(v) for v in self._vertices}
        for edge in self._edges:
            if edge.source is None or edge.target is None:
                raise ModelBuildError(f"Edge '{edge.name or edge.id}' is missing a source or target vertex")
            if id(edge.source) not in known or id(edge.target) not in known:
                raise ModelBuildError(
                    f"Edge '{edge.name or edge.id}' references a vertex outside model '{self.name}'"
                )

        members = known | {id(e) for e in self._edges}
        if self.start_element is not None and id(self.start_element) not in members:
            raise ModelBuildError(f"Start element '{self.start_element}' is not part of model '{self.name}'")

        runtime = RuntimeModel(
            name=self.name,
            vertices=tuple(self._vertices),
            edges=tuple(self._edges),
            start_element=self.start_element,
        )
        logger.debug(
            "Built model '%s' with %d vertices and %d edges",
            self.name,
            len(runtime.vertices),
            len(runtime.edges),
        )
        return runtime


class RuntimeModel:
    """Resolved, read-only graph used during a walk."""

    def __init__(
        self,
        name: str,
        vertices: tuple[Vertex, ...],
        edges: tuple[Edge, ...],
        start_element: Element | None = None,
    ) -> None:
        self._name = name
        self._vertices = vertices
        self._edges = edges
        self._start_element = start_element

        out_edges: dict[int, list[Edge]] = {id(v): [] for v in vertices}
        for edge in edges:
            out_edges[id(edge.source)].append(edge)
        self._out_edges = MappingProxyType({k: tuple(v) for k, v in out_edges.items()})
        self._by_id = MappingProxyType({e.id: e for e in (*vertices, *edges)})

    @property
    def name(self) -> str:
        return self._name

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        return self._vertices

    @property
    def edges(self) -> tuple[Edge, ...]:
        return self._edges

    @property
    def start_element(self) -> Element | None:
        return self._start_element

    def get_elements(self) -> list[Element]:
        return [*self._vertices, *self._edges]

    def get_element(self, element_id: str) -> Element | None:
        return self._by_id.get(element_id)

    def get_out_edges(self, vertex: Vertex) -> tuple[Edge, ...]:
        """Outgoing edges of ``vertex`` in declaration order."""
        return self._out_edges.get(id(vertex), ())

    def __repr__(self) -> str:
        return f"RuntimeModel(name={self._name!r}, vertices={len(self._vertices)}, edges={len(self._edges)})"
