"""Breadth-first shortest paths over the runtime model.

Distances count elements, so the path ``v0 -> e0 -> v1`` has length 2.
Results are memoized per source element for the lifetime of the owning
context; the runtime model never changes during a walk.
"""

from __future__ import annotations

from collections import deque

from modelwalk.algorithm.registry import Algorithm, register_algorithm
from modelwalk.model.elements import Edge, Element, Vertex


@register_algorithm
class ShortestPath(Algorithm):
    def __init__(self, context) -> None:
        super().__init__(context)
        if context.get_model() is None:
            raise ValueError("ShortestPath needs a context with a model")
        self._predecessors: dict[str, dict[str, Element | None]] = {}

    def _successors(self, element: Element) -> tuple[Element, ...]:
        if isinstance(element, Edge):
            return (element.target,)
        return self.context.get_model().get_out_edges(element)

    def _search(self, source: Element) -> dict[str, Element | None]:
        cached = self._predecessors.get(source.id)
        if cached is not None:
            return cached

        predecessors: dict[str, Element | None] = {source.id: None}
        queue = deque([source])
        while queue:
            element = queue.popleft()
            for successor in self._successors(element):
                if successor.id not in predecessors:
                    predecessors[successor.id] = element
                    queue.append(successor)

        self._predecessors[source.id] = predecessors
        return predecessors

    def get_path(self, source: Element, target: Element) -> list[Element]:
        """Elements from ``source`` to ``target`` inclusive, or ``[]`` if unreachable."""
        predecessors = self._search(source)
        if target.id not in predecessors:
            return []
        path: list[Element] = []
        element: Element | None = target
        while element is not None:
            path.append(element)
            element = predecessors[element.id]
        path.reverse()
        return path

    def get_distance(self, source: Element, target: Element) -> int | None:
        """Number of steps from ``source`` to ``target``, or ``None`` if unreachable."""
        path = self.get_path(source, target)
        return len(path) - 1 if path else None

    def get_reachable_vertices(self, source: Element) -> list[Vertex]:
        model = self.context.get_model()
        predecessors = self._search(source)
        return [v for v in model.vertices if v.id in predecessors]
