"""Tests for the ShortestPath algorithm."""

import pytest

from modelwalk.algorithm import ShortestPath
from modelwalk.machine import AlgorithmConstructionError, ExecutionContext
from modelwalk.model import Edge, Model, Vertex


@pytest.fixture
def chain():
    """a -> b -> c, plus an isolated vertex d."""
    a, b, c, d = (Vertex(name=n) for n in "abcd")
    ab, bc = Edge(a, b, name="ab"), Edge(b, c, name="bc")
    model = Model()
    for v in (a, b, c, d):
        model.add_vertex(v)
    model.add_edge(ab).add_edge(bc)
    context = ExecutionContext(model)
    return context, (a, b, c, d), (ab, bc)


class TestShortestPath:
    def test_path_alternates_vertices_and_edges(self, chain):
        context, (a, b, c, _), (ab, bc) = chain

        path = context.get_algorithm(ShortestPath).get_path(a, c)

        assert path == [a, ab, b, bc, c]

    def test_distance(self, chain):
        context, (a, _, c, d), _ = chain
        algorithm = context.get_algorithm(ShortestPath)

        assert algorithm.get_distance(a, c) == 4
        assert algorithm.get_distance(a, a) == 0
        assert algorithm.get_distance(a, d) is None
        assert algorithm.get_path(c, a) == []

    def test_path_from_edge(self, chain):
        context, (_, b, c, _), (ab, bc) = chain

        assert context.get_algorithm(ShortestPath).get_path(ab, c) == [ab, b, bc, c]

    def test_reachable_vertices(self, chain):
        context, (a, b, c, _), _ = chain

        assert context.get_algorithm(ShortestPath).get_reachable_vertices(b) == [b, c]
        assert context.get_algorithm(ShortestPath).get_reachable_vertices(a) == [a, b, c]

    def test_requires_model(self):
        with pytest.raises(AlgorithmConstructionError, match="needs a context with a model"):
            ExecutionContext().get_algorithm(ShortestPath)
