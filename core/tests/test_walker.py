"""Tests for RandomPath and the Walker driver."""

import pytest

from modelwalk.generator import NoPathFoundError, RandomPath
from modelwalk.machine import (
    ActionExecutionError,
    ExecutionContext,
    ExecutionStatus,
    Walker,
)
from modelwalk.model import Action, Edge, Guard, Model, Vertex

from conftest import CounterContext


@pytest.fixture
def fork_model() -> Model:
    """hub with three outgoing edges back to itself through spokes."""
    hub = Vertex(name="hub")
    model = Model(name="fork", start_element=hub).add_vertex(hub)
    for name in ("x", "y", "z"):
        spoke = Vertex(name=f"v_{name}")
        model.add_vertex(spoke)
        model.add_edge(Edge(hub, spoke, name=f"e_to_{name}"))
        model.add_edge(Edge(spoke, hub))
    return model


class TestRandomPath:
    def test_negative_max_steps(self):
        with pytest.raises(ValueError):
            RandomPath(max_steps=-1)

    def test_stops_after_max_steps(self, fork_model):
        context = ExecutionContext(fork_model)
        generator = RandomPath(max_steps=0)
        context.set_current_element(context.get_model().start_element)

        assert generator.has_next_step(context) is False

    def test_edge_leads_to_target(self, login_model):
        context = ExecutionContext(login_model)
        login = context.get_model().get_element("e0")
        context.set_current_element(login)

        chosen = RandomPath(max_steps=5).get_next_step(context)

        assert chosen is login.target
        assert context.get_next_element() is login.target
        assert context.get_current_element() is None

    def test_same_seed_same_walk(self, fork_model):
        def walk(seed):
            context = ExecutionContext(fork_model, RandomPath(max_steps=20, seed=seed))
            return Walker(context).run().path

        assert walk(7) == walk(7)

    def test_respects_guards(self, fork_model):
        hub = fork_model.start_element
        blocked = Edge(hub, hub, guard=Guard("False"), name="e_blocked")
        fork_model.add_edge(blocked)
        context = ExecutionContext(fork_model, RandomPath(max_steps=200, seed=1))

        result = Walker(context).run()

        assert "e_blocked" not in result.path
        assert len(result.steps) == 201

    def test_no_available_edge(self):
        lonely = Vertex(name="lonely")
        context = ExecutionContext(Model().add_vertex(lonely))
        context.set_current_element(lonely)
        generator = RandomPath(max_steps=5)

        assert generator.has_next_step(context) is False
        with pytest.raises(NoPathFoundError):
            generator.get_next_step(context)


class TestWalker:
    def test_walk_until_guard_closes(self, login_model):
        context = CounterContext(login_model, RandomPath(max_steps=100))

        result = Walker(context).run()

        assert result.status == ExecutionStatus.COMPLETED
        assert context.get_execution_status() == ExecutionStatus.COMPLETED
        assert result.path == ["v_Start"] + ["e_Login", "v_Home", "e_Logout", "v_Start"] * 3
        assert context.steps == 3
        assert context.hook_calls == ["v_Home"] * 3
        assert [s.order for s in result.steps] == list(range(13))
        assert result.model_name == "login"
        assert result.completed_at != ""

    def test_walk_stops_at_step_limit(self, login_model):
        context = CounterContext(login_model, RandomPath(max_steps=2))

        result = Walker(context).run()

        assert result.path == ["v_Start", "e_Login", "v_Home"]
        assert [s.kind for s in result.steps] == ["vertex", "edge", "vertex"]
        assert context.get_current_element() is context.get_model().get_element("v1")

    def test_explicit_start(self, login_model):
        context = CounterContext(login_model, RandomPath(max_steps=1))
        home = context.get_model().get_element("v1")

        result = Walker(context).run(start=home)

        assert result.path == ["v_Home", "e_Logout"]

    def test_failing_action_marks_walk_failed(self):
        a, b = Vertex(name="a"), Vertex(name="b")
        model = Model(start_element=a).add_vertex(a).add_vertex(b)
        model.add_edge(Edge(a, b, actions=[Action("undefined += 1")]))
        context = ExecutionContext(model, RandomPath(max_steps=10))

        with pytest.raises(ActionExecutionError):
            Walker(context).run()

        assert context.get_execution_status() == ExecutionStatus.FAILED

    def test_actions_share_variables(self):
        a = Vertex(name="a")
        loop = Edge(a, a, guard=Guard("visits < 2"), actions=[Action("visits += 1")], name="e_loop")
        model = Model(start_element=a).add_vertex(a).add_edge(loop)
        context = ExecutionContext(model, RandomPath(max_steps=50))
        context.execute(Action("visits = 0"))

        result = Walker(context).run()

        assert result.path == ["a", "e_loop", "a", "e_loop", "a"]
        assert context.get_variables()["visits"] == 2

    def test_requires_generator(self, login_model):
        with pytest.raises(ValueError, match="path generator"):
            Walker(ExecutionContext(login_model)).run()

    def test_requires_start_element(self):
        model = Model(name="nostart").add_vertex(Vertex())

        with pytest.raises(ValueError, match="no start element"):
            Walker(ExecutionContext(model, RandomPath(max_steps=1))).run()

    def test_step_without_next_element(self, login_model):
        with pytest.raises(ValueError):
            Walker(ExecutionContext(login_model)).step()

    def test_result_serializes(self, login_model):
        context = CounterContext(login_model, RandomPath(max_steps=1))

        data = Walker(context).run().model_dump()

        assert data["status"] == "completed"
        assert data["steps"][0]["element_id"] == "v0"
