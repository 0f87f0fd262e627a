"""
Shared fixtures for modelwalk tests.

This module provides small models and an execution context subclass with
script-callable counters, reused across test files.
"""

from typing import Callable

import pytest

from modelwalk.machine import ExecutionContext, capability
from modelwalk.model import Action, Edge, Guard, Model, Vertex


class CounterContext(ExecutionContext):
    """Context exposing a step counter to scripts."""

    def __init__(self, *args, **kwargs):
        self.steps = 0
        self.hook_calls: list[str] = []
        super().__init__(*args, **kwargs)

    @capability
    def step_count(self) -> int:
        return self.steps

    @capability
    def increment(self) -> None:
        self.steps += 1

    @capability
    def v_Home(self) -> None:
        self.hook_calls.append("v_Home")

    @capability
    def broken_hook(self) -> None:
        raise RuntimeError("hook exploded")


@pytest.fixture
def make_edge() -> Callable[..., Edge]:
    """
    Factory fixture creating an edge between two fresh vertices.

    Returns:
        A function taking an optional guard script and edge name.
    """

    def _make_edge(guard: str | None = None, name: str | None = None) -> Edge:
        return Edge(
            Vertex(name="v_A"),
            Vertex(name="v_B"),
            guard=Guard(guard) if guard is not None else None,
            name=name,
        )

    return _make_edge


@pytest.fixture
def login_model() -> Model:
    """Two-vertex model: v_Start -> v_Home guarded by a step counter, with a way back."""
    start = Vertex(name="v_Start", id="v0")
    home = Vertex(name="v_Home", id="v1")
    model = Model(name="login", start_element=start)
    model.add_vertex(start).add_vertex(home)
    model.add_edge(
        Edge(start, home, guard=Guard("step_count() < 3"), actions=[Action("increment()")], name="e_Login", id="e0")
    )
    model.add_edge(Edge(home, start, name="e_Logout", id="e1"))
    return model


@pytest.fixture
def context(login_model: Model) -> CounterContext:
    """CounterContext bound to the login model, without a path generator."""
    return CounterContext(login_model)
