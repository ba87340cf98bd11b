"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from pathviz.animation import Renderer
from pathviz.graph import Graph, Node


def make_graph(
    nodes: dict[str, tuple[int, int]],
    edges: list[tuple[str, str, int]],
    start: str | None = "S",
    finish: str | None = "F",
) -> Graph:
    """Build a graph from label -> (x, y) and (source, target, cost) triples."""
    graph = Graph()
    by_label = {}
    for label, (x, y) in nodes.items():
        by_label[label] = Node(label, x, y)
        graph.add_node(by_label[label])

    for source, target, cost in edges:
        edge = graph.connect(by_label[source], by_label[target], cost)
        assert edge is not None, f"duplicate edge {source}->{target}"

    if start is not None:
        graph.set_start(by_label[start])
    if finish is not None:
        graph.set_finish(by_label[finish])
    return graph


class FakeHandle:
    """Timer handle returned by FakeLoop.call_later."""

    def __init__(self, loop: "FakeLoop", delay: float, callback):
        self.loop = loop
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeLoop:
    """Event loop stand-in that runs scheduled callbacks only when told to."""

    def __init__(self):
        self.scheduled: list[FakeHandle] = []
        self.delays: list[float] = []

    def call_later(self, delay: float, callback) -> FakeHandle:
        handle = FakeHandle(self, delay, callback)
        self.scheduled.append(handle)
        self.delays.append(delay)
        return handle

    @property
    def pending(self) -> list[FakeHandle]:
        return [h for h in self.scheduled if not h.cancelled]

    def advance(self) -> bool:
        """Run the oldest pending callback. Returns False if nothing was pending."""
        for handle in self.scheduled:
            if not handle.cancelled:
                self.scheduled.remove(handle)
                handle.callback()
                return True
        return False

    def run_all(self, limit: int = 10_000) -> int:
        """Run callbacks until none are pending; returns how many ran."""
        count = 0
        while count < limit and self.advance():
            count += 1
        return count


class RecordingRenderer(Renderer):
    """Renderer that records every call as a (name, argument) tuple."""

    def __init__(self):
        self.calls: list[tuple] = []
        self.states = []
        self.steps: list[int] = []
        self.finished = None
        self.aborted = False

    def draw(self, element):
        self.calls.append(("draw", element))

    def highlight(self, element, color):
        self.calls.append(("highlight", element, color))

    def redraw_all(self):
        self.calls.append(("redraw",))

    def on_state(self, state):
        self.states.append(state)

    def on_step(self, count):
        self.steps.append(count)

    def on_finish(self, termination, cost):
        self.finished = (termination, cost)

    def on_abort(self):
        self.aborted = True

    @property
    def drawn(self) -> list:
        return [call[1] for call in self.calls if call[0] == "draw"]

    @property
    def highlighted(self) -> list:
        return [call[1:] for call in self.calls if call[0] == "highlight"]


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def graph_factory():
    """Return the graph builder for ad hoc graphs."""
    return make_graph


@pytest.fixture
def scenario_graph() -> Graph:
    """S->A (1), A->F (1), S->F (5), laid out close enough for A* to stay optimal."""
    return make_graph(
        {"S": (0, 0), "A": (1, 1), "F": (2, 0)},
        [("S", "A", 1), ("A", "F", 1), ("S", "F", 5)],
    )


@pytest.fixture
def cycle_graph() -> Graph:
    """S->A and A->S; the finish is unreachable."""
    return make_graph(
        {"S": (0, 0), "A": (10, 0), "F": (20, 0)},
        [("S", "A", 1), ("A", "S", 1)],
    )


@pytest.fixture
def trivial_graph() -> Graph:
    """The start has no outgoing edges."""
    return make_graph(
        {"S": (0, 0), "A": (10, 0), "F": (20, 0)},
        [("A", "F", 1), ("F", "S", 1)],
    )


@pytest.fixture
def diamond_graph() -> Graph:
    """Two equally cheap routes S-A-F and S-B-F plus a dearer S-C-F."""
    return make_graph(
        {"S": (0, 10), "A": (10, 0), "B": (10, 20), "C": (10, 30), "F": (20, 10)},
        [
            ("S", "A", 2),
            ("S", "B", 2),
            ("S", "C", 1),
            ("A", "F", 3),
            ("B", "F", 3),
            ("C", "F", 7),
        ],
    )


@pytest.fixture
def fake_loop() -> FakeLoop:
    return FakeLoop()


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()
