"""
Unit tests for the console and plotly renderers.
"""

import io

import plotly.graph_objects as go

from pathviz.algorithms import Algorithm
from pathviz.animation import AnimationInterpreter, Highlight
from pathviz.config import OVERLAY_COLORS
from pathviz.engine import SearchEngine
from pathviz.render import ConsoleRenderer, FigureRenderer


def replay(renderer, result):
    AnimationInterpreter(renderer).reveal_instant(result)


class TestConsoleRenderer:
    """Test the text renderer."""

    def test_prints_result(self, scenario_graph):
        stream = io.StringIO()
        replay(ConsoleRenderer(stream), SearchEngine(scenario_graph).run(Algorithm.DIJKSTRA))

        output = stream.getvalue()
        assert "[+] terminated: S A F" in output
        assert "cost: 2" in output

    def test_prints_failure(self, cycle_graph):
        stream = io.StringIO()
        replay(ConsoleRenderer(stream), SearchEngine(cycle_graph).run(Algorithm.GREEDY))
        assert "[x] cycle: S A" in stream.getvalue()
        assert "cost" not in stream.getvalue()

    def test_prints_edges_while_drawing(self, scenario_graph):
        stream = io.StringIO()
        renderer = ConsoleRenderer(stream)
        edge = scenario_graph.edges[0]
        renderer.draw(edge)
        assert stream.getvalue().strip() == "S -(1)-> A"

    def test_abort(self):
        stream = io.StringIO()
        ConsoleRenderer(stream).on_abort()
        assert "aborted" in stream.getvalue()


class TestFigureRenderer:
    """Test the plotly renderer."""

    def test_plain_figure(self, scenario_graph):
        fig = FigureRenderer(scenario_graph).to_figure()
        assert isinstance(fig, go.Figure)
        # one trace per edge plus the node scatter
        assert len(fig.data) == len(scenario_graph.edges) + 1
        assert list(fig.data[-1].text) == ["S", "A", "F"]

    def test_overlay_after_success(self, scenario_graph):
        renderer = FigureRenderer(scenario_graph, title="dijkstra")
        replay(renderer, SearchEngine(scenario_graph).run(Algorithm.DIJKSTRA))

        fig = renderer.to_figure()
        assert len(fig.data) == len(scenario_graph.edges) + 2 + 1
        assert list(fig.data[-1].marker.color) == [OVERLAY_COLORS["success"]] * 3
        assert fig.layout.title.text == "dijkstra (terminated, cost 2)"

    def test_redraw_clears_overlay(self, scenario_graph):
        renderer = FigureRenderer(scenario_graph)
        renderer.highlight(scenario_graph.nodes[0], Highlight.FAILURE)
        renderer.redraw_all()
        assert renderer.overlay == []

    def test_write_html(self, scenario_graph, tmp_path):
        path = FigureRenderer(scenario_graph).write_html(tmp_path / "out" / "graph.html")
        assert path.exists()
        assert "plotly" in path.read_text(encoding="utf-8").lower()
