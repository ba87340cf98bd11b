"""
Unit tests for the animation interpreter.

The interpreter is driven through a fake event loop so every scheduled step
can be run (or not) explicitly.
"""

import asyncio

import pytest

from pathviz.algorithms import Algorithm
from pathviz.animation import (
    AnimationInterpreter,
    AnimationState,
    Highlight,
    Termination,
    count_result_steps,
)
from pathviz.engine import SearchEngine
from pathviz.graph import Edge
from pathviz.trace import FULL, SINGLE, Outcome


def names(elements):
    out = []
    for element in elements:
        if isinstance(element, Edge):
            out.append(element.source.label + element.target.label)
        else:
            out.append(element.label)
    return out


@pytest.fixture
def interpreter(renderer, fake_loop):
    return AnimationInterpreter(renderer, loop=fake_loop, base_delay=1.0)


@pytest.fixture
def dijkstra_result(scenario_graph):
    return SearchEngine(scenario_graph).run(Algorithm.DIJKSTRA)


class TestReplay:
    """Test stepping through a trace."""

    def test_start_schedules_first_step(self, interpreter, fake_loop, dijkstra_result):
        interpreter.start(dijkstra_result)
        assert interpreter.state is AnimationState.RUNNING
        assert len(fake_loop.pending) == 1
        assert fake_loop.delays == [1.0]

    def test_full_replay(self, interpreter, renderer, fake_loop, dijkstra_result):
        """Single-draw items are drawn one per step, full-draw items are buffered and flushed."""
        interpreter.start(dijkstra_result)
        steps = fake_loop.run_all()

        assert steps == 9
        assert names(renderer.drawn) == ["S", "SA", "A", "S", "SA", "A", "AF", "F"]
        assert interpreter.state is AnimationState.TERMINATED
        assert interpreter.step_count == 2

    def test_only_one_timer_pending(self, interpreter, fake_loop, dijkstra_result):
        interpreter.start(dijkstra_result)
        while fake_loop.advance():
            assert len(fake_loop.pending) <= 1

    def test_full_mode_buffers(self, interpreter, renderer, fake_loop, dijkstra_result):
        """Entering full-draw mode clears the overlays and draws nothing until the next switch."""
        interpreter.start(dijkstra_result)
        for _ in range(5):
            fake_loop.advance()
        drawn_before = len(renderer.drawn)

        fake_loop.advance()

        assert ("redraw",) in renderer.calls
        assert names(renderer.drawn[drawn_before:]) == ["S", "SA", "A"]
        assert interpreter.mode.name == "SINGLE"

    def test_step_counter_reported(self, interpreter, renderer, fake_loop, dijkstra_result):
        interpreter.start(dijkstra_result)
        fake_loop.run_all()
        assert renderer.steps == [0, 1, 2]

    def test_count_result_steps_matches_replay(self, dijkstra_result):
        assert count_result_steps(dijkstra_result.trace) == 2

    def test_count_skips_buffered_edges(self, scenario_graph):
        edge = scenario_graph.edges[0]
        assert count_result_steps([SINGLE, edge, FULL, edge, edge]) == 1


class TestTermination:
    """Test how finished runs are presented."""

    def test_success(self, interpreter, renderer, fake_loop, dijkstra_result):
        interpreter.start(dijkstra_result)
        fake_loop.run_all()

        assert interpreter.termination is Termination.SUCCESS
        assert renderer.finished == (Termination.SUCCESS, 2)
        assert [color for _, color in renderer.highlighted] == [Highlight.SUCCESS] * 5
        assert names(element for element, _ in renderer.highlighted) == ["S", "SA", "A", "AF", "F"]

    def test_overlays_cleared_before_highlight(self, interpreter, renderer, fake_loop, dijkstra_result):
        interpreter.start(dijkstra_result)
        fake_loop.run_all()
        first_highlight = next(i for i, call in enumerate(renderer.calls) if call[0] == "highlight")
        assert renderer.calls[first_highlight - 1] == ("redraw",)

    def test_cycle(self, interpreter, renderer, fake_loop, cycle_graph):
        result = SearchEngine(cycle_graph).run(Algorithm.GREEDY)
        interpreter.start(result)
        fake_loop.run_all()

        assert interpreter.termination is Termination.CYCLE
        assert renderer.finished == (Termination.CYCLE, None)
        assert names(renderer.drawn) == ["S", "SA", "A", "AS"]
        assert {color for _, color in renderer.highlighted} == {Highlight.FAILURE}

    def test_deadlock(self, interpreter, fake_loop, graph_factory):
        graph = graph_factory(
            {"S": (0, 0), "A": (10, 0), "F": (20, 0)},
            [("S", "A", 1), ("F", "A", 1)],
        )
        interpreter.start(SearchEngine(graph).run(Algorithm.SMART_GREEDY))
        fake_loop.run_all()
        assert interpreter.termination is Termination.DEADLOCK

    def test_no_path(self, interpreter, renderer, fake_loop, cycle_graph):
        interpreter.start(SearchEngine(cycle_graph).run(Algorithm.DFS))
        fake_loop.run_all()
        assert interpreter.termination is Termination.NO_PATH
        assert renderer.highlighted == []

    def test_trivial_start(self, interpreter, renderer, fake_loop, trivial_graph):
        interpreter.start(SearchEngine(trivial_graph).run(Algorithm.BFS))
        fake_loop.run_all()
        assert names(renderer.drawn) == ["S"]
        assert interpreter.termination is Termination.NO_PATH

    @pytest.mark.parametrize(
        "outcome, cost, expected",
        [
            (Outcome.SUCCESS, 0, Termination.SUCCESS),
            (Outcome.SUCCESS, 7, Termination.SUCCESS),
            (Outcome.NO_PATH, None, Termination.NO_PATH),
            (Outcome.CYCLE, None, Termination.CYCLE),
            (Outcome.DEADLOCK, None, Termination.DEADLOCK),
        ],
    )
    def test_classify(self, outcome, cost, expected):
        """A cost of zero still counts as a found path."""
        assert Termination.classify(outcome, cost) is expected


class TestControl:
    """Test pause, resume, abort and speed changes."""

    def test_pause_cancels_timer(self, interpreter, fake_loop, dijkstra_result):
        interpreter.start(dijkstra_result)
        fake_loop.advance()
        remaining = interpreter.remaining

        interpreter.pause()

        assert interpreter.state is AnimationState.PAUSED
        assert fake_loop.pending == []
        assert not fake_loop.advance()
        assert interpreter.remaining == remaining

    def test_resume_continues_where_paused(self, interpreter, renderer, fake_loop, dijkstra_result):
        interpreter.start(dijkstra_result)
        fake_loop.advance()
        fake_loop.advance()
        interpreter.pause()
        interpreter.resume()
        fake_loop.run_all()

        assert names(renderer.drawn) == ["S", "SA", "A", "S", "SA", "A", "AF", "F"]
        assert interpreter.termination is Termination.SUCCESS

    def test_manual_step_keeps_one_timer(self, interpreter, fake_loop, dijkstra_result):
        """Stepping by hand replaces the pending timer instead of adding a second one."""
        interpreter.start(dijkstra_result)
        interpreter.step()
        assert len(fake_loop.pending) == 1

        interpreter.pause()
        assert fake_loop.pending == []

    def test_resume_requires_pause(self, interpreter, fake_loop, dijkstra_result):
        interpreter.start(dijkstra_result)
        interpreter.resume()
        assert len(fake_loop.pending) == 1

    def test_abort(self, interpreter, renderer, fake_loop, dijkstra_result):
        interpreter.start(dijkstra_result)
        fake_loop.advance()
        interpreter.abort()

        assert interpreter.state is AnimationState.ABORTED
        assert renderer.aborted
        assert fake_loop.pending == []
        assert renderer.finished is None

    def test_abort_while_paused(self, interpreter, renderer, dijkstra_result):
        interpreter.start(dijkstra_result)
        interpreter.pause()
        interpreter.abort()
        assert interpreter.state is AnimationState.ABORTED
        assert renderer.aborted

    def test_abort_when_idle_is_ignored(self, interpreter, renderer):
        interpreter.abort()
        assert interpreter.state is AnimationState.IDLE
        assert not renderer.aborted

    def test_speed_applies_to_next_step(self, interpreter, fake_loop, dijkstra_result):
        interpreter.start(dijkstra_result)
        interpreter.set_speed(0.25)
        fake_loop.advance()
        assert fake_loop.delays == [1.0, 0.25]

    def test_speed_level(self, interpreter):
        interpreter.set_speed_level(7)
        assert interpreter.speed_factor == pytest.approx(0.05)
        assert interpreter.delay == pytest.approx(0.05)

    def test_unknown_speed_level_is_medium(self, interpreter):
        interpreter.set_speed_level(42)
        assert interpreter.speed_factor == 1.0

    @pytest.mark.parametrize("factor", [0, -1.5])
    def test_invalid_speed(self, interpreter, factor):
        with pytest.raises(ValueError):
            interpreter.set_speed(factor)

    def test_restart_resets_run(self, interpreter, renderer, fake_loop, dijkstra_result):
        interpreter.start(dijkstra_result)
        fake_loop.run_all()
        interpreter.start(dijkstra_result)
        assert interpreter.step_count == 0
        assert interpreter.termination is None
        fake_loop.run_all()
        assert interpreter.termination is Termination.SUCCESS


class TestRevealInstant:
    """Test skipping the replay."""

    def test_reveal_instant(self, interpreter, renderer, fake_loop, dijkstra_result):
        interpreter.reveal_instant(dijkstra_result)

        assert fake_loop.scheduled == []
        assert renderer.drawn == []
        assert interpreter.state is AnimationState.TERMINATED
        assert interpreter.step_count == 2
        assert renderer.finished == (Termination.SUCCESS, 2)
        assert len(renderer.highlighted) == 5


class TestEventLoop:
    """Test the interpreter on a real asyncio loop."""

    def test_runs_to_completion(self, renderer, scenario_graph):
        result = SearchEngine(scenario_graph).run(Algorithm.BFS)

        async def replay():
            done = asyncio.get_running_loop().create_future()
            renderer.on_finish = lambda termination, cost: done.set_result((termination, cost))
            interpreter = AnimationInterpreter(renderer, base_delay=0.0)
            interpreter.start(result)
            return await asyncio.wait_for(done, timeout=5)

        assert asyncio.run(replay()) == (Termination.SUCCESS, 2)
