"""
Animation interpreter: replays a decoded search trace on a renderer.

The interpreter is a cooperative state machine driven by event-loop timers.
Each scheduled step consumes trace items until one needs a visible delay,
so items that draw nothing (entering full-draw mode, buffered elements) are
applied within the same turn. Only one timer is pending at any time and
cancelling it is how pause and abort take effect.
"""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from typing import TYPE_CHECKING, Iterable

from pathviz.animation.state import AnimationState, Highlight, Termination
from pathviz.config import BASE_DELAY_SECONDS, speed_factor_for
from pathviz.graph.model import Edge, Node
from pathviz.graph.translator import DrawItem
from pathviz.trace import Mode, ModeSwitch

if TYPE_CHECKING:
    from pathviz.animation.renderer import Renderer
    from pathviz.engine import RunResult

logger = logging.getLogger(__name__)


def count_result_steps(trace: Iterable[DrawItem]) -> int:
    """Number of edges a full replay of the trace draws in single-draw mode."""
    steps = 0
    counting = True

    for item in trace:
        if isinstance(item, ModeSwitch):
            counting = item.mode is Mode.SINGLE
        elif counting and isinstance(item, Edge):
            steps += 1
    return steps


class AnimationInterpreter:
    """
    Drives a renderer through one decoded trace at a time.

    Attributes:
        step_count: Edges drawn one at a time so far
        termination: How the last completed run ended (None until then)
    """

    def __init__(
        self,
        renderer: Renderer,
        loop: asyncio.AbstractEventLoop | None = None,
        base_delay: float = BASE_DELAY_SECONDS,
        speed_factor: float = 1.0,
    ) -> None:
        """
        Initialize the interpreter.

        Args:
            renderer: Drawing collaborator
            loop: Event loop used for scheduling; defaults to the running loop
            base_delay: Seconds between visible steps at speed factor 1.0
            speed_factor: Multiplier for the delay (smaller is faster)
        """
        self._renderer = renderer
        self._loop = loop
        self._base_delay = base_delay
        self._speed_factor = speed_factor

        self._result: RunResult | None = None
        self._trace: deque[DrawItem] = deque()
        self._buffer: list[Node | Edge] = []
        self._mode = Mode.SINGLE
        self._state = AnimationState.IDLE
        self._handle: asyncio.TimerHandle | None = None

        self.step_count = 0
        self.termination: Termination | None = None

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def state(self) -> AnimationState:
        return self._state

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def speed_factor(self) -> float:
        return self._speed_factor

    @property
    def delay(self) -> float:
        """Seconds until the next visible step."""
        return self._base_delay * self._speed_factor

    @property
    def remaining(self) -> int:
        """Trace items not consumed yet."""
        return len(self._trace)

    @property
    def is_running(self) -> bool:
        return self._state is AnimationState.RUNNING

    # -------------------------------------------------------------------------
    # Control
    # -------------------------------------------------------------------------

    def start(self, result: RunResult) -> None:
        """Replay a result's trace from the beginning."""
        self._load(result)
        self._set_state(AnimationState.RUNNING)
        logger.info(f"Animating {len(self._trace)} trace items")
        self._schedule()

    def reveal_instant(self, result: RunResult) -> None:
        """Skip the replay and show the final result immediately."""
        self._load(result)
        self.step_count = count_result_steps(result.trace)
        self._renderer.on_step(self.step_count)
        self._trace.clear()
        self._set_state(AnimationState.RUNNING)
        self._terminate()

    def pause(self) -> None:
        """Stop scheduling; the trace position is kept for resume()."""
        if self._state is not AnimationState.RUNNING:
            return
        self._cancel()
        self._set_state(AnimationState.PAUSED)

    def resume(self) -> None:
        if self._state is not AnimationState.PAUSED:
            return
        self._set_state(AnimationState.RUNNING)
        self._schedule()

    def abort(self) -> None:
        """Stop the run for good and let the renderer reset its controls."""
        if self._state not in (AnimationState.RUNNING, AnimationState.PAUSED):
            return
        self._cancel()
        self._set_state(AnimationState.ABORTED)
        self._renderer.on_abort()
        logger.info("Animation aborted")

    def set_speed(self, factor: float) -> None:
        """
        Set the delay multiplier. Applies from the next scheduled step on.

        Raises:
            ValueError: If factor is not positive
        """
        if factor <= 0:
            raise ValueError(f"Speed factor must be positive, got {factor}")
        self._speed_factor = factor

    def set_speed_level(self, level: int) -> None:
        """Set the speed from a slider level (see config.SPEED_PRESETS)."""
        self.set_speed(speed_factor_for(level))

    # -------------------------------------------------------------------------
    # Stepping
    # -------------------------------------------------------------------------

    def step(self) -> None:
        """
        Consume trace items until one needs a visible delay, then schedule
        the next step. An exhausted trace terminates the run.
        """
        self._cancel()
        if self._state is not AnimationState.RUNNING:
            return

        while self._trace:
            needs_delay = self._apply(self._trace.popleft())
            if not self._trace:
                break
            if needs_delay:
                self._schedule()
                return

        self._terminate()

    def _apply(self, item: DrawItem) -> bool:
        """Apply one trace item. Returns whether it should be followed by a delay."""
        if isinstance(item, ModeSwitch):
            if item.mode is Mode.FULL:
                self._renderer.redraw_all()
                self._mode = Mode.FULL
                return False

            self._mode = Mode.SINGLE
            for element in self._buffer:
                self._renderer.draw(element)
            self._buffer = []
            return True

        if self._mode is Mode.FULL:
            self._buffer.append(item)
            return False

        self._renderer.draw(item)
        if isinstance(item, Edge):
            self.step_count += 1
            self._renderer.on_step(self.step_count)
        return True

    def _terminate(self) -> None:
        """Highlight the final path and end the run."""
        result = self._result
        self._renderer.redraw_all()

        termination = Termination.classify(result.outcome, result.cost)
        color = Highlight.SUCCESS if termination is Termination.SUCCESS else Highlight.FAILURE
        for element in result.path:
            self._renderer.highlight(element, color)

        self.termination = termination
        self._set_state(AnimationState.TERMINATED)
        self._renderer.on_finish(termination, result.cost)
        logger.info(
            f"Animation completed: {termination.value}, "
            f"{self.step_count} steps, cost {result.cost}"
        )

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _load(self, result: RunResult) -> None:
        self._cancel()
        self._result = result
        self._trace = deque(result.trace)
        self._buffer = []
        self._mode = Mode.SINGLE
        self.step_count = 0
        self.termination = None
        self._renderer.on_step(0)

    def _schedule(self) -> None:
        loop = self._loop or asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self.step)

    def _cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _set_state(self, state: AnimationState) -> None:
        self._state = state
        self._renderer.on_state(state)
