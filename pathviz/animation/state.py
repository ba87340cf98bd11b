"""
Animation state enums.
"""

from __future__ import annotations

from enum import Enum

from pathviz.trace import Outcome


class AnimationState(Enum):
    """
    Lifecycle of one animation run.

    IDLE -> RUNNING -> {PAUSED, ABORTED, TERMINATED}; PAUSED -> RUNNING.
    ABORTED and TERMINATED are final until the next start.
    """

    IDLE = "inactive"
    RUNNING = "running"
    PAUSED = "paused"
    ABORTED = "aborted"
    TERMINATED = "terminated"


class Termination(Enum):
    """How a completed animation is presented."""

    SUCCESS = "terminated"
    CYCLE = "cycle"
    DEADLOCK = "deadlock"
    NO_PATH = "no-result"

    @classmethod
    def classify(cls, outcome: Outcome, cost: int | None) -> Termination:
        """Cycle and deadlock by outcome; otherwise a missing cost means no path."""
        if outcome is Outcome.CYCLE:
            return cls.CYCLE
        if outcome is Outcome.DEADLOCK:
            return cls.DEADLOCK
        if cost is None:
            return cls.NO_PATH
        return cls.SUCCESS


class Highlight(Enum):
    """Overlay color classes a renderer must distinguish."""

    NEUTRAL = "neutral"
    SUCCESS = "success"
    FAILURE = "failure"
