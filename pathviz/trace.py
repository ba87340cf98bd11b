"""
Animation trace items.

A search emits a trace: an ordered sequence of data elements and control
tokens describing how its progress should be replayed. Algorithms emit
label-level items; the translator decodes them into Node/Edge objects
interleaved with ModeSwitch tokens, which is what the animation
interpreter consumes.

Label-level vocabulary:
- Visit(label): a node on the path being drawn
- ModeSwitch(SINGLE): draw following elements one per tick
- ModeSwitch(FULL): buffer following elements until the next SINGLE
- EdgeMarker: animate the edge into the next visited node on its own
- BranchRestart: replace the last drawn element by a fresh edge+node pair
- RemoveLast: erase the edge+node that closed a revisit
- CycleMarker / DeadlockMarker: terminal status of the walk
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Mode(Enum):
    """Interpreter drawing mode."""

    SINGLE = "singleDraw"
    FULL = "fullDraw"


class Outcome(Enum):
    """Classification of a finished search."""

    SUCCESS = "success"
    CYCLE = "cycle"
    DEADLOCK = "deadlock"
    NO_PATH = "noPathToFinish"


@dataclass(frozen=True)
class Visit:
    label: str


@dataclass(frozen=True)
class ModeSwitch:
    mode: Mode


@dataclass(frozen=True)
class EdgeMarker:
    pass


@dataclass(frozen=True)
class BranchRestart:
    pass


@dataclass(frozen=True)
class RemoveLast:
    pass


@dataclass(frozen=True)
class CycleMarker:
    pass


@dataclass(frozen=True)
class DeadlockMarker:
    pass


TraceItem = Union[
    Visit, ModeSwitch, EdgeMarker, BranchRestart, RemoveLast, CycleMarker, DeadlockMarker
]

SINGLE = ModeSwitch(Mode.SINGLE)
FULL = ModeSwitch(Mode.FULL)


def visits(labels: list[str]) -> list[Visit]:
    """Wrap a label sequence as Visit items."""
    return [Visit(label) for label in labels]
