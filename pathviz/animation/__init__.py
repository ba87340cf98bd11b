"""
Animation module.

Replays search traces on a renderer:
- AnimationInterpreter: Timer-driven, pausable, speed-adjustable replay
- Renderer: Drawing collaborator interface
- AnimationState, Termination, Highlight: State and presentation enums
"""

from pathviz.animation.interpreter import AnimationInterpreter, count_result_steps
from pathviz.animation.renderer import Renderer
from pathviz.animation.state import AnimationState, Highlight, Termination

__all__ = [
    "AnimationInterpreter",
    "AnimationState",
    "Highlight",
    "Renderer",
    "Termination",
    "count_result_steps",
]
