"""
Renderer base class consumed by the animation interpreter.

A renderer owns all drawing. The interpreter only tells it which graph
element to draw or highlight and when to clear the overlays.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Union

from pathviz.graph.model import Edge, Node

if TYPE_CHECKING:
    from pathviz.animation.state import AnimationState, Highlight, Termination

Element = Union[Node, Edge]


class Renderer(ABC):
    """
    Abstract drawing collaborator.

    Subclasses implement the three drawing primitives; the status hooks are
    optional and default to doing nothing.
    """

    @abstractmethod
    def draw(self, element: Element) -> None:
        """Draw the neutral progress overlay for a node or edge."""
        ...

    @abstractmethod
    def highlight(self, element: Element, color: Highlight) -> None:
        """Draw a result overlay for a node or edge in the given color class."""
        ...

    @abstractmethod
    def redraw_all(self) -> None:
        """Clear all overlays and redraw the plain graph."""
        ...

    def on_state(self, state: AnimationState) -> None:
        """Called when the animation state changes."""
        pass

    def on_step(self, count: int) -> None:
        """Called when the step counter changes."""
        pass

    def on_finish(self, termination: Termination, cost: int | None) -> None:
        """Called once the final path has been highlighted."""
        pass

    def on_abort(self) -> None:
        """Called when a run is aborted. Override to reset controls."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
