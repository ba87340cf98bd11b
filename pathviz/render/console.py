"""
Console renderer: prints animation progress as text.
"""

from __future__ import annotations

import sys
from typing import TextIO

from pathviz.animation.renderer import Element, Renderer
from pathviz.animation.state import AnimationState, Highlight, Termination
from pathviz.graph.model import Edge, Node

_MARKS = {
    Highlight.NEUTRAL: " ",
    Highlight.SUCCESS: "+",
    Highlight.FAILURE: "x",
}


def describe(element: Element) -> str:
    """Short text form of a node or edge."""
    if isinstance(element, Edge):
        return f"{element.source.label} -({element.cost})-> {element.target.label}"
    return element.label


class ConsoleRenderer(Renderer):
    """
    Writes one line per drawn element to a text stream.

    Attributes:
        overlay: Elements currently drawn over the plain graph, with their color
    """

    def __init__(self, stream: TextIO | None = None, verbose: bool = True):
        self._stream = stream or sys.stdout
        self._verbose = verbose
        self.overlay: list[tuple[Element, Highlight]] = []

    def _write(self, text: str) -> None:
        print(text, file=self._stream)

    def draw(self, element: Element) -> None:
        self.overlay.append((element, Highlight.NEUTRAL))
        if self._verbose and isinstance(element, Edge):
            self._write(f"  {describe(element)}")
        elif self._verbose and isinstance(element, Node) and len(self.overlay) == 1:
            self._write(f"  {describe(element)}")

    def highlight(self, element: Element, color: Highlight) -> None:
        self.overlay.append((element, color))

    def redraw_all(self) -> None:
        self.overlay = []

    def on_state(self, state: AnimationState) -> None:
        if self._verbose and state is AnimationState.PAUSED:
            self._write("  (paused)")

    def on_finish(self, termination: Termination, cost: int | None) -> None:
        highlighted = [element for element, color in self.overlay if color is not Highlight.NEUTRAL]
        mark = _MARKS[Highlight.SUCCESS if termination is Termination.SUCCESS else Highlight.FAILURE]

        path = " ".join(describe(e) for e in highlighted if isinstance(e, Node))
        self._write(f"[{mark}] {termination.value}: {path or '-'}")
        if cost is not None:
            self._write(f"    cost: {cost}")

    def on_abort(self) -> None:
        self._write("  (aborted)")
