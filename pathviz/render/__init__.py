"""
Renderers for the animation interpreter.

- ConsoleRenderer: Text output for terminals and logs
- FigureRenderer: Plotly figure of the graph with animation overlays
"""

from pathviz.render.console import ConsoleRenderer
from pathviz.render.figure import FigureRenderer

__all__ = ["ConsoleRenderer", "FigureRenderer"]
